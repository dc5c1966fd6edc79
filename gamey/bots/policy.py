"""
Bot Policy - Interface for bot decision-making.

A bot takes a read-only game state and proposes the coordinates of
the cell to claim for the player to move. Callers submit the result
as a regular placement, the same path as a human move.

Bots never mutate the state they are given; search bots work on clones.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
import random

from ..engine_core.coords import Coordinates

if TYPE_CHECKING:
    from ..engine_core.state import GameState


class YBot(ABC):
    """
    Abstract base class for bots.

    Implementations range from a random pick to Monte-Carlo playouts.
    They are registered by name in a BotRegistry.
    """

    @abstractmethod
    def name(self) -> str:
        """Registry name of the bot."""

    @abstractmethod
    def choose_move(self, state: GameState) -> Coordinates | None:
        """
        Choose a cell for the player to move.

        Args:
            state: Current game state (not modified)

        Returns:
            Coordinates of an available cell, or None if no move exists
        """


class RandomBot(YBot):
    """
    Random bot - picks an available cell uniformly at random.

    Used for:
    - Testing
    - Baseline comparison
    """

    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)

    def name(self) -> str:
        return "random_bot"

    def choose_move(self, state: GameState) -> Coordinates | None:
        available = state.available_cells()
        if not available:
            return None
        return Coordinates.from_index(self.rng.choice(available), state.size)
