"""
Action System - Movements, game status and move results.

A Movement is a single state transition request:
1. Placement: claim an empty cell
2. Resign: forfeit the game

GameStatus is derived from the game state: Ongoing (with the next
player) or Finished (with the winner). There is no draw.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .coords import Coordinates

PlayerId = int

NUM_PLAYERS = 2
PLAYER_SYMBOLS = ("B", "R")


def other_player(player: PlayerId) -> PlayerId:
    """The opponent of a player."""
    return 1 - player


def player_symbol(player: PlayerId) -> str:
    return PLAYER_SYMBOLS[player]


class MoveType(Enum):
    """Types of movements."""
    PLACEMENT = "placement"
    RESIGN = "resign"


@dataclass(frozen=True)
class Movement:
    """
    A movement submitted by a player.

    Usage:
        Movement.placement(0, Coordinates(2, 0, 0))
        Movement.resign(1)
    """
    move_type: MoveType
    player: PlayerId
    coords: Optional[Coordinates] = None

    @classmethod
    def placement(cls, player: PlayerId, coords: Coordinates) -> Movement:
        """Factory for a cell placement."""
        return cls(move_type=MoveType.PLACEMENT, player=player, coords=coords)

    @classmethod
    def resign(cls, player: PlayerId) -> Movement:
        """Factory for a resignation."""
        return cls(move_type=MoveType.RESIGN, player=player)

    @property
    def is_placement(self) -> bool:
        return self.move_type == MoveType.PLACEMENT

    def __str__(self) -> str:
        if self.is_placement:
            return f"player {self.player} places at {self.coords}"
        return f"player {self.player} resigns"


@dataclass(frozen=True)
class GameStatus:
    """
    Ongoing{next_player} or Finished{winner}.

    Exactly one of next_player / winner is set.
    """
    next_player: Optional[PlayerId] = None
    winner: Optional[PlayerId] = None

    @classmethod
    def ongoing(cls, next_player: PlayerId) -> GameStatus:
        return cls(next_player=next_player)

    @classmethod
    def finished(cls, winner: PlayerId) -> GameStatus:
        return cls(winner=winner)

    @property
    def is_finished(self) -> bool:
        return self.winner is not None

    def __str__(self) -> str:
        if self.is_finished:
            return f"finished (winner: player {self.winner})"
        return f"ongoing (next: player {self.next_player})"


@dataclass
class MoveResult:
    """
    Result of applying a movement through the reducer.

    Contains:
    - Whether the movement was accepted
    - The status after the movement (unchanged status on failure)
    - Error message and code (if rejected)
    """
    success: bool
    status: Optional[GameStatus] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def failure(cls, error: str, error_code: str | None = None,
                status: GameStatus | None = None) -> MoveResult:
        """Create a failure result."""
        return cls(success=False, status=status, error=error, error_code=error_code)

    @classmethod
    def success_with_status(cls, status: GameStatus) -> MoveResult:
        """Create a success result."""
        return cls(success=True, status=status)
