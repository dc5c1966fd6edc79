"""
Pytest fixtures for GameY tests.
"""

import pytest

from ..api.service import GameService
from ..bots import BotRegistry, GreedyBot, MctsBot, RandomBot
from ..config import Settings
from ..engine_core.action import Movement
from ..engine_core.coords import Coordinates
from ..engine_core.state import GameState


def place(state: GameState, index: int):
    """Place a stone for the player to move at a cell index."""
    coords = Coordinates.from_index(index, state.size)
    return state.add_move(Movement.placement(state.next_player, coords))


@pytest.fixture
def empty_game() -> GameState:
    """Empty size-7 board."""
    return GameState.new(7)


@pytest.fixture
def small_game() -> GameState:
    """Empty size-3 board (6 cells)."""
    return GameState.new(3)


@pytest.fixture
def mid_game() -> GameState:
    """Size-5 board after a few moves, player 0 to move."""
    state = GameState.new(5)
    for index in (4, 7, 12, 0):
        place(state, index)
    return state


@pytest.fixture
def won_game() -> GameState:
    """Size-3 game won by player 0 along the bottom row."""
    state = GameState.new(3)
    for index in (3, 0, 4, 1, 5):
        place(state, index)
    return state


@pytest.fixture
def settings() -> Settings:
    """Small MCTS budgets so API tests stay fast."""
    return Settings(mcts_iterations=60, mcts_hard_iterations=120)


@pytest.fixture
def registry() -> BotRegistry:
    """Seeded bots for deterministic tests."""
    return (
        BotRegistry()
        .with_bot(RandomBot(seed=7))
        .with_bot(GreedyBot())
        .with_bot(MctsBot(iterations=60, seed=7))
    )


@pytest.fixture
def service(settings, registry) -> GameService:
    return GameService(settings=settings, registry=registry)
