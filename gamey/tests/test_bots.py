"""
Tests for the bots.

Tests:
- Heuristic scoring
- Greedy choice and tie-breaking
- Monte-Carlo playouts and budgets
- Registry lookup
"""

import pytest

from ..bots import (
    BotRegistry,
    EvaluationWeights,
    GreedyBot,
    HeuristicEvaluator,
    MctsBot,
    RandomBot,
    default_registry,
)
from ..config import Settings
from ..engine_core.action import Movement
from ..engine_core.coords import Coordinates
from ..engine_core.errors import BotNotFound
from ..engine_core.state import GameState
from .conftest import place


def _full_board() -> GameState:
    state = GameState.new(2)
    state.cells = [0, 1, 0]
    return state


def _one_move_from_win() -> GameState:
    """Size 3, player 0 to move holding 3 and 4; cells 2 and 5 both win."""
    state = GameState.new(3)
    for index in (3, 0, 4, 1):
        place(state, index)
    return state


class TestHeuristicEvaluator:
    """Tests for cell scoring."""

    def test_breakdown(self):
        evaluation = HeuristicEvaluator().evaluate(Coordinates(1, 2, 3))
        assert evaluation.feature_breakdown == {"distance": 15, "corner": 0, "balance": 10}
        assert evaluation.total_score == 25

    def test_corner_penalty(self):
        assert HeuristicEvaluator().score_cell(Coordinates(6, 0, 0)) == 25 + 30

    def test_edge_midpoint_is_best(self):
        evaluator = HeuristicEvaluator()
        assert evaluator.score_cell(Coordinates(3, 0, 3)) == 15
        assert evaluator.score_cell(Coordinates(2, 2, 2)) == 30

    def test_custom_weights(self):
        evaluator = HeuristicEvaluator(EvaluationWeights(distance_to_side=0, corner_penalty=0, imbalance=1))
        assert evaluator.score_cell(Coordinates(6, 0, 0)) == 6


class TestGreedyBot:
    """Tests for the greedy bot."""

    def test_first_move_on_size_7(self, empty_game):
        """Lowest score wins; the first of the tied edge midpoints is taken."""
        assert GreedyBot().choose_move(empty_game) == Coordinates(3, 0, 3)

    def test_avoids_corners(self, empty_game):
        coords = GreedyBot().choose_move(empty_game)
        assert not coords.is_corner()

    def test_next_tie_in_index_order(self, empty_game):
        place(empty_game, 6)
        assert GreedyBot().choose_move(empty_game) == Coordinates(3, 3, 0)

    def test_all_corners(self):
        """On size 2 every cell scores the same, so index 0 is played."""
        assert GreedyBot().choose_move(GameState.new(2)) == Coordinates(1, 0, 0)

    def test_full_board(self):
        assert GreedyBot().choose_move(_full_board()) is None

    def test_name(self):
        assert GreedyBot().name() == "greedy_bot"


class TestRandomBot:
    """Tests for the random bot."""

    def test_picks_available_cell(self, mid_game):
        coords = RandomBot(seed=1).choose_move(mid_game)
        assert coords.to_index(mid_game.size) in mid_game.available_cells()

    def test_seeded(self, empty_game):
        assert RandomBot(seed=3).choose_move(empty_game) == RandomBot(seed=3).choose_move(empty_game)

    def test_full_board(self):
        assert RandomBot().choose_move(_full_board()) is None


class TestMctsBot:
    """Tests for the Monte-Carlo bot."""

    def test_picks_available_cell(self, mid_game):
        coords = MctsBot(iterations=100, seed=1).choose_move(mid_game)
        assert coords.to_index(mid_game.size) in mid_game.available_cells()

    def test_does_not_mutate_state(self, mid_game):
        cells = list(mid_game.cells)
        history = list(mid_game.history)
        status = mid_game.status
        MctsBot(iterations=200, seed=1).choose_move(mid_game)
        assert mid_game.cells == cells
        assert mid_game.history == history
        assert mid_game.status == status

    def test_finds_immediate_win(self):
        state = _one_move_from_win()
        coords = MctsBot(iterations=100, seed=5).choose_move(state)
        state.add_move(Movement.placement(0, coords))
        assert state.winner == 0

    def test_budget_split(self):
        state = _one_move_from_win()
        stats = MctsBot(iterations=10, seed=5).evaluate(state)
        assert [s.index for s in stats] == [2, 5]
        assert [s.trials for s in stats] == [5, 5]
        assert all(s.win_rate == 1.0 for s in stats)

    def test_zero_budget_plays_first_available(self, mid_game):
        """No trials: every win rate is 0.0 and the first candidate is kept."""
        stats = MctsBot(iterations=0).evaluate(mid_game)
        assert all(s.trials == 0 and s.win_rate == 0.0 for s in stats)
        assert MctsBot(iterations=0).choose_move(mid_game) == Coordinates.from_index(1, 5)

    def test_budget_smaller_than_candidates(self, empty_game):
        """28 candidates and 10 iterations: nobody gets a trial."""
        stats = MctsBot(iterations=10).evaluate(empty_game)
        assert len(stats) == 28
        assert sum(s.trials for s in stats) == 0

    def test_time_limit(self, empty_game):
        """An expired deadline returns the best candidate so far."""
        bot = MctsBot(iterations=10_000, time_limit=0.0, seed=1)
        assert sum(s.trials for s in bot.evaluate(empty_game)) == 0
        assert bot.choose_move(empty_game) == Coordinates.from_index(0, 7)

    def test_seeded(self, mid_game):
        first = MctsBot(iterations=300, seed=42).choose_move(mid_game)
        second = MctsBot(iterations=300, seed=42).choose_move(mid_game)
        assert first == second

    def test_finished_game(self, won_game):
        assert MctsBot(iterations=100).evaluate(won_game) == []
        assert MctsBot(iterations=100).choose_move(won_game) is None

    def test_full_board(self):
        assert MctsBot(iterations=100).evaluate(_full_board()) == []
        assert MctsBot(iterations=100).choose_move(_full_board()) is None

    def test_custom_name(self):
        assert MctsBot(iterations=1, bot_name="mcts_bot_hard").name() == "mcts_bot_hard"


class TestRegistry:
    """Tests for name-based lookup."""

    def test_default_bots(self):
        registry = default_registry(Settings(mcts_iterations=10, mcts_hard_iterations=20))
        assert registry.names() == ["random_bot", "greedy_bot", "mcts_bot", "mcts_bot_hard"]
        assert registry.get("mcts_bot").iterations == 10
        assert registry.get("mcts_bot_hard").iterations == 20

    def test_unknown_bot(self, registry):
        assert registry.find("nope") is None
        assert "nope" not in registry
        with pytest.raises(BotNotFound) as exc_info:
            registry.get("nope")
        assert exc_info.value.code == "BOT_NOT_FOUND"
        assert exc_info.value.context["bot_id"] == "nope"

    def test_same_name_replaces(self):
        registry = BotRegistry().with_bot(RandomBot(seed=1))
        replacement = RandomBot(seed=2)
        registry.register(replacement)
        assert len(registry) == 1
        assert registry.get("random_bot") is replacement
