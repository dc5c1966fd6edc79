"""
Monte-Carlo Bot - Chooses moves from random playout statistics.

For every available cell the bot plays a share of its iteration budget
as random games that start with that cell, and keeps the cell with the
highest observed win rate for the player to move.

Process:
1. Split the budget evenly: iterations // number of available cells
2. For each trial: clone the state, play the candidate, then play
   uniformly random moves for both players until the game ends
3. Win rate = wins / trials (0.0 when a candidate got no trials)
4. Keep the strict maximum; the first candidate wins ties

The bot does NOT:
- Build a search tree (no selection/expansion/backpropagation)
- Resign during playouts
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import logging
import random
import time

from ..engine_core.action import Movement, PlayerId
from ..engine_core.coords import Coordinates
from .policy import YBot

if TYPE_CHECKING:
    from ..engine_core.state import GameState

logger = logging.getLogger(__name__)


@dataclass
class CandidateStats:
    """Playout results for one candidate cell."""
    index: int
    coords: Coordinates
    wins: int = 0
    trials: int = 0

    @property
    def win_rate(self) -> float:
        if self.trials == 0:
            return 0.0
        return self.wins / self.trials


class MctsBot(YBot):
    """
    Usage:
        bot = MctsBot(iterations=5000)
        coords = bot.choose_move(state)

        # Wall-clock bounded: returns the best candidate found so far
        bot = MctsBot(iterations=20000, time_limit=2.0)
    """

    def __init__(
        self,
        iterations: int,
        time_limit: float | None = None,
        seed: int | None = None,
        bot_name: str = "mcts_bot",
    ):
        self.iterations = iterations
        self.time_limit = time_limit
        self.rng = random.Random(seed)
        self._name = bot_name

    def name(self) -> str:
        return self._name

    def choose_move(self, state: GameState) -> Coordinates | None:
        stats = self.evaluate(state)
        best: CandidateStats | None = None
        best_rate = -1.0
        for candidate in stats:
            if candidate.win_rate > best_rate:
                best, best_rate = candidate, candidate.win_rate

        if best is None:
            return None
        logger.debug(
            "%s picked %s: %d/%d wins over %d candidates",
            self._name, best.coords, best.wins, best.trials, len(stats),
        )
        return best.coords

    def evaluate(self, state: GameState) -> list[CandidateStats]:
        """
        Run the playouts and return per-candidate statistics.

        Candidates are in available-cell order. Empty when the game is
        over or the board is full. With a time limit, candidates not
        reached before the deadline are reported with zero trials.
        """
        player = state.next_player
        available = state.available_cells()
        if player is None or not available:
            return []

        per_candidate = self.iterations // max(len(available), 1)
        deadline = None
        if self.time_limit is not None:
            deadline = time.monotonic() + self.time_limit

        stats = [
            CandidateStats(index=index, coords=Coordinates.from_index(index, state.size))
            for index in available
        ]
        for candidate in stats:
            for _ in range(per_candidate):
                if deadline is not None and time.monotonic() >= deadline:
                    logger.info("%s hit its %.2fs time limit", self._name, self.time_limit)
                    return stats
                winner = self._playout(state, player, candidate.coords)
                candidate.trials += 1
                if winner == player:
                    candidate.wins += 1
        return stats

    def _playout(self, state: GameState, player: PlayerId, first: Coordinates) -> PlayerId | None:
        """
        Play one random game on a clone, starting with `first`.

        Returns the winner, or None if the board filled up without one.
        """
        board = state.clone()
        board.add_move(Movement.placement(player, first))

        # A shuffled order of the empty cells gives each step a uniform pick
        remaining = board.available_cells()
        self.rng.shuffle(remaining)
        for index in remaining:
            if board.is_finished:
                break
            coords = Coordinates.from_index(index, board.size)
            board.add_move(Movement.placement(board.next_player, coords))

        return board.winner
