"""
Greedy Bot - One-pass heuristic player.

Scores every available cell with the HeuristicEvaluator and plays the
lowest score. Ties go to the first cell in index order.

The bot does NOT:
- Look at the opponent's stones
- Search ahead
"""

from __future__ import annotations
from typing import TYPE_CHECKING
import logging

from ..engine_core.coords import Coordinates
from .evaluator import HeuristicEvaluator
from .policy import YBot

if TYPE_CHECKING:
    from ..engine_core.state import GameState

logger = logging.getLogger(__name__)


class GreedyBot(YBot):
    """
    Usage:
        bot = GreedyBot()
        coords = bot.choose_move(state)
    """

    def __init__(self, evaluator: HeuristicEvaluator | None = None):
        self.evaluator = evaluator or HeuristicEvaluator()

    def name(self) -> str:
        return "greedy_bot"

    def choose_move(self, state: GameState) -> Coordinates | None:
        best: Coordinates | None = None
        best_score = 0
        for index in state.available_cells():
            coords = Coordinates.from_index(index, state.size)
            score = self.evaluator.score_cell(coords)
            if best is None or score < best_score:
                best, best_score = coords, score

        if best is not None:
            logger.debug("greedy_bot picked %s (score %d)", best, best_score)
        return best
