"""
Reducer - Result-returning move application for callers.

GameState.add_move() raises on illegal movements. Interactive callers
(CLI loop, HTTP service) prefer a result they can report, so
apply_move() turns engine errors into a failed MoveResult.

Only GameError is caught; anything else is a bug and propagates.
"""

from __future__ import annotations
import logging

from .action import Movement, MoveResult
from .errors import GameError
from .state import GameState

logger = logging.getLogger(__name__)


def apply_move(state: GameState, movement: Movement) -> MoveResult:
    """
    Apply a movement to the game state.

    Returns MoveResult with the new status, or the error and its code.
    The state is mutated only on success.
    """
    try:
        status = state.add_move(movement)
    except GameError as e:
        logger.debug("Rejected %s: %s", movement, e.message)
        return MoveResult.failure(e.message, error_code=e.code, status=state.status)
    return MoveResult.success_with_status(status)
