"""
Engine Errors - Exception hierarchy for rejected operations.

All engine exceptions inherit from GameError so callers (CLI, HTTP)
can catch one type and read a machine-readable code.

Usage:
    try:
        state.add_move(movement)
    except GameError as e:
        print(e.code, e.message)

A rejected move never leaves the game state partially updated.
"""

from __future__ import annotations
from typing import Any

__all__ = [
    "GameError",
    "GameAlreadyFinished",
    "WrongTurn",
    "CellOccupied",
    "IndexOutOfRange",
    "InvalidBoardSize",
    "NotationError",
    "InvalidPlayer",
    "BotNotFound",
    "NoMoveAvailable",
]


class GameError(Exception):
    """
    Base exception for all engine errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        context: Extra details (cell index, player, ...)
    """
    code: str = "GAME_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class GameAlreadyFinished(GameError):
    """A move was attempted after the game ended."""
    code = "GAME_ALREADY_FINISHED"


class WrongTurn(GameError):
    """The acting player is not the expected next player."""
    code = "WRONG_TURN"


class CellOccupied(GameError):
    """The target cell is already claimed."""
    code = "CELL_OCCUPIED"


class IndexOutOfRange(GameError):
    """A cell index or coordinate triple falls outside the board."""
    code = "INDEX_OUT_OF_RANGE"


class InvalidBoardSize(GameError):
    """Board size below the minimum of 2."""
    code = "INVALID_BOARD_SIZE"


class NotationError(GameError):
    """Malformed exchange notation (layout rows, symbols, turn)."""
    code = "INVALID_NOTATION"


class InvalidPlayer(GameError):
    """A movement names a player id other than 0 or 1."""
    code = "INVALID_PLAYER"


class BotNotFound(GameError):
    """Registry lookup miss."""
    code = "BOT_NOT_FOUND"


class NoMoveAvailable(GameError):
    """A bot was asked to move on a board with no available cell."""
    code = "NO_MOVE_AVAILABLE"
