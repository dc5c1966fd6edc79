"""
Engine Core - Game of Y rules and state management.

The engine:
1. Maps cell indices to (x, y, z) coordinates
2. Tracks each player's side connectivity with union-find
3. Validates and applies movements atomically
4. Converts games to and from the exchange notation
"""

from .coords import Coordinates, total_cells
from .connectivity import ConnectivityTracker
from .action import (
    GameStatus,
    Movement,
    MoveResult,
    MoveType,
    PlayerId,
    other_player,
    player_symbol,
)
from .state import GameState
from .reducer import apply_move
from .notation import YEN, GameRecord, MoveRecord, load_game, save_game
from .errors import (
    GameError,
    GameAlreadyFinished,
    WrongTurn,
    CellOccupied,
    IndexOutOfRange,
    InvalidBoardSize,
    NotationError,
    InvalidPlayer,
    BotNotFound,
    NoMoveAvailable,
)

__all__ = [
    "Coordinates",
    "total_cells",
    "ConnectivityTracker",
    "GameStatus",
    "Movement",
    "MoveResult",
    "MoveType",
    "PlayerId",
    "other_player",
    "player_symbol",
    "GameState",
    "apply_move",
    "YEN",
    "GameRecord",
    "MoveRecord",
    "load_game",
    "save_game",
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
