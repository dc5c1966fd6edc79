"""
API Module - HTTP interface.

Exposes the engine and the bots via a REST API:
1. Start a game (empty YEN snapshot)
2. Ask a named bot for a move
3. Play a human move and receive the bot's reply

All state travels with the requests. No game is stored server-side.
"""

from .schemas import (
    # Requests
    NewGameRequest,
    HumanMoveRequest,
    # Responses
    NewGameResponse,
    ChooseMoveResponse,
    HumanVsBotMoveResponse,
    BoardResponse,
    BotListResponse,
    ErrorResponse,
    HealthResponse,
    # Shared
    AppliedMove,
    CoordsInfo,
    ErrorCode,
)
from .service import GameService
from .app import create_app

__all__ = [
    # Requests
    "NewGameRequest",
    "HumanMoveRequest",
    # Responses
    "NewGameResponse",
    "ChooseMoveResponse",
    "HumanVsBotMoveResponse",
    "BoardResponse",
    "BotListResponse",
    "ErrorResponse",
    "HealthResponse",
    # Shared
    "AppliedMove",
    "CoordsInfo",
    "ErrorCode",
    # Service
    "GameService",
    "create_app",
]
