"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between HTTP clients and the engine.
Game states travel as YEN snapshots (see engine_core.notation).

Error Codes:
- INVALID_BOARD_SIZE: Board size below 2
- INVALID_NOTATION: Malformed YEN
- INDEX_OUT_OF_RANGE: Cell id outside the board
- CELL_OCCUPIED / WRONG_TURN / GAME_ALREADY_FINISHED: Move rejected
- BOT_NOT_FOUND: Unknown bot id
- NO_MOVE_AVAILABLE: The bot found no cell to play
- UNSUPPORTED_API_VERSION: Only v1 is served
- VALIDATION_ERROR: Request body or query failed validation
"""

from enum import Enum
from typing import Optional, Any, Literal, Union
from pydantic import BaseModel, Field

from ..engine_core.notation import YEN

API_VERSION = "v1"


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    INVALID_BOARD_SIZE = "INVALID_BOARD_SIZE"
    INVALID_NOTATION = "INVALID_NOTATION"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    CELL_OCCUPIED = "CELL_OCCUPIED"
    WRONG_TURN = "WRONG_TURN"
    GAME_ALREADY_FINISHED = "GAME_ALREADY_FINISHED"
    BOT_NOT_FOUND = "BOT_NOT_FOUND"
    NO_MOVE_AVAILABLE = "NO_MOVE_AVAILABLE"
    UNSUPPORTED_API_VERSION = "UNSUPPORTED_API_VERSION"
    INVALID_PLAYER = "INVALID_PLAYER"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    GAME_ERROR = "GAME_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class CoordsInfo(BaseModel):
    """Barycentric coordinates of a cell."""
    x: int
    y: int
    z: int

    model_config = {"from_attributes": True}


class AppliedMove(BaseModel):
    """A placement that was applied to the game."""
    cell_id: int
    coords: CoordsInfo


class OngoingStatus(BaseModel):
    state: Literal["ongoing"] = "ongoing"
    next: str = Field(..., description="Who moves next: human, bot or a player symbol")


class FinishedStatus(BaseModel):
    state: Literal["finished"] = "finished"
    winner: str


StatusInfo = Union[OngoingStatus, FinishedStatus]


# =============================================================================
# Request Models
# =============================================================================

class NewGameRequest(BaseModel):
    """Request to start an empty game."""
    size: int = Field(..., description="Board size, at least 2")


class HumanMoveRequest(BaseModel):
    """A human placement followed by the bot's reply."""
    yen: YEN
    cell_id: int = Field(..., ge=0, description="Cell claimed by the human (player 0)")


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    message: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    bot_id: Optional[str] = None
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field(API_VERSION, description="API version")


class NewGameResponse(BaseModel):
    yen: YEN


class ChooseMoveResponse(BaseModel):
    """Move proposed by a bot for the player to move."""
    api_version: str = API_VERSION
    bot_id: str
    cell_id: int
    coords: CoordsInfo


class HumanVsBotMoveResponse(BaseModel):
    """Result of a human move and the bot's answer."""
    yen: YEN
    human_move: AppliedMove
    bot_move: Optional[AppliedMove] = None
    status: StatusInfo


class BoardResponse(BaseModel):
    """Every cell of a board, in index order."""
    api_version: str = API_VERSION
    size: int
    cells: list[CoordsInfo]


class BotListResponse(BaseModel):
    bots: list[str]
    count: int


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
