"""
FastAPI Application - REST API for the Game of Y.

Endpoints:
    GET    /status                               Plain-text liveness probe
    GET    /health                               Health check
    GET    /v1/bots                              List registered bots
    GET    /v1/board?size=N                      Coordinates of every cell
    POST   /v1/game/new                          Start an empty game
    POST   /{api_version}/ybot/choose/{bot_id}   Ask a bot for a move
    POST   /v1/game/hvb/move/{bot_id}            Human move + bot reply

Games travel as YEN snapshots in request and response bodies; the
server keeps no game state between requests.

All responses are JSON with explicit Pydantic schemas, except /status.

Run with: uvicorn --factory gamey.api.app:create_app
"""

from typing import Annotated

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .. import __version__
from ..config import Settings
from ..engine_core.errors import GameError
from ..engine_core.notation import YEN
from .schemas import (
    API_VERSION,
    BoardResponse,
    BotListResponse,
    ChooseMoveResponse,
    ErrorCode,
    ErrorResponse,
    HealthResponse,
    HumanMoveRequest,
    HumanVsBotMoveResponse,
    NewGameRequest,
    NewGameResponse,
)
from .service import GameService


def create_app(service: GameService | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional GameService instance (creates new if not provided)
        settings: Optional settings (read from the environment if not provided)

    Returns:
        FastAPI application instance
    """
    settings = settings or Settings.from_env()
    api_service = service or GameService(settings=settings)

    app = FastAPI(
        title="GameY API",
        description="""
Game of Y engine with automatic players.

## Error Codes

| Code | Description |
|------|-------------|
| `INVALID_BOARD_SIZE` | Board size below 2 |
| `INVALID_NOTATION` | Malformed YEN |
| `INDEX_OUT_OF_RANGE` | Cell id outside the board |
| `CELL_OCCUPIED` | Cell already claimed |
| `WRONG_TURN` | Not this player's turn |
| `GAME_ALREADY_FINISHED` | The game is over |
| `BOT_NOT_FOUND` | Unknown bot id |
| `NO_MOVE_AVAILABLE` | The bot found no cell to play |
| `INVALID_PLAYER` | Player id other than 0 or 1 |
| `VALIDATION_ERROR` | Malformed request (422) |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        bot_id: str | None = None,
        details: dict | None = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                message=message,
                error_code=error_code,
                bot_id=bot_id,
                details=details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(GameError)
    async def game_error_handler(request: Request, exc: GameError) -> JSONResponse:
        status_code = 404 if exc.code == ErrorCode.BOT_NOT_FOUND.value else 400
        return make_error_response(
            ErrorCode(exc.code),
            exc.message,
            status_code=status_code,
            bot_id=request.path_params.get("bot_id"),
            details=exc.context or None,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Request validation failed",
            status_code=422,
            bot_id=request.path_params.get("bot_id"),
            details={"errors": jsonable_encoder(exc.errors())},
        )

    # =========================================================================
    # System Endpoints
    # =========================================================================

    @app.get("/status", response_class=PlainTextResponse, tags=["System"])
    async def status() -> str:
        """Liveness probe, answers OK."""
        return "OK"

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="gamey",
            version=__version__,
        )

    # =========================================================================
    # Board & Bots
    # =========================================================================

    @app.get(
        "/v1/bots",
        response_model=BotListResponse,
        tags=["Bots"],
        summary="List registered bots",
    )
    async def list_bots() -> BotListResponse:
        names = api_service.bot_names()
        return BotListResponse(bots=names, count=len(names))

    @app.get(
        "/v1/board",
        response_model=BoardResponse,
        responses={400: {"model": ErrorResponse}},
        tags=["Board"],
        summary="Coordinates of every cell",
    )
    async def get_board(
        size: Annotated[int, Query(description="Board size")],
    ) -> BoardResponse:
        return api_service.board(size)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/v1/game/new",
        response_model=NewGameResponse,
        responses={400: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Start an empty game",
    )
    async def new_game(body: NewGameRequest) -> NewGameResponse:
        return api_service.new_game(body.size)

    @app.post(
        "/{api_version}/ybot/choose/{bot_id}",
        response_model=ChooseMoveResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Invalid game or version"},
            404: {"model": ErrorResponse, "description": "Bot not found"},
        },
        tags=["Bots"],
        summary="Ask a bot for the next move",
    )
    def choose(api_version: str, bot_id: str, yen: YEN):
        """
        Ask a bot to play for the player to move in the given game.

        **Request Body:** a YEN snapshot
        ```json
        {"size": 3, "turn": 0, "players": ["B", "R"], "layout": "./../..."}
        ```
        """
        if api_version != API_VERSION:
            return make_error_response(
                ErrorCode.UNSUPPORTED_API_VERSION,
                f"Unsupported API version: {api_version}",
                bot_id=bot_id,
            )
        return api_service.choose_move(bot_id, yen)

    @app.post(
        "/v1/game/hvb/move/{bot_id}",
        response_model=HumanVsBotMoveResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Move rejected"},
            404: {"model": ErrorResponse, "description": "Bot not found"},
        },
        tags=["Game"],
        summary="Play a human move and get the bot's reply",
    )
    def human_vs_bot_move(bot_id: str, body: HumanMoveRequest) -> HumanVsBotMoveResponse:
        return api_service.human_vs_bot_move(bot_id, body.yen, body.cell_id)

    return app
