"""
API Service - Business logic layer between HTTP and the engine.

The service:
1. Rebuilds games from YEN snapshots
2. Applies human moves and dispatches bot replies by name
3. Formats responses as pydantic schemas

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
and stateless: every request carries the full game.
Engine errors (GameError subclasses) propagate to the caller.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from ..bots import BotRegistry, default_registry
from ..config import Settings
from ..engine_core.action import Movement, GameStatus
from ..engine_core.coords import Coordinates, total_cells
from ..engine_core.errors import GameAlreadyFinished, InvalidBoardSize, NoMoveAvailable
from ..engine_core.notation import YEN
from ..engine_core.state import GameState, MIN_BOARD_SIZE
from .schemas import (
    AppliedMove,
    BoardResponse,
    ChooseMoveResponse,
    CoordsInfo,
    FinishedStatus,
    HumanVsBotMoveResponse,
    NewGameResponse,
    OngoingStatus,
    StatusInfo,
)

logger = logging.getLogger(__name__)

HUMAN_PLAYER = 0
BOT_PLAYER = 1
ROLE_NAMES = {HUMAN_PLAYER: "human", BOT_PLAYER: "bot"}


def _coords_info(coords: Coordinates) -> CoordsInfo:
    return CoordsInfo(x=coords.x, y=coords.y, z=coords.z)


def _status_info(status: GameStatus) -> StatusInfo:
    if status.is_finished:
        return FinishedStatus(winner=ROLE_NAMES[status.winner])
    return OngoingStatus(next=ROLE_NAMES[status.next_player])


@dataclass
class GameService:
    """
    Main API service.

    Usage:
        service = GameService()
        yen = service.new_game(7).yen
        response = service.human_vs_bot_move("greedy_bot", yen, cell_id=10)
    """
    settings: Settings = field(default_factory=Settings)
    registry: BotRegistry | None = None

    def __post_init__(self):
        if self.registry is None:
            self.registry = default_registry(self.settings)

    def bot_names(self) -> list[str]:
        return self.registry.names()

    def new_game(self, size: int) -> NewGameResponse:
        """Create an empty game."""
        game = GameState.new(size)
        logger.info("New game of size %d", size)
        return NewGameResponse(yen=YEN.from_game(game))

    def board(self, size: int) -> BoardResponse:
        """List the coordinates of every cell of a board."""
        if size < MIN_BOARD_SIZE:
            raise InvalidBoardSize(f"Board size must be >= {MIN_BOARD_SIZE}, got {size}")
        cells = [
            _coords_info(Coordinates.from_index(index, size))
            for index in range(total_cells(size))
        ]
        return BoardResponse(size=size, cells=cells)

    def choose_move(self, bot_id: str, yen: YEN) -> ChooseMoveResponse:
        """Ask a bot for the next move of the player to move."""
        bot = self.registry.get(bot_id)
        game = yen.to_game()
        if game.is_finished:
            raise GameAlreadyFinished(
                f"Game is over (winner: player {game.winner})",
                context={"winner": game.winner},
            )
        coords = self._bot_choice(bot, game)
        return ChooseMoveResponse(
            bot_id=bot_id,
            cell_id=coords.to_index(game.size),
            coords=_coords_info(coords),
        )

    def human_vs_bot_move(self, bot_id: str, yen: YEN, cell_id: int) -> HumanVsBotMoveResponse:
        """
        Apply the human's placement, then let the bot answer.

        The human is player 0 and the bot player 1. No bot move is made
        if the human's placement ends the game.
        """
        bot = self.registry.get(bot_id)
        game = yen.to_game()

        human_coords = Coordinates.from_index(cell_id, game.size)
        game.add_move(Movement.placement(HUMAN_PLAYER, human_coords))
        human_move = AppliedMove(cell_id=cell_id, coords=_coords_info(human_coords))

        bot_move = None
        if not game.is_finished:
            bot_coords = self._bot_choice(bot, game)
            game.add_move(Movement.placement(BOT_PLAYER, bot_coords))
            bot_move = AppliedMove(
                cell_id=bot_coords.to_index(game.size),
                coords=_coords_info(bot_coords),
            )

        logger.info(
            "hvb move with %s: human %d, bot %s, status %s",
            bot_id, cell_id, bot_move.cell_id if bot_move else None, game.status,
        )
        return HumanVsBotMoveResponse(
            yen=YEN.from_game(game),
            human_move=human_move,
            bot_move=bot_move,
            status=_status_info(game.status),
        )

    def _bot_choice(self, bot, game: GameState) -> Coordinates:
        coords = bot.choose_move(game)
        if coords is None:
            raise NoMoveAvailable(
                f"Bot {bot.name()} could not choose a move",
                context={"bot_id": bot.name()},
            )
        return coords
