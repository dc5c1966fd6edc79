"""
GameY CLI - Command-line interface for the engine.

Usage:
    gamey                                  Two humans on one terminal
    gamey --mode computer --bot mcts_bot   Play against a bot
    gamey --mode server --port 3000        Serve the HTTP API

Interactive commands:
    <number>            Claim the cell with that index
    resign              Give up the game
    show_coords         Toggle x/y/z coordinates
    show_idx            Toggle cell indices
    show_colors         Toggle colored stones
    save <file>         Save the game (move list, JSON)
    load <file>         Load a saved game
    help                Show commands
    exit                Quit
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional
import argparse
import logging
import sys

from .bots import YBot, default_registry
from .config import Settings
from .engine_core import reducer
from .engine_core.action import Movement, player_symbol
from .engine_core.coords import Coordinates
from .engine_core.errors import GameError
from .engine_core.notation import load_game, save_game
from .engine_core.state import GameState
from .render import RenderOptions, render_board

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Commands: <number> (place), resign, show_coords, show_idx, show_colors, "
    "save/load <file>, exit, help"
)


class Mode(str, Enum):
    HUMAN = "human"
    COMPUTER = "computer"
    SERVER = "server"

    def __str__(self) -> str:
        return self.value


class CommandKind(Enum):
    PLACE = "place"
    RESIGN = "resign"
    NONE = "none"
    ERROR = "error"
    SAVE = "save"
    LOAD = "load"
    SHOW_COORDS = "show_coords"
    SHOW_COLORS = "show_colors"
    SHOW_IDX = "show_idx"
    EXIT = "exit"
    HELP = "help"


@dataclass(frozen=True)
class Command:
    """A parsed line of interactive input."""
    kind: CommandKind
    index: Optional[int] = None
    filename: Optional[str] = None
    message: Optional[str] = None


_KEYWORDS = {
    "resign": CommandKind.RESIGN,
    "help": CommandKind.HELP,
    "exit": CommandKind.EXIT,
    "show_colors": CommandKind.SHOW_COLORS,
    "show_coords": CommandKind.SHOW_COORDS,
    "show_idx": CommandKind.SHOW_IDX,
}


def parse_idx(text: str, bound: int) -> int:
    """
    Parse a cell index in [0, bound).

    Raises ValueError with "Not a number" or "Out of bounds" messages.
    """
    if not text.isdigit():
        raise ValueError(f"Not a number: {text}")
    index = int(text)
    if index >= bound:
        raise ValueError(f"Out of bounds: {index}")
    return index


def parse_command(text: str, bound: int) -> Command:
    """Parse one line of input. `bound` is the number of cells on the board."""
    parts = text.split()
    if not parts:
        return Command(CommandKind.NONE)

    head = parts[0]
    if head in ("save", "load"):
        if len(parts) < 2:
            return Command(CommandKind.ERROR, message="Filename required")
        kind = CommandKind.SAVE if head == "save" else CommandKind.LOAD
        return Command(kind, filename=parts[1])

    if head in _KEYWORDS:
        return Command(_KEYWORDS[head])

    try:
        return Command(CommandKind.PLACE, index=parse_idx(head, bound))
    except ValueError as e:
        return Command(CommandKind.ERROR, message=str(e))


# =============================================================================
# Interactive session
# =============================================================================

@dataclass
class Session:
    """One interactive game on the terminal."""
    game: GameState
    mode: Mode = Mode.HUMAN
    bot: Optional[YBot] = None
    options: Optional[RenderOptions] = None
    output: Callable[[str], None] = print

    def __post_init__(self):
        if self.options is None:
            self.options = RenderOptions()

    def apply(self, movement: Movement, error_prefix: str) -> bool:
        result = reducer.apply_move(self.game, movement)
        if not result.success:
            self.output(f"{error_prefix}: {result.error}")
        return result.success

    def bot_move(self) -> None:
        """Let the bot play for the player to move, if the game is ongoing."""
        player = self.game.next_player
        if self.bot is None or player is None:
            return
        coords = self.bot.choose_move(self.game)
        if coords is None:
            self.output(f"Bot {self.bot.name()} found no move")
            return
        logger.info("Bot %s plays %s", self.bot.name(), coords)
        self.apply(Movement.placement(player, coords), "Bot move error")

    def handle(self, command: Command) -> bool:
        """
        Execute a command for the player to move.

        Returns False when the session should end.
        """
        kind = command.kind
        player = self.game.next_player

        if kind == CommandKind.PLACE:
            coords = Coordinates.from_index(command.index, self.game.size)
            placed = self.apply(Movement.placement(player, coords), "Invalid move")
            if placed and self.mode == Mode.COMPUTER and not self.game.is_finished:
                self.bot_move()
        elif kind == CommandKind.RESIGN:
            self.apply(Movement.resign(player), "Error adding resign move")
        elif kind == CommandKind.SHOW_COORDS:
            self.options.show_3d_coords = not self.options.show_3d_coords
        elif kind == CommandKind.SHOW_IDX:
            self.options.show_idx = not self.options.show_idx
        elif kind == CommandKind.SHOW_COLORS:
            self.options.show_colors = not self.options.show_colors
        elif kind == CommandKind.HELP:
            self.output(HELP_TEXT)
        elif kind == CommandKind.EXIT:
            self.output("Exiting the game.")
            return False
        elif kind == CommandKind.NONE:
            self.output("No command entered.")
        elif kind == CommandKind.ERROR:
            self.output(f"Error parsing command: {command.message}")
        elif kind == CommandKind.SAVE:
            try:
                save_game(self.game, command.filename)
                self.output(f"Game saved to {command.filename}")
            except OSError as e:
                self.output(f"Could not save: {e}")
        elif kind == CommandKind.LOAD:
            try:
                self.game = load_game(command.filename)
                self.output(f"Game loaded from {command.filename}")
            except (OSError, GameError) as e:
                self.output(f"Could not load: {e}")
        return True

    def run(self, read_line: Callable[[str], str] = input) -> None:
        """Prompt until the game ends, the user exits, or input runs out."""
        while True:
            self.output(render_board(self.game, self.options))
            if self.game.is_finished:
                winner = self.game.winner
                self.output(f"Game over! Winner: {player_symbol(winner)} (player {winner})")
                return
            player = self.game.next_player
            prompt = f"Current player: {player}, action (help = show commands)? "
            try:
                line = read_line(prompt)
            except (EOFError, KeyboardInterrupt):
                self.output("Interrupted")
                return
            if not self.handle(parse_command(line, self.game.total_cells)):
                return


# =============================================================================
# Entry point
# =============================================================================

def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="GameY: a command-line implementation of the Game of Y.",
        prog="gamey",
    )
    parser.add_argument("--size", "-s", type=int, default=settings.default_size,
                        help="Size of the triangular board (cells per side)")
    parser.add_argument("--mode", "-m", type=Mode, choices=list(Mode), default=Mode.HUMAN,
                        help="human (2 players), computer (vs bot) or server (HTTP API)")
    parser.add_argument("--bot", "-b", default="random_bot",
                        help="Bot to play against in computer mode")
    parser.add_argument("--bot-first", action="store_true",
                        help="The bot makes the first move (computer mode)")
    parser.add_argument("--port", "-p", type=int, default=settings.port,
                        help="Port for server mode")
    parser.add_argument("--log-level", default=settings.log_level,
                        help="Logging level (DEBUG, INFO, WARNING...)")
    return parser


def cmd_server(args, settings: Settings) -> None:
    """Serve the HTTP API."""
    import uvicorn

    from .api import create_app

    uvicorn.run(create_app(settings=settings), host="0.0.0.0", port=args.port)


def cmd_play(args, settings: Settings) -> int:
    """Run an interactive game on the terminal."""
    registry = default_registry(settings)
    bot = registry.find(args.bot)
    if bot is None:
        print(f"Bot '{args.bot}' not found. Available bots: {registry.names()}")
        return 1

    try:
        game = GameState.new(args.size)
    except GameError as e:
        print(f"Error: {e}")
        return 1

    session = Session(game=game, mode=args.mode, bot=bot)
    if args.mode == Mode.COMPUTER and args.bot_first:
        print(f"The bot ({bot.name()}) is thinking about its first move...")
        session.bot_move()
    session.run()
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    settings = Settings.from_env()
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.mode == Mode.SERVER:
        cmd_server(args, settings)
    else:
        sys.exit(cmd_play(args, settings))


if __name__ == "__main__":
    main()
