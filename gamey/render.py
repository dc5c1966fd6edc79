"""
Text rendering of the triangular board for the CLI.
"""

from __future__ import annotations
from dataclasses import dataclass

from .engine_core.action import PLAYER_SYMBOLS
from .engine_core.coords import Coordinates
from .engine_core.state import GameState

EMPTY = "."

_COLORS = ("\033[34m", "\033[31m")
_RESET = "\033[0m"


@dataclass
class RenderOptions:
    show_idx: bool = False
    show_3d_coords: bool = False
    show_colors: bool = True


def _cell_label(state: GameState, index: int, options: RenderOptions) -> str:
    owner = state.cells[index]
    symbol = EMPTY if owner is None else PLAYER_SYMBOLS[owner]
    if options.show_colors and owner is not None:
        symbol = f"{_COLORS[owner]}{symbol}{_RESET}"
    if options.show_idx:
        symbol = f"{symbol}{index}"
    if options.show_3d_coords:
        c = Coordinates.from_index(index, state.size)
        symbol = f"{symbol}({c.x}{c.y}{c.z})"
    return symbol


def render_board(state: GameState, options: RenderOptions | None = None) -> str:
    """
    Draw the board as centered rows, apex first.

    Labels are padded to a common width so the triangle stays aligned
    when indices or coordinates are shown.
    """
    options = options or RenderOptions()
    labels = [_cell_label(state, i, options) for i in range(state.total_cells)]
    plain = RenderOptions(
        show_idx=options.show_idx,
        show_3d_coords=options.show_3d_coords,
        show_colors=False,
    )
    width = max(len(_cell_label(state, i, plain)) for i in range(state.total_cells))

    lines = []
    index = 0
    for row in range(state.size):
        indent = " " * ((state.size - row - 1) * (width + 1) // 2)
        cells = []
        for _ in range(row + 1):
            visible = len(_cell_label(state, index, plain))
            cells.append(labels[index] + " " * (width - visible))
            index += 1
        lines.append(indent + " ".join(cells))

    status = state.status
    if status.is_finished:
        lines.append(f"Winner: {PLAYER_SYMBOLS[status.winner]} (player {status.winner})")
    else:
        lines.append(f"Next: {PLAYER_SYMBOLS[status.next_player]} (player {status.next_player})")
    return "\n".join(lines)
