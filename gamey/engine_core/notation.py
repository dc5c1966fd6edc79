"""
Notation - Compact exchange forms of a game state.

Two forms are supported:

YEN (occupancy snapshot), used by HTTP clients:
    {"size": 3, "turn": 0, "players": ["B", "R"], "layout": "./../B.R"}
    layout rows are separated by "/", row r has r + 1 characters,
    "." is empty, "B" is player 0, "R" is player 1.

GameRecord (size + ordered move list), used for save/load:
    {"size": 3, "moves": [{"player": 0, "cell": 4}, {"player": 1, "resign": true}]}
    Replaying the record reproduces the state exactly, history included.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional
import json

from pydantic import BaseModel, Field, ValidationError

from .action import GameStatus, Movement, PLAYER_SYMBOLS, other_player
from .coords import Coordinates
from .errors import NotationError
from .state import GameState

EMPTY_SYMBOL = "."
ROW_SEPARATOR = "/"


class YEN(BaseModel):
    """Occupancy snapshot of a game."""
    size: int = Field(..., description="Board size (cells per side)")
    turn: int = Field(0, description="Index of the player to move")
    players: list[str] = Field(default_factory=lambda: list(PLAYER_SYMBOLS))
    layout: str = Field(..., description="Rows separated by '/'")

    @classmethod
    def from_game(cls, state: GameState) -> YEN:
        """Snapshot a game state."""
        rows = []
        for row in range(state.size):
            start = row * (row + 1) // 2
            rows.append("".join(
                EMPTY_SYMBOL if owner is None else PLAYER_SYMBOLS[owner]
                for owner in state.cells[start:start + row + 1]
            ))
        turn = state.next_player
        if turn is None:
            # Finished games keep alternating so the loser reads as "to move"
            turn = other_player(state.winner)
        return cls(
            size=state.size,
            turn=turn,
            players=list(PLAYER_SYMBOLS),
            layout=ROW_SEPARATOR.join(rows),
        )

    def to_game(self) -> GameState:
        """
        Rebuild a game state from the snapshot.

        Occupied cells are registered in index order; the move order is
        unknown, so the rebuilt history is empty. Both trackers are
        rebuilt, then the status is derived: a player whose group spans
        all sides is the winner, otherwise `turn` is to move.
        """
        state = GameState.new(self.size)
        symbols = {symbol: player for player, symbol in enumerate(self.players)}
        if len(symbols) != len(PLAYER_SYMBOLS):
            raise NotationError(f"Expected two distinct player symbols, got {self.players}")
        if self.turn not in (0, 1):
            raise NotationError(f"Invalid turn: {self.turn}")

        rows = self.layout.split(ROW_SEPARATOR)
        if len(rows) != self.size:
            raise NotationError(
                f"Invalid layout: expected {self.size} rows, got {len(rows)}"
            )

        owners = [None] * state.total_cells
        index = 0
        for row_number, row in enumerate(rows):
            if len(row) != row_number + 1:
                raise NotationError(
                    f"Invalid row {row_number}: expected length {row_number + 1}, got {len(row)}"
                )
            for symbol in row:
                if symbol != EMPTY_SYMBOL:
                    if symbol not in symbols:
                        raise NotationError(f"Unknown cell symbol: {symbol!r}")
                    owners[index] = symbols[symbol]
                index += 1

        # Register cells one at a time so each tracker only sees placed cells
        for index, owner in enumerate(owners):
            if owner is not None:
                state.cells[index] = owner
                coords = Coordinates.from_index(index, self.size)
                state.trackers[owner].place_cell(
                    coords, lambda i, owner=owner: state.cells[i] == owner
                )

        winners = [player for player in (0, 1) if state.trackers[player].has_won()]
        if len(winners) > 1:
            raise NotationError("Both players connect all three sides")
        if winners:
            state.status = GameStatus.finished(winners[0])
        else:
            state.status = GameStatus.ongoing(self.turn)
        return state


class MoveRecord(BaseModel):
    """One entry of a game record."""
    player: int = Field(..., ge=0, le=1)
    cell: Optional[int] = None
    resign: bool = False

    @classmethod
    def from_movement(cls, movement: Movement, size: int) -> MoveRecord:
        if movement.is_placement:
            return cls(player=movement.player, cell=movement.coords.to_index(size))
        return cls(player=movement.player, resign=True)

    def to_movement(self, size: int) -> Movement:
        if self.resign:
            return Movement.resign(self.player)
        if self.cell is None:
            raise NotationError("Move record needs either a cell or resign")
        return Movement.placement(self.player, Coordinates.from_index(self.cell, size))


class GameRecord(BaseModel):
    """Board size plus the full move history."""
    size: int
    moves: list[MoveRecord] = Field(default_factory=list)

    @classmethod
    def from_game(cls, state: GameState) -> GameRecord:
        return cls(
            size=state.size,
            moves=[MoveRecord.from_movement(m, state.size) for m in state.history],
        )

    def to_game(self) -> GameState:
        """Replay every move; illegal records raise the engine's error."""
        state = GameState.new(self.size)
        for move in self.moves:
            state.add_move(move.to_movement(self.size))
        return state


def save_game(state: GameState, path: str | Path) -> None:
    """Write the game record as JSON."""
    record = GameRecord.from_game(state)
    Path(path).write_text(record.model_dump_json(indent=2), encoding="utf-8")


def load_game(path: str | Path) -> GameState:
    """Read a JSON game record and replay it."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise NotationError(f"Invalid game file {path}: {e}") from e
    try:
        record = GameRecord.model_validate(data)
    except ValidationError as e:
        raise NotationError(f"Invalid game record in {path}: {e}") from e
    return record.to_game()
