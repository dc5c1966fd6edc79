"""
Game State - The Y board, its history and the two connectivity trackers.

Design principles:
- Single point of mutation: add_move() applies one movement atomically
- Validate first, mutate after: a rejected movement leaves no trace
- Cheap clones: search bots copy the state for every playout
- Serializable: size + history reproduce the state (see notation)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import logging

from .action import GameStatus, Movement, PlayerId, other_player, NUM_PLAYERS
from .connectivity import ConnectivityTracker
from .coords import total_cells
from .errors import (
    CellOccupied,
    GameAlreadyFinished,
    IndexOutOfRange,
    InvalidBoardSize,
    InvalidPlayer,
    WrongTurn,
)

logger = logging.getLogger(__name__)

MIN_BOARD_SIZE = 2


@dataclass
class GameState:
    """
    Complete game state at a point in time.

    Usage:
        state = GameState.new(7)
        state.add_move(Movement.placement(0, Coordinates.from_index(10, 7)))
        state.status          # GameStatus(next_player=1)
    """
    size: int
    cells: list[Optional[PlayerId]]
    trackers: list[ConnectivityTracker]
    status: GameStatus = field(default_factory=lambda: GameStatus.ongoing(0))

    # History (for undo, replay, serialization)
    history: list[Movement] = field(default_factory=list)

    @classmethod
    def new(cls, size: int) -> GameState:
        """Create an empty board; player 0 moves first."""
        if size < MIN_BOARD_SIZE:
            raise InvalidBoardSize(
                f"Board size must be >= {MIN_BOARD_SIZE}, got {size}",
                context={"size": size},
            )
        return cls(
            size=size,
            cells=[None] * total_cells(size),
            trackers=[ConnectivityTracker(size) for _ in range(NUM_PLAYERS)],
        )

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def board_size(self) -> int:
        return self.size

    @property
    def total_cells(self) -> int:
        return len(self.cells)

    @property
    def is_finished(self) -> bool:
        return self.status.is_finished

    @property
    def next_player(self) -> PlayerId | None:
        """Player to move, or None once the game is over."""
        return self.status.next_player

    @property
    def winner(self) -> PlayerId | None:
        return self.status.winner

    def available_cells(self) -> list[int]:
        """Indices of all empty cells, ascending."""
        return [index for index, owner in enumerate(self.cells) if owner is None]

    def cell_owner(self, index: int) -> PlayerId | None:
        self._check_index(index)
        return self.cells[index]

    def has_won(self, player: PlayerId) -> bool:
        return self.trackers[player].has_won()

    def touched_sides(self, player: PlayerId, index: int) -> list[int]:
        """Sides reached by the group of the player's cell at index."""
        if self.cell_owner(index) != player:
            return []
        return self.trackers[player].touched_sides(index)

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_move(self, movement: Movement) -> GameStatus:
        """
        Apply a movement.

        Returns the new status. Raises a GameError subclass if the
        movement is illegal; the state is unchanged in that case.
        """
        if self.status.is_finished:
            raise GameAlreadyFinished(
                f"Game is over (winner: player {self.status.winner})",
                context={"winner": self.status.winner},
            )

        if movement.player not in range(NUM_PLAYERS):
            raise InvalidPlayer(
                f"Unknown player {movement.player}",
                context={"player": movement.player},
            )

        if not movement.is_placement:
            self.history.append(movement)
            self.status = GameStatus.finished(other_player(movement.player))
            logger.debug("Player %s resigned", movement.player)
            return self.status

        player = movement.player
        if player != self.status.next_player:
            raise WrongTurn(
                f"Not player {player}'s turn (next: player {self.status.next_player})",
                context={"player": player, "expected": self.status.next_player},
            )

        # Raises IndexOutOfRange for coordinates off the board
        index = movement.coords.to_index(self.size)
        if self.cells[index] is not None:
            raise CellOccupied(
                f"Cell {index} {movement.coords} is already occupied",
                context={"index": index, "owner": self.cells[index]},
            )

        self.cells[index] = player
        self.trackers[player].place_cell(
            movement.coords, lambda i: self.cells[i] == player
        )
        self.history.append(movement)

        if self.trackers[player].has_won():
            self.status = GameStatus.finished(player)
            logger.debug("Player %s connected all three sides", player)
        else:
            self.status = GameStatus.ongoing(other_player(player))
            if None not in self.cells:
                logger.error(
                    "Board of size %d is full with no winner; adjacency is broken",
                    self.size,
                )
        return self.status

    def undo(self) -> Movement | None:
        """
        Take back the last movement.

        Rebuilds the trackers by replaying the remaining history.
        Returns the removed movement, or None if there was nothing to undo.
        """
        if not self.history:
            return None
        last = self.history[-1]
        replay = GameState.new(self.size)
        for movement in self.history[:-1]:
            replay.add_move(movement)
        self.cells = replay.cells
        self.trackers = replay.trackers
        self.status = replay.status
        self.history = replay.history
        return last

    def clone(self) -> GameState:
        """Deep copy: occupancy, history and both trackers are independent."""
        return GameState(
            size=self.size,
            cells=self.cells.copy(),
            trackers=[tracker.copy() for tracker in self.trackers],
            status=self.status,
            history=self.history.copy(),
        )

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self.cells):
            raise IndexOutOfRange(
                f"Cell index {index} out of range for board size {self.size}",
                context={"index": index, "size": self.size},
            )
