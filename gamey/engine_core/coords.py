"""
Coordinates - Barycentric cell positions on the triangular Y board.

A board of size N has N rows; row r holds r + 1 cells, so the board
has N * (N + 1) / 2 cells numbered row by row from the apex.

Each cell is described by (x, y, z) with x + y + z == N - 1.
A coordinate equal to 0 means the cell touches the matching side:
- side 0: x == 0 (bottom row)
- side 1: y == 0 (left edge)
- side 2: z == 0 (right edge)

Index 0 is the apex corner (N - 1, 0, 0).
"""

from __future__ import annotations
from dataclasses import dataclass
from math import isqrt

from .errors import IndexOutOfRange

SIDES = (0, 1, 2)

# Unit moves between coordinates: take one from a, give one to b
_NEIGHBOR_STEPS = (
    (-1, 1, 0),
    (-1, 0, 1),
    (1, -1, 0),
    (0, -1, 1),
    (1, 0, -1),
    (0, 1, -1),
)


def triangular(n: int) -> int:
    """Number of cells in the first n rows."""
    return n * (n + 1) // 2


def total_cells(size: int) -> int:
    """Number of cells on a board of the given size."""
    return triangular(size)


@dataclass(frozen=True)
class Coordinates:
    """
    Immutable (x, y, z) position of a cell.

    Usage:
        coords = Coordinates.from_index(2, size=3)   # (1, 1, 0)
        coords.to_index(3)                           # 2
    """
    x: int
    y: int
    z: int

    @classmethod
    def from_index(cls, index: int, size: int) -> Coordinates:
        """Map a linear cell index to coordinates."""
        if index < 0 or index >= total_cells(size):
            raise IndexOutOfRange(
                f"Cell index {index} out of range for board size {size}",
                context={"index": index, "size": size},
            )
        row = (isqrt(8 * index + 1) - 1) // 2
        col = index - triangular(row)
        return cls(x=size - 1 - row, y=col, z=row - col)

    def to_index(self, size: int) -> int:
        """Map coordinates back to the linear cell index."""
        if not self.is_valid(size):
            raise IndexOutOfRange(
                f"Coordinates {self} do not lie on a board of size {size}",
                context={"coords": self.as_tuple(), "size": size},
            )
        row = size - 1 - self.x
        return triangular(row) + self.y

    def is_valid(self, size: int) -> bool:
        return (
            self.x >= 0 and self.y >= 0 and self.z >= 0
            and self.x + self.y + self.z == size - 1
        )

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def touches_side(self, side: int) -> bool:
        """Whether this cell lies on the given side (0, 1 or 2)."""
        return self.as_tuple()[side] == 0

    def sides(self) -> list[int]:
        """Sides this cell touches: one on edges, two on corners, none inside."""
        return [side for side in SIDES if self.touches_side(side)]

    def is_corner(self) -> bool:
        return sum(1 for value in self.as_tuple() if value == 0) == 2

    def neighbors(self) -> list[Coordinates]:
        """
        Adjacent cells on the triangular lattice.

        Up to 6; fewer on edges and corners. The coordinate sum is
        preserved, so every neighbor lies on the same board.
        """
        result = []
        for dx, dy, dz in _NEIGHBOR_STEPS:
            x, y, z = self.x + dx, self.y + dy, self.z + dz
            if x >= 0 and y >= 0 and z >= 0:
                result.append(Coordinates(x, y, z))
        return result

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"
