"""
Connectivity Tracker - Incremental side-connection detection for one player.

A disjoint-set forest over every board cell. Placing a cell unions it
with its occupied same-player neighbors. Each root also carries a bit
mask of the sides its group touches, one bit per side anchor; a union
ORs the masks. The player has won once a group is joined to all three
anchors.

Anchors are bits rather than shared elements: two groups touching the
same side must stay separate sets.

Stored as flat lists so copies are cheap: the search bot clones game
states thousands of times per decision.
"""

from __future__ import annotations
from typing import Callable

from .coords import Coordinates, SIDES, total_cells

ALL_SIDES = (1 << len(SIDES)) - 1


def side_bit(side: int) -> int:
    """Mask bit of the anchor for a side."""
    return 1 << side


class ConnectivityTracker:
    """
    Union-find with path compression and union by rank.

    Elements 0 .. cells-1 are board cells; sides[root] is the anchor
    mask of the root's group.
    """

    __slots__ = ("size", "num_cells", "parent", "rank", "sides", "won")

    def __init__(self, size: int):
        self.size = size
        self.num_cells = total_cells(size)
        self.parent = list(range(self.num_cells))
        self.rank = [0] * self.num_cells
        self.sides = [0] * self.num_cells
        self.won = False

    def find(self, element: int) -> int:
        """Root of the element's set, compressing the path on the way."""
        parent = self.parent
        root = element
        while parent[root] != root:
            root = parent[root]
        while parent[element] != root:
            parent[element], element = root, parent[element]
        return root

    def union(self, a: int, b: int) -> bool:
        """
        Merge the sets of a and b.

        Returns:
            True if a merge happened, False if already connected
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        self.sides[root_a] |= self.sides[root_b]
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def place_cell(self, coords: Coordinates, is_own: Callable[[int], bool]) -> None:
        """
        Register a newly placed cell.

        Args:
            coords: Position of the placed cell
            is_own: Predicate telling whether a cell index already
                belongs to this player
        """
        index = coords.to_index(self.size)
        for neighbor in coords.neighbors():
            neighbor_index = neighbor.to_index(self.size)
            if is_own(neighbor_index):
                self.union(index, neighbor_index)
        # Masks are only read at roots; corners join two anchors at once
        root = self.find(index)
        for side in coords.sides():
            self.sides[root] |= side_bit(side)
        if self.sides[root] == ALL_SIDES:
            self.won = True

    def has_won(self) -> bool:
        """True iff one group is joined to all three side anchors."""
        return self.won

    def touched_sides(self, index: int) -> list[int]:
        """Sides reached by the group containing a cell."""
        mask = self.sides[self.find(index)]
        return [side for side in SIDES if mask & side_bit(side)]

    def copy(self) -> ConnectivityTracker:
        """Independent copy; no list is shared with the original."""
        new = ConnectivityTracker.__new__(ConnectivityTracker)
        new.size = self.size
        new.num_cells = self.num_cells
        new.parent = self.parent.copy()
        new.rank = self.rank.copy()
        new.sides = self.sides.copy()
        new.won = self.won
        return new

    def __eq__(self, other: object) -> bool:
        # Equal when the partitions and group masks match, regardless of tree shape
        if not isinstance(other, ConnectivityTracker):
            return NotImplemented
        if self.size != other.size or self.won != other.won:
            return False
        for element in range(self.num_cells):
            root, other_root = self.find(element), other.find(element)
            if self.sides[root] != other.sides[other_root]:
                return False
            if not self.connected(element, other_root) or not other.connected(element, root):
                return False
        return True
