# src/connect5/core/lattice.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from connect5.config import SIZE
from connect5.errors import IllegalPlacement
from connect5.types import Cell, Column, Coord, Side


@dataclass(slots=True)
class Lattice:
    """
    The 5x5x5 cube of cells, indexed grid[x][y][z] with y as height.

    heights[x][z] counts the pieces in a column; the column's drop target is
    the cell at y == height, or none once the column is full. Gravity keeps
    occupied cells a contiguous prefix from y == 0, so the height is all the
    bookkeeping a column needs.
    """
    size: int = SIZE
    grid: List[List[List[Cell]]] = field(default_factory=list)
    heights: List[List[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        n = self.size
        self.grid = [[[None for _ in range(n)] for _ in range(n)] for _ in range(n)]
        self.heights = [[0 for _ in range(n)] for _ in range(n)]

    def copy(self) -> "Lattice":
        lat = Lattice(self.size)
        lat.grid = [[col[:] for col in layer] for layer in self.grid]
        lat.heights = [row[:] for row in self.heights]
        return lat

    # -----------------------------
    # Queries
    # -----------------------------
    def in_bounds(self, x: int, z: int) -> bool:
        return 0 <= x < self.size and 0 <= z < self.size

    def owner_at(self, coord: Coord) -> Cell:
        x, y, z = coord
        return self.grid[x][y][z]

    def drop_target(self, column: Column) -> Optional[int]:
        x, z = column
        h = self.heights[x][z]
        return h if h < self.size else None

    def is_drop_target(self, x: int, y: int, z: int) -> bool:
        return self.heights[x][z] == y

    def is_column_full(self, x: int, z: int) -> bool:
        return self.heights[x][z] >= self.size

    def open_columns(self) -> List[Column]:
        n = self.size
        return [(x, z) for x in range(n) for z in range(n) if self.heights[x][z] < n]

    def drop_targets(self) -> List[Coord]:
        """Every current drop target, in x (outer), y, z (inner) scan order."""
        n = self.size
        out: List[Coord] = []
        for x in range(n):
            for y in range(n):
                for z in range(n):
                    if self.heights[x][z] == y:
                        out.append((x, y, z))
        return out

    def is_full(self) -> bool:
        return not self.open_columns()

    def occupied_count(self) -> int:
        return sum(sum(row) for row in self.heights)

    def cells(self) -> Iterator[Coord]:
        n = self.size
        for x in range(n):
            for y in range(n):
                for z in range(n):
                    yield (x, y, z)

    # -----------------------------
    # Mutation
    # -----------------------------
    def place_at(self, x: int, z: int, owner: Side) -> Coord:
        """
        Fill the drop target of column (x, z) and return its coordinate.
        The only way ownership ever changes.
        """
        if not self.in_bounds(x, z):
            raise IllegalPlacement(f"Column ({x}, {z}) is out of range.")
        y = self.heights[x][z]
        if y >= self.size:
            raise IllegalPlacement(f"Column ({x}, {z}) is full.")

        self.grid[x][y][z] = owner
        self.heights[x][z] = y + 1
        return (x, y, z)
