# src/connect5/core/lines.py

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterator, List, Tuple

from connect5.config import SIZE
from connect5.types import Coord

# Line kinds, in catalog order
ROW_Z = "row-z"                      # fixed x, y
ROW_X = "row-x"                      # fixed y, z
LAYER_DIAGONAL = "layer-diagonal"    # fixed y
VERTICAL = "vertical"                # fixed x, z
X_PLANE_DIAGONAL = "x-plane-diagonal"
Z_PLANE_DIAGONAL = "z-plane-diagonal"
SPACE_DIAGONAL = "space-diagonal"


@dataclass(frozen=True, slots=True)
class Line:
    kind: str
    cells: Tuple[Coord, ...]

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, coord: object) -> bool:
        return coord in self.cells


def build_line_catalog(size: int = SIZE) -> Tuple[Line, ...]:
    """
    Enumerate every straight line that spans the cube edge to edge.

    Order:
      1) per layer y: rows along z (each x), rows along x (each z),
         then the diagonal x == z and the anti-diagonal z == size-1-x
      2) verticals, z outer / x inner
      3) per x: diagonals y == z and z == size-1-y;
         then per z: diagonals x == y and x == size-1-y
      4) the four space diagonals
    For size 5 that is 60 + 25 + 20 + 4 = 109 lines.
    """
    n = size
    last = n - 1
    idx = range(n)
    lines: List[Line] = []

    for y in idx:
        for x in idx:
            lines.append(Line(ROW_Z, tuple((x, y, z) for z in idx)))
        for z in idx:
            lines.append(Line(ROW_X, tuple((x, y, z) for x in idx)))
        lines.append(Line(LAYER_DIAGONAL, tuple((t, y, t) for t in idx)))
        lines.append(Line(LAYER_DIAGONAL, tuple((t, y, last - t) for t in idx)))

    for z in idx:
        for x in idx:
            lines.append(Line(VERTICAL, tuple((x, y, z) for y in idx)))

    for x in idx:
        lines.append(Line(X_PLANE_DIAGONAL, tuple((x, t, t) for t in idx)))
        lines.append(Line(X_PLANE_DIAGONAL, tuple((x, t, last - t) for t in idx)))
    for z in idx:
        lines.append(Line(Z_PLANE_DIAGONAL, tuple((t, t, z) for t in idx)))
        lines.append(Line(Z_PLANE_DIAGONAL, tuple((last - t, t, z) for t in idx)))

    lines.append(Line(SPACE_DIAGONAL, tuple((t, t, t) for t in idx)))
    lines.append(Line(SPACE_DIAGONAL, tuple((t, last - t, t) for t in idx)))
    lines.append(Line(SPACE_DIAGONAL, tuple((t, t, last - t) for t in idx)))
    lines.append(Line(SPACE_DIAGONAL, tuple((t, last - t, last - t) for t in idx)))

    return tuple(lines)


@lru_cache(maxsize=None)
def line_catalog(size: int = SIZE) -> Tuple[Line, ...]:
    return build_line_catalog(size)


@lru_cache(maxsize=None)
def _lines_by_cell(size: int) -> Dict[Coord, Tuple[Line, ...]]:
    index: Dict[Coord, List[Line]] = {}
    for line in line_catalog(size):
        for coord in line:
            index.setdefault(coord, []).append(line)
    return {coord: tuple(ls) for coord, ls in index.items()}


def lines_through(coord: Coord, size: int = SIZE) -> Tuple[Line, ...]:
    """Catalog lines containing `coord`, in catalog order."""
    return _lines_by_cell(size).get(coord, ())
