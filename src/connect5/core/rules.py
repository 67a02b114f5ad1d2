from __future__ import annotations
from typing import Iterable, Optional, Tuple

from connect5.core.lattice import Lattice
from connect5.core.lines import Line, line_catalog, lines_through
from connect5.types import OPPONENT, PLAYER, Coord, Side, other


def line_counts(lattice: Lattice, line: Line, me: Side) -> Tuple[int, int, int]:
    """(mine, theirs, empty) cell counts of `line` on the current lattice."""
    opp = other(me)
    mine = theirs = empty = 0
    for coord in line:
        v = lattice.owner_at(coord)
        if v is None:
            empty += 1
        elif v == me:
            mine += 1
        elif v == opp:
            theirs += 1
    return mine, theirs, empty


def _first_complete(lattice: Lattice, owner: Side, lines: Iterable[Line]) -> Optional[Line]:
    for line in lines:
        if all(lattice.owner_at(c) == owner for c in line):
            return line
    return None


def completed_line(lattice: Lattice, owner: Side, through: Optional[Coord] = None) -> Optional[Line]:
    """
    First catalog line whose five cells all belong to `owner`.

    With `through`, only lines containing that cell are scanned; after a
    placement that gives the same answer as a full scan, because any new
    line must pass through the piece just placed.
    """
    if through is None:
        lines = line_catalog(lattice.size)
    else:
        lines = lines_through(through, lattice.size)
    return _first_complete(lattice, owner, lines)


def has_completed_line(lattice: Lattice, owner: Side) -> bool:
    return completed_line(lattice, owner) is not None


def is_draw(lattice: Lattice) -> bool:
    return (
        lattice.is_full()
        and completed_line(lattice, PLAYER) is None
        and completed_line(lattice, OPPONENT) is None
    )
