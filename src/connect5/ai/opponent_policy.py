
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from connect5.config import CORNER_COLUMNS
from connect5.core.lattice import Lattice
from connect5.core.lines import Line, line_catalog
from connect5.core.rules import line_counts
from connect5.types import OPPONENT, Column, Coord, Side, other

logger = logging.getLogger(__name__)

OPENING = "opening"
WIN = "win"
BLOCK = "block"
DEVELOP = "develop"
FALLBACK = "fallback"
NO_MOVE = "no_move"

OPPONENT_RULES = (OPENING, WIN, BLOCK, DEVELOP, FALLBACK, NO_MOVE)


@dataclass
class OpponentPolicy:
    """
    Deterministic rule-priority opponent. First matching rule wins:
      1) opening: take an untouched corner column
      2) win: finish a line holding four of my pieces
      3) block: fill the empty cell of a line holding four of theirs
      4) develop: extend my strongest line that they have not touched
      5) fallback: first drop target in x, y, z scan order
    Returns None when every column is full.

    Candidate cells are always current drop targets; cells higher up a
    column are read for line counts but never chosen.
    """
    name: str = "Opponent"
    corners: Tuple[Column, ...] = CORNER_COLUMNS
    last_info: dict = field(default_factory=dict)

    def choose_move(self, lattice: Lattice, me: Side = OPPONENT) -> Optional[Column]:
        t0 = time.perf_counter()
        rule, cell, line = self._decide(lattice, me)

        column = (cell[0], cell[2]) if cell is not None else None
        self.last_info = {
            "rule": rule,
            "column": column,
            "cell": cell,
            "line_kind": line.kind if line is not None else None,
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
        }
        logger.debug("%s plays %s via %s", self.name, column, rule)
        return column

    def _decide(self, lattice: Lattice, me: Side) -> Tuple[str, Optional[Coord], Optional[Line]]:
        # 1) opening corners
        for (x, z) in self.corners:
            if lattice.owner_at((x, 0, z)) is None:
                return OPENING, (x, 0, z), None

        lines = line_catalog(lattice.size)

        # 2) win now
        hit = self._four_and_open(lattice, lines, me)
        if hit is not None:
            return WIN, hit[0], hit[1]

        # 3) block their win
        hit = self._four_and_open(lattice, lines, other(me))
        if hit is not None:
            return BLOCK, hit[0], hit[1]

        # 4) develop the line with most of my pieces and none of theirs
        best: Optional[Line] = None
        best_cells: List[Coord] = []
        best_mine = 0
        for line in lines:
            mine, theirs, _ = line_counts(lattice, line, me)
            if theirs or mine == 0 or mine <= best_mine:
                continue
            targets = [c for c in line if lattice.is_drop_target(*c)]
            if not targets:
                continue
            best, best_cells, best_mine = line, targets, mine
        if best is not None:
            return DEVELOP, min(best_cells), best

        # 5) anything legal
        targets = lattice.drop_targets()
        if targets:
            return FALLBACK, targets[0], None

        return NO_MOVE, None, None

    @staticmethod
    def _four_and_open(lattice: Lattice, lines, owner: Side) -> Optional[Tuple[Coord, Line]]:
        """First line with four `owner` pieces whose fifth cell is playable now."""
        n = lattice.size
        for line in lines:
            filled = [c for c in line if lattice.owner_at(c) == owner]
            if len(filled) != n - 1:
                continue
            empty = [c for c in line if lattice.owner_at(c) is None]
            if len(empty) == 1 and lattice.is_drop_target(*empty[0]):
                return empty[0], line
        return None
