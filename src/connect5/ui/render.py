from __future__ import annotations
from typing import Iterable, List, Optional, Set

from connect5.config import CLEAR_SCREEN
from connect5.core.lattice import Lattice
from connect5.types import Coord, OPPONENT, PLAYER
from connect5.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_GREEN, FG_RED, FG_YELLOW, REVERSE, RESET


def _piece(lattice: Lattice, coord: Coord) -> str:
    owner = lattice.owner_at(coord)
    if owner == PLAYER:
        return c("X", FG_RED)
    if owner == OPPONENT:
        return c("O", FG_YELLOW)
    if lattice.is_drop_target(*coord):
        return c("+", FG_GREEN)
    return c("·", FG_GRAY)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def format_lattice(lattice: Lattice, highlight: Optional[Iterable[Coord]] = None) -> str:
    """
    Horizontal layers side by side, y = 0 (bottom) on the left.
    Within a layer, rows are z and columns are x, both numbered from 1.
    """
    n = lattice.size
    hl: Set[Coord] = set(highlight) if highlight else set()
    gap = "   "

    header = gap.join(f"   y={y + 1}".ljust(2 * n + 3) for y in range(n))
    nums = gap.join(("   " + " ".join(str(x + 1) for x in range(n))).ljust(2 * n + 3) for _ in range(n))
    out: List[str] = [c(header, BOLD), c(nums, DIM)]

    for z in range(n):
        parts = []
        for y in range(n):
            cells = []
            for x in range(n):
                p = _piece(lattice, (x, y, z))
                if (x, y, z) in hl:
                    p = f"{REVERSE}{p}{RESET}"
                cells.append(p)
            parts.append(f"{z + 1}| " + " ".join(cells) + " ")
        out.append(gap.join(parts))

    return "\n".join(out)


def render(lattice: Lattice, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("CONNECT 5 · 5x5x5", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    print(format_lattice(lattice, highlight))
    print(c("   '+' marks where a piece would land. Enter 'x z' to drop. Enter q to quit.", DIM))
