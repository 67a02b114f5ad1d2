from __future__ import annotations

from typing import Iterable, Optional, Sequence

import matplotlib
import pytest

matplotlib.use("Agg")

from connect5.core.lattice import Lattice
from connect5.game.controller import TurnController
from connect5.game.events import BaseListener
from connect5.game.scheduler import ManualScheduler
from connect5.game.state import Phase
from connect5.types import OPPONENT, PLAYER, Cell, Column, Coord, Side

# Per-axis bit patterns; their xor colours the full cube with no uniform line.
_A = (0, 1, 0, 1, 0)
_B = (0, 0, 0, 1, 1)
_D = (0, 0, 1, 1, 0)


def draw_colour(x: int, y: int, z: int) -> Side:
    return PLAYER if _A[x] ^ _B[y] ^ _D[z] else OPPONENT


def stack(lattice: Lattice, column: Column, owners: Iterable[Side]) -> None:
    for owner in owners:
        lattice.place_at(column[0], column[1], owner)


def fill_draw_pattern(lattice: Lattice, skip: Sequence[Coord] = ()) -> None:
    """Fill every column bottom-up with the draw colouring, stopping below any skipped cell."""
    skipped = set(skip)
    n = lattice.size
    for x in range(n):
        for z in range(n):
            for y in range(n):
                if (x, y, z) in skipped:
                    break
                lattice.place_at(x, z, draw_colour(x, y, z))


class RecordingListener(BaseListener):
    def __init__(self) -> None:
        self.events: list[tuple] = []

    def on_cell_changed(self, x: int, y: int, z: int, owner: Cell) -> None:
        self.events.append(("cell", (x, y, z), owner))

    def on_drop_target_changed(self, column: Column, y: Optional[int]) -> None:
        self.events.append(("drop", column, y))

    def on_line_completed(self, cells: Sequence[Coord], winner: Side) -> None:
        self.events.append(("line", tuple(cells), winner))

    def on_game_phase_changed(self, phase: Phase) -> None:
        self.events.append(("phase", phase))

    def on_no_moves_left(self) -> None:
        self.events.append(("no_moves",))

    def kinds(self) -> list[str]:
        return [e[0] for e in self.events]

    def phases(self) -> list[Phase]:
        return [e[1] for e in self.events if e[0] == "phase"]


@pytest.fixture()
def lattice() -> Lattice:
    return Lattice()


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def recorder() -> RecordingListener:
    return RecordingListener()


@pytest.fixture()
def controller(scheduler: ManualScheduler, recorder: RecordingListener) -> TurnController:
    return TurnController(scheduler=scheduler, listeners=[recorder])
