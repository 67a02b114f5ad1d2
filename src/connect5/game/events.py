from __future__ import annotations
from typing import Optional, Protocol, Sequence

from connect5.game.state import Phase
from connect5.types import Cell, Column, Coord, Side


class GameListener(Protocol):
    """
    Engine -> collaborator notifications. Purely informational: rendering,
    highlighting and dialogs are driven from these, never from engine state
    directly.
    """

    def on_cell_changed(self, x: int, y: int, z: int, owner: Cell) -> None:
        ...

    def on_drop_target_changed(self, column: Column, y: Optional[int]) -> None:
        ...

    def on_line_completed(self, cells: Sequence[Coord], winner: Side) -> None:
        ...

    def on_game_phase_changed(self, phase: Phase) -> None:
        ...

    def on_no_moves_left(self) -> None:
        ...


class BaseListener:
    """No-op listener; subclass and override what you need."""

    def on_cell_changed(self, x: int, y: int, z: int, owner: Cell) -> None:
        pass

    def on_drop_target_changed(self, column: Column, y: Optional[int]) -> None:
        pass

    def on_line_completed(self, cells: Sequence[Coord], winner: Side) -> None:
        pass

    def on_game_phase_changed(self, phase: Phase) -> None:
        pass

    def on_no_moves_left(self) -> None:
        pass
