from __future__ import annotations
from typing import Callable, Optional, Sequence

from connect5.game.controller import TurnController
from connect5.game.events import BaseListener
from connect5.game.scheduler import ManualScheduler
from connect5.game.state import Phase
from connect5.types import PLAYER, Cell, Column, Coord, Side
from connect5.ui.effects import ai_thinking
from connect5.ui.prompts import parse_column
from connect5.ui.render import render


class TerminalView(BaseListener):
    """Turns engine notifications into the status line and highlight."""

    def __init__(self) -> None:
        self.status = ""
        self.highlight: Optional[Sequence[Coord]] = None
        self.finished_message = ""

    def on_cell_changed(self, x: int, y: int, z: int, owner: Cell) -> None:
        if owner is None:
            return
        who = "You" if owner == PLAYER else "Opponent"
        self.status = f"{who} dropped into column {x + 1} {z + 1} (height {y + 1})"

    def on_line_completed(self, cells: Sequence[Coord], winner: Side) -> None:
        self.highlight = cells
        self.finished_message = "You won 👍" if winner == PLAYER else "You lost 😛"

    def on_no_moves_left(self) -> None:
        self.finished_message = "There are no more moves"

    def on_game_phase_changed(self, phase: Phase) -> None:
        if phase is Phase.NOT_STARTED:
            self.status = ""
            self.highlight = None
            self.finished_message = ""


def run_terminal_game(
    human_goes_first: bool,
    read: Callable[[str], str] = input,
    show_thinking: bool = True,
) -> Optional[str]:
    """
    Play one game in the terminal. Returns the outcome, or None if the
    human quit.
    """
    scheduler = ManualScheduler()
    view = TerminalView()
    ctl = TurnController(scheduler=scheduler, listeners=[view])
    ctl.configure_sides(human_goes_first)

    while True:
        lattice = ctl.session.lattice

        if ctl.phase is Phase.FINISHED:
            render(lattice, view.finished_message, highlight=view.highlight)
            return ctl.session.outcome

        if ctl.phase is Phase.OPPONENT_TO_MOVE:
            render(lattice, view.status, highlight=view.highlight)
            if show_thinking:
                ai_thinking(scheduler.next_delay or 0.0)
            scheduler.run_pending()
            continue

        render(lattice, view.status or "Your move.", highlight=view.highlight)
        try:
            column: Optional[Column] = parse_column(read("Your move (x z): "), lattice.size)
        except ValueError as e:
            view.status = str(e)
            continue

        if column is None:
            render(lattice, "Game quit.", highlight=view.highlight)
            return None

        if ctl.request_placement(column) is None:
            view.status = f"Column {column[0] + 1} {column[1] + 1} is full."
