from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from connect5.ai.base import Agent
from connect5.ai.opponent_policy import OpponentPolicy
from connect5.config import OPPONENT_THINK_DELAY_SEC
from connect5.core.rules import completed_line
from connect5.errors import ConfigurationMisuse
from connect5.game.events import GameListener
from connect5.game.scheduler import Handle, ManualScheduler, Scheduler
from connect5.game.state import GameSession, Phase
from connect5.types import OPPONENT, PLAYER, Column, Coord, Side

logger = logging.getLogger(__name__)


class TurnController:
    """
    Owns the current GameSession and moves it through
    NOT_STARTED -> PLAYER_TO_MOVE <-> OPPONENT_TO_MOVE -> FINISHED.

    Human input arrives through request_placement(); the opponent acts from
    a callback scheduled `think_delay` seconds after the turn passes to it.
    Listeners hear about every cell, drop-target and phase change.
    """

    def __init__(
        self,
        policy: Optional[Agent] = None,
        scheduler: Optional[Scheduler] = None,
        listeners: Iterable[GameListener] = (),
        think_delay: float = OPPONENT_THINK_DELAY_SEC,
        strict: bool = True,
    ) -> None:
        self.policy: Agent = policy if policy is not None else OpponentPolicy()
        self.scheduler: Scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.listeners: List[GameListener] = list(listeners)
        self.think_delay = think_delay
        self.strict = strict

        self._session = GameSession()
        self._pending: Optional[Handle] = None

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def phase(self) -> Phase:
        return self._session.phase

    def add_listener(self, listener: GameListener) -> None:
        self.listeners.append(listener)

    # -----------------------------
    # Session control
    # -----------------------------
    def configure_sides(self, human_goes_first: bool) -> None:
        s = self._session
        if s.phase is not Phase.NOT_STARTED:
            self._misuse("configure_sides called twice without reset_game")
            return

        s.human_goes_first = human_goes_first
        if human_goes_first:
            self._set_phase(Phase.PLAYER_TO_MOVE)
        else:
            self._hand_to_opponent()

    def reset_game(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

        old = self._session.lattice
        self._session = GameSession()
        fresh = self._session.lattice

        for (x, y, z) in old.cells():
            if old.grid[x][y][z] is not None:
                self._emit("on_cell_changed", x, y, z, None)
        for (x, z) in fresh.open_columns():
            if old.heights[x][z] != 0:
                self._emit("on_drop_target_changed", (x, z), 0)

        self._emit("on_game_phase_changed", Phase.NOT_STARTED)

    # -----------------------------
    # Input
    # -----------------------------
    def request_placement(self, column: Column) -> Optional[Coord]:
        """
        Human move. Ignored (returns None) when it is not the human's turn
        or the column cannot take a piece.
        """
        s = self._session
        if s.phase is Phase.NOT_STARTED:
            self._misuse("request_placement before configure_sides")
            return None
        if s.phase is not Phase.PLAYER_TO_MOVE:
            logger.debug("ignoring out-of-phase placement %s during %s", column, s.phase.value)
            return None

        x, z = column
        if not s.lattice.in_bounds(x, z) or s.lattice.is_column_full(x, z):
            logger.debug("ignoring placement into unavailable column %s", column)
            return None

        coord = self._place(column, PLAYER)
        if self._check_end(coord, PLAYER):
            return coord

        self._hand_to_opponent()
        return coord

    # -----------------------------
    # Opponent turn
    # -----------------------------
    def _hand_to_opponent(self) -> None:
        self._set_phase(Phase.OPPONENT_TO_MOVE)
        session = self._session
        self._pending = self.scheduler.call_later(
            self.think_delay, lambda: self._opponent_turn(session)
        )

    def _opponent_turn(self, session: GameSession) -> None:
        if session is not self._session or session.phase is not Phase.OPPONENT_TO_MOVE:
            logger.debug("stale opponent callback for session %d dropped", session.session_id)
            return
        self._pending = None

        column = self.policy.choose_move(session.lattice, OPPONENT)
        if column is None:
            self._emit("on_no_moves_left")
            self._finish(None)
            return

        coord = self._place(column, OPPONENT)
        if self._check_end(coord, OPPONENT):
            return
        self._set_phase(Phase.PLAYER_TO_MOVE)

    # -----------------------------
    # Helpers
    # -----------------------------
    def _place(self, column: Column, side: Side) -> Coord:
        lattice = self._session.lattice
        coord = lattice.place_at(column[0], column[1], side)
        self._session.moves += 1
        logger.debug("%s -> %s", side, coord)

        self._emit("on_cell_changed", *coord, side)
        self._emit("on_drop_target_changed", column, lattice.drop_target(column))
        return coord

    def _check_end(self, coord: Coord, side: Side) -> bool:
        """Finish the game if `side` just completed a line or filled the cube."""
        s = self._session
        line = completed_line(s.lattice, side, through=coord)
        if line is not None:
            s.winning_line = line
            self._emit("on_line_completed", line.cells, side)
            self._finish(side)
            return True

        if not s.lattice.open_columns():
            self._emit("on_no_moves_left")
            self._finish(None)
            return True

        return False

    def _finish(self, winner: Optional[Side]) -> None:
        self._session.winner = winner
        logger.info("game %d finished: %s", self._session.session_id, winner or "draw")
        self._set_phase(Phase.FINISHED)

    def _set_phase(self, phase: Phase) -> None:
        self._session.phase = phase
        self._emit("on_game_phase_changed", phase)

    def _misuse(self, msg: str) -> None:
        if self.strict:
            raise ConfigurationMisuse(msg)
        logger.warning("%s; ignored", msg)

    def _emit(self, event: str, *args) -> None:
        for listener in self.listeners:
            getattr(listener, event)(*args)
