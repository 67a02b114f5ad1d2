from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from itertools import count
from typing import Optional

from connect5.core.lattice import Lattice
from connect5.core.lines import Line
from connect5.types import Outcome, Side

_session_ids = count(1)


class Phase(str, Enum):
    NOT_STARTED = "not_started"
    PLAYER_TO_MOVE = "player_to_move"
    OPPONENT_TO_MOVE = "opponent_to_move"
    FINISHED = "finished"


@dataclass(slots=True)
class GameSession:
    lattice: Lattice = field(default_factory=Lattice)
    phase: Phase = Phase.NOT_STARTED
    human_goes_first: Optional[bool] = None
    winner: Optional[Side] = None
    winning_line: Optional[Line] = None
    moves: int = 0
    session_id: int = field(default_factory=lambda: next(_session_ids))

    @property
    def outcome(self) -> Optional[Outcome]:
        if self.phase is not Phase.FINISHED:
            return None
        return self.winner if self.winner is not None else "draw"
