# src/connect5/types.py

from __future__ import annotations
from typing import Literal, Optional, Tuple

Side = Literal["player", "opponent"]
Cell = Optional[Side]          # None == empty
Coord = Tuple[int, int, int]   # (x, y, z), y is height
Column = Tuple[int, int]       # (x, z)
Outcome = Literal["player", "opponent", "draw"]

PLAYER: Side = "player"
OPPONENT: Side = "opponent"


def other(side: Side) -> Side:
    return OPPONENT if side == PLAYER else PLAYER
