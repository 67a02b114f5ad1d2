from __future__ import annotations
from typing import Optional, Protocol

from connect5.core.lattice import Lattice
from connect5.types import Column, Side


class Agent(Protocol):
    name: str

    def choose_move(self, lattice: Lattice, me: Side) -> Optional[Column]:
        ...
