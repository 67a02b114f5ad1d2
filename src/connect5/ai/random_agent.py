from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import Optional

from connect5.core.lattice import Lattice
from connect5.types import Column, Side


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)

    def choose_move(self, lattice: Lattice, me: Side) -> Optional[Column]:
        moves = lattice.open_columns()
        if not moves:
            return None
        return self.rng.choice(moves)
