from __future__ import annotations
import re
from typing import Optional

from connect5.types import Column


def parse_column(raw: str, size: int) -> Optional[Column]:
    """
    Parse "x z" (1-based, space or comma separated) into a 0-based column.
    Returns None for quit.
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None

    parts = [p for p in re.split(r"[\s,]+", s) if p]
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError("Invalid input. Enter two numbers 'x z' or q.")

    x, z = (int(p) - 1 for p in parts)
    if not (0 <= x < size and 0 <= z < size):
        raise ValueError(f"x and z must be between 1 and {size}.")
    return (x, z)
