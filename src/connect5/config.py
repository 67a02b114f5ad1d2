# src/connect5/config.py

from __future__ import annotations

SIZE = 5          # edge length of the cube
CONNECT_N = 5     # a line spans one full edge

# Opening heuristic order, as (x, z) columns
CORNER_COLUMNS = ((0, 0), (0, 4), (4, 0), (4, 4))

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “Opponent thinking” effect
AI_THINKING_SPINNER = True
OPPONENT_THINK_DELAY_SEC = 0.7  # short pause so opponent moves aren’t instant
