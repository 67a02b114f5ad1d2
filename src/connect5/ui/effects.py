from __future__ import annotations
import sys
import time

from connect5.config import AI_THINKING_SPINNER


def ai_thinking(delay_sec: float, label: str = "Opponent is thinking") -> None:
    """
    User-visible pause + optional spinner while the opponent's move is pending.
    """
    if delay_sec <= 0:
        return

    if not AI_THINKING_SPINNER:
        time.sleep(delay_sec)
        return

    frames = ["|", "/", "-", "\\"]
    start = time.time()
    i = 0
    while (time.time() - start) < delay_sec:
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()
