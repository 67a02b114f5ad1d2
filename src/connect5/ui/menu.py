from __future__ import annotations

import time

from connect5.ui.terminal import run_terminal_game


def run_menu() -> None:
    print("Who moves first?")
    print("1) You")
    print("2) Opponent")

    choice = input("Choice: ").strip()

    if choice not in {"1", "2"}:
        print("\nInvalid choice. Defaulting to you moving first.\n")
        choice = "1"

    human_first = choice == "1"
    print(f"\nStarting game: {'you' if human_first else 'the opponent'} to move.")
    print("Game will start in 1 second...\n")
    time.sleep(1)

    outcome = run_terminal_game(human_first)
    if outcome is not None:
        print(f"\nResult: {outcome}")
