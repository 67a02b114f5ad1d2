from __future__ import annotations

import argparse
import logging

from connect5.ui.menu import run_menu
from connect5.ui.terminal import run_terminal_game


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connect5", description="Five in a row in a 5x5x5 cube, with gravity.")
    group = ap.add_mutually_exclusive_group()
    group.add_argument("--first", action="store_true", help="You move first (skip the menu)")
    group.add_argument("--second", action="store_true", help="Opponent moves first (skip the menu)")
    ap.add_argument("--no-spinner", action="store_true", help="Do not pause while the opponent thinks")
    ap.add_argument("--log-level", type=str, default="WARNING", help="Logging level (DEBUG shows every decision)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    if args.first or args.second:
        outcome = run_terminal_game(human_goes_first=args.first, show_thinking=not args.no_spinner)
        if outcome is not None:
            print(f"\nResult: {outcome}")
        return 0

    run_menu()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
