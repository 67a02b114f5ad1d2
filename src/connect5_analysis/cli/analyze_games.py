from __future__ import annotations

import argparse
import logging

from connect5.scripts.simulate import simulate

from ..metrics.summarize import SummaryConfig, numeric_summary, outcome_table, results_frame, rule_usage


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="connect5_analysis analyze",
        description="Play seeded games of the opponent policy against a random stand-in and summarise them.",
    )
    ap.add_argument("--games", type=int, default=50, help="Number of games to play (first mover alternates)")
    ap.add_argument("--seed", type=int, default=0, help="Base seed for the random stand-in")
    ap.add_argument("--no-split", action="store_true", help="Do not split the outcome table by first mover")
    ap.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    df = results_frame(simulate(games=args.games, seed=args.seed))
    if df.empty:
        print("No games played.")
        return 0

    print(f"\nPlayed: {len(df):,} games  (seed {args.seed})")

    cfg = SummaryConfig(by_first_mover=not args.no_split)

    print("\n=== Outcomes ===")
    print(outcome_table(df, cfg).to_string(index=False))

    print("\n=== Opponent rule usage ===")
    print(rule_usage(df).to_string(index=False))

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
