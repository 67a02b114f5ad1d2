
# src/connect5_analysis/cli/make_figures.py
from __future__ import annotations

import argparse
from pathlib import Path

from connect5.scripts.simulate import simulate

from ..metrics.summarize import outcome_table, results_frame, rule_usage
from ..plots.chart import plot_histograms, plot_outcome_bar, plot_rule_usage


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="connect5_analysis figures",
        description="Play seeded games and write outcome / game-length / rule-usage figures.",
    )
    ap.add_argument("--games", type=int, default=50, help="Number of games to play (first mover alternates)")
    ap.add_argument("--seed", type=int, default=0, help="Base seed for the random stand-in")
    ap.add_argument(
        "--figures-dir",
        type=str,
        default="figures",
        help="Directory the PNG files are written to.",
    )
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    df = results_frame(simulate(games=args.games, seed=args.seed))
    if df.empty:
        print("No games played.")
        return 0

    figures_dir = Path(args.figures_dir)
    created = []
    created += plot_histograms(df, figures_dir, ["moves"], show=args.show)
    created.append(plot_outcome_bar(outcome_table(df), figures_dir, show=args.show))
    created.append(plot_rule_usage(rule_usage(df), figures_dir, show=args.show))
    created = [p for p in created if p is not None]

    if not args.show:
        print(f"Wrote {len(created)} figures under: {figures_dir.resolve()}")
        for p in created:
            print(f"- {p}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
