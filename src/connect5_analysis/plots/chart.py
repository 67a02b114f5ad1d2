from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> list[Path]:
    num_cols = [c for c in cols if c in df.columns and pd.api.types.is_numeric_dtype(df[c])]
    if not num_cols:
        return []

    if not show:
        _ensure_dir(outdir)

    written = []
    for c in num_cols:
        fig = plt.figure()
        plt.hist(df[c].dropna(), bins=30)
        plt.title(f"Histogram: {c}")
        plt.xlabel(c)
        plt.ylabel("games")

        if show:
            plt.show()
        else:
            path = outdir / f"hist_{c}.png"
            fig.savefig(path, dpi=200, bbox_inches="tight")
            plt.close(fig)
            written.append(path)
    return written


def plot_outcome_bar(table: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Stacked player/opponent/draw bars, one per row of an outcome table."""
    cols = [c for c in ("player", "opponent", "draw") if c in table.columns]
    if not cols or "first" not in table.columns:
        return None

    if not show:
        _ensure_dir(outdir)

    fig = plt.figure(figsize=(6, 4))
    bottom = pd.Series(0, index=table.index, dtype=float)
    for c in cols:
        vals = table[c].astype(float)
        plt.bar(table["first"].astype(str), vals, bottom=bottom, label=c)
        bottom = bottom + vals
    plt.title("Outcomes by first mover")
    plt.xlabel("first mover")
    plt.ylabel("games")
    plt.legend()

    if show:
        plt.show()
        return None

    path = outdir / "outcomes.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_rule_usage(usage: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if usage.empty or "rule" not in usage.columns:
        return None

    if not show:
        _ensure_dir(outdir)

    fig = plt.figure(figsize=(7, 4))
    plt.bar(usage["rule"].astype(str), usage["moves"].astype(float))
    plt.title("Opponent moves by deciding rule")
    plt.xlabel("rule")
    plt.ylabel("moves")

    if show:
        plt.show()
        return None

    path = outdir / "rule_usage.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path
