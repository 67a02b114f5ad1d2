from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

import pandas as pd

from connect5.ai.opponent_policy import OPPONENT_RULES

RULE_COLS = [f"rule_{r}" for r in OPPONENT_RULES]


@dataclass(frozen=True)
class SummaryConfig:
    # Split tables by who moved first
    by_first_mover: bool = True


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def results_frame(rows: Iterable[Mapping[str, object]]) -> pd.DataFrame:
    df = pd.DataFrame(list(rows))
    if df.empty:
        return df

    _require_cols(df, ["outcome", "moves", "human_first"])
    for c in ["moves", "opp_time_ms", *RULE_COLS]:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    df["first"] = df["human_first"].map({True: "human", False: "opponent"})
    return df


def outcome_table(df: pd.DataFrame, cfg: SummaryConfig = SummaryConfig()) -> pd.DataFrame:
    """Games, wins per side, draws and share of each outcome."""
    _require_cols(df, ["outcome"])

    keys = ["first"] if cfg.by_first_mover and "first" in df.columns else []
    if keys:
        counts = df.groupby(keys)["outcome"].value_counts().unstack(fill_value=0)
    else:
        counts = df["outcome"].value_counts().to_frame().T
        counts.index = ["all"]

    for col in ["player", "opponent", "draw"]:
        if col not in counts.columns:
            counts[col] = 0
    out = counts[["player", "opponent", "draw"]].copy()
    out.insert(0, "games", out.sum(axis=1))
    out["opponent_win_rate"] = (out["opponent"] / out["games"]).round(3)
    return out.reset_index().rename(columns={"index": "first"})


def rule_usage(df: pd.DataFrame) -> pd.DataFrame:
    """How often each opponent rule decided a move, over all games."""
    cols = [c for c in RULE_COLS if c in df.columns]
    if not cols:
        return pd.DataFrame(columns=["rule", "moves", "share"])

    totals = df[cols].sum()
    out = pd.DataFrame({
        "rule": [c.removeprefix("rule_") for c in cols],
        "moves": totals.values.astype(int),
    })
    total = out["moves"].sum()
    out["share"] = (out["moves"] / total).round(3) if total else 0.0
    return out


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    desc = num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
    return desc
