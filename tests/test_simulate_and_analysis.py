from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from connect5.ai.opponent_policy import OpponentPolicy
from connect5.scripts.simulate import play_headless, simulate
from connect5_analysis.__main__ import main as analysis_main
from connect5_analysis.metrics.summarize import (
    RULE_COLS,
    SummaryConfig,
    numeric_summary,
    outcome_table,
    results_frame,
    rule_usage,
)
from connect5_analysis.plots.chart import plot_histograms, plot_outcome_bar, plot_rule_usage


@pytest.fixture(scope="module")
def rows() -> list[dict]:
    return simulate(games=6, seed=3)


def test_simulate_plays_complete_games(rows) -> None:
    assert len(rows) == 6
    assert [r["human_first"] for r in rows] == [True, False] * 3
    for r in rows:
        assert r["outcome"] in {"player", "opponent", "draw"}
        assert 1 <= r["moves"] <= 125
        # the first opponent move always finds an untouched corner
        assert r["rule_opening"] >= 1


def test_simulate_is_reproducible(rows) -> None:
    def strip(rs):
        return [{k: v for k, v in r.items() if k != "opp_time_ms"} for r in rs]

    assert strip(simulate(games=6, seed=3)) == strip(rows)


def test_mirror_match_finishes() -> None:
    row = play_headless(OpponentPolicy(name="Mirror"), human_goes_first=True)
    assert row["human"] == "Mirror"
    assert row["outcome"] in {"player", "opponent", "draw"}


def test_results_frame_and_tables(rows) -> None:
    df = results_frame(rows)
    assert len(df) == 6
    assert set(df["first"]) == {"human", "opponent"}

    table = outcome_table(df)
    assert list(table["first"]) == ["human", "opponent"]
    assert table["games"].sum() == 6
    assert (table["player"] + table["opponent"] + table["draw"] == table["games"]).all()

    flat = outcome_table(df, SummaryConfig(by_first_mover=False))
    assert len(flat) == 1 and int(flat["games"].iloc[0]) == 6

    usage = rule_usage(df)
    assert usage["moves"].sum() == int(df[RULE_COLS].to_numpy().sum())
    assert set(usage["rule"]) == {c.removeprefix("rule_") for c in RULE_COLS}

    desc = numeric_summary(df)
    assert "moves" in desc.index


def test_results_frame_requires_outcome_columns() -> None:
    with pytest.raises(ValueError):
        results_frame([{"moves": 3}])
    assert results_frame([]).empty


def test_plots_write_files(rows, tmp_path: Path) -> None:
    df = results_frame(rows)
    hist = plot_histograms(df, tmp_path, ["moves", "not_a_column"], show=False)
    bar = plot_outcome_bar(outcome_table(df), tmp_path, show=False)
    usage = plot_rule_usage(rule_usage(df), tmp_path, show=False)

    assert hist == [tmp_path / "hist_moves.png"]
    assert bar == tmp_path / "outcomes.png"
    assert usage == tmp_path / "rule_usage.png"
    for p in [*hist, bar, usage]:
        assert p.exists() and p.stat().st_size > 0


def test_plot_skips_unusable_input(tmp_path: Path) -> None:
    assert plot_outcome_bar(pd.DataFrame({"x": [1]}), tmp_path, show=False) is None
    assert plot_rule_usage(pd.DataFrame(), tmp_path, show=False) is None


def test_analysis_cli(capsys, tmp_path: Path) -> None:
    assert analysis_main(["analyze", "--games", "2"]) == 0
    out = capsys.readouterr().out
    assert "=== Outcomes ===" in out
    assert "=== Opponent rule usage ===" in out

    figs = tmp_path / "figs"
    assert analysis_main(["figures", "--games", "2", "--figures-dir", str(figs)]) == 0
    assert (figs / "outcomes.png").exists()

    assert analysis_main(["bogus"]) == 2
