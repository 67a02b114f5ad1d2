from __future__ import annotations

import pytest

from connect5.core.lattice import Lattice
from connect5.types import OPPONENT, PLAYER
from connect5.ui.prompts import parse_column
from connect5.ui.render import format_lattice
from connect5.ui.terminal import run_terminal_game


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1 1", (0, 0)),
        ("5,3", (4, 2)),
        ("  2   4 ", (1, 3)),
        ("q", None),
        ("EXIT", None),
    ],
)
def test_parse_column_accepts(raw, expected) -> None:
    assert parse_column(raw, 5) == expected


@pytest.mark.parametrize("raw", ["", "3", "a b", "1 2 3", "0 1", "6 1"])
def test_parse_column_rejects(raw) -> None:
    with pytest.raises(ValueError):
        parse_column(raw, 5)


def test_format_lattice_shows_pieces_and_drop_targets() -> None:
    lat = Lattice()
    lat.place_at(0, 0, PLAYER)
    lat.place_at(1, 0, OPPONENT)

    text = format_lattice(lat)
    lines = text.splitlines()

    assert len(lines) == 2 + 5
    assert "y=1" in lines[0] and "y=5" in lines[0]
    assert "X" in lines[2] and "O" in lines[2]
    assert "+" in text and "·" in text


def test_terminal_game_quits_cleanly(capsys) -> None:
    answers = iter(["nonsense", "1 1", "q"])
    outcome = run_terminal_game(True, read=lambda prompt: next(answers), show_thinking=False)

    assert outcome is None
    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "Opponent dropped into column 1 5" in out
    assert "Game quit." in out


def test_terminal_game_human_wins_up_a_column(capsys) -> None:
    # the opponent is still busy taking corners while the column grows
    answers = iter(["3 3"] * 5)
    outcome = run_terminal_game(True, read=lambda prompt: next(answers), show_thinking=False)

    assert outcome == "player"
    assert "You won" in capsys.readouterr().out
