from __future__ import annotations

import pytest

from connect5.core.lattice import Lattice
from connect5.errors import IllegalPlacement
from connect5.types import OPPONENT, PLAYER

from conftest import fill_draw_pattern, stack


def _assert_gravity(lattice: Lattice) -> None:
    n = lattice.size
    for x in range(n):
        for z in range(n):
            occupied = [y for y in range(n) if lattice.owner_at((x, y, z)) is not None]
            assert occupied == list(range(len(occupied)))


def test_fresh_lattice_is_empty_with_bottom_drop_targets(lattice: Lattice) -> None:
    assert all(lattice.owner_at(c) is None for c in lattice.cells())
    assert len(list(lattice.cells())) == 125
    assert len(lattice.open_columns()) == 25
    for (x, z) in lattice.open_columns():
        assert lattice.drop_target((x, z)) == 0
        assert lattice.is_drop_target(x, 0, z)
        assert not lattice.is_drop_target(x, 1, z)
    assert lattice.occupied_count() == 0


def test_place_at_fills_drop_target_and_moves_it_up(lattice: Lattice) -> None:
    coord = lattice.place_at(2, 3, PLAYER)

    assert coord == (2, 0, 3)
    assert lattice.owner_at((2, 0, 3)) == PLAYER
    assert lattice.drop_target((2, 3)) == 1
    assert lattice.is_drop_target(2, 1, 3)
    assert not lattice.is_drop_target(2, 0, 3)


def test_scenario_a_column_fills_after_five_placements(lattice: Lattice) -> None:
    stack(lattice, (0, 0), [PLAYER] * 4)
    assert [lattice.owner_at((0, y, 0)) for y in range(4)] == [PLAYER] * 4
    assert lattice.drop_target((0, 0)) == 4

    assert lattice.place_at(0, 0, PLAYER) == (0, 4, 0)
    assert lattice.drop_target((0, 0)) is None
    assert lattice.is_column_full(0, 0)
    assert (0, 0) not in lattice.open_columns()


def test_place_into_full_column_raises(lattice: Lattice) -> None:
    stack(lattice, (1, 1), [PLAYER, OPPONENT] * 2 + [PLAYER])
    with pytest.raises(IllegalPlacement):
        lattice.place_at(1, 1, OPPONENT)
    # still a ValueError for callers that only know the builtin
    with pytest.raises(ValueError):
        lattice.place_at(1, 1, OPPONENT)


@pytest.mark.parametrize("column", [(-1, 0), (0, 5), (5, 5)])
def test_place_out_of_range_raises(lattice: Lattice, column) -> None:
    with pytest.raises(IllegalPlacement):
        lattice.place_at(column[0], column[1], PLAYER)


def test_drop_targets_follow_x_y_z_scan_order(lattice: Lattice) -> None:
    lattice.place_at(0, 0, PLAYER)
    lattice.place_at(0, 1, PLAYER)
    targets = lattice.drop_targets()

    assert len(targets) == 25
    assert targets[:5] == [(0, 0, 2), (0, 0, 3), (0, 0, 4), (0, 1, 0), (0, 1, 1)]
    assert targets == sorted(targets)


def test_gravity_holds_through_a_full_fill(lattice: Lattice) -> None:
    fill_draw_pattern(lattice, skip=[(3, 2, 1)])
    _assert_gravity(lattice)
    assert lattice.open_columns() == [(3, 1)]

    for _ in range(2, 5):
        lattice.place_at(3, 1, PLAYER)
        _assert_gravity(lattice)

    assert lattice.is_full()
    assert lattice.open_columns() == []
    assert lattice.occupied_count() == 125


def test_copy_is_independent(lattice: Lattice) -> None:
    lattice.place_at(4, 4, OPPONENT)
    dup = lattice.copy()
    dup.place_at(4, 4, PLAYER)

    assert lattice.drop_target((4, 4)) == 1
    assert dup.drop_target((4, 4)) == 2
    assert lattice.owner_at((4, 1, 4)) is None
