"""Tests for wall construction and brick removal."""

from breakout.entities import Bounds
from breakout.wall import Wall
from shared.constants import BRICK_COLORS
from shared.game_config import GameConfig


def _wall():
    w = Wall(GameConfig())
    w.build()
    return w


def test_build_full_wall_row_major():
    w = _wall()
    assert len(w) == 6 * 18 == w.full_size
    rows = [b.row for b in w]
    assert rows == sorted(rows)
    assert rows[:18] == [0] * 18
    assert rows[-18:] == [5] * 18


def test_brick_geometry():
    w = _wall()
    first = w.get(0)
    # y = 400 - 2*12 - 18 - 1*4
    assert first.bounds == Bounds(12.0, 354.0, 12.0, 4.0)
    assert w.get(17).bounds.x == 12 + 17 * 12
    assert w.get(18).bounds.y == 350.0
    assert w.get(107).bounds.y == 334.0


def test_points_colors_and_speed_flags():
    w = _wall()
    by_row = {b.row: b for b in w}
    assert [by_row[r].points for r in range(6)] == [7, 7, 4, 4, 1, 1]
    assert [by_row[r].speed_brick for r in range(6)] == [True, True, True, False, False, False]
    assert [by_row[r].color for r in range(6)] == list(BRICK_COLORS)


def test_remove_at_and_out_of_range():
    w = _wall()
    second = w.get(1)
    removed = w.remove_at(0)
    assert removed is not None
    assert len(w) == 107
    assert w.get(0) is second

    assert w.remove_at(500) is None
    assert w.remove_at(-1) is None
    assert len(w) == 107


def test_index_of_uses_identity():
    w = _wall()
    brick = w.get(40)
    assert w.index_of(brick) == 40
    w.remove_at(0)
    assert w.index_of(brick) == 39
    w.remove_at(39)
    assert w.index_of(brick) == -1


def test_rebuild_ignores_previous_depletion():
    w = _wall()
    for _ in range(50):
        w.remove_at(0)
    w.build()
    assert len(w) == w.full_size
    assert w.get(0).bounds == Bounds(12.0, 354.0, 12.0, 4.0)
