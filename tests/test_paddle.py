"""Tests for paddle movement, clamping and sections."""

import random

import pytest

from breakout.paddle import Paddle

LEFT, RIGHT = 12.0, 228.0


def _paddle():
    return Paddle(108, 15, 24, 3, (200, 72, 72), 5, left_limit=LEFT, right_limit=RIGHT)


def test_move_sets_velocity_and_position():
    p = _paddle()
    p.move(5.5)
    assert p.bounds.x == 113.5
    assert p.velocity.x == 5.5
    assert p.bounds.y == 15


def test_move_clamps_to_corner_blocks():
    p = _paddle()
    p.move(-500)
    assert p.bounds.x == LEFT
    assert p.velocity.x == -500
    p.move(1000)
    assert p.bounds.x == RIGHT - 24


def test_clamp_invariant_over_random_moves():
    rng = random.Random(7)
    p = _paddle()
    for _ in range(500):
        p.move(rng.uniform(-60, 60))
        assert LEFT <= p.bounds.x <= RIGHT - p.bounds.width


def test_section_width():
    assert _paddle().section_width == pytest.approx(4.8)


def test_reset_repositions_and_clears_points():
    p = _paddle()
    p.points = 42
    p.move(30)
    p.reset(108, 15)
    assert p.points == 0
    assert p.bounds.x == 108 and p.bounds.y == 15
    assert p.velocity.x == 0
