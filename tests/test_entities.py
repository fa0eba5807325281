"""Tests for geometry and kinematic bodies."""

from breakout.entities import Blocks, Block, Body, Border, Bounds


def test_overlaps_requires_interior_intersection():
    a = Bounds(0, 0, 10, 10)
    assert a.overlaps(Bounds(5, 5, 10, 10))
    # touching edges are not a collision
    assert not a.overlaps(Bounds(10, 0, 5, 5))
    assert not a.overlaps(Bounds(0, 10, 5, 5))
    assert not a.overlaps(Bounds(20, 20, 1, 1))


def test_contains_and_edges():
    b = Bounds(2, 3, 4, 5)
    assert b.right == 6
    assert b.top == 8
    assert b.center_x == 4
    assert b.contains(2, 3)
    assert b.contains(6, 8)
    assert not b.contains(6.5, 4)


def test_body_position_mirrors_bounds():
    body = Body.at(1, 2, 3, 3, (0, 0, 0))
    body.set_position(40, 50)
    assert body.bounds.x == 40 and body.bounds.y == 50
    assert body.position.x == 40 and body.position.y == 50
    assert body.width == 3 and body.height == 3

    body.bounds.x += 2.5
    assert body.position.x == 42.5


def test_border_and_blocks_iterate_in_order():
    left = Block(Bounds(0, 0, 1, 1), (1, 1, 1))
    top = Block(Bounds(1, 1, 1, 1), (2, 2, 2))
    right = Block(Bounds(2, 2, 1, 1), (3, 3, 3))
    assert list(Border(left, top, right)) == [left, top, right]
    assert list(Blocks(left, right)) == [left, right]
