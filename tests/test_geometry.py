import pytest

from bst.geometry import NODE_RADIUS, ROOT_POSITION, Point, child_position


def test_root_constants():
    assert ROOT_POSITION == Point(200, 20)
    assert NODE_RADIUS == 15


def test_left_child_offsets():
    assert child_position(Point(200, 20), 15, "left") == Point(155, 65)


def test_right_child_offsets():
    assert child_position(Point(200, 20), 15, "right") == Point(245, 65)


def test_offsets_scale_with_radius():
    assert child_position(Point(0, 0), 10, "left") == Point(-30, 30)
    assert child_position(Point(0, 0), 10, "right") == Point(30, 30)


def test_unknown_direction_is_rejected():
    with pytest.raises(ValueError):
        child_position(ROOT_POSITION, NODE_RADIUS, "up")
