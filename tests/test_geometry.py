import pytest

from phantom_mansion.geometry import Rect


@pytest.fixture
def square():
    return Rect(0, 0, 10, 10)


def test_contains_point_inside(square):
    assert square.contains_point(5, 5)


def test_contains_point_includes_top_left_corner(square):
    assert square.contains_point(0, 0)


def test_contains_point_excludes_right_and_bottom_edges(square):
    assert not square.contains_point(10, 5)
    assert not square.contains_point(5, 10)


def test_contains_point_outside(square):
    assert not square.contains_point(-1, 5)
    assert not square.contains_point(5, -0.5)


def test_right_and_bottom_follow_size():
    rect = Rect(3, 4, 7, 8)
    assert rect.right == rect.x + rect.width
    assert rect.bottom == rect.y + rect.height


def test_overlapping_rectangles_collide(square):
    assert square.collides(Rect(5, 5, 10, 10))


def test_touching_rectangles_do_not_collide(square):
    assert not square.collides(Rect(10, 0, 10, 10))
    assert not square.collides(Rect(0, 10, 10, 10))


def test_separate_rectangles_do_not_collide(square):
    assert not square.collides(Rect(50, 50, 5, 5))


@pytest.mark.parametrize(
    "other",
    [Rect(5, 5, 10, 10), Rect(10, 0, 10, 10), Rect(-5, -5, 30, 30), Rect(2, 2, 1, 1), Rect(40, 0, 1, 1)],
)
def test_collision_is_symmetric(square, other):
    assert square.collides(other) == other.collides(square)


def test_contained_rectangle_collides(square):
    inner = Rect(2, 2, 1, 1)
    assert square.collides(inner)
    assert inner.collides(square)


def test_empty_rectangle_does_not_collide(square):
    assert not Rect(-100, -100, 0, 0).collides(square)