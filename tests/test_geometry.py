import dataclasses

import pytest

from gamesys.geometry import Circle, Point, Rectangle


def test_point_defaults_to_zero():
    assert Point() == Point.ZERO
    assert Point.ZERO == Point(0, 0)


def test_undefined_constants_use_all_bits_set():
    assert Point.UNDEFINED == Point(-1, -1)
    assert Rectangle.UNDEFINED == Rectangle(-1, -1, 0, 0)
    assert Circle.UNDEFINED == Circle(-1, -1, 0)


def test_equality_compares_all_fields():
    assert Rectangle(1, 2, 3, 4) == Rectangle(1, 2, 3, 4)
    assert not Rectangle(1, 2, 3, 4) == Rectangle(1, 2, 3, 5)
    assert not Circle(1, 2, 3) == Circle(1, 2, 4)


def test_points_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Point(1, 2).x = 5


@pytest.mark.parametrize(
    "point, inside",
    [
        (Point(10, 20), True),
        (Point(40, 60), True),
        (Point(25, 40), True),
        (Point(9, 20), False),
        (Point(41, 20), False),
        (Point(10, 61), False),
        (Point(10, 19), False),
    ],
)
def test_rectangle_contains_inclusive_edges(point, inside):
    assert Rectangle(10, 20, 30, 40).contains(point) is inside


@pytest.mark.parametrize(
    "point, inside",
    [
        (Point(0, 0), True),
        (Point(3, 4), True),
        (Point(5, 0), True),
        (Point(4, 4), True),
        (Point(4, 5), False),
        (Point(6, 0), False),
    ],
)
def test_circle_contains_with_truncated_distance(point, inside):
    assert Circle(0, 0, 5).contains(point) is inside


def test_circle_contains_relative_to_centre():
    circle = Circle(100, -50, 2)
    assert circle.contains(Point(102, -50))
    assert not circle.contains(Point(100, -47))