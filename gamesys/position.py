"""Placement of a rectangle inside a container rectangle."""

from __future__ import annotations

from gamesys.geometry import Point, Rectangle


def _half(value: int) -> int:
    """Halve an integer, rounding toward zero."""
    return -(-value // 2) if value < 0 else value // 2


def _left(obj: Rectangle, container: Rectangle) -> int:
    return container.x


def _center_x(obj: Rectangle, container: Rectangle) -> int:
    return container.x + _half(container.w - obj.w)


def _right(obj: Rectangle, container: Rectangle) -> int:
    return container.x + container.w - obj.w


def _top(obj: Rectangle, container: Rectangle) -> int:
    return container.y


def _middle_y(obj: Rectangle, container: Rectangle) -> int:
    return container.y + _half(container.h - obj.h)


def _bottom(obj: Rectangle, container: Rectangle) -> int:
    return container.y + container.h - obj.h


def top_left(obj: Rectangle, container: Rectangle) -> Point:
    """Position of obj at the top-left corner of container."""
    return Point(_left(obj, container), _top(obj, container))


def top_center(obj: Rectangle, container: Rectangle) -> Point:
    """Position of obj centred along the top edge of container."""
    return Point(_center_x(obj, container), _top(obj, container))


def top_right(obj: Rectangle, container: Rectangle) -> Point:
    """Position of obj at the top-right corner of container."""
    return Point(_right(obj, container), _top(obj, container))


def middle_left(obj: Rectangle, container: Rectangle) -> Point:
    """Position of obj centred along the left edge of container."""
    return Point(_left(obj, container), _middle_y(obj, container))


def middle_center(obj: Rectangle, container: Rectangle) -> Point:
    """Position of obj in the centre of container."""
    return Point(_center_x(obj, container), _middle_y(obj, container))


def middle_right(obj: Rectangle, container: Rectangle) -> Point:
    """Position of obj centred along the right edge of container."""
    return Point(_right(obj, container), _middle_y(obj, container))


def bottom_left(obj: Rectangle, container: Rectangle) -> Point:
    """Position of obj at the bottom-left corner of container."""
    return Point(_left(obj, container), _bottom(obj, container))


def bottom_center(obj: Rectangle, container: Rectangle) -> Point:
    """Position of obj centred along the bottom edge of container."""
    return Point(_center_x(obj, container), _bottom(obj, container))


def bottom_right(obj: Rectangle, container: Rectangle) -> Point:
    """Position of obj at the bottom-right corner of container."""
    return Point(_right(obj, container), _bottom(obj, container))