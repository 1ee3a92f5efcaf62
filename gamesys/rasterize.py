"""Pixel coordinates that make up circle outlines and filled circles."""

from __future__ import annotations

from collections.abc import Iterator

from gamesys.geometry import Circle, Point


def circle_outline_points(circle: Circle) -> Iterator[Point]:
    """Yield the outline pixels of a circle, eight octants per step.

    Points on the octant boundaries may be yielded more than once.
    """
    cx, cy, r = circle.x, circle.y, circle.r
    diameter = r * 2
    x = r - 1
    y = 0
    tx = 1
    ty = 1
    error = tx - diameter

    while x >= y:
        yield Point(cx + x, cy - y)
        yield Point(cx + x, cy + y)
        yield Point(cx - x, cy - y)
        yield Point(cx - x, cy + y)
        yield Point(cx + y, cy - x)
        yield Point(cx + y, cy + x)
        yield Point(cx - y, cy - x)
        yield Point(cx - y, cy + x)

        if error <= 0:
            y += 1
            error += ty
            ty += 2

        if error > 0:
            x -= 1
            tx += 2
            error += tx - diameter


def filled_circle_points(circle: Circle) -> Iterator[Point]:
    """Yield every pixel of a filled circle.

    Offsets run from +r down to -r + 1 on each axis, so the leftmost column
    and topmost row at distance r are not included.
    """
    cx, cy, r = circle.x, circle.y, circle.r
    radius_sq = r * r
    for i in range(r * 2):
        dx = r - i
        for j in range(r * 2):
            dy = r - j
            if dx * dx + dy * dy <= radius_sq:
                yield Point(cx + dx, cy + dy)