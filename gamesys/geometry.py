"""Integer points, rectangles and circles on the screen plane."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int = 0
    y: int = 0

    ZERO: ClassVar[Point]
    UNDEFINED: ClassVar[Point]


Point.ZERO = Point(0, 0)
Point.UNDEFINED = Point(-1, -1)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    ZERO: ClassVar[Rectangle]
    UNDEFINED: ClassVar[Rectangle]

    def contains(self, point: Point) -> bool:
        """Return whether point lies inside the rectangle, edges included."""
        return (self.x <= point.x <= self.x + self.w
                and self.y <= point.y <= self.y + self.h)


Rectangle.ZERO = Rectangle(0, 0, 0, 0)
Rectangle.UNDEFINED = Rectangle(-1, -1, 0, 0)


@dataclass(frozen=True)
class Circle:
    """A circle given by its centre and radius."""

    x: int = 0
    y: int = 0
    r: int = 0

    ZERO: ClassVar[Circle]
    UNDEFINED: ClassVar[Circle]

    def contains(self, point: Point) -> bool:
        """Return whether point lies inside the circle.

        The distance to the centre is truncated to a whole number before it
        is compared with the radius.
        """
        distance = int(math.hypot(point.x - self.x, point.y - self.y))
        return distance <= self.r


Circle.ZERO = Circle(0, 0, 0)
Circle.UNDEFINED = Circle(-1, -1, 0)