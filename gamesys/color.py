"""RGBA colour value and a palette of named colours."""

from __future__ import annotations

from dataclasses import dataclass


def _channel(name: str, value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {value!r}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in 0..255, got {value}")
    return value


@dataclass(frozen=True, init=False)
class Color:
    """An 8-bit-per-channel RGBA colour.

    Color() is fully transparent black; Color(r, g, b) is opaque.
    """

    r: int
    g: int
    b: int
    a: int

    def __init__(self, r: int | None = None, g: int | None = None,
                 b: int | None = None, a: int | None = None) -> None:
        if r is None and g is None and b is None:
            if a is not None:
                raise TypeError("alpha given without red, green and blue")
            channels = (0, 0, 0, 0)
        else:
            if r is None or g is None or b is None:
                raise TypeError("red, green and blue must all be given")
            channels = (r, g, b, 0xFF if a is None else a)
        for name, value in zip("rgba", channels):
            object.__setattr__(self, name, _channel(name, value))

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Return the channels as (r, g, b, a)."""
        return (self.r, self.g, self.b, self.a)


TRANSPARENT = Color(0x00, 0x00, 0x00, 0x00)

# White, grey and black
WHITE = Color(0xFF, 0xFF, 0xFF, 0xFF)
VERY_LIGHT_GREY = Color(0xDF, 0xDF, 0xDF, 0xFF)
LIGHT_GREY = Color(0xBF, 0xBF, 0xBF, 0xFF)
GREY = Color(0x7F, 0x7F, 0x7F, 0xFF)
DARK_GREY = Color(0x3F, 0x3F, 0x3F, 0xFF)
VERY_DARK_GREY = Color(0x1F, 0x1F, 0x1F, 0xFF)
BLACK = Color(0x00, 0x00, 0x00, 0xFF)

# Very light colours
VERY_LIGHT_RED = Color(0xFF, 0xBF, 0xBF, 0xFF)
VERY_LIGHT_GREEN = Color(0xBF, 0xFF, 0xBF, 0xFF)
VERY_LIGHT_BLUE = Color(0xBF, 0xBF, 0xFF, 0xFF)
VERY_LIGHT_YELLOW = Color(0xFF, 0xFF, 0xBF, 0xFF)
VERY_LIGHT_CYAN = Color(0xBF, 0xFF, 0xFF, 0xFF)
VERY_LIGHT_MAGENTA = Color(0xFF, 0xBF, 0xFF, 0xFF)

VERY_LIGHT_ORANGE = Color(0xFF, 0xBF, 0x7F, 0xFF)
VERY_LIGHT_PINK = Color(0xFF, 0x7F, 0xBF, 0xFF)
VERY_LIGHT_LIME = Color(0xBF, 0xFF, 0x7F, 0xFF)
VERY_LIGHT_SPRING_GREEN = Color(0x7F, 0xFF, 0xBF, 0xFF)
VERY_LIGHT_PURPLE = Color(0xBF, 0x7F, 0xFF, 0xFF)
VERY_LIGHT_SKY_BLUE = Color(0x7F, 0xBF, 0xFF, 0xFF)

# Light colours
LIGHT_RED = Color(0xFF, 0x7F, 0x7F, 0xFF)
LIGHT_GREEN = Color(0x7F, 0xFF, 0x7F, 0xFF)
LIGHT_BLUE = Color(0x7F, 0x7F, 0xFF, 0xFF)
LIGHT_YELLOW = Color(0xFF, 0xFF, 0x7F, 0xFF)
LIGHT_CYAN = Color(0x7F, 0xFF, 0xFF, 0xFF)
LIGHT_MAGENTA = Color(0xFF, 0x7F, 0xFF, 0xFF)

LIGHT_ORANGE = Color(0xFF, 0x9F, 0x7F, 0xFF)
LIGHT_PINK = Color(0xFF, 0x7F, 0x9F, 0xFF)
LIGHT_LIME = Color(0x9F, 0xFF, 0x7F, 0xFF)
LIGHT_SPRING_GREEN = Color(0x7F, 0xFF, 0x9F, 0xFF)
LIGHT_PURPLE = Color(0x9F, 0x7F, 0xFF, 0xFF)
LIGHT_SKY_BLUE = Color(0x7F, 0x9F, 0xFF, 0xFF)

# Colours
RED = Color(0xFF, 0x00, 0x00, 0xFF)
GREEN = Color(0x00, 0xFF, 0x00, 0xFF)
BLUE = Color(0x00, 0x00, 0xFF, 0xFF)
YELLOW = Color(0xFF, 0xFF, 0x00, 0xFF)
CYAN = Color(0x00, 0xFF, 0xFF, 0xFF)
MAGENTA = Color(0xFF, 0x00, 0xFF, 0xFF)

ORANGE = Color(0xFF, 0x7F, 0x00, 0xFF)
PINK = Color(0xFF, 0x00, 0x7F, 0xFF)
LIME = Color(0x7F, 0xFF, 0x00, 0xFF)
SPRING_GREEN = Color(0x00, 0xFF, 0x7F, 0xFF)
PURPLE = Color(0x7F, 0x00, 0xFF, 0xFF)
SKY_BLUE = Color(0x00, 0x7F, 0xFF, 0xFF)

# Dark colours
DARK_RED = Color(0x7F, 0x00, 0x00, 0xFF)
DARK_GREEN = Color(0x00, 0x7F, 0x00, 0xFF)
DARK_BLUE = Color(0x00, 0x00, 0x7F, 0xFF)
DARK_YELLOW = Color(0x7F, 0x7F, 0x00, 0xFF)
DARK_CYAN = Color(0x00, 0x7F, 0x7F, 0xFF)
DARK_MAGENTA = Color(0x7F, 0x00, 0x7F, 0xFF)

DARK_ORANGE = Color(0x7F, 0x3F, 0x00, 0xFF)
DARK_PINK = Color(0x7F, 0x00, 0x3F, 0xFF)
DARK_LIME = Color(0x3F, 0x7F, 0x00, 0xFF)
DARK_SPRING_GREEN = Color(0x00, 0x7F, 0x3F, 0xFF)
DARK_PURPLE = Color(0x3F, 0x00, 0x7F, 0xFF)
DARK_SKY_BLUE = Color(0x00, 0x3F, 0x7F, 0xFF)

# Very dark colours
VERY_DARK_RED = Color(0x3F, 0x00, 0x00, 0xFF)
VERY_DARK_GREEN = Color(0x00, 0x3F, 0x00, 0xFF)
VERY_DARK_BLUE = Color(0x00, 0x00, 0x3F, 0xFF)
VERY_DARK_YELLOW = Color(0x3F, 0x3F, 0x00, 0xFF)
VERY_DARK_CYAN = Color(0x00, 0x3F, 0x3F, 0xFF)
VERY_DARK_MAGENTA = Color(0x3F, 0x00, 0x3F, 0xFF)

VERY_DARK_ORANGE = Color(0x3F, 0x1F, 0x00, 0xFF)
VERY_DARK_PINK = Color(0x3F, 0x00, 0x1F, 0xFF)
VERY_DARK_LIME = Color(0x1F, 0x3F, 0x00, 0xFF)
VERY_DARK_SPRING_GREEN = Color(0x00, 0x3F, 0x1F, 0xFF)
VERY_DARK_PURPLE = Color(0x1F, 0x00, 0x3F, 0xFF)
VERY_DARK_SKY_BLUE = Color(0x00, 0x1F, 0x3F, 0xFF)