"""A small, fast, seedable pseudo-random number generator."""

from __future__ import annotations

import time

_MASK64 = 0xFFFFFFFFFFFFFFFF

_INCREMENT = 0xE120FC15
_FIRST_MULTIPLIER = 0x4A39B70D
_SECOND_MULTIPLIER = 0x12FAD5C9

_FRACTION_LOW = 1_000_000_000_000_000
_FRACTION_HIGH = 9_999_999_999_999_999
_FRACTION_SCALE = 10_000_000_000_000_000


def _to_int64(value: int) -> int:
    """Reinterpret an unsigned 64-bit value as a signed one."""
    value &= _MASK64
    return value - (1 << 64) if value >= (1 << 63) else value


class RandomNumberGenerator:
    """Lehmer-style 64-bit generator.

    ``state`` is the unsigned 64-bit seed that advances with every draw;
    ``low`` and ``high`` are the bounds used when a generate method is
    called without bounds. Ranges are half-open: ``low <= n < high``.
    """

    def __init__(self, seed: int | None = None, low: int = 0, high: int = 0) -> None:
        self.state = (int(time.time()) if seed is None else seed) & _MASK64
        self.low = low
        self.high = high

    def _next(self) -> int:
        self.state = (self.state + _INCREMENT) & _MASK64
        tmp = (self.state * _FIRST_MULTIPLIER) & _MASK64
        mixed = (tmp >> 32) ^ tmp
        tmp = (mixed * _SECOND_MULTIPLIER) & _MASK64
        return (tmp >> 32) ^ tmp

    def generate_uint64(self, low: int | None = None, high: int | None = None) -> int:
        """Return an unsigned 64-bit number in [low, high), or 0 for an empty range."""
        low = (self.low if low is None else low) & _MASK64
        high = (self.high if high is None else high) & _MASK64
        span = (high - low) & _MASK64
        if span == 0:
            return 0
        return (low + self._next() % span) & _MASK64

    def generate_int64(self, low: int | None = None, high: int | None = None) -> int:
        """Return a signed 64-bit number in [low, high), or 0 for an empty range."""
        low = _to_int64(self.low if low is None else low)
        high = _to_int64(self.high if high is None else high)
        span = (high - low) & _MASK64
        if span == 0:
            return 0
        return _to_int64(low + self._next() % span)

    def generate_double(self, low: float | None = None, high: float | None = None) -> float:
        """Return a float in [low + 0.1 * (high - low), high), or 0.0 for an empty range."""
        low = float(self.low & _MASK64) if low is None else float(low)
        high = float(self.high & _MASK64) if high is None else float(high)
        if high - low == 0:
            return 0.0
        fraction = self.generate_uint64(_FRACTION_LOW, _FRACTION_HIGH) / _FRACTION_SCALE
        return low + fraction * (high - low)