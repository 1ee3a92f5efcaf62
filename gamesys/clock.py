"""A point in time with microsecond resolution."""

from __future__ import annotations

import time

from gamesys.defines import (
    SECONDS_IN_DAY,
    SECONDS_IN_HOUR,
    SECONDS_IN_MINUTE,
    TimeStringFormat,
    UnitOfTime,
)

_MASK64 = 0xFFFFFFFFFFFFFFFF
_MICROS_IN_SECOND = 1_000_000

_DIVISORS = {
    UnitOfTime.MICROSECONDS: 1,
    UnitOfTime.MILLISECONDS: 1_000,
    UnitOfTime.SECONDS: _MICROS_IN_SECOND,
    UnitOfTime.MINUTES: SECONDS_IN_MINUTE * _MICROS_IN_SECOND,
    UnitOfTime.HOURS: SECONDS_IN_HOUR * _MICROS_IN_SECOND,
    UnitOfTime.DAYS: SECONDS_IN_DAY * _MICROS_IN_SECOND,
}

_PATTERNS = {
    TimeStringFormat.YYYYMMDDHHMMSS_ZERO_PUNCTUATION: "%Y%m%d%H%M%S",
    TimeStringFormat.YYYYMMDDHHMMSS_DOTS: "%Y.%m.%d %H:%M:%S",
    TimeStringFormat.DDMMYYYYHHMMSS_ZERO_PUNCTUATION: "%d%m%Y%H%M%S",
    TimeStringFormat.DDMMYYYYHHMMSS_DOTS: "%d.%m.%Y %H:%M:%S",
}


class Time:
    """Microseconds since 1970-01-01 00:00:00 UTC, as an unsigned 64-bit count.

    Time() is the current time; sums and differences wrap around 2**64.
    """

    __slots__ = ("_microseconds",)

    def __init__(self, microseconds: int | None = None) -> None:
        if microseconds is None:
            self.set_to_now()
        else:
            if microseconds < 0:
                raise ValueError("microseconds must not be negative")
            self._microseconds = microseconds & _MASK64

    @staticmethod
    def now() -> Time:
        """Return the current time."""
        return Time()

    @property
    def microseconds(self) -> int:
        return self._microseconds

    def set_to_now(self) -> None:
        """Move this time to the present."""
        self._microseconds = (time.time_ns() // 1_000) & _MASK64

    def get_as(self, unit: UnitOfTime) -> int:
        """Return the time in whole units, truncated."""
        if unit == UnitOfTime.NANOSECONDS:
            return (self._microseconds * 1_000) & _MASK64
        try:
            return self._microseconds // _DIVISORS[unit]
        except KeyError:
            raise ValueError(f"unsupported unit of time: {unit!r}") from None

    def elapsed_till_now(self, unit: UnitOfTime) -> int:
        """Return how many whole units lie between this time and now."""
        return Time.now().get_as(unit) - self.get_as(unit)

    def format(self, fmt: TimeStringFormat) -> str:
        """Return the time as local date and time text in the given format."""
        try:
            pattern = _PATTERNS[fmt]
        except KeyError:
            raise ValueError(f"unsupported time string format: {fmt!r}") from None
        seconds = self._microseconds // _MICROS_IN_SECOND
        return time.strftime(pattern, time.localtime(seconds))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._microseconds == other._microseconds

    def __hash__(self) -> int:
        return hash(self._microseconds)

    def __add__(self, other: Time) -> Time:
        if not isinstance(other, Time):
            return NotImplemented
        return Time((self._microseconds + other._microseconds) & _MASK64)

    def __sub__(self, other: Time) -> Time:
        if not isinstance(other, Time):
            return NotImplemented
        return Time((self._microseconds - other._microseconds) & _MASK64)

    def __repr__(self) -> str:
        return f"Time(microseconds={self._microseconds})"