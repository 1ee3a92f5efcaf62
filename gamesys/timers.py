"""Interval timers driven by elapsed milliseconds."""

from __future__ import annotations

from dataclasses import dataclass, field

from gamesys.defines import TIMER_MIN_INTERVAL, TimerType


@dataclass
class TimerData:
    """State of one timer; times are in milliseconds."""

    timer_type: TimerType = TimerType.ONE_SHOT
    interval: int = 0
    remaining: int = 0
    ticked: bool = False
    paused: bool = False


@dataclass
class TimerContainer:
    """Timers keyed by id, advanced together by update().

    A one-shot timer is removed once its tick has been consumed by
    is_ticked(); a pulse timer keeps ticking every interval.
    """

    timers: dict[int, TimerData] = field(default_factory=dict)
    _next_id: int = field(default=0, repr=False)

    def exists(self, timer_id: int) -> bool:
        """Return whether a timer with this id is running."""
        return timer_id in self.timers

    def start_timer(self, interval: int, timer_type: TimerType) -> int:
        """Start a timer with a fresh id and return that id."""
        self._check_interval(interval)
        timer_id = self._next_id
        self._next_id += 1
        self.start_timer_with_id(timer_id, interval, timer_type)
        return timer_id

    def start_timer_with_id(self, timer_id: int, interval: int, timer_type: TimerType) -> None:
        """Start a timer under the given id.

        Raises KeyError if the id is taken and ValueError if the interval is
        below TIMER_MIN_INTERVAL milliseconds.
        """
        if self.exists(timer_id):
            raise KeyError(f"timer {timer_id} already exists")
        self._check_interval(interval)
        self.timers[timer_id] = TimerData(
            timer_type=timer_type, interval=interval, remaining=interval
        )

    def destroy_timer(self, timer_id: int) -> None:
        """Remove a timer; removing an unknown id does nothing."""
        self.timers.pop(timer_id, None)

    def set_paused(self, timer_id: int, paused: bool) -> None:
        """Pause or resume a timer."""
        self._get(timer_id).paused = paused

    def is_ticked(self, timer_id: int) -> bool:
        """Consume and report a pending tick; paused timers report no tick."""
        timer = self._get(timer_id)
        if timer.paused or not timer.ticked:
            return False
        timer.ticked = False
        if timer.timer_type == TimerType.ONE_SHOT:
            self.destroy_timer(timer_id)
        return True

    def is_paused(self, timer_id: int) -> bool:
        """Return whether a timer is paused."""
        return self._get(timer_id).paused

    def update(self, dt: int) -> None:
        """Advance every running timer by dt milliseconds."""
        for timer in self.timers.values():
            if timer.paused:
                continue
            timer.remaining -= dt
            while timer.remaining < 0:
                timer.remaining += timer.interval
                timer.ticked = True

    def _get(self, timer_id: int) -> TimerData:
        try:
            return self.timers[timer_id]
        except KeyError:
            raise KeyError(f"no timer with id {timer_id}") from None

    @staticmethod
    def _check_interval(interval: int) -> None:
        if interval < TIMER_MIN_INTERVAL:
            raise ValueError(
                f"timer interval {interval} is below the minimum of {TIMER_MIN_INTERVAL} ms"
            )