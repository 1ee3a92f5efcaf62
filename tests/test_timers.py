import pytest

from gamesys.defines import TIMER_MIN_INTERVAL, TimerType
from gamesys.timers import TimerContainer, TimerData


def test_timer_data_defaults():
    data = TimerData()
    assert data.timer_type == TimerType.ONE_SHOT
    assert (data.interval, data.remaining, data.ticked, data.paused) == (0, 0, False, False)


def test_start_timer_returns_sequential_ids():
    timers = TimerContainer()
    first = timers.start_timer(100, TimerType.PULSE)
    second = timers.start_timer(100, TimerType.PULSE)
    assert (first, second) == (0, 1)
    assert timers.exists(first) and timers.exists(second)


def test_start_timer_sets_remaining_to_interval():
    timers = TimerContainer()
    timer_id = timers.start_timer(250, TimerType.PULSE)
    assert timers.timers[timer_id].remaining == 250


def test_interval_below_minimum_raises():
    timers = TimerContainer()
    with pytest.raises(ValueError):
        timers.start_timer(TIMER_MIN_INTERVAL - 1, TimerType.PULSE)
    assert timers.timers == {}


def test_minimum_interval_is_accepted():
    timers = TimerContainer()
    timer_id = timers.start_timer(TIMER_MIN_INTERVAL, TimerType.PULSE)
    assert timers.exists(timer_id)


def test_duplicate_id_raises():
    timers = TimerContainer()
    timers.start_timer_with_id(7, 100, TimerType.PULSE)
    with pytest.raises(KeyError):
        timers.start_timer_with_id(7, 100, TimerType.PULSE)


def test_no_tick_before_interval_elapses():
    timers = TimerContainer()
    timer_id = timers.start_timer(100, TimerType.PULSE)
    timers.update(50)
    assert timers.is_ticked(timer_id) is False


def test_exact_interval_does_not_tick_until_passed():
    timers = TimerContainer()
    timer_id = timers.start_timer(100, TimerType.PULSE)
    timers.update(100)
    assert timers.is_ticked(timer_id) is False
    timers.update(1)
    assert timers.is_ticked(timer_id) is True


def test_pulse_tick_is_consumed_and_repeats():
    timers = TimerContainer()
    timer_id = timers.start_timer(100, TimerType.PULSE)
    timers.update(150)
    assert timers.is_ticked(timer_id) is True
    assert timers.is_ticked(timer_id) is False
    timers.update(100)
    assert timers.is_ticked(timer_id) is True
    assert timers.exists(timer_id)


def test_one_shot_is_removed_after_tick():
    timers = TimerContainer()
    timer_id = timers.start_timer(100, TimerType.ONE_SHOT)
    timers.update(101)
    assert timers.is_ticked(timer_id) is True
    assert timers.exists(timer_id) is False


def test_paused_timer_does_not_advance():
    timers = TimerContainer()
    timer_id = timers.start_timer(100, TimerType.PULSE)
    timers.set_paused(timer_id, True)
    assert timers.is_paused(timer_id) is True
    timers.update(500)
    assert timers.timers[timer_id].remaining == 100
    timers.set_paused(timer_id, False)
    assert timers.is_ticked(timer_id) is False


def test_paused_timer_hides_pending_tick():
    timers = TimerContainer()
    timer_id = timers.start_timer(100, TimerType.PULSE)
    timers.update(200)
    timers.set_paused(timer_id, True)
    assert timers.is_ticked(timer_id) is False
    timers.set_paused(timer_id, False)
    assert timers.is_ticked(timer_id) is True


def test_large_step_keeps_remaining_within_interval():
    timers = TimerContainer()
    timer_id = timers.start_timer(100, TimerType.PULSE)
    timers.update(1000)
    assert 0 <= timers.timers[timer_id].remaining < 100


def test_unknown_id_raises():
    timers = TimerContainer()
    with pytest.raises(KeyError):
        timers.is_ticked(3)
    with pytest.raises(KeyError):
        timers.is_paused(3)
    with pytest.raises(KeyError):
        timers.set_paused(3, True)


def test_destroy_timer_removes_it():
    timers = TimerContainer()
    timer_id = timers.start_timer(100, TimerType.PULSE)
    timers.destroy_timer(timer_id)
    assert timers.exists(timer_id) is False