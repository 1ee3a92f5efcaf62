import re
import time

import pytest

from gamesys.clock import Time
from gamesys.defines import TimeStringFormat, UnitOfTime


def test_now_is_current():
    before = time.time_ns() // 1000
    now = Time.now()
    after = time.time_ns() // 1000
    assert before <= now.microseconds <= after


def test_set_to_now_moves_forward():
    t = Time(0)
    t.set_to_now()
    assert t.microseconds >= time.time_ns() // 1000 - 5_000_000


def test_negative_rejected():
    with pytest.raises(ValueError):
        Time(-1)


def test_equality_and_hash():
    assert Time(42) == Time(42)
    assert Time(42) != Time(43)
    assert len({Time(42), Time(42)}) == 1


def test_add_and_subtract():
    assert Time(5) + Time(7) == Time(12)
    assert Time(12) - Time(7) == Time(5)


def test_subtract_wraps_around():
    assert (Time(3) - Time(5)) + Time(5) == Time(3)


def test_get_as_microseconds_round_trip():
    assert Time(123_456_789).get_as(UnitOfTime.MICROSECONDS) == 123_456_789


def test_get_as_one_day():
    day = Time(86_400_000_000)
    assert day.get_as(UnitOfTime.DAYS) == 1
    assert day.get_as(UnitOfTime.HOURS) == 24


@pytest.mark.parametrize(
    "smaller, larger",
    [
        (UnitOfTime.NANOSECONDS, UnitOfTime.MICROSECONDS),
        (UnitOfTime.MICROSECONDS, UnitOfTime.MILLISECONDS),
        (UnitOfTime.MILLISECONDS, UnitOfTime.SECONDS),
        (UnitOfTime.SECONDS, UnitOfTime.MINUTES),
        (UnitOfTime.MINUTES, UnitOfTime.HOURS),
        (UnitOfTime.HOURS, UnitOfTime.DAYS),
    ],
)
def test_units_are_ordered(smaller, larger):
    t = Time(987_654_321_012)
    assert t.get_as(smaller) >= t.get_as(larger)


def test_get_as_truncates():
    t = Time(1_999_999)
    assert t.get_as(UnitOfTime.SECONDS) * 1000 <= t.get_as(UnitOfTime.MILLISECONDS)
    assert t.get_as(UnitOfTime.MILLISECONDS) < (t.get_as(UnitOfTime.SECONDS) + 1) * 1000


def test_get_as_invalid_unit():
    with pytest.raises(ValueError):
        Time(0).get_as(UnitOfTime.INVALID)


def test_elapsed_till_now():
    seconds_now = time.time_ns() // 1_000_000_000
    elapsed = Time(0).elapsed_till_now(UnitOfTime.SECONDS)
    assert abs(elapsed - seconds_now) <= 2


def test_elapsed_from_now_is_small():
    assert 0 <= Time.now().elapsed_till_now(UnitOfTime.SECONDS) <= 1


def test_format_shapes():
    t = Time(1_700_000_000_000_000)

    plain = t.format(TimeStringFormat.YYYYMMDDHHMMSS_ZERO_PUNCTUATION)
    assert len(plain) == 14
    assert plain.isdigit() is True
    assert plain[:6] == "202311"

    dots = t.format(TimeStringFormat.YYYYMMDDHHMMSS_DOTS)
    assert len(dots) == 19
    assert dots[:8] == "2023.11."
    assert dots[10] + dots[13] + dots[16] == " ::"

    day_first = t.format(TimeStringFormat.DDMMYYYYHHMMSS_DOTS)
    assert len(day_first) == 19
    assert day_first[2] == "."
    assert day_first[3:11] == "11.2023 "
    assert day_first[13] + day_first[16] == "::"


def test_formats_agree():
    t = Time(1_700_000_000_000_000)
    plain = t.format(TimeStringFormat.YYYYMMDDHHMMSS_ZERO_PUNCTUATION)
    dots = t.format(TimeStringFormat.YYYYMMDDHHMMSS_DOTS)
    day_first = t.format(TimeStringFormat.DDMMYYYYHHMMSS_ZERO_PUNCTUATION)
    assert re.sub(r"[.: ]", "", dots) == plain
    assert day_first == plain[6:8] + plain[4:6] + plain[0:4] + plain[8:]


def test_format_ignores_sub_second_part():
    base = Time(1_700_000_000_000_000)
    later = base + Time(999_999)
    fmt = TimeStringFormat.DDMMYYYYHHMMSS_DOTS
    assert base.format(fmt) == later.format(fmt)


def test_format_invalid():
    with pytest.raises(ValueError):
        Time(0).format(TimeStringFormat.COUNT)