"""Travel-time calculation tests."""

from __future__ import annotations

import pytest

from journey.domain.duration import compute_duration, format_travel_time, is_valid_time, to_minutes
from journey.domain.exceptions import InvalidTimeFormat


def _as_tuple(tt):
    return (tt.hours, tt.minutes, tt.total_minutes)


def test_same_day_duration():
    assert _as_tuple(compute_duration("09:15", "11:45")) == (2, 30, 150)


def test_same_time_is_zero_not_none():
    assert _as_tuple(compute_duration("09:00", "09:00")) == (0, 0, 0)


def test_midnight_rollover():
    assert _as_tuple(compute_duration("23:30", "00:15")) == (0, 45, 45)


def test_one_minute_before_is_almost_a_full_day():
    assert _as_tuple(compute_duration("10:00", "09:59")) == (23, 59, 1439)


@pytest.mark.parametrize("departure,arrival", [("", "10:00"), ("10:00", ""), (None, "10:00"), ("10:00", None)])
def test_missing_side_returns_none(departure, arrival):
    assert compute_duration(departure, arrival) is None


@pytest.mark.parametrize("value", ["24:00", "9:60", "abc", "12-30", "12:3", "123:00"])
def test_malformed_time_raises(value):
    with pytest.raises(InvalidTimeFormat):
        compute_duration(value, "10:00")


def test_single_digit_hour_is_accepted():
    assert to_minutes("7:05") == 425
    assert is_valid_time("7:05")
    assert not is_valid_time("")


def test_properties_hold_across_the_day():
    for dep in range(0, 1440, 97):
        for arr in range(0, 1440, 89):
            tt = compute_duration(f"{dep // 60:02d}:{dep % 60:02d}", f"{arr // 60:02d}:{arr % 60:02d}")
            expected = arr - dep if arr >= dep else arr - dep + 1440
            assert tt.total_minutes == expected
            assert tt.hours * 60 + tt.minutes == tt.total_minutes
            assert 0 <= tt.total_minutes <= 1439


def test_format_travel_time():
    assert format_travel_time(compute_duration("08:00", "09:05")) == "1h 05m"
    assert format_travel_time(None) == "unknown"
