"""Travel-time arithmetic on HH:MM wall-clock strings."""

from __future__ import annotations

import re
from typing import Optional

from journey.domain.exceptions import InvalidTimeFormat
from journey.domain.models import TravelTime

TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"
MINUTES_PER_DAY = 24 * 60

_TIME_RE = re.compile(TIME_PATTERN)


def is_valid_time(value: str | None) -> bool:
    return bool(value) and _TIME_RE.match(str(value).strip()) is not None


def to_minutes(value: str) -> int:
    """Minutes since midnight for an HH:MM string."""
    raw = str(value).strip()
    if not _TIME_RE.match(raw):
        raise InvalidTimeFormat(raw)
    hours, minutes = raw.split(":")
    return int(hours) * 60 + int(minutes)


def compute_duration(departure: str | None, arrival: str | None) -> Optional[TravelTime]:
    """
    Elapsed time from departure to arrival.

    Returns None when either side is empty. An arrival earlier than the
    departure is read as the next day, so the result always lies in
    [0, 1439] minutes; equal times give a zero duration.
    """
    if not departure or not arrival:
        return None

    delta = to_minutes(arrival) - to_minutes(departure)
    if delta < 0:
        delta += MINUTES_PER_DAY

    return TravelTime(hours=delta // 60, minutes=delta % 60, total_minutes=delta)


def format_travel_time(travel_time: TravelTime | None) -> str:
    if travel_time is None:
        return "unknown"
    return f"{travel_time.hours}h {travel_time.minutes:02d}m"


__all__ = [
    "MINUTES_PER_DAY",
    "TIME_PATTERN",
    "compute_duration",
    "format_travel_time",
    "is_valid_time",
    "to_minutes",
]
