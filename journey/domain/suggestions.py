"""Deterministic mood + style suggestion resolver."""

from __future__ import annotations

from collections.abc import Iterable

from journey.domain.catalog import DIRECT_ROUTE_ENTRY, MOOD_PRIORITY, lookup
from journey.domain.enums import MoodTag, coerce_style
from journey.domain.exceptions import InvalidMood
from journey.domain.models import SuggestionEntry, TravelTime

# Stopovers only make sense when there is more than an hour to spare.
MIN_STOPOVER_MINUTES = 60


def parse_moods(values: Iterable[object]) -> set[MoodTag]:
    moods: set[MoodTag] = set()
    for value in values:
        if isinstance(value, MoodTag):
            moods.add(value)
            continue
        raw = str(value or "").strip().lower()
        try:
            moods.add(MoodTag(raw))
        except ValueError:
            raise InvalidMood(str(value)) from None
    return moods


def resolve_suggestions(
    moods: Iterable[object],
    style: object,
    travel_time: TravelTime | None,
) -> list[SuggestionEntry]:
    """
    Pick catalog entries for the selected moods.

    Returns the direct-route entry alone when the trip leaves 60 minutes or
    less. Otherwise returns one entry per selected mood, ordered by
    MOOD_PRIORITY.
    """
    if travel_time is None or travel_time.total_minutes <= MIN_STOPOVER_MINUTES:
        return [DIRECT_ROUTE_ENTRY.model_copy(deep=True)]

    selected = parse_moods(moods)
    resolved_style = coerce_style(style)

    entries: list[SuggestionEntry] = []
    for mood in MOOD_PRIORITY:
        if mood not in selected:
            continue
        entry = lookup(mood, resolved_style)
        if entry is not None:
            entries.append(entry.model_copy(deep=True))
    return entries


__all__ = ["MIN_STOPOVER_MINUTES", "parse_moods", "resolve_suggestions"]
