"""Defensive payload coercion and card rendering tests."""

from __future__ import annotations

import pytest

from journey.application.contracts import SuggestionRequest
from journey.domain.models import AiSuggestionResult, FallbackSuggestionResult, SuggestionEntry, TravelTime
from journey.services.suggestion_presenter import (
    coerce_coordinates,
    coerce_entries,
    normalize_payload,
    render_cards,
    to_response_data,
)


def _request() -> SuggestionRequest:
    return SuggestionRequest(
        departure="A",
        destination="B",
        departure_time="23:30",
        arrival_time="01:00",
        moods=["photo"],
        style="creative",
    )


def test_coerce_entries_fills_defaults_and_skips_garbage():
    entries = coerce_entries([{"name": 42, "duration": ""}, "oops", None, {"type": "cafe"}])
    assert len(entries) == 2
    assert entries[0].name == "42"
    assert entries[0].duration == "60 min"
    assert entries[1].name == "Suggestion 4"
    for entry in entries:
        for field in (entry.type, entry.name, entry.duration, entry.description):
            assert isinstance(field, str) and field


@pytest.mark.parametrize("raw", [None, "35,139", {"lat": "x", "lng": 1}, {"lat": 95, "lng": 0}, {"lat": 1}])
def test_bad_coordinates_are_dropped(raw):
    assert coerce_coordinates(raw) is None


def test_coordinates_accept_numeric_strings():
    coords = coerce_coordinates({"lat": "35.5", "lng": "139.7"})
    assert (coords.lat, coords.lng) == (35.5, 139.7)


def test_normalize_payload_uses_request_defaults():
    result = normalize_payload({"suggestions": [{"name": "Pier"}]}, _request())
    assert isinstance(result, AiSuggestionResult)
    assert result.route == "A → B"
    assert result.style.value == "creative"
    assert result.travel_time.total_minutes == 90


def test_normalize_payload_keeps_fallback_annotation():
    data = {
        "suggestions": [],
        "travelTime": {"hours": 1, "minutes": 30, "totalMinutes": 90},
        "source": "fallback",
        "fallbackReason": "llm_error",
        "style": "nonsense",
    }
    result = normalize_payload(data, _request())
    assert isinstance(result, FallbackSuggestionResult)
    assert result.reason == "llm_error"
    assert result.style.value == "balanced"


def test_normalize_payload_without_list_raises():
    with pytest.raises(ValueError):
        normalize_payload({"suggestions": "none"}, _request())
    with pytest.raises(ValueError):
        normalize_payload(None, _request())


def test_response_data_wire_shape():
    result = FallbackSuggestionResult(
        travel_time=TravelTime(hours=1, minutes=5, total_minutes=65),
        route="A → B",
        style="safe",
        suggestions=[SuggestionEntry(type="t", name="n", duration="d", description="x")],
        reason="llm_unavailable",
    )
    data = to_response_data(result)
    assert data["travelTime"] == {"hours": 1, "minutes": 5, "totalMinutes": 65}
    assert data["fallback"] is True
    assert data["fallbackReason"] == "llm_unavailable"
    assert data["source"] == "fallback"
    assert "reason" not in data
    assert data["suggestions"][0] == {"type": "t", "name": "n", "duration": "d", "description": "x"}


def test_render_cards_lists_every_entry():
    result = AiSuggestionResult(
        travel_time=TravelTime(hours=2, minutes=0, total_minutes=120),
        route="A → B",
        style="balanced",
        suggestions=[
            SuggestionEntry(type="cafe", name="Blue Door", duration="30 min", description="Coffee.", tips="Go early"),
            SuggestionEntry(type="park", name="Green Field", duration="45 min", description="Walk."),
        ],
    )
    text = render_cards(result)
    assert "Blue Door" in text and "Green Field" in text
    assert "Available time: 2h 00m" in text
    assert "Balanced plan" in text
    assert "Tip: Go early" in text
    assert "offline" not in text
