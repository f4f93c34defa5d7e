"""Defensive coercion and text rendering for suggestion payloads.

Model output and backend responses are untrusted: every string field is
stringified with a default, malformed optional fields are dropped, and
non-object items are skipped, so renderers never see a null.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from journey.application.contracts import SuggestionRequest
from journey.domain.duration import compute_duration, format_travel_time
from journey.domain.enums import SuggestionStyle, coerce_style
from journey.domain.models import (
    AiSuggestionResult,
    Coordinates,
    FallbackSuggestionResult,
    SuggestionEntry,
    SuggestionResult,
    TravelTime,
)

DEFAULT_TYPE = "AI suggestion"
DEFAULT_DURATION = "60 min"
DEFAULT_DESCRIPTION = "Suggested by the AI planner."

STYLE_LABELS: dict[SuggestionStyle, str] = {
    SuggestionStyle.SAFE: "Safe & classic plan",
    SuggestionStyle.BALANCED: "Balanced plan",
    SuggestionStyle.CREATIVE: "Adventurous & unique plan",
}


def _text(value: Any, default: str) -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def coerce_coordinates(raw: Any) -> Coordinates | None:
    if not isinstance(raw, Mapping):
        return None
    try:
        return Coordinates(lat=float(raw.get("lat")), lng=float(raw.get("lng")))
    except (TypeError, ValueError, ValidationError):
        return None


def coerce_entry(raw: Any, index: int) -> SuggestionEntry | None:
    if not isinstance(raw, Mapping):
        return None
    return SuggestionEntry(
        type=_text(raw.get("type"), DEFAULT_TYPE),
        name=_text(raw.get("name"), f"Suggestion {index + 1}"),
        duration=_text(raw.get("duration"), DEFAULT_DURATION),
        description=_text(raw.get("description"), DEFAULT_DESCRIPTION),
        address=_optional_text(raw.get("address")),
        coordinates=coerce_coordinates(raw.get("coordinates")),
        tips=_optional_text(raw.get("tips")),
    )


def coerce_entries(raw_items: Any) -> list[SuggestionEntry]:
    if not isinstance(raw_items, list):
        return []
    entries: list[SuggestionEntry] = []
    for index, raw in enumerate(raw_items):
        entry = coerce_entry(raw, index)
        if entry is not None:
            entries.append(entry)
    return entries


def coerce_travel_time(raw: Any) -> TravelTime | None:
    if not isinstance(raw, Mapping):
        return None
    try:
        return TravelTime.model_validate(raw)
    except ValidationError:
        return None


def normalize_payload(data: Any, request: SuggestionRequest) -> SuggestionResult:
    """
    Turn a backend ``data`` object into a typed result.

    Raises ValueError when the payload has no suggestion list at all, so the
    caller can switch to the offline path.
    """
    if not isinstance(data, Mapping) or not isinstance(data.get("suggestions"), list):
        raise ValueError("response data has no suggestion list")

    travel_time = coerce_travel_time(data.get("travelTime"))
    if travel_time is None:
        travel_time = compute_duration(request.departure_time, request.arrival_time)

    fields = {
        "travel_time": travel_time,
        "route": _text(data.get("route"), request.route),
        "style": coerce_style(data.get("style") or request.style),
        "suggestions": coerce_entries(data["suggestions"]),
    }
    if data.get("source") == "fallback" or data.get("fallback") is True:
        return FallbackSuggestionResult(reason=_text(data.get("fallbackReason"), "backend_fallback"), **fields)
    return AiSuggestionResult(**fields)


def to_response_data(result: SuggestionResult) -> dict[str, Any]:
    """Wire shape of a result, with the fallback annotation flattened in."""
    payload = result.to_wire()
    payload["fallback"] = result.is_fallback
    reason = payload.pop("reason", None)
    if reason:
        payload["fallbackReason"] = reason
    return payload


def render_cards(result: SuggestionResult) -> str:
    lines: list[str] = []
    lines.append(f"Route: {result.route or 'no route information'}")
    if result.travel_time is not None:
        lines.append(f"Available time: {format_travel_time(result.travel_time)}")
    lines.append(f"Style: {STYLE_LABELS.get(result.style, result.style.value)}")
    if result.is_fallback:
        lines.append("(offline suggestions: the AI planner was not available)")
    lines.append("=" * 50)

    for entry in result.suggestions:
        lines.append(f"[{entry.type}] {entry.name}")
        lines.append(f"    {entry.description}")
        lines.append(f"    Duration: {entry.duration}")
        if entry.address:
            lines.append(f"    Address: {entry.address}")
        if entry.coordinates is not None:
            lines.append(f"    Location: {entry.coordinates.lat:.4f}, {entry.coordinates.lng:.4f}")
        if entry.tips:
            lines.append(f"    Tip: {entry.tips}")
        lines.append("-" * 50)

    return "\n".join(lines)


__all__ = [
    "STYLE_LABELS",
    "coerce_coordinates",
    "coerce_entries",
    "coerce_entry",
    "coerce_travel_time",
    "normalize_payload",
    "render_cards",
    "to_response_data",
]
