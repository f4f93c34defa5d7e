"""Prompt construction for the itinerary model."""

from __future__ import annotations

from journey.domain.enums import MoodTag, SuggestionStyle
from journey.domain.models import TravelTime
from journey.domain.suggestions import MIN_STOPOVER_MINUTES

MOOD_LABELS: dict[MoodTag, str] = {
    MoodTag.RELAXED: "relaxed, unhurried",
    MoodTag.ADVENTUROUS: "adventurous, wants to explore",
    MoodTag.CULTURAL: "interested in culture and history",
    MoodTag.FOODIE: "in the mood for good food",
    MoodTag.SHOPPING: "wants to do some shopping",
    MoodTag.PHOTO: "wants to take photos",
    MoodTag.MUSIC: "wants to enjoy music",
}

STYLE_INSTRUCTIONS: dict[SuggestionStyle, str] = {
    SuggestionStyle.SAFE: (
        "Suggest only well-known, reliable, safe spots that most visitors would recommend.\n"
        "- Prefer places with long opening hours and easy access from stations.\n"
        "- Avoid anything that needs reservations or has uncertain availability."
    ),
    SuggestionStyle.BALANCED: (
        "Mix classic spots with one or two lesser-known places.\n"
        "- At least one suggestion should be a standard choice.\n"
        "- At least one suggestion should be something a local would pick."
    ),
    SuggestionStyle.CREATIVE: (
        "Suggest surprising, off-the-beaten-path experiences.\n"
        "- Favour hidden spots, local quirks and small independent places.\n"
        "- Still keep every suggestion realistic and reachable on the route."
    ),
}

_OUTPUT_FORMAT = """Return ONLY a JSON object, no other text:
{
  "suggestions": [
    {
      "type": "short category label",
      "name": "place or activity name",
      "duration": "e.g. 45 min",
      "description": "one or two sentences",
      "address": "optional street address",
      "coordinates": {"lat": 35.0, "lng": 139.0},
      "tips": "optional practical tip"
    }
  ]
}"""


def describe_moods(moods: list[MoodTag]) -> str:
    return ", ".join(MOOD_LABELS.get(mood, mood.value) for mood in moods)


def build_suggestion_prompt(
    *,
    departure: str,
    destination: str,
    departure_time: str,
    arrival_time: str,
    moods: list[MoodTag],
    style: SuggestionStyle,
    travel_time: TravelTime | None,
) -> str:
    if travel_time is None:
        available = "unknown"
    else:
        available = f"{travel_time.hours} hours {travel_time.minutes} minutes ({travel_time.total_minutes} minutes)"

    text = f"""
You are a travel planner who suggests stopovers along a journey.

TRIP:
- From: {departure}
- To: {destination}
- Departure time: {departure_time}
- Desired arrival time: {arrival_time}
- Available time: {available}
- Traveller mood: {describe_moods(moods)}

STYLE ({style.value}):
{STYLE_INSTRUCTIONS[style]}

RULES:
- Suggest 2 to 4 stops that fit inside the available time, including travel.
- If the available time is {MIN_STOPOVER_MINUTES} minutes or less, suggest a single direct route instead.
- Use real places near the route when you are confident they exist; otherwise describe the kind of place.

{_OUTPUT_FORMAT}
"""
    return text.strip()


__all__ = ["MOOD_LABELS", "STYLE_INSTRUCTIONS", "build_suggestion_prompt", "describe_moods"]
