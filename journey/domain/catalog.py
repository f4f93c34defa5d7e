"""Static suggestion catalog used by the offline / fallback path.

One entry per (mood, style). ``safe`` entries are well-known, low-risk
stops; ``creative`` entries favour the unusual; ``balanced`` sits between.
"""

from __future__ import annotations

from types import MappingProxyType

from journey.domain.enums import MoodTag, SuggestionStyle
from journey.domain.models import SuggestionEntry

S = SuggestionStyle

MOOD_PRIORITY: tuple[MoodTag, ...] = tuple(MoodTag)

DIRECT_ROUTE_ENTRY = SuggestionEntry(
    type="route",
    name="Direct route",
    duration="Whole trip",
    description="There is not enough spare time for a stopover. Head straight to your destination.",
    tips="Allow a few minutes of buffer for transfers.",
)

_CATALOG: dict[MoodTag, dict[SuggestionStyle, SuggestionEntry]] = {
    MoodTag.RELAXED: {
        S.SAFE: SuggestionEntry(
            type="relaxed",
            name="Station-side cafe break",
            duration="30 min",
            description="Sit down at a well-reviewed cafe near the station and take a breather.",
        ),
        S.BALANCED: SuggestionEntry(
            type="relaxed",
            name="Stroll through a city park",
            duration="45 min",
            description="A slow walk through the nearest large park, with a bench stop by the water.",
        ),
        S.CREATIVE: SuggestionEntry(
            type="relaxed",
            name="Rooftop garden hideaway",
            duration="40 min",
            description="Find a department-store rooftop garden most travellers walk past.",
            tips="Rooftops often close earlier than the store below.",
        ),
    },
    MoodTag.ADVENTUROUS: {
        S.SAFE: SuggestionEntry(
            type="adventurous",
            name="Observation deck visit",
            duration="45 min",
            description="Ride up the best-known observation deck on the way for a wide view of the route.",
        ),
        S.BALANCED: SuggestionEntry(
            type="adventurous",
            name="Take the scenic line",
            duration="60 min",
            description="Swap one leg of the journey for a slower local line with better scenery.",
        ),
        S.CREATIVE: SuggestionEntry(
            type="adventurous",
            name="Get off one stop early",
            duration="50 min",
            description="Leave the train a stop before your destination and walk in through back streets.",
            tips="Keep a map offline in case signal drops.",
        ),
    },
    MoodTag.CULTURAL: {
        S.SAFE: SuggestionEntry(
            type="cultural",
            name="City history museum",
            duration="60 min",
            description="A compact introduction to the area's history at the main municipal museum.",
        ),
        S.BALANCED: SuggestionEntry(
            type="cultural",
            name="Historic shrine and old street",
            duration="60 min",
            description="Visit a local shrine, then walk the preserved shopping street next to it.",
        ),
        S.CREATIVE: SuggestionEntry(
            type="cultural",
            name="Small independent gallery",
            duration="45 min",
            description="Drop into a tiny gallery run by local artists, often with the artist on site.",
        ),
    },
    MoodTag.FOODIE: {
        S.SAFE: SuggestionEntry(
            type="foodie",
            name="Station food hall",
            duration="40 min",
            description="Sample regional specialities from the food hall inside the station building.",
        ),
        S.BALANCED: SuggestionEntry(
            type="foodie",
            name="Local market snack crawl",
            duration="60 min",
            description="Graze through the nearest covered market, one small bite per stall.",
        ),
        S.CREATIVE: SuggestionEntry(
            type="foodie",
            name="Standing bar counter",
            duration="45 min",
            description="Eat where the locals do at a tiny standing counter with a handwritten menu.",
            tips="Cash is often the only payment option.",
        ),
    },
    MoodTag.SHOPPING: {
        S.SAFE: SuggestionEntry(
            type="shopping",
            name="Station shopping mall",
            duration="45 min",
            description="Browse the shopping complex attached to the station without leaving the building.",
        ),
        S.BALANCED: SuggestionEntry(
            type="shopping",
            name="Shopping arcade walk",
            duration="60 min",
            description="A covered arcade mixing chain stores with long-running family shops.",
        ),
        S.CREATIVE: SuggestionEntry(
            type="shopping",
            name="Vintage and zakka shops",
            duration="60 min",
            description="Hunt for second-hand finds and handmade goods in a side-street shop cluster.",
        ),
    },
    MoodTag.PHOTO: {
        S.SAFE: SuggestionEntry(
            type="photo",
            name="Landmark photo spot",
            duration="30 min",
            description="Capture the classic shot of the area's best-known landmark.",
        ),
        S.BALANCED: SuggestionEntry(
            type="photo",
            name="Riverside walk",
            duration="45 min",
            description="Follow the river for reflections, bridges and changing light.",
        ),
        S.CREATIVE: SuggestionEntry(
            type="photo",
            name="Alley and signage hunt",
            duration="50 min",
            description="Look for retro signs, murals and narrow alleys away from the main street.",
            tips="Ask before photographing shop interiors.",
        ),
    },
    MoodTag.MUSIC: {
        S.SAFE: SuggestionEntry(
            type="music",
            name="Record store browse",
            duration="30 min",
            description="Dig through the listening stations at a large record store.",
        ),
        S.BALANCED: SuggestionEntry(
            type="music",
            name="Jazz cafe",
            duration="60 min",
            description="A coffee to a soundtrack of vinyl at a long-running jazz cafe.",
        ),
        S.CREATIVE: SuggestionEntry(
            type="music",
            name="Street performance square",
            duration="45 min",
            description="Catch buskers and pop-up sets at a square known for live street music.",
        ),
    },
}

CATALOG = MappingProxyType({mood: MappingProxyType(styles) for mood, styles in _CATALOG.items()})


def lookup(mood: MoodTag, style: SuggestionStyle) -> SuggestionEntry | None:
    styles = CATALOG.get(mood)
    if styles is None:
        return None
    return styles.get(style)


__all__ = ["CATALOG", "DIRECT_ROUTE_ENTRY", "MOOD_PRIORITY", "lookup"]
