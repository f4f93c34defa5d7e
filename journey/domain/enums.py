"""Domain enums."""

from enum import Enum


class MoodTag(str, Enum):
    """Trip moods; declaration order is the fixed suggestion priority order."""

    RELAXED = "relaxed"
    ADVENTUROUS = "adventurous"
    CULTURAL = "cultural"
    FOODIE = "foodie"
    SHOPPING = "shopping"
    PHOTO = "photo"
    MUSIC = "music"


class SuggestionStyle(str, Enum):
    SAFE = "safe"
    BALANCED = "balanced"
    CREATIVE = "creative"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


DEFAULT_STYLE = SuggestionStyle.BALANCED


def coerce_style(value: object) -> SuggestionStyle:
    """Map any raw style value to a SuggestionStyle, defaulting to balanced."""
    if isinstance(value, SuggestionStyle):
        return value
    raw = str(value or "").strip().lower()
    try:
        return SuggestionStyle(raw)
    except ValueError:
        return DEFAULT_STYLE
