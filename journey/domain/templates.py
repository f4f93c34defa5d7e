"""Keyword-triggered canned suggestions for the to-do list."""

from __future__ import annotations

MIN_TEXT_LENGTH = 3
MAX_TEMPLATES = 3
DEFAULT_CATEGORY = "default"

# First matching group wins, so order is significant.
KEYWORD_GROUPS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("work", ("work", "job", "office")),
    ("meeting", ("meeting", "call")),
    ("shopping", ("buy", "shop", "grocer")),
    ("study", ("study", "learn", "read", "exam")),
    ("exercise", ("exercise", "gym", "run", "workout")),
    ("cleaning", ("clean", "laundry", "tidy")),
    ("travel", ("trip", "travel", "flight", "hotel")),
)

TEMPLATES: dict[str, tuple[str, ...]] = {
    "work": (
        "Break the task into smaller steps",
        "Block focused time on your calendar",
        "List what you need from colleagues",
        "Set a deadline for the first draft",
    ),
    "meeting": (
        "Prepare an agenda",
        "Share materials before the meeting",
        "Write down action items afterwards",
        "Confirm the time with attendees",
    ),
    "shopping": (
        "Make a shopping list",
        "Check what is already at home",
        "Compare prices before buying",
    ),
    "study": (
        "Set a goal for this session",
        "Use a 25-minute focus timer",
        "Review notes the next day",
    ),
    "exercise": (
        "Warm up for 5 minutes",
        "Pack water and a towel",
        "Log today's workout",
    ),
    "cleaning": (
        "Start with one room",
        "Put on a playlist",
        "Sort items to donate",
    ),
    "travel": (
        "Check the timetable",
        "Pack the night before",
        "Save tickets offline",
    ),
    DEFAULT_CATEGORY: (
        "Set a due date",
        "Split into subtasks",
        "Add a reminder",
    ),
}


def match_category(free_text: str) -> str:
    lowered = free_text.lower()
    for category, keywords in KEYWORD_GROUPS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


def match_templates(free_text: str | None) -> list[str]:
    """Up to three template suggestions for a to-do text; [] for short input."""
    text = (free_text or "").strip()
    if len(text) < MIN_TEXT_LENGTH:
        return []
    return list(TEMPLATES[match_category(text)][:MAX_TEMPLATES])


__all__ = [
    "DEFAULT_CATEGORY",
    "KEYWORD_GROUPS",
    "MAX_TEMPLATES",
    "MIN_TEXT_LENGTH",
    "TEMPLATES",
    "match_category",
    "match_templates",
]
