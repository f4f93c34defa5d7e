"""Application request contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field

from journey.domain.duration import TIME_PATTERN
from journey.domain.enums import MoodTag, SuggestionStyle


class SuggestionRequest(BaseModel):
    """A validated trip form, ready for the suggestion pipeline."""

    departure: str = Field(min_length=1)
    destination: str = Field(min_length=1)
    departure_time: str = Field(pattern=TIME_PATTERN)
    arrival_time: str = Field(pattern=TIME_PATTERN)
    moods: list[MoodTag] = Field(min_length=1)
    style: SuggestionStyle = SuggestionStyle.BALANCED

    @property
    def route(self) -> str:
        return f"{self.departure} → {self.destination}"
