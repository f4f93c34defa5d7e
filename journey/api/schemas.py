"""API request/response models."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from journey.application.contracts import SuggestionRequest
from journey.domain.duration import TIME_PATTERN
from journey.domain.enums import SuggestionStyle, coerce_style
from journey.domain.exceptions import InvalidMood
from journey.domain.suggestions import parse_moods


class GenerateSuggestionsRequest(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    departure: str = Field(min_length=1, max_length=200, description="Departure place")
    destination: str = Field(min_length=1, max_length=200, description="Destination place")
    departure_time: str = Field(pattern=TIME_PATTERN, description="HH:MM, 24-hour")
    arrival_time: str = Field(pattern=TIME_PATTERN, description="HH:MM, 24-hour")
    mood: list[str] = Field(min_length=1, description="Selected mood tags")
    suggestion_style: SuggestionStyle = Field(
        default=SuggestionStyle.BALANCED,
        description="safe / balanced / creative; anything else means balanced",
    )

    @field_validator("mood")
    @classmethod
    def _known_moods(cls, value: list[str]) -> list[str]:
        try:
            parse_moods(value)
        except InvalidMood as exc:
            raise ValueError(str(exc)) from None
        seen: list[str] = []
        for item in value:
            key = item.strip().lower()
            if key not in seen:
                seen.append(key)
        return seen

    @field_validator("suggestion_style", mode="before")
    @classmethod
    def _default_style(cls, value: Any) -> SuggestionStyle:
        return coerce_style(value)

    def to_contract(self) -> SuggestionRequest:
        return SuggestionRequest(
            departure=self.departure,
            destination=self.destination,
            departure_time=self.departure_time,
            arrival_time=self.arrival_time,
            moods=self.mood,
            style=self.suggestion_style,
        )


class SuggestionsResponse(BaseModel):
    success: bool = True
    data: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: Optional[Any] = None


class HealthResponse(BaseModel):
    status: str = "OK"
    message: str = "Journey AI API is running"
    timestamp: str
    environment: str
    port: int
