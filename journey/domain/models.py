"""Pydantic domain models.

Field names are snake_case in Python and camelCase on the wire
(``total_minutes`` <-> ``totalMinutes``); dump with ``by_alias=True``.
"""

from __future__ import annotations

import datetime as dt
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from journey.domain.enums import SuggestionStyle, TaskPriority


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TravelTime(_WireModel):
    hours: int = Field(ge=0, le=23)
    minutes: int = Field(ge=0, le=59)
    total_minutes: int = Field(ge=0, le=1439)

    @model_validator(mode="after")
    def _check_consistent(self) -> "TravelTime":
        if self.hours * 60 + self.minutes != self.total_minutes:
            raise ValueError("hours*60 + minutes must equal total_minutes")
        return self


class Coordinates(_WireModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class SuggestionEntry(_WireModel):
    type: str
    name: str
    duration: str
    description: str
    address: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    tips: Optional[str] = None


class _SuggestionResultBase(_WireModel):
    travel_time: Optional[TravelTime] = None
    route: str
    style: SuggestionStyle
    suggestions: list[SuggestionEntry] = Field(default_factory=list)


class AiSuggestionResult(_SuggestionResultBase):
    source: Literal["ai"] = "ai"

    @property
    def is_fallback(self) -> bool:
        return False


class FallbackSuggestionResult(_SuggestionResultBase):
    source: Literal["fallback"] = "fallback"
    reason: str = "llm_unavailable"

    @property
    def is_fallback(self) -> bool:
        return True


SuggestionResult = Union[AiSuggestionResult, FallbackSuggestionResult]


class Task(_WireModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    text: str
    completed: bool = False
    created_at: dt.datetime
    priority: TaskPriority = TaskPriority.MEDIUM
