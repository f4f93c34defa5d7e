"""Suggestion use case tests: AI path, fallback path, response parsing."""

from __future__ import annotations

import io
import json

import pytest

from journey.application.contracts import SuggestionRequest
from journey.application.generate_suggestions import (
    REASON_INVALID_RESPONSE,
    REASON_LLM_ERROR,
    REASON_LLM_UNAVAILABLE,
    generate_suggestions,
    message_text,
    parse_llm_suggestions,
    strip_code_fence,
)
from journey.domain.models import AiSuggestionResult, FallbackSuggestionResult
from journey.infrastructure.logging import StructuredLogger
from journey.shared.exceptions import LlmResponseError


def _request(**overrides) -> SuggestionRequest:
    data = {
        "departure": "Tokyo Station",
        "destination": "Yokohama Station",
        "departure_time": "10:00",
        "arrival_time": "12:30",
        "moods": ["cultural", "foodie"],
        "style": "safe",
    }
    data.update(overrides)
    return SuggestionRequest(**data)


def _quiet_logger() -> tuple[StructuredLogger, io.StringIO]:
    buf = io.StringIO()
    return StructuredLogger(trace_id="t1", output=buf), buf


_AI_REPLY = json.dumps(
    {
        "suggestions": [
            {
                "type": "museum",
                "name": "Harbour History Museum",
                "duration": "50 min",
                "description": "Maritime history.",
                "coordinates": {"lat": 35.45, "lng": 139.64},
            },
            {"name": "Noodle counter", "description": None},
        ]
    }
)


def test_ai_path_merges_duration_and_route(fake_llm_factory):
    llm = fake_llm_factory(reply=f"```json\n{_AI_REPLY}\n```")
    logger, _ = _quiet_logger()

    result = generate_suggestions(_request(), llm=llm, logger=logger)

    assert isinstance(result, AiSuggestionResult)
    assert result.source == "ai"
    assert result.route == "Tokyo Station → Yokohama Station"
    assert result.travel_time.total_minutes == 150
    assert result.suggestions[0].coordinates.lat == 35.45
    second = result.suggestions[1]
    assert second.type == "AI suggestion"
    assert second.duration == "60 min"
    assert second.description == "Suggested by the AI planner."


def test_prompt_carries_trip_and_style_block(fake_llm_factory):
    llm = fake_llm_factory(reply=_AI_REPLY)
    logger, _ = _quiet_logger()

    generate_suggestions(_request(style="creative"), llm=llm, logger=logger)

    prompt = llm.prompts[0]
    assert "Tokyo Station" in prompt and "Yokohama Station" in prompt
    assert "2 hours 30 minutes" in prompt
    assert "STYLE (creative)" in prompt
    assert "off-the-beaten-path" in prompt


def test_no_llm_uses_catalog_fallback():
    logger, buf = _quiet_logger()
    result = generate_suggestions(_request(), llm=None, logger=logger)

    assert isinstance(result, FallbackSuggestionResult)
    assert result.reason == REASON_LLM_UNAVAILABLE
    assert [e.type for e in result.suggestions] == ["cultural", "foodie"]
    assert '"event": "fallback"' in buf.getvalue()


def test_default_llm_is_template_mode_without_keys():
    logger, _ = _quiet_logger()
    result = generate_suggestions(_request(), logger=logger)
    assert result.is_fallback
    assert result.reason == REASON_LLM_UNAVAILABLE


def test_llm_exception_falls_back(fake_llm_factory):
    llm = fake_llm_factory(error=RuntimeError("connection reset, key=AIzaSyA1234567890abcdefghij"))
    logger, buf = _quiet_logger()

    result = generate_suggestions(_request(), llm=llm, logger=logger)

    assert result.is_fallback
    assert result.reason == REASON_LLM_ERROR
    assert "AIzaSyA1234567890abcdefghij" not in buf.getvalue()


@pytest.mark.parametrize("reply", ["not json at all", "", '{"items": []}', '{"suggestions": []}', "[1, 2, 3]"])
def test_unusable_reply_falls_back(fake_llm_factory, reply):
    logger, _ = _quiet_logger()
    result = generate_suggestions(_request(), llm=fake_llm_factory(reply=reply), logger=logger)
    assert result.is_fallback
    assert result.reason == REASON_INVALID_RESPONSE


def test_short_trip_fallback_is_direct_route():
    logger, _ = _quiet_logger()
    result = generate_suggestions(_request(arrival_time="10:45"), llm=None, logger=logger)
    assert [e.type for e in result.suggestions] == ["route"]


def test_strip_code_fence_variants():
    assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert strip_code_fence('```\n[1]\n```') == "[1]"
    assert strip_code_fence('```json\n{"a": 1}') == '{"a": 1}'
    assert strip_code_fence('  {"a": 1}  ') == '{"a": 1}'


def test_parse_accepts_bare_list():
    assert parse_llm_suggestions('[{"name": "x"}]') == [{"name": "x"}]


def test_parse_rejects_non_json():
    with pytest.raises(LlmResponseError):
        parse_llm_suggestions("Sure! Here are some ideas")


def test_content_block_list_is_read_as_text(fake_llm_factory):
    llm = fake_llm_factory(reply=[{"type": "text", "text": _AI_REPLY}])
    logger, _ = _quiet_logger()

    result = generate_suggestions(_request(), llm=llm, logger=logger)

    assert isinstance(result, AiSuggestionResult)
    assert result.suggestions[0].name == "Harbour History Museum"


def test_empty_content_block_list_falls_back(fake_llm_factory):
    llm = fake_llm_factory(reply=[{"type": "text", "text": "[]"}])
    logger, _ = _quiet_logger()

    result = generate_suggestions(_request(), llm=llm, logger=logger)

    assert isinstance(result, FallbackSuggestionResult)
    assert result.reason == REASON_INVALID_RESPONSE


def test_message_text_variants():
    assert message_text("plain") == "plain"
    assert message_text(["a", {"type": "text", "text": "b"}, {"type": "image_url"}]) == "ab"
    assert message_text(None) == ""
    assert message_text(42) == "42"


def test_deeply_nested_reply_falls_back(fake_llm_factory):
    logger, _ = _quiet_logger()
    llm = fake_llm_factory(reply="[" * 100000 + "]" * 100000)
    result = generate_suggestions(_request(), llm=llm, logger=logger)
    assert result.reason == REASON_INVALID_RESPONSE


def test_text_after_closing_fence_is_ignored(fake_llm_factory):
    assert strip_code_fence('```json\n{"a": 1}\n```\nEnjoy your trip!') == '{"a": 1}'

    llm = fake_llm_factory(reply=f"```json\n{_AI_REPLY}\n```\nEnjoy!")
    logger, _ = _quiet_logger()
    result = generate_suggestions(_request(), llm=llm, logger=logger)
    assert isinstance(result, AiSuggestionResult)


def test_llm_call_logs_the_client_actually_used(fake_llm_factory):
    logger, buf = _quiet_logger()
    generate_suggestions(_request(), llm=fake_llm_factory(reply=_AI_REPLY), logger=logger)

    events = [json.loads(line) for line in buf.getvalue().splitlines()]
    call = next(e for e in events if e["event"] == "llm_call")
    assert call["provider"] == "FakeLLM"
