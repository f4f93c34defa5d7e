"""Suggestion use case: one LLM attempt, deterministic catalog fallback."""

from __future__ import annotations

import json as _json
import time
from typing import Any

from journey.application.contracts import SuggestionRequest
from journey.application.prompts import build_suggestion_prompt
from journey.domain.duration import compute_duration
from journey.domain.models import AiSuggestionResult, FallbackSuggestionResult, SuggestionResult, TravelTime
from journey.domain.suggestions import resolve_suggestions
from journey.infrastructure.llm_factory import describe_llm, get_llm
from journey.infrastructure.logging import StructuredLogger, get_logger
from journey.services.suggestion_presenter import coerce_entries
from journey.shared.exceptions import LlmResponseError

REASON_LLM_UNAVAILABLE = "llm_unavailable"
REASON_LLM_ERROR = "llm_error"
REASON_INVALID_RESPONSE = "invalid_response"

_USE_DEFAULT_LLM = object()


def strip_code_fence(content: str) -> str:
    """Keep only the body of a leading ```json ... ``` block; text after the closing fence is dropped."""
    content = content.strip()
    if not content.startswith("```"):
        return content
    body = content.split("\n")[1:]
    closing = [i for i, line in enumerate(body) if line.strip() == "```"]
    if closing:
        body = body[: closing[-1]]
    return "\n".join(body).strip()


def message_text(content: Any) -> str:
    """Flatten chat message content (a string or a list of content blocks) to text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and isinstance(block.get("text"), str):
                parts.append(block["text"])
        return "".join(parts)
    return "" if content is None else str(content)


def parse_llm_suggestions(content: Any) -> list[dict[str, Any]]:
    """
    Extract the raw suggestion list from model text.

    Accepts ``{"suggestions": [...]}`` or a bare list. Raises
    LlmResponseError when the text is not JSON or has no list.
    """
    text = strip_code_fence(message_text(content))
    if not text:
        raise LlmResponseError("empty response")
    try:
        data = _json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise LlmResponseError(f"response is not JSON: {exc}") from None

    if isinstance(data, dict):
        data = data.get("suggestions")
    if not isinstance(data, list):
        raise LlmResponseError("response has no suggestion list")
    return data


def build_fallback_result(
    request: SuggestionRequest,
    reason: str,
    travel_time: TravelTime | None = None,
) -> FallbackSuggestionResult:
    if travel_time is None:
        travel_time = compute_duration(request.departure_time, request.arrival_time)
    return FallbackSuggestionResult(
        travel_time=travel_time,
        route=request.route,
        style=request.style,
        suggestions=resolve_suggestions(request.moods, request.style, travel_time),
        reason=reason,
    )


def _ask_llm(llm: Any, prompt: str) -> str:
    resp = llm.invoke(prompt)
    return message_text(resp.content if hasattr(resp, "content") else resp)


def generate_suggestions(
    request: SuggestionRequest,
    *,
    llm: Any = _USE_DEFAULT_LLM,
    logger: StructuredLogger | None = None,
) -> SuggestionResult:
    """
    Suggestions for a validated trip form.

    Any LLM problem (no key, exception, unusable reply) yields a
    FallbackSuggestionResult instead of an error.
    """
    log = logger or get_logger()
    if llm is _USE_DEFAULT_LLM:
        llm = get_llm()

    travel_time = compute_duration(request.departure_time, request.arrival_time)

    if llm is None:
        log.fallback(REASON_LLM_UNAVAILABLE, route=request.route)
        return build_fallback_result(request, REASON_LLM_UNAVAILABLE, travel_time)

    prompt = build_suggestion_prompt(
        departure=request.departure,
        destination=request.destination,
        departure_time=request.departure_time,
        arrival_time=request.arrival_time,
        moods=request.moods,
        style=request.style,
        travel_time=travel_time,
    )

    started = time.time()
    log.step_start("llm_suggest")
    try:
        content = _ask_llm(llm, prompt)
    except Exception as exc:
        log.error("llm_suggest", f"{type(exc).__name__}: {exc}")
        log.fallback(REASON_LLM_ERROR, route=request.route)
        return build_fallback_result(request, REASON_LLM_ERROR, travel_time)
    finally:
        log.step_end("llm_suggest")

    log.llm_call(
        describe_llm(llm),
        model=getattr(llm, "model_name", None),
        latency_ms=round((time.time() - started) * 1000, 1),
        response_chars=len(content or ""),
    )

    try:
        entries = coerce_entries(parse_llm_suggestions(content))
        if not entries:
            raise LlmResponseError("response contained no usable suggestions")
    except LlmResponseError as exc:
        log.error("parse_suggestions", str(exc))
        log.fallback(REASON_INVALID_RESPONSE, route=request.route)
        return build_fallback_result(request, REASON_INVALID_RESPONSE, travel_time)

    return AiSuggestionResult(
        travel_time=travel_time,
        route=request.route,
        style=request.style,
        suggestions=entries,
    )


__all__ = [
    "REASON_INVALID_RESPONSE",
    "REASON_LLM_ERROR",
    "REASON_LLM_UNAVAILABLE",
    "build_fallback_result",
    "generate_suggestions",
    "message_text",
    "parse_llm_suggestions",
    "strip_code_fence",
]
