"""HTTP client for the suggestion backend with an offline fallback.

One POST per user action. When the backend cannot be reached or answers
with something unusable, the suggestions are computed locally from the
catalog so the caller always has something to render.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import httpx

from journey.application.contracts import SuggestionRequest
from journey.application.generate_suggestions import build_fallback_result
from journey.domain.models import SuggestionResult
from journey.security.redact import redact_sensitive
from journey.services.suggestion_presenter import normalize_payload
from journey.shared.exceptions import ExternalServiceError

_logger = logging.getLogger("journey-ai.client")

DEFAULT_API_URL = "http://localhost:10000"
SUGGESTIONS_PATH = "/api/generate-suggestions"
REASON_BACKEND_UNREACHABLE = "backend_unreachable"


@dataclass(frozen=True)
class FetchOutcome:
    result: SuggestionResult
    error: Optional[str] = None


def request_payload(request: SuggestionRequest) -> dict:
    return {
        "departure": request.departure,
        "destination": request.destination,
        "departureTime": request.departure_time,
        "arrivalTime": request.arrival_time,
        "mood": [mood.value for mood in request.moods],
        "suggestionStyle": request.style.value,
    }


class SuggestionClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or os.getenv("JOURNEY_API_URL") or DEFAULT_API_URL).rstrip("/")
        self._client = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def __enter__(self) -> "SuggestionClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _post(self, request: SuggestionRequest) -> SuggestionResult:
        resp = self._client.post(SUGGESTIONS_PATH, json=request_payload(request))
        resp.raise_for_status()
        body = resp.json()
        if not isinstance(body, dict) or not body.get("success"):
            error = body.get("error") if isinstance(body, dict) else None
            raise ExternalServiceError("backend", str(error or "API error"))
        return normalize_payload(body.get("data"), request)

    def fetch(self, request: SuggestionRequest) -> FetchOutcome:
        try:
            return FetchOutcome(result=self._post(request))
        except httpx.HTTPStatusError as e:
            message = f"HTTP {e.response.status_code}: {e.response.reason_phrase}"
        except httpx.HTTPError as e:
            message = f"Network error: {redact_sensitive(str(e))}"
        except (ExternalServiceError, ValueError) as e:
            message = redact_sensitive(str(e))

        _logger.warning("Suggestion backend failed, using offline suggestions: %s", message)
        return FetchOutcome(
            result=build_fallback_result(request, REASON_BACKEND_UNREACHABLE),
            error=message,
        )


__all__ = ["DEFAULT_API_URL", "FetchOutcome", "SuggestionClient", "request_payload"]
