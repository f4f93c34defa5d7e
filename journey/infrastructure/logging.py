"""Structured logging: JSON lines with secret redaction."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional

from journey.security.redact import redact_sensitive


class StructuredLogger:
    """Writes one JSON object per event; every line is redacted before output."""

    def __init__(self, trace_id: Optional[str] = None, output=None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output or sys.stderr
        self._timers: dict[str, float] = {}

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            self._output.write(redact_sensitive(line) + "\n")
            self._output.flush()
        except (OSError, ValueError) as exc:
            fallback = {
                "event": "logger_internal_error",
                "trace_id": self.trace_id,
                "timestamp": time.time(),
                "error": str(exc),
            }
            sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")
            sys.stderr.flush()

    def step_start(self, step: str, **extra: Any) -> None:
        self._timers[step] = time.time()
        self._emit({"event": "step_start", "step": step, **extra})

    def step_end(self, step: str, **extra: Any) -> None:
        start = self._timers.pop(step, time.time())
        duration_ms = round((time.time() - start) * 1000, 1)
        self._emit({"event": "step_end", "step": step, "duration_ms": duration_ms, **extra})

    def llm_call(self, provider: str, **extra: Any) -> None:
        self._emit({"event": "llm_call", "provider": provider, **extra})

    def fallback(self, reason: str, **extra: Any) -> None:
        self._emit({"event": "fallback", "reason": reason, **extra})

    def error(self, step: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "step": step, "error": redact_sensitive(error), **extra})

    def summary(self, **extra: Any) -> None:
        self._emit({"event": "summary", **extra})


def get_logger(trace_id: Optional[str] = None, output=None) -> StructuredLogger:
    """A fresh logger per request so trace ids never leak between requests."""
    return StructuredLogger(trace_id=trace_id, output=output)


__all__ = ["StructuredLogger", "get_logger"]
