"""In-process counters for the suggestion endpoint."""

from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass
class _LatencyAgg:
    total_ms: float = 0.0
    count: int = 0
    max_ms: float = 0.0

    def add(self, value_ms: float) -> None:
        val = max(0.0, float(value_ms))
        self.total_ms += val
        self.count += 1
        if val > self.max_ms:
            self.max_ms = val

    def snapshot(self) -> dict[str, float]:
        avg_ms = (self.total_ms / self.count) if self.count else 0.0
        return {
            "count": self.count,
            "avg_ms": round(avg_ms, 2),
            "max_ms": round(self.max_ms, 2),
        }


class SuggestionMetrics:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._total_requests = 0
        self._source_counts: dict[str, int] = {}
        self._fallback_reasons: dict[str, int] = {}
        self._style_counts: dict[str, int] = {}
        self._latency = _LatencyAgg()

    def record(self, *, source: str, style: str, latency_ms: float, fallback_reason: str = "") -> None:
        key_source = source or "unknown"
        key_style = style or "unknown"
        with self._lock:
            self._total_requests += 1
            self._source_counts[key_source] = self._source_counts.get(key_source, 0) + 1
            self._style_counts[key_style] = self._style_counts.get(key_style, 0) + 1
            if fallback_reason:
                self._fallback_reasons[fallback_reason] = self._fallback_reasons.get(fallback_reason, 0) + 1
            self._latency.add(latency_ms)

    def snapshot(self) -> dict[str, object]:
        with self._lock:
            return {
                "total_requests": self._total_requests,
                "sources": dict(self._source_counts),
                "fallback_reasons": dict(self._fallback_reasons),
                "styles": dict(self._style_counts),
                "latency": self._latency.snapshot(),
            }

    def reset(self) -> None:
        with self._lock:
            self._total_requests = 0
            self._source_counts.clear()
            self._fallback_reasons.clear()
            self._style_counts.clear()
            self._latency = _LatencyAgg()


_metrics = SuggestionMetrics()


def get_suggestion_metrics() -> SuggestionMetrics:
    return _metrics


__all__ = ["SuggestionMetrics", "get_suggestion_metrics"]
