"""In-process observability helpers."""

from journey.observability.suggestion_metrics import SuggestionMetrics, get_suggestion_metrics

__all__ = ["SuggestionMetrics", "get_suggestion_metrics"]
