"""Infrastructure services and cross-cutting utilities."""

from journey.infrastructure.llm_factory import get_llm, is_llm_available, reset_llm
from journey.infrastructure.rate_limiter import get_rate_limiter

__all__ = [
    "get_llm",
    "get_rate_limiter",
    "is_llm_available",
    "reset_llm",
]
