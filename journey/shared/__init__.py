"""Shared cross-layer types and exceptions."""

from journey.shared.exceptions import ExternalServiceError, LlmResponseError

__all__ = ["ExternalServiceError", "LlmResponseError"]
