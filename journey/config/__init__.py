"""Runtime configuration helpers."""

from journey.config.settings import Settings, get_settings, resolve_llm_provider

__all__ = ["Settings", "get_settings", "resolve_llm_provider"]
