"""LLM factory: decides from the environment whether an LLM is available.

Supported keys (in priority order):
  GEMINI_API_KEY  -> Google Gemini through its OpenAI-compatible endpoint
  OPENAI_API_KEY  -> OpenAI
  LLM_API_KEY     -> any OpenAI-compatible endpoint (set LLM_BASE_URL)

Optional:
  LLM_MODEL     model name, defaults per provider
  LLM_BASE_URL  custom base_url

Without a key the service runs in template mode and every request is
answered from the static catalog.
"""

from __future__ import annotations

import os
from typing import Any, Optional

from langchain_openai import ChatOpenAI

from journey.config.settings import get_settings, resolve_llm_provider

_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
_GEMINI_DEFAULT_MODEL = "gemini-2.0-flash"
_OPENAI_BASE_URL = "https://api.openai.com/v1"
_OPENAI_DEFAULT_MODEL = "gpt-4o-mini"

# provider -> (key variable, default base_url, default model)
_PROVIDERS: dict[str, tuple[str, str, str]] = {
    "gemini": ("GEMINI_API_KEY", _GEMINI_BASE_URL, _GEMINI_DEFAULT_MODEL),
    "openai": ("OPENAI_API_KEY", _OPENAI_BASE_URL, _OPENAI_DEFAULT_MODEL),
    "llm_compatible": ("LLM_API_KEY", _OPENAI_BASE_URL, _OPENAI_DEFAULT_MODEL),
}


def _resolve_config(provider: Optional[str] = None) -> tuple[str, str, str] | None:
    """Return (api_key, base_url, model) or None."""
    provider = provider or resolve_llm_provider()
    if provider not in _PROVIDERS:
        return None
    key_var, default_base_url, default_model = _PROVIDERS[provider]
    return (
        os.environ[key_var].strip(),
        (os.getenv("LLM_BASE_URL") or "").strip() or default_base_url,
        (os.getenv("LLM_MODEL") or "").strip() or default_model,
    )


# module-level singleton
_llm_instance: Optional[ChatOpenAI] = None
_llm_provider: Optional[str] = None
_llm_resolved: bool = False  # distinguishes "no key" from "not yet built"


def get_llm() -> Optional[ChatOpenAI]:
    """Build the LLM client once per process; None means template mode."""
    global _llm_instance, _llm_provider, _llm_resolved
    if _llm_resolved:
        return _llm_instance

    settings = get_settings()
    cfg = _resolve_config(settings.llm_provider)
    _llm_resolved = True
    if cfg is None:
        _llm_instance = None
        _llm_provider = None
        return None

    api_key, base_url, model = cfg
    # no retries; a failed call goes straight to the catalog
    _llm_instance = ChatOpenAI(
        model=model,
        temperature=0.7,
        api_key=api_key,
        base_url=base_url,
        timeout=settings.llm_timeout_seconds,
        max_retries=0,
    )
    _llm_provider = settings.llm_provider
    return _llm_instance


def describe_llm(llm: Any) -> str:
    """Provider name for the cached client; class name for anything else."""
    if llm is not None and llm is _llm_instance and _llm_provider:
        return _llm_provider
    return type(llm).__name__


def reset_llm() -> None:
    """Drop the cached client (tests and key rotation)."""
    global _llm_instance, _llm_provider, _llm_resolved
    _llm_instance = None
    _llm_provider = None
    _llm_resolved = False


def is_llm_available() -> bool:
    """Whether an LLM key is configured, without building a client."""
    return _resolve_config() is not None
