"""Environment-driven runtime settings."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


def _is_enabled(value: str | None) -> bool:
    return bool(value and value.strip().lower() in _TRUTHY)


def _is_configured(value: str | None) -> bool:
    return bool(value and value.strip())


def _int_env(name: str, default: int) -> int:
    raw = str(os.getenv(name) or "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def resolve_llm_provider() -> str:
    if _is_configured(os.getenv("GEMINI_API_KEY")):
        return "gemini"
    if _is_configured(os.getenv("OPENAI_API_KEY")):
        return "openai"
    if _is_configured(os.getenv("LLM_API_KEY")):
        return "llm_compatible"
    return "template"


def resolve_cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    origins = [item.strip() for item in raw.split(",") if item.strip()]
    return origins or ["*"]


class Settings(BaseModel):
    environment: str = Field(default="development")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=10000)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    rate_limit_max: int = Field(default=60)
    rate_limit_window: int = Field(default=60)
    llm_provider: str = Field(default="template")
    llm_timeout_seconds: int = Field(default=30)
    enable_docs: bool = Field(default=False)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


def get_settings() -> Settings:
    """Read settings from the environment on every call."""
    return Settings(
        environment=str(os.getenv("APP_ENV") or "development").strip(),
        host=str(os.getenv("HOST") or "0.0.0.0").strip(),
        port=_int_env("PORT", 10000),
        cors_origins=resolve_cors_origins(),
        rate_limit_max=_int_env("RATE_LIMIT_MAX", 60),
        rate_limit_window=_int_env("RATE_LIMIT_WINDOW", 60),
        llm_provider=resolve_llm_provider(),
        llm_timeout_seconds=_int_env("LLM_TIMEOUT_SECONDS", 30),
        enable_docs=_is_enabled(os.getenv("ENABLE_DOCS")),
    )


__all__ = ["Settings", "get_settings", "resolve_cors_origins", "resolve_llm_provider"]
