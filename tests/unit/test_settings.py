"""Environment settings tests."""

from __future__ import annotations

from journey.config.settings import get_settings


def test_defaults():
    settings = get_settings()
    assert settings.environment == "development"
    assert settings.port == 10000
    assert settings.cors_origins == ["*"]
    assert settings.llm_provider == "template"
    assert not settings.is_production


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("APP_ENV", "Production")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("RATE_LIMIT_MAX", "5")
    monkeypatch.setenv("ENABLE_DOCS", "yes")
    settings = get_settings()
    assert settings.is_production
    assert settings.port == 8080
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.rate_limit_max == 5
    assert settings.enable_docs


def test_bad_integer_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    assert get_settings().port == 10000
