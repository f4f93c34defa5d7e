"""LLM factory provider-resolution tests."""

from __future__ import annotations

from journey.config.settings import resolve_llm_provider
from journey.infrastructure import llm_factory


def test_template_mode_without_keys():
    assert llm_factory.get_llm() is None
    assert not llm_factory.is_llm_available()
    assert resolve_llm_provider() == "template"


def test_gemini_takes_priority(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-openai-test-000000")
    monkeypatch.setenv("GEMINI_API_KEY", "gemini-test-key")
    api_key, base_url, model = llm_factory._resolve_config()
    assert api_key == "gemini-test-key"
    assert "generativelanguage.googleapis.com" in base_url
    assert model.startswith("gemini")
    assert resolve_llm_provider() == "gemini"


def test_model_and_base_url_override(monkeypatch):
    monkeypatch.setenv("LLM_API_KEY", "compat-key")
    monkeypatch.setenv("LLM_BASE_URL", "http://localhost:8080/v1")
    monkeypatch.setenv("LLM_MODEL", "local-model")
    assert llm_factory._resolve_config() == ("compat-key", "http://localhost:8080/v1", "local-model")
    assert resolve_llm_provider() == "llm_compatible"


def test_client_is_cached_until_reset(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-openai-test-000000")
    first = llm_factory.get_llm()
    assert first is not None
    assert llm_factory.get_llm() is first
    llm_factory.reset_llm()
    monkeypatch.delenv("OPENAI_API_KEY")
    assert llm_factory.get_llm() is None


def test_whitespace_key_is_not_configured(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "   ")
    assert resolve_llm_provider() == "template"
    assert not llm_factory.is_llm_available()
    assert llm_factory.get_llm() is None


def test_client_uses_settings_timeout_and_provider(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", " gemini-test-key ")
    monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "7")
    llm = llm_factory.get_llm()
    assert llm.request_timeout == 7
    assert llm.model_name == "gemini-2.0-flash"
    assert llm_factory.describe_llm(llm) == "gemini"
    assert llm_factory.describe_llm(object()) == "object"
