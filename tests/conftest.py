"""pytest global fixtures: isolate tests from real services."""

import pytest


@pytest.fixture(autouse=True)
def no_real_apis(monkeypatch):
    """Disable real LLM providers and shared backends so tests never leave the process."""
    for name in ("GEMINI_API_KEY", "OPENAI_API_KEY", "LLM_API_KEY", "LLM_MODEL", "LLM_BASE_URL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("RATE_LIMIT_REDIS_URL", raising=False)
    monkeypatch.delenv("REDIS_URL", raising=False)
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("JOURNEY_API_URL", raising=False)

    from journey.infrastructure.llm_factory import reset_llm
    from journey.observability.suggestion_metrics import get_suggestion_metrics

    reset_llm()
    get_suggestion_metrics().reset()
    yield
    reset_llm()


class FakeMessage:
    def __init__(self, content: str):
        self.content = content


class FakeLLM:
    """Stands in for ChatOpenAI: records prompts and replays a canned reply."""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    def invoke(self, prompt: str):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return FakeMessage(self.reply)


@pytest.fixture
def fake_llm_factory():
    return FakeLLM
