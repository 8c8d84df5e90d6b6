import threading
from types import SimpleNamespace

import pytest


class FakeOpenAIRecorder:
    """Stands in for openai.OpenAI / openai.AsyncOpenAI and records every use."""

    def __init__(self) -> None:
        self.clients: list[dict] = []
        self.requests: list[dict] = []
        self.request_keys: list[str] = []
        self.content: str | None = "Resumen de prueba"
        self.choices: list | None = None      # overrides content when set
        self.error: Exception | None = None
        self.barrier: threading.Barrier | None = None

    def _respond(self, api_key, kwargs: dict):
        if self.barrier is not None:
            self.barrier.wait()
        self.requests.append(kwargs)
        self.request_keys.append(api_key)
        if self.error is not None:
            raise self.error
        if self.choices is not None:
            return SimpleNamespace(choices=self.choices)
        message = SimpleNamespace(role="assistant", content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)])

    def sync_client(self, api_key=None, **kwargs):
        self.clients.append({"api_key": api_key, "async": False})
        return SimpleNamespace(
            chat=SimpleNamespace(completions=SimpleNamespace(
                create=lambda **kw: self._respond(api_key, kw),
            ))
        )

    def async_client(self, api_key=None, **kwargs):
        self.clients.append({"api_key": api_key, "async": True})

        async def create(**kw):
            return self._respond(api_key, kw)

        return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


class FakeGenAIRecorder:
    """Stands in for google.genai.Client; each request records its client's key."""

    def __init__(self) -> None:
        self.clients: list[str] = []
        self.requests: list[dict] = []
        self.text: str | None = "Resumen de Gemini"
        self.error: Exception | None = None
        self.barrier: threading.Barrier | None = None

    def _respond(self, api_key, model=None, contents=None, config=None, **kw):
        if self.barrier is not None:
            self.barrier.wait()
        self.requests.append({
            "api_key": api_key,
            "model": model,
            "contents": contents,
            "config": config,
            "async": kw.pop("_async", False),
        })
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)

    def client(self, api_key=None, **kwargs):
        self.clients.append(api_key)

        async def generate_content_async(**kw):
            return self._respond(api_key, _async=True, **kw)

        return SimpleNamespace(
            models=SimpleNamespace(generate_content=lambda **kw: self._respond(api_key, **kw)),
            aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content_async)),
        )

    @property
    def prompts(self) -> list[str]:
        return [r["contents"] for r in self.requests]

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def fake_openai(monkeypatch):
    recorder = FakeOpenAIRecorder()
    monkeypatch.setattr("openai.OpenAI", recorder.sync_client)
    monkeypatch.setattr("openai.AsyncOpenAI", recorder.async_client)
    return recorder


@pytest.fixture
def fake_gemini(monkeypatch):
    recorder = FakeGenAIRecorder()
    monkeypatch.setattr("google.genai.Client", recorder.client)
    return recorder


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "REVIEW_SUMMARY_PROVIDER",
        "GEMINI_API_KEY",
        "GOOGLE_API_KEY",
        "OPENAI_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
