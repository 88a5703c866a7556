import httpx
import pytest
from fastapi.testclient import TestClient

from app import app


@pytest.fixture(autouse=True)
def gemini_env(monkeypatch):
    # Keep a developer's local .env out of the tests.
    monkeypatch.setattr("gemini_chat.load_dotenv", lambda *args, **kwargs: False)
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    for name in ("GEMINI_MODEL", "GEMINI_API_BASE", "GEMINI_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def upstream(monkeypatch):
    """Replace the outbound Gemini call with a canned response or exception."""
    calls: list[dict] = []

    def install(response: httpx.Response | Exception) -> list[dict]:
        async def fake_generate_content(prompt, api_key, **kwargs):
            calls.append({"prompt": prompt, "api_key": api_key})
            if isinstance(response, Exception):
                raise response
            return response

        monkeypatch.setattr("api.generate.service.generate_content", fake_generate_content)
        return calls

    return install


def _gemini_result(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.fixture
def gemini_result():
    """Build a generateContent result whose first candidate holds ``text``."""
    return _gemini_result
