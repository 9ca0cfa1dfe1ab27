from types import SimpleNamespace

import pytest
from google.genai import errors

from services import gemini_client
from services.ai_output.errors import AIInvocationError


def _fake_client(result=None, exc=None):
    async def generate_content(**kwargs):
        if exc is not None:
            raise exc
        return result

    return SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))


class TestGenerateText:
    @pytest.mark.asyncio
    async def test_missing_key_is_configuration_error(self, monkeypatch):
        monkeypatch.setattr(gemini_client.settings, "gemini_api_key", "")
        monkeypatch.setattr(gemini_client, "_client", None)
        with pytest.raises(AIInvocationError) as exc_info:
            await gemini_client.generate_text("hello")
        assert exc_info.value.kind == "configuration"

    @pytest.mark.asyncio
    async def test_returns_raw_text(self, monkeypatch):
        fenced = '```json\n{"a": 1}\n```'
        monkeypatch.setattr(gemini_client, "get_client", lambda: _fake_client(SimpleNamespace(text=fenced)))
        assert await gemini_client.generate_text("hello") == fenced

    @pytest.mark.asyncio
    async def test_empty_response_text(self, monkeypatch):
        monkeypatch.setattr(gemini_client, "get_client", lambda: _fake_client(SimpleNamespace(text=None)))
        assert await gemini_client.generate_text("hello") == ""

    @pytest.mark.asyncio
    async def test_client_error(self, monkeypatch):
        exc = errors.ClientError(429, {"error": {"code": 429, "message": "quota", "status": "RESOURCE_EXHAUSTED"}})
        monkeypatch.setattr(gemini_client, "get_client", lambda: _fake_client(exc=exc))
        with pytest.raises(AIInvocationError) as exc_info:
            await gemini_client.generate_text("hello")
        assert exc_info.value.kind == "client"

    @pytest.mark.asyncio
    async def test_transport_error_is_network(self, monkeypatch):
        monkeypatch.setattr(gemini_client, "get_client", lambda: _fake_client(exc=TimeoutError("timed out")))
        with pytest.raises(AIInvocationError) as exc_info:
            await gemini_client.generate_text("hello")
        assert exc_info.value.kind == "network"
        assert "timed out" in str(exc_info.value)


class TestGetClient:
    def test_client_built_once(self, monkeypatch):
        monkeypatch.setattr(gemini_client.settings, "gemini_api_key", "test-key")
        monkeypatch.setattr(gemini_client, "_client", None)
        first = gemini_client.get_client()
        assert first is not None
        assert gemini_client.get_client() is first

    def test_no_key_no_client(self, monkeypatch):
        monkeypatch.setattr(gemini_client.settings, "gemini_api_key", "")
        monkeypatch.setattr(gemini_client, "_client", None)
        assert gemini_client.get_client() is None
