"""Unit tests for the text-generation backends (HTTP client and ChatOllama)."""
from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from focus.core.llm import TextRequest, reply_text
from infra.llm.http_text import HttpTextService
from infra.llm.ollama import OllamaTextService


@pytest.mark.unit
class TestReplyText:
    def test_first_non_empty_field_wins(self):
        assert reply_text({"reply": "  ", "text": "b", "message": "c"}) == "b"

    def test_reply_preferred(self):
        assert reply_text({"reply": "a", "text": "b"}) == "a"

    def test_string_payload(self):
        assert reply_text("raw") == "raw"

    @pytest.mark.parametrize("payload", [None, 3, [], {}, {"reply": 5}, {"other": "x"}])
    def test_no_text(self, payload):
        assert reply_text(payload) == ""


@pytest.mark.unit
class TestHttpTextService:
    @pytest.mark.asyncio
    async def test_posts_request_with_bearer_token(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers.get("authorization")
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"reply": '{"titles": ["a"]}'})

        service = HttpTextService("http://chat.local/", token="secret", transport=httpx.MockTransport(handler))
        payload = await service.invoke(TextRequest(message="hello", json_mode=True))

        assert payload == {"reply": '{"titles": ["a"]}'}
        assert seen["url"] == "http://chat.local/chat/enhanced"
        assert seen["auth"] == "Bearer secret"
        assert seen["body"] == {"message": "hello", "lang": "hu", "mode": "learning", "json_mode": True}

    @pytest.mark.asyncio
    async def test_no_authorization_without_token(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("authorization")
            return httpx.Response(200, json={"text": "ok"})

        service = HttpTextService("http://chat.local", transport=httpx.MockTransport(handler))
        await service.invoke(TextRequest(message="hi"))
        assert seen["auth"] is None

    @pytest.mark.asyncio
    async def test_non_object_payload_wrapped(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json="plain"))
        service = HttpTextService("http://chat.local", transport=transport)
        assert await service.invoke(TextRequest(message="hi")) == {"reply": "plain"}

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(503, json={"detail": "down"}))
        service = HttpTextService("http://chat.local", transport=transport)
        with pytest.raises(httpx.HTTPStatusError):
            await service.invoke(TextRequest(message="hi"))


@pytest.mark.unit
class TestOllamaTextService:
    """ChatOllama is patched; no local model is needed."""

    def _patched(self, content):
        mock_chat = MagicMock()
        mock_chat.ainvoke = AsyncMock(return_value=SimpleNamespace(content=content))
        return mock_chat

    @pytest.mark.asyncio
    async def test_json_mode_uses_json_client(self):
        chat = self._patched("chat")
        json_llm = self._patched('{"titles": []}')
        with patch("infra.llm.ollama.ChatOllama", side_effect=[chat, json_llm]) as factory:
            service = OllamaTextService(model="test-model")
            payload = await service.invoke(TextRequest(message="prompt", json_mode=True))

        assert payload == {"reply": '{"titles": []}'}
        json_llm.ainvoke.assert_called_once_with("prompt")
        chat.ainvoke.assert_not_called()
        assert factory.call_args_list[1].kwargs["format"] == "json"

    @pytest.mark.asyncio
    async def test_plain_mode_uses_chat_client(self):
        chat = self._patched("Szia!")
        json_llm = self._patched("{}")
        with patch("infra.llm.ollama.ChatOllama", side_effect=[chat, json_llm]):
            service = OllamaTextService(model="test-model")
            payload = await service.invoke(TextRequest(message="hello"))

        assert payload == {"reply": "Szia!"}
        json_llm.ainvoke.assert_not_called()


@pytest.mark.unit
class TestBootstrap:
    def test_http_backend(self):
        from api.bootstrap import build_plan_generator
        from api.config import Settings

        config = Settings(text_service_backend="http", text_service_url="http://chat.local/", smart_plan_timeout_seconds=3)
        generator = build_plan_generator(config)
        assert isinstance(generator.text_service, HttpTextService)
        assert generator.text_service.base_url == "http://chat.local"
        assert generator.timeout == 3

    def test_ollama_backend(self):
        from api.bootstrap import build_text_service
        from api.config import Settings

        with patch("infra.llm.ollama.ChatOllama"):
            service = build_text_service(Settings(text_service_backend="ollama", ollama_model="m"))
        assert isinstance(service, OllamaTextService)
        assert service.model == "m"

    def test_unknown_backend(self):
        from api.bootstrap import build_text_service
        from api.config import Settings

        with pytest.raises(ValueError):
            build_text_service(Settings(text_service_backend="carrier-pigeon"))
