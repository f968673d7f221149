# tests/test_chat_client.py
import json

import httpx
import pytest

from vocab_app.chat_client import ChatClient, ChatClientError
from vocab_app.config import Settings


def make_client(handler, api_key="sk-test"):
    settings = Settings(chat_api_base="https://llm.example/v1/", chat_api_key=api_key, chat_model="tiny")
    return ChatClient(settings, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
class TestChatClient:

    async def test_posts_prompt_and_returns_content(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": "hello"}}]})

        text = await make_client(handler).complete("Say hello")

        assert text == "hello"
        assert seen["url"] == "https://llm.example/v1/chat/completions"
        assert seen["auth"] == "Bearer sk-test"
        assert seen["body"] == {"model": "tiny", "messages": [{"role": "user", "content": "Say hello"}]}

    async def test_null_content_is_returned_as_none(self):
        def handler(request):
            return httpx.Response(200, json={"choices": [{"message": {"content": None}}]})

        assert await make_client(handler).complete("x") is None

    async def test_http_error_propagates(self):
        def handler(request):
            return httpx.Response(429, json={"error": "slow down"})

        with pytest.raises(httpx.HTTPStatusError):
            await make_client(handler).complete("x")

    async def test_unexpected_payload_raises(self):
        def handler(request):
            return httpx.Response(200, json={"choices": []})

        with pytest.raises(ChatClientError):
            await make_client(handler).complete("x")

    async def test_missing_api_key_raises_before_calling(self):
        def handler(request):
            raise AssertionError("no request expected")

        with pytest.raises(ChatClientError):
            await make_client(handler, api_key=None).complete("x")
