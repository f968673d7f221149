# vocab_app/chat_client.py
from __future__ import annotations
from typing import Any, Dict, Optional
import httpx

from .config import Settings


class ChatClientError(RuntimeError):
    pass


def _content(data: Any) -> Optional[str]:
    # OpenAI-style body: {"choices": [{"message": {"content": "..."}}]}
    try:
        message = data["choices"][0]["message"]
    except (KeyError, IndexError, TypeError):
        raise ChatClientError(f"Unexpected chat completion payload: {data!r}")
    if not isinstance(message, dict):
        raise ChatClientError(f"Unexpected chat completion message: {message!r}")
    content = message.get("content")
    return content if isinstance(content, str) else None


class ChatClient:
    """Prompt in, text out, over an OpenAI-compatible /chat/completions endpoint."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = settings.chat_api_base.rstrip("/")
        self.api_key = settings.chat_api_key
        self.model = settings.chat_model
        self.timeout = settings.chat_timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "accept": "application/json",
            "content-type": "application/json",
            "authorization": f"Bearer {self.api_key}",
        }

    async def complete(self, prompt: str) -> Optional[str]:
        if not self.api_key:
            raise ChatClientError("CHAT_API_KEY is not set")
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            r = await client.post(f"{self.base_url}/chat/completions", headers=self._headers(), json=payload)
            r.raise_for_status()
            return _content(r.json())
