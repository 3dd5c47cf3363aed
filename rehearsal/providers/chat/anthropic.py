"""Anthropic Messages API chat provider."""

import os
import time
from typing import Any

import httpx

from rehearsal.observability.logging import get_logger
from rehearsal.providers.base import ChatMessage, ChatResponse
from rehearsal.providers.chat.base import ChatProvider
from rehearsal.providers.errors import (
    MalformedResponseError,
    RateLimitError,
    RetryableTransportError,
    ServiceNotConfiguredError,
    TerminalProviderError,
)

logger = get_logger(__name__)


class AnthropicChatProvider(ChatProvider):
    """Chat provider calling ``POST /v1/messages`` over httpx.

    HTTP failures are mapped onto the provider error taxonomy so the
    executor can classify them; the response body is logged but never put
    into a user-facing message.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "claude-3-7-sonnet-20250219",
        base_url: str = "https://api.anthropic.com",
        api_version: str = "2023-06-01",
        max_tokens: int = 1000,
        temperature: float = 0.7,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            api_key: API key (defaults to ANTHROPIC_API_KEY env var)
            model: Model identifier
            base_url: API base URL
            api_version: anthropic-version header value
            max_tokens: Maximum tokens per reply
            temperature: Sampling temperature
            client: Shared httpx client (one is created lazily otherwise)
        """
        self._api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._api_version = api_version
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._client = client

    @property
    def provider_name(self) -> str:
        return "anthropic"

    @property
    def model(self) -> str:
        return self._model

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    async def complete(
        self,
        system: str,
        messages: list[ChatMessage],
    ) -> ChatResponse:
        if not self._api_key:
            raise ServiceNotConfiguredError("chat")

        body: dict[str, Any] = {
            "model": self._model,
            "max_tokens": self._max_tokens,
            "temperature": self._temperature,
            "system": system,
            "messages": [m.model_dump() for m in messages],
        }
        headers = {
            "x-api-key": self._api_key,
            "anthropic-version": self._api_version,
            "content-type": "application/json",
        }

        start_time = time.perf_counter()
        try:
            response = await self._ensure_client().post(
                f"{self._base_url}/v1/messages",
                json=body,
                headers=headers,
            )
        except httpx.TransportError as e:
            raise RetryableTransportError(
                f"Anthropic transport error: {type(e).__name__}: {e}"
            ) from e

        latency_ms = (time.perf_counter() - start_time) * 1000
        self._raise_for_status(response)

        try:
            data = response.json()
            text = data["content"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise MalformedResponseError(f"Unexpected Anthropic response: {e}") from e
        if not isinstance(text, str):
            raise MalformedResponseError("Anthropic reply text is not a string")

        logger.debug(
            "chat_complete",
            model=self._model,
            latency_ms=round(latency_ms, 2),
            reply_length=len(text),
        )

        return ChatResponse(
            text=text,
            model=data.get("model", self._model),
            stop_reason=data.get("stop_reason"),
            metadata={"latency_ms": latency_ms, "provider": self.provider_name},
        )

    def _raise_for_status(self, response: httpx.Response) -> None:
        status = response.status_code
        if status < 400:
            return

        logger.warning(
            "chat_provider_http_error",
            status_code=status,
            response_preview=response.text[:200],
        )
        if status == 429:
            raise RateLimitError("Anthropic rate limited", status_code=status)
        if status >= 500:
            raise RetryableTransportError(
                f"Anthropic server error: {status}", status_code=status
            )
        if status in (401, 403):
            raise TerminalProviderError(
                f"Anthropic rejected credentials: {status}",
                status_code=status,
                user_message="The chat service rejected its credentials.",
            )
        raise TerminalProviderError(f"Anthropic client error: {status}", status_code=status)

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
