"""Tests for AnthropicChatProvider against a mocked HTTP transport."""

import json

import httpx
import pytest

from rehearsal.providers import (
    AnthropicChatProvider,
    ChatMessage,
    MalformedResponseError,
    RateLimitError,
    RetryableTransportError,
    ServiceNotConfiguredError,
    TerminalProviderError,
)

MESSAGES = [
    ChatMessage(role="user", content="Welcome in!"),
    ChatMessage(role="assistant", content="Thanks, lovely place."),
    ChatMessage(role="user", content="Can I pour you a Pinot?"),
]


def _provider(handler, **kwargs) -> AnthropicChatProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AnthropicChatProvider(api_key="test-key", client=client, **kwargs)


class TestAnthropicChatProvider:
    @pytest.mark.asyncio
    async def test_sends_messages_request(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(
                200,
                json={
                    "model": "claude-test",
                    "stop_reason": "end_turn",
                    "content": [{"type": "text", "text": "Yes please!"}],
                },
            )

        provider = _provider(handler, model="claude-test", max_tokens=500, temperature=0.2)
        response = await provider.complete("You are a guest.", MESSAGES)

        assert response.text == "Yes please!"
        assert response.model == "claude-test"
        assert response.stop_reason == "end_turn"

        request = captured[0]
        assert request.url == "https://api.anthropic.com/v1/messages"
        assert request.headers["x-api-key"] == "test-key"
        assert request.headers["anthropic-version"] == "2023-06-01"
        body = json.loads(request.content)
        assert body["system"] == "You are a guest."
        assert body["max_tokens"] == 500
        assert body["temperature"] == 0.2
        assert [m["role"] for m in body["messages"]] == ["user", "assistant", "user"]

    @pytest.mark.asyncio
    async def test_missing_key_raises_before_io(self, monkeypatch) -> None:
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(200)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        provider = AnthropicChatProvider(client=client)

        with pytest.raises(ServiceNotConfiguredError):
            await provider.complete("system", MESSAGES)
        assert calls == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status", "error_type"),
        [
            (429, RateLimitError),
            (500, RetryableTransportError),
            (529, RetryableTransportError),
            (400, TerminalProviderError),
            (401, TerminalProviderError),
        ],
    )
    async def test_status_mapping(self, status, error_type) -> None:
        provider = _provider(
            lambda request: httpx.Response(status, json={"error": {"message": "raw"}})
        )

        with pytest.raises(error_type) as exc_info:
            await provider.complete("system", MESSAGES)

        assert exc_info.value.status_code == status
        assert "raw" not in exc_info.value.user_message

    @pytest.mark.asyncio
    async def test_rejected_credentials_message(self) -> None:
        provider = _provider(lambda request: httpx.Response(401))

        with pytest.raises(TerminalProviderError) as exc_info:
            await provider.complete("system", MESSAGES)

        assert exc_info.value.user_message == "The chat service rejected its credentials."

    @pytest.mark.asyncio
    async def test_transport_error_is_retryable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(RetryableTransportError):
            await _provider(handler).complete("system", MESSAGES)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [{"content": []}, {"content": [{"type": "text"}]}, {"unexpected": True}],
    )
    async def test_malformed_body(self, payload) -> None:
        provider = _provider(lambda request: httpx.Response(200, json=payload))

        with pytest.raises(MalformedResponseError):
            await provider.complete("system", MESSAGES)

    @pytest.mark.asyncio
    async def test_non_json_body(self) -> None:
        provider = _provider(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(MalformedResponseError):
            await provider.complete("system", MESSAGES)
