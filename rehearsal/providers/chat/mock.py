"""Mock chat provider for testing."""

from collections.abc import Sequence
from typing import Any

from rehearsal.providers.base import ChatMessage, ChatResponse
from rehearsal.providers.chat.base import ChatProvider


class MockChatProvider(ChatProvider):
    """Chat provider returning scripted replies without network calls.

    ``failures`` is consumed first: each entry is raised on one call,
    letting tests rig transient or terminal errors before a success.
    """

    def __init__(
        self,
        default_response: str = "Mock reply",
        responses: dict[str, str] | None = None,
        failures: Sequence[BaseException] = (),
    ) -> None:
        self._default_response = default_response
        self._responses = responses or {}
        self._failures = list(failures)
        self._call_history: list[dict[str, Any]] = []

    @property
    def provider_name(self) -> str:
        return "mock"

    @property
    def call_history(self) -> list[dict[str, Any]]:
        """Return history of calls for testing assertions."""
        return self._call_history

    def set_response(self, trigger: str, response: str) -> None:
        """Reply with ``response`` when the last message equals ``trigger``."""
        self._responses[trigger] = response

    def fail_next(self, *errors: BaseException) -> None:
        """Raise each of ``errors`` on the next calls, in order."""
        self._failures.extend(errors)

    async def complete(
        self,
        system: str,
        messages: list[ChatMessage],
    ) -> ChatResponse:
        self._call_history.append({"system": system, "messages": list(messages)})

        if self._failures:
            raise self._failures.pop(0)

        text = self._default_response
        if messages and messages[-1].content in self._responses:
            text = self._responses[messages[-1].content]

        return ChatResponse(text=text, model="mock-model", stop_reason="end_turn")
