"""Mock narration provider for testing."""

from collections.abc import Sequence
from typing import Any

from rehearsal.providers.narration.base import NarrationProvider


class MockNarrationProvider(NarrationProvider):
    """Returns ``audio_prefix + text`` bytes; can be rigged to fail."""

    def __init__(
        self,
        audio_prefix: bytes = b"ID3",
        failures: Sequence[BaseException] = (),
    ) -> None:
        self._audio_prefix = audio_prefix
        self._failures = list(failures)
        self._call_history: list[dict[str, Any]] = []

    @property
    def provider_name(self) -> str:
        return "mock"

    @property
    def call_history(self) -> list[dict[str, Any]]:
        return self._call_history

    def fail_next(self, *errors: BaseException) -> None:
        self._failures.extend(errors)

    async def synthesize(self, text: str, voice_id: str | None = None) -> bytes:
        self._call_history.append({"text": text, "voice_id": voice_id})
        if self._failures:
            raise self._failures.pop(0)
        return self._audio_prefix + text.encode()
