"""NarrationProvider abstract interface."""

from abc import ABC, abstractmethod


class NarrationProvider(ABC):
    """Synthesizes speech for the simulated character's replies."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name."""

    @property
    def media_type(self) -> str:
        """MIME type of the bytes returned by synthesize()."""
        return "audio/mpeg"

    @abstractmethod
    async def synthesize(self, text: str, voice_id: str | None = None) -> bytes:
        """Convert text to audio.

        Args:
            text: Reply text to narrate
            voice_id: Voice override (scenario voice); provider default if None

        Returns:
            Encoded audio payload
        """

    async def close(self) -> None:  # noqa: B027
        """Release connections. No-op unless the provider holds any."""
