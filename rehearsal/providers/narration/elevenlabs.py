"""ElevenLabs text-to-speech narration provider."""

import os

import httpx

from rehearsal.observability.logging import get_logger
from rehearsal.providers.errors import (
    MalformedResponseError,
    RateLimitError,
    RetryableTransportError,
    ServiceNotConfiguredError,
    TerminalProviderError,
)
from rehearsal.providers.narration.base import NarrationProvider

logger = get_logger(__name__)


class ElevenLabsNarrationProvider(NarrationProvider):
    """Narration via ``POST /v1/text-to-speech/{voice_id}``."""

    def __init__(
        self,
        api_key: str | None = None,
        voice_id: str | None = None,
        base_url: str = "https://api.elevenlabs.io",
        model_id: str = "eleven_monolingual_v1",
        stability: float = 0.75,
        similarity_boost: float = 0.75,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            api_key: API key (defaults to ELEVENLABS_API_KEY env var)
            voice_id: Default voice (defaults to ELEVENLABS_VOICE_ID env var)
            base_url: API base URL
            model_id: Speech model identifier
            stability: Voice stability setting
            similarity_boost: Voice similarity setting
            client: Shared httpx client (one is created lazily otherwise)
        """
        self._api_key = api_key or os.environ.get("ELEVENLABS_API_KEY")
        self._voice_id = voice_id or os.environ.get("ELEVENLABS_VOICE_ID")
        self._base_url = base_url.rstrip("/")
        self._model_id = model_id
        self._stability = stability
        self._similarity_boost = similarity_boost
        self._client = client

    @property
    def provider_name(self) -> str:
        return "elevenlabs"

    @property
    def is_configured(self) -> bool:
        """True when an API key is available; the voice may come per call."""
        return bool(self._api_key)

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    async def synthesize(self, text: str, voice_id: str | None = None) -> bytes:
        voice = voice_id or self._voice_id
        if not self._api_key or not voice:
            raise ServiceNotConfiguredError("narration")

        try:
            response = await self._ensure_client().post(
                f"{self._base_url}/v1/text-to-speech/{voice}",
                json={
                    "text": text,
                    "model_id": self._model_id,
                    "voice_settings": {
                        "stability": self._stability,
                        "similarity_boost": self._similarity_boost,
                    },
                },
                headers={
                    "xi-api-key": self._api_key,
                    "accept": self.media_type,
                },
            )
        except httpx.TransportError as e:
            raise RetryableTransportError(
                f"ElevenLabs transport error: {type(e).__name__}: {e}"
            ) from e

        status = response.status_code
        if status == 429:
            raise RateLimitError("ElevenLabs rate limited", status_code=status)
        if status >= 500:
            raise RetryableTransportError(
                f"ElevenLabs server error: {status}", status_code=status
            )
        if status >= 400:
            raise TerminalProviderError(f"ElevenLabs client error: {status}", status_code=status)

        audio = response.content
        if not audio:
            raise MalformedResponseError("ElevenLabs returned an empty audio payload")

        logger.debug("narration_complete", voice_id=voice, audio_bytes=len(audio))
        return audio

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
