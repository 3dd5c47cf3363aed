"""Factory functions building providers from configuration."""

from rehearsal.config.models.providers import ChatProviderConfig, NarrationProviderConfig
from rehearsal.observability.logging import get_logger
from rehearsal.providers.chat import AnthropicChatProvider, ChatProvider, MockChatProvider
from rehearsal.providers.narration import (
    ElevenLabsNarrationProvider,
    MockNarrationProvider,
    NarrationProvider,
)

logger = get_logger(__name__)


def create_chat_provider(config: ChatProviderConfig) -> ChatProvider:
    """Create the chat provider named by ``config.provider``.

    A missing API key is not an error here: the provider raises
    ServiceNotConfiguredError on first use so the turn can report it.
    """
    if config.provider == "mock":
        return MockChatProvider()

    return AnthropicChatProvider(
        api_key=config.api_key.get_secret_value() if config.api_key else None,
        model=config.model,
        base_url=config.base_url,
        api_version=config.api_version,
        max_tokens=config.max_tokens,
        temperature=config.temperature,
    )


def create_narration_provider(config: NarrationProviderConfig) -> NarrationProvider | None:
    """Create the narration provider, or None when narration is off.

    ElevenLabs counts as configured only when an API key is available
    (from config or ELEVENLABS_API_KEY); otherwise narration is skipped.
    """
    if config.provider == "none":
        return None
    if config.provider == "mock":
        return MockNarrationProvider()

    provider = ElevenLabsNarrationProvider(
        api_key=config.api_key.get_secret_value() if config.api_key else None,
        voice_id=config.voice_id,
        base_url=config.base_url,
        model_id=config.model_id,
        stability=config.stability,
        similarity_boost=config.similarity_boost,
    )
    if not provider.is_configured:
        logger.info("narration_not_configured", provider=config.provider)
        return None
    return provider
