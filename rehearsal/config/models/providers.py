"""Chat and narration provider configuration models."""

from typing import Literal

from pydantic import BaseModel, Field, SecretStr

ChatProviderType = Literal["anthropic", "mock"]
NarrationProviderType = Literal["elevenlabs", "mock", "none"]


class ChatProviderConfig(BaseModel):
    """Configuration for the chat (simulated character) provider."""

    provider: ChatProviderType = Field(
        default="anthropic",
        description="Provider type",
    )
    model: str = Field(
        default="claude-3-7-sonnet-20250219",
        description="Model identifier",
    )
    api_key: SecretStr | None = Field(
        default=None,
        description="API key (prefer ANTHROPIC_API_KEY env var)",
    )
    base_url: str = Field(
        default="https://api.anthropic.com",
        description="API base URL",
    )
    api_version: str = Field(
        default="2023-06-01",
        description="Value of the anthropic-version header",
    )
    max_tokens: int = Field(
        default=1000,
        gt=0,
        description="Maximum tokens per reply",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Sampling temperature",
    )


class NarrationProviderConfig(BaseModel):
    """Configuration for the text-to-speech provider."""

    provider: NarrationProviderType = Field(
        default="elevenlabs",
        description="Provider type ('none' disables narration)",
    )
    api_key: SecretStr | None = Field(
        default=None,
        description="API key (prefer ELEVENLABS_API_KEY env var)",
    )
    base_url: str = Field(
        default="https://api.elevenlabs.io",
        description="API base URL",
    )
    voice_id: str | None = Field(
        default=None,
        description="Default voice when the scenario does not name one",
    )
    model_id: str = Field(
        default="eleven_monolingual_v1",
        description="Speech model identifier",
    )
    stability: float = Field(default=0.75, ge=0.0, le=1.0)
    similarity_boost: float = Field(default=0.75, ge=0.0, le=1.0)


class ProvidersConfig(BaseModel):
    """Configuration for external providers."""

    chat: ChatProviderConfig = Field(
        default_factory=ChatProviderConfig,
        description="Chat provider",
    )
    narration: NarrationProviderConfig = Field(
        default_factory=NarrationProviderConfig,
        description="Narration provider",
    )
