"""Chat providers for the simulated character."""

from rehearsal.providers.chat.anthropic import AnthropicChatProvider
from rehearsal.providers.chat.base import ChatProvider
from rehearsal.providers.chat.mock import MockChatProvider

__all__ = [
    "AnthropicChatProvider",
    "ChatProvider",
    "MockChatProvider",
]
