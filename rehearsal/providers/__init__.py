"""External providers: chat (simulated character) and narration (speech).

Every outbound call goes through ResilientCallExecutor, which retries
transient failures with exponential backoff and translates the rest into
user-presentable ProviderErrors.
"""

from rehearsal.providers.base import ChatMessage, ChatResponse
from rehearsal.providers.chat import AnthropicChatProvider, ChatProvider, MockChatProvider
from rehearsal.providers.errors import (
    MalformedResponseError,
    ProviderError,
    RateLimitError,
    RetryableTransportError,
    RetryExhaustedError,
    ServiceNotConfiguredError,
    TerminalProviderError,
)
from rehearsal.providers.factory import create_chat_provider, create_narration_provider
from rehearsal.providers.narration import (
    ElevenLabsNarrationProvider,
    MockNarrationProvider,
    NarrationProvider,
)
from rehearsal.providers.retry import ErrorClass, ResilientCallExecutor, classify_error

__all__ = [
    # Models
    "ChatMessage",
    "ChatResponse",
    # Errors
    "MalformedResponseError",
    "ProviderError",
    "RateLimitError",
    "RetryableTransportError",
    "RetryExhaustedError",
    "ServiceNotConfiguredError",
    "TerminalProviderError",
    # Retry
    "ErrorClass",
    "ResilientCallExecutor",
    "classify_error",
    # Chat
    "AnthropicChatProvider",
    "ChatProvider",
    "MockChatProvider",
    # Narration
    "ElevenLabsNarrationProvider",
    "MockNarrationProvider",
    "NarrationProvider",
    # Factories
    "create_chat_provider",
    "create_narration_provider",
]
