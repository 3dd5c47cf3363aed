"""ChatProvider abstract interface."""

from abc import ABC, abstractmethod

from rehearsal.providers.base import ChatMessage, ChatResponse


class ChatProvider(ABC):
    """Produces the simulated character's next reply.

    Implementations perform exactly one request per call; retrying is the
    ResilientCallExecutor's job.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name."""

    @abstractmethod
    async def complete(
        self,
        system: str,
        messages: list[ChatMessage],
    ) -> ChatResponse:
        """Generate the next assistant reply.

        Args:
            system: Instruction context (the character brief)
            messages: Ordered role/content transcript ending with the
                trainee's newest message

        Raises:
            RetryableTransportError: Network failure, 5xx or 429
            TerminalProviderError: Other client errors, malformed reply,
                or missing configuration
        """

    async def close(self) -> None:  # noqa: B027
        """Release connections. No-op unless the provider holds any."""
