"""Store interfaces for the conversation domain.

- SessionStore: conversation id -> character brief, with idle eviction
- TranscriptStore: append-only persisted transcript per conversation
- ScenarioSource: read-only scenario documents
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

from rehearsal.conversation.models import (
    CharacterBrief,
    ConversationSession,
    Exchange,
    Scenario,
)

BriefBuilder = Callable[[], Awaitable[CharacterBrief]]


class SessionStore(ABC):
    """Maps conversation ids to their character brief.

    Owned by whoever constructs it and injected into the orchestrator;
    shared by all conversations in the process.
    """

    @abstractmethod
    async def resolve(
        self,
        conversation_id: str | None,
        build_brief: BriefBuilder,
    ) -> ConversationSession:
        """Return the session for ``conversation_id``, creating one if needed.

        A known id has its activity refreshed and keeps its stored brief;
        ``build_brief`` is only awaited when the id is absent or unknown,
        in which case a new id is minted.
        """

    @abstractmethod
    async def sweep(self) -> None:
        """Evict every session idle for at least the idle window."""

    @abstractmethod
    async def get(self, conversation_id: str) -> ConversationSession | None:
        """Get a session without refreshing its activity."""

    @abstractmethod
    async def count(self) -> int:
        """Number of sessions currently held."""


class TranscriptStore(ABC):
    """Persistence collaborator: one append-only transcript per conversation.

    Implementations raise PersistenceUnavailableError when the backing
    store cannot be reached.
    """

    @abstractmethod
    async def append(self, conversation_id: str, exchange: Exchange) -> None:
        """Append an exchange to the conversation's transcript."""

    @abstractmethod
    async def list(self, conversation_id: str) -> list[Exchange]:
        """Return the transcript in chronological order (empty if unknown)."""


class ScenarioSource(ABC):
    """Read-only source of scenario documents."""

    @abstractmethod
    async def get(self, scenario_id: str) -> Scenario:
        """Get a scenario.

        Raises:
            ScenarioNotFoundError: No scenario with this id
        """
