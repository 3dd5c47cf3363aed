"""Conversation exchange pipeline.

ExchangeOrchestrator runs trainee -> character turns on top of:
- SessionStore: per-conversation character brief with idle eviction
- TranscriptStore / ScenarioSource: persistence and scenario collaborators
- PendingExchangeBuffer + ConnectivityMonitor: offline deferral and replay
- TranscriptView: tentative local transcript with confirm / rollback
"""

from rehearsal.conversation.brief import build_character_brief, build_instruction_context
from rehearsal.conversation.connectivity import OFFLINE_BANNER, ConnectivityMonitor
from rehearsal.conversation.errors import (
    ConversationError,
    EmptyMessageError,
    NarrationFailure,
    PersistenceUnavailableError,
    ScenarioNotFoundError,
    TurnFailedError,
)
from rehearsal.conversation.export import export_filename, transcript_to_markdown
from rehearsal.conversation.orchestrator import (
    HISTORY_FAILED_MESSAGE,
    PERSISTENCE_FAILED_MESSAGE,
    ExchangeOrchestrator,
    TurnResult,
)
from rehearsal.conversation.pending import PendingExchange, PendingExchangeBuffer
from rehearsal.conversation.store import ScenarioSource, SessionStore, TranscriptStore
from rehearsal.conversation.stores import (
    InMemoryScenarioSource,
    InMemorySessionStore,
    InMemoryTranscriptStore,
)
from rehearsal.conversation.sweeper import SessionSweeper
from rehearsal.conversation.view import TranscriptView, ViewEntry

__all__ = [
    # Orchestration
    "ExchangeOrchestrator",
    "TurnResult",
    "HISTORY_FAILED_MESSAGE",
    "PERSISTENCE_FAILED_MESSAGE",
    # Stores
    "ScenarioSource",
    "SessionStore",
    "TranscriptStore",
    "InMemoryScenarioSource",
    "InMemorySessionStore",
    "InMemoryTranscriptStore",
    "SessionSweeper",
    # Offline handling
    "ConnectivityMonitor",
    "OFFLINE_BANNER",
    "PendingExchange",
    "PendingExchangeBuffer",
    "TranscriptView",
    "ViewEntry",
    # Brief and export
    "build_character_brief",
    "build_instruction_context",
    "export_filename",
    "transcript_to_markdown",
    # Errors
    "ConversationError",
    "EmptyMessageError",
    "NarrationFailure",
    "PersistenceUnavailableError",
    "ScenarioNotFoundError",
    "TurnFailedError",
]
