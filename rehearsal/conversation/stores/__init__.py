"""Conversation store implementations."""

from rehearsal.conversation.stores.inmemory import (
    InMemoryScenarioSource,
    InMemorySessionStore,
    InMemoryTranscriptStore,
)

__all__ = [
    "InMemoryScenarioSource",
    "InMemorySessionStore",
    "InMemoryTranscriptStore",
]
