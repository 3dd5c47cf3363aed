"""Test doubles shared across the Rehearsal test suite."""

from tests.factories.doubles import (
    CountingScenarioSource,
    CountingTranscriptStore,
    RecordingSink,
    RecordingSleep,
)

__all__ = [
    "CountingScenarioSource",
    "CountingTranscriptStore",
    "RecordingSink",
    "RecordingSleep",
]
