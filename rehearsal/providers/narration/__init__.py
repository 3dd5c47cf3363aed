"""Narration (text-to-speech) providers."""

from rehearsal.providers.narration.base import NarrationProvider
from rehearsal.providers.narration.elevenlabs import ElevenLabsNarrationProvider
from rehearsal.providers.narration.mock import MockNarrationProvider

__all__ = [
    "ElevenLabsNarrationProvider",
    "MockNarrationProvider",
    "NarrationProvider",
]
