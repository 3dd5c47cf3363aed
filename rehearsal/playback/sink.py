"""Audio output abstraction."""

from abc import ABC, abstractmethod

from rehearsal.playback.models import AudioSegment

# Silent segment used to probe whether autonomous playback is permitted
PROBE_SEGMENT = AudioSegment(payload=b"")


class PlaybackError(Exception):
    """A segment could not be played (decode error, device failure)."""


class PlaybackBlockedError(PlaybackError):
    """The platform refused to start audio without a user gesture."""


class AudioSink(ABC):
    """Plays one segment to completion.

    Implementations return once the segment has finished playing and
    raise PlaybackBlockedError when autonomous playback is refused.
    """

    @abstractmethod
    async def play(self, segment: AudioSegment) -> None:
        """Play ``segment`` and wait for it to finish."""

    async def probe(self) -> None:
        """Attempt a silent play; raises PlaybackBlockedError if refused."""
        await self.play(PROBE_SEGMENT)
