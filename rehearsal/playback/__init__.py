"""Client-side narration playback.

AudioPlaybackQueue sequences narration segments under mute control and
autoplay restrictions; probe_autoplay detects those restrictions.
"""

from rehearsal.playback.capability import probe_autoplay
from rehearsal.playback.models import AudioSegment
from rehearsal.playback.queue import AudioPlaybackQueue
from rehearsal.playback.sink import AudioSink, PlaybackBlockedError, PlaybackError

__all__ = [
    "AudioPlaybackQueue",
    "AudioSegment",
    "AudioSink",
    "PlaybackBlockedError",
    "PlaybackError",
    "probe_autoplay",
]
