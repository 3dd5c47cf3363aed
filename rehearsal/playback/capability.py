"""Autoplay capability detection."""

from rehearsal.observability.logging import get_logger
from rehearsal.playback.sink import AudioSink, PlaybackBlockedError

logger = get_logger(__name__)


async def probe_autoplay(sink: AudioSink) -> bool:
    """Return whether ``sink`` may start playback without a user gesture.

    Only an explicit refusal counts as blocked. Any other probe failure
    says nothing about gesture restrictions and is reported as allowed;
    real segments will surface their own errors.
    """
    try:
        await sink.probe()
    except PlaybackBlockedError:
        logger.info("autoplay_blocked")
        return False
    except Exception as e:
        logger.debug("autoplay_probe_inconclusive", error=str(e), error_type=type(e).__name__)
    return True
