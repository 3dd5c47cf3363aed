"""Audio playback queue.

Plays narration segments one at a time in enqueue order, honoring the
mute switch and platforms that only allow audio to start from a user
gesture. A segment that fails to play is consumed and the queue moves
on; it is never retried automatically.
"""

import asyncio
from collections import deque
from enum import Enum

from rehearsal.observability.logging import get_logger
from rehearsal.observability.metrics import AUDIO_SEGMENTS
from rehearsal.playback.models import AudioSegment
from rehearsal.playback.sink import AudioSink, PlaybackBlockedError

logger = get_logger(__name__)


class _Outcome(str, Enum):
    PLAYED = "played"
    FAILED = "failed"
    BLOCKED = "blocked"


class AudioPlaybackQueue:
    """FIFO narration player scoped to one conversation view.

    All state changes happen synchronously between awaits, so the queue
    is safe to share between coroutines on one event loop.

    Args:
        sink: Audio output
        autoplay_allowed: Result of ``probe_autoplay``; when False nothing
            starts until ``manual_play`` is called from a user gesture
        muted: Initial mute state
    """

    def __init__(
        self,
        sink: AudioSink,
        *,
        autoplay_allowed: bool = True,
        muted: bool = False,
    ) -> None:
        self._sink = sink
        self._queue: deque[AudioSegment] = deque()
        self._autoplay_allowed = autoplay_allowed
        self._muted = muted
        self._playing = False
        self._awaiting_gesture = False
        self._blocked: AudioSegment | None = None
        self._task: asyncio.Task[int] | None = None

    @property
    def muted(self) -> bool:
        return self._muted

    @property
    def playing(self) -> bool:
        return self._playing

    @property
    def pending(self) -> int:
        """Segments waiting to play, including one refused by the platform."""
        return len(self._queue) + (1 if self._blocked is not None else 0)

    @property
    def awaiting_gesture(self) -> bool:
        """True when playback needs ``manual_play`` to start."""
        return self._awaiting_gesture

    def enqueue(self, segment: AudioSegment) -> None:
        """Append a segment, starting playback if the queue is idle.

        Must be called from a running event loop.
        """
        self._queue.append(segment)
        logger.debug("segment_enqueued", segment_id=segment.id, queued=len(self._queue))
        self._resume()

    async def play_next(self) -> int:
        """Drain the queue until it is empty, muted or blocked.

        Returns:
            Number of segments taken from the queue
        """
        if self._playing:
            return 0
        self._playing = True
        return await self._drain()

    def toggle_mute(self) -> bool:
        """Flip the mute state and return the new value.

        Muting discards every queued segment, including one the platform
        refused to start; a segment already playing finishes. Segments
        enqueued while muted are kept and play once unmuted.
        """
        self._muted = not self._muted
        if self._muted:
            discarded = self.pending
            self._queue.clear()
            self._blocked = None
            if discarded:
                AUDIO_SEGMENTS.labels(outcome="discarded").inc(discarded)
            logger.info("playback_muted", discarded=discarded)
        else:
            logger.info("playback_unmuted", queued=len(self._queue))
            self._resume()
        return self._muted

    async def manual_play(self) -> bool:
        """Play the refused or head segment in response to a user gesture.

        On success autoplay is considered unlocked and the rest of the
        queue drains normally.

        Returns:
            True if a segment played
        """
        if self._muted:
            return False
        if self._playing:
            if self._blocked is not None:
                self._queue.appendleft(self._blocked)
                self._blocked = None
            return False

        segment = self._blocked
        self._blocked = None
        if segment is None:
            if not self._queue:
                return False
            segment = self._queue.popleft()

        self._playing = True
        outcome = await self._play(segment)
        if outcome is not _Outcome.PLAYED:
            self._playing = False
            return False

        self._autoplay_allowed = True
        self._awaiting_gesture = False
        await self._drain()
        return True

    async def join(self) -> None:
        """Wait for the current background drain, if any, to finish."""
        if self._task is not None:
            await self._task

    async def close(self) -> None:
        """Stop playback and drop everything queued."""
        self._queue.clear()
        self._blocked = None
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None
        self._playing = False

    def _resume(self) -> None:
        if self._muted or self._playing or not self._queue:
            return
        if not self._autoplay_allowed:
            self._awaiting_gesture = True
            return
        self._playing = True
        self._task = asyncio.get_running_loop().create_task(self._drain())

    async def _drain(self) -> int:
        processed = 0
        try:
            while self._queue and not self._muted:
                segment = self._queue.popleft()
                processed += 1
                if await self._play(segment) is _Outcome.BLOCKED:
                    break
        finally:
            self._playing = False
        return processed

    async def _play(self, segment: AudioSegment) -> _Outcome:
        try:
            await self._sink.play(segment)
        except PlaybackBlockedError:
            self._blocked = segment
            self._autoplay_allowed = False
            self._awaiting_gesture = True
            AUDIO_SEGMENTS.labels(outcome=_Outcome.BLOCKED.value).inc()
            logger.info("playback_blocked", segment_id=segment.id)
            return _Outcome.BLOCKED
        except Exception as e:
            AUDIO_SEGMENTS.labels(outcome=_Outcome.FAILED.value).inc()
            logger.warning(
                "playback_failed",
                segment_id=segment.id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return _Outcome.FAILED

        AUDIO_SEGMENTS.labels(outcome=_Outcome.PLAYED.value).inc()
        logger.debug("segment_played", segment_id=segment.id)
        return _Outcome.PLAYED
