"""Connectivity recovery monitor.

Tracks online/offline transitions of the transcript store and replays
deferred exchanges when connectivity returns.
"""

from collections.abc import Callable

from rehearsal.conversation.errors import PersistenceUnavailableError
from rehearsal.conversation.pending import PendingExchangeBuffer
from rehearsal.conversation.store import TranscriptStore
from rehearsal.conversation.view import TranscriptView
from rehearsal.observability.logging import get_logger

logger = get_logger(__name__)

OFFLINE_BANNER = "Messages will be saved when connection returns."


class ConnectivityMonitor:
    """Owns the offline flag and drains the pending buffer on reconnect.

    While offline, persistence failures are expected; the trainee sees a
    single informational banner per offline period instead of errors.
    Replay applies no backoff. It runs on an online transition, and
    before the next exchange of a conversation that has buffered entries.
    """

    def __init__(
        self,
        transcript: TranscriptStore,
        pending: PendingExchangeBuffer,
        view: TranscriptView | None = None,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self._transcript = transcript
        self._pending = pending
        self._view = view
        self._notify = notify
        self._offline = False
        self._replaying = False

    @property
    def offline(self) -> bool:
        return self._offline

    def handle_offline(self) -> None:
        """Record an offline transition. Idempotent while already offline."""
        if self._offline:
            return
        self._offline = True
        logger.info("connectivity_offline", pending=len(self._pending))
        if self._notify is not None:
            self._notify(OFFLINE_BANNER)

    async def handle_online(self) -> int:
        """Record an online transition and replay the pending buffer.

        Returns:
            Number of exchanges persisted by this replay
        """
        if self._offline:
            self._offline = False
            logger.info("connectivity_online", pending=len(self._pending))
        return await self._replay()

    async def recover(self) -> int:
        """Replay the buffer without a reported online transition.

        Called before persisting into a conversation that still has
        buffered exchanges. If anything is persisted the store is
        reachable again and the offline period ends.

        Returns:
            Number of exchanges persisted by this replay
        """
        if not len(self._pending):
            return 0
        replayed = await self._replay()
        if replayed and self._offline:
            self._offline = False
            logger.info("connectivity_restored", replayed=replayed)
        return replayed

    async def _replay(self) -> int:
        """Replay the pending buffer in original order.

        Successfully persisted entries are removed. When an entry fails,
        later entries of the same conversation stay buffered too so the
        transcript order is preserved; they are retried on the next
        online event. Other conversations keep replaying.
        """
        if self._replaying:
            return 0

        self._replaying = True
        replayed = 0
        blocked: set[str] = set()
        try:
            for entry in self._pending.snapshot():
                if entry.conversation_id in blocked:
                    continue
                try:
                    await self._transcript.append(entry.conversation_id, entry.exchange)
                except PersistenceUnavailableError as e:
                    blocked.add(entry.conversation_id)
                    logger.info(
                        "replay_deferred",
                        conversation_id=entry.conversation_id,
                        exchange_id=entry.exchange.id,
                        error=str(e),
                    )
                    continue
                except Exception as e:
                    blocked.add(entry.conversation_id)
                    logger.warning(
                        "replay_failed",
                        conversation_id=entry.conversation_id,
                        exchange_id=entry.exchange.id,
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                    continue

                self._pending.remove(entry)
                if self._view is not None:
                    self._view.confirm(entry.conversation_id, entry.exchange.id)
                replayed += 1
        finally:
            self._replaying = False

        logger.info("pending_replayed", replayed=replayed, remaining=len(self._pending))
        return replayed
