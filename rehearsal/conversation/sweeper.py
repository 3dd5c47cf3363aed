"""Periodic idle-session sweep."""

import asyncio
from collections.abc import Awaitable, Callable

from rehearsal.conversation.store import SessionStore
from rehearsal.observability.logging import get_logger

logger = get_logger(__name__)


class SessionSweeper:
    """Background task calling ``SessionStore.sweep`` on a fixed interval.

    The first sweep runs one interval after start. A failing sweep is
    logged and the loop keeps going.
    """

    def __init__(
        self,
        sessions: SessionStore,
        interval_seconds: float = 3600.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._sessions = sessions
        self._interval_seconds = interval_seconds
        self._sleep = sleep
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the sweep loop."""
        if self._running:
            logger.warning("sweeper_already_running")
            return

        self._running = True
        self._task = asyncio.create_task(self._sweep_loop())
        logger.info("sweeper_started", interval_seconds=self._interval_seconds)

    async def stop(self) -> None:
        """Stop the sweep loop."""
        if not self._running:
            return

        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info("sweeper_stopped")

    async def _sweep_loop(self) -> None:
        while self._running:
            await self._sleep(self._interval_seconds)
            try:
                await self._sessions.sweep()
            except Exception as e:
                logger.error("sweep_error", error=str(e), error_type=type(e).__name__)
