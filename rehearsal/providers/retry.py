"""Resilient call executor - bounded retries with exponential backoff.

Wraps a single outbound provider call (chat or narration). The wrapped
call is retried only when the classifier says the failure is transient;
everything else is translated to a user-presentable ProviderError and
raised immediately.

Example:
    executor = ResilientCallExecutor(max_attempts=3, base_delay=1.0)

    response = await executor.execute(
        lambda: chat_provider.complete(system, messages),
        operation="chat",
    )
"""

from __future__ import annotations

import asyncio
import socket
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import TYPE_CHECKING, TypeVar

import httpx

from rehearsal.observability.logging import get_logger
from rehearsal.observability.metrics import PROVIDER_ATTEMPTS, PROVIDER_RETRIES
from rehearsal.providers.errors import (
    ProviderError,
    RetryableTransportError,
    RetryExhaustedError,
    ServiceNotConfiguredError,
    TerminalProviderError,
)

if TYPE_CHECKING:
    from rehearsal.config.models.conversation import RetryConfig

logger = get_logger(__name__)

T = TypeVar("T")


class ErrorClass(str, Enum):
    """Whether a failed call is worth another attempt."""

    RETRYABLE = "retryable"
    TERMINAL = "terminal"


Classifier = Callable[[BaseException], ErrorClass]
Sleep = Callable[[float], Awaitable[None]]


def classify_error(exc: BaseException) -> ErrorClass:
    """Default classification policy.

    Retryable: transport failures (refused connection, timeout, DNS) and
    HTTP 5xx / 429. Terminal: other 4xx, malformed responses, missing
    configuration and anything unrecognised.
    """
    if isinstance(exc, RetryableTransportError):
        return ErrorClass.RETRYABLE
    if isinstance(exc, ProviderError):
        return ErrorClass.TERMINAL

    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        if status == 429 or status >= 500:
            return ErrorClass.RETRYABLE
        return ErrorClass.TERMINAL

    if isinstance(exc, httpx.TransportError):
        return ErrorClass.RETRYABLE

    if isinstance(exc, (TimeoutError, ConnectionError, socket.gaierror)):
        return ErrorClass.RETRYABLE

    return ErrorClass.TERMINAL


class ResilientCallExecutor:
    """Performs one outbound call with bounded, backoff-delayed retries.

    The delay after failed attempt n is ``base_delay * multiplier**(n-1)``,
    so the defaults wait 1s then 2s between three attempts. Stateless
    between calls; one instance serves every provider.
    """

    def __init__(
        self,
        max_attempts: int = 3,
        base_delay: float = 1.0,
        multiplier: float = 2.0,
        attempt_timeout: float | None = 30.0,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        """Initialize the executor.

        Args:
            max_attempts: Total attempts per call, including the first
            base_delay: Seconds to wait after the first failure
            multiplier: Growth factor applied per further failure
            attempt_timeout: Per-attempt timeout in seconds (None disables)
            sleep: Awaitable sleep, injectable for deterministic tests
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._max_attempts = max_attempts
        self._base_delay = base_delay
        self._multiplier = multiplier
        self._attempt_timeout = attempt_timeout
        self._sleep = sleep

    @classmethod
    def from_config(
        cls, config: RetryConfig, sleep: Sleep = asyncio.sleep
    ) -> ResilientCallExecutor:
        """Create an executor from the [retry] settings section."""
        return cls(
            max_attempts=config.max_attempts,
            base_delay=config.base_delay_seconds,
            multiplier=config.multiplier,
            attempt_timeout=config.attempt_timeout_seconds,
            sleep=sleep,
        )

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def backoff_delay(self, attempt: int) -> float:
        """Delay to wait after failed attempt number ``attempt`` (1-based)."""
        return self._base_delay * self._multiplier ** (attempt - 1)

    async def execute(
        self,
        request_builder: Callable[[], Awaitable[T]],
        classify: Classifier = classify_error,
        *,
        operation: str = "provider_call",
    ) -> T:
        """Run ``request_builder`` until it succeeds or retrying stops.

        Args:
            request_builder: Zero-argument callable performing the call
            classify: Maps a caught error to retryable or terminal
            operation: Name used in logs and metrics

        Returns:
            Whatever the successful call returned

        Raises:
            RetryExhaustedError: Every attempt failed with a retryable error
            TerminalProviderError: A terminal failure (including
                ServiceNotConfiguredError for missing credentials)
        """
        attempt = 0
        while True:
            attempt += 1
            try:
                result = await self._attempt(request_builder)
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                # Missing credentials never heal on retry, whatever the classifier says
                if isinstance(exc, ServiceNotConfiguredError):
                    error_class = ErrorClass.TERMINAL
                else:
                    error_class = classify(exc)
                PROVIDER_ATTEMPTS.labels(operation=operation, outcome=error_class.value).inc()

                if error_class is ErrorClass.TERMINAL:
                    logger.warning(
                        "provider_call_terminal",
                        operation=operation,
                        attempt=attempt,
                        error=str(exc),
                        error_type=type(exc).__name__,
                    )
                    if isinstance(exc, ProviderError):
                        raise
                    raise TerminalProviderError(
                        f"{operation} failed: {type(exc).__name__}: {exc}"
                    ) from exc

                if attempt >= self._max_attempts:
                    logger.warning(
                        "provider_call_exhausted",
                        operation=operation,
                        attempts=attempt,
                        error=str(exc),
                        error_type=type(exc).__name__,
                    )
                    raise RetryExhaustedError(operation, attempt, exc) from exc

                delay = self.backoff_delay(attempt)
                PROVIDER_RETRIES.labels(operation=operation).inc()
                logger.info(
                    "retry_scheduled",
                    operation=operation,
                    attempt=attempt,
                    delay_seconds=delay,
                    error_type=type(exc).__name__,
                )
                await self._sleep(delay)
                continue

            PROVIDER_ATTEMPTS.labels(operation=operation, outcome="success").inc()
            if attempt > 1:
                logger.info("provider_call_recovered", operation=operation, attempts=attempt)
            return result

    async def _attempt(self, request_builder: Callable[[], Awaitable[T]]) -> T:
        # request_builder() may raise before returning an awaitable; the
        # caller's except clause classifies that too
        if self._attempt_timeout is None:
            return await request_builder()
        return await asyncio.wait_for(request_builder(), timeout=self._attempt_timeout)
