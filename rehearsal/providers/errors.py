"""Provider error taxonomy.

Every error carries a ``user_message`` that is safe to show to a trainee.
The exception text (``str(exc)``) may hold provider details and is meant
for logs only.
"""


class ProviderError(Exception):
    """Base exception for chat and narration provider errors."""

    default_user_message = "The conversation service is unavailable. Please try again."

    def __init__(self, message: str, *, user_message: str | None = None) -> None:
        super().__init__(message)
        self.user_message = user_message or self.default_user_message


class RetryableTransportError(ProviderError):
    """Network failure, 5xx or rate limiting. Worth another attempt."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message, user_message=user_message)
        self.status_code = status_code


class RateLimitError(RetryableTransportError):
    """Provider answered 429."""

    default_user_message = "The conversation service is busy. Please try again in a moment."


class TerminalProviderError(ProviderError):
    """Client error (4xx other than 429) or a response we cannot use."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message, user_message=user_message)
        self.status_code = status_code


class MalformedResponseError(TerminalProviderError):
    """Response body did not have the expected shape."""

    default_user_message = "The conversation service returned an unexpected reply."


class ServiceNotConfiguredError(TerminalProviderError):
    """Credentials or endpoint missing. Raised before any I/O."""

    default_user_message = "The conversation service is not configured."

    def __init__(self, service: str) -> None:
        super().__init__(
            f"{service} service not configured",
            user_message=f"The {service} service is not configured.",
        )
        self.service = service


class RetryExhaustedError(ProviderError):
    """Every allowed attempt failed with a retryable error."""

    default_user_message = (
        "The conversation service is not responding. Please try again shortly."
    )

    def __init__(self, operation: str, attempts: int, last_error: BaseException) -> None:
        super().__init__(
            f"{operation} failed after {attempts} attempts: {last_error}",
        )
        self.operation = operation
        self.attempts = attempts
        self.last_error = last_error
