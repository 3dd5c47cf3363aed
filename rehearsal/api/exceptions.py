"""API exception hierarchy for consistent error handling.

All API exceptions inherit from RehearsalAPIError, which provides
status_code and error_code attributes used by the global exception
handler to generate consistent error responses. Messages are always
trainee-presentable.
"""

from rehearsal.api.models.errors import ErrorCode


class RehearsalAPIError(Exception):
    """Base exception for all API errors."""

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, conversation_id: str | None = None) -> None:
        self.message = message
        self.conversation_id = conversation_id
        super().__init__(message)


class InvalidRequestError(RehearsalAPIError):
    """Raised when request validation fails."""

    status_code = 400
    error_code = ErrorCode.INVALID_REQUEST


class ScenarioNotFoundAPIError(RehearsalAPIError):
    """Raised when the requested scenario doesn't exist."""

    status_code = 404
    error_code = ErrorCode.SCENARIO_NOT_FOUND


class ServiceNotConfiguredAPIError(RehearsalAPIError):
    """Raised when a required provider is not configured."""

    status_code = 503
    error_code = ErrorCode.SERVICE_NOT_CONFIGURED


class PersistenceUnavailableAPIError(RehearsalAPIError):
    """Raised when the transcript store cannot be reached for a read."""

    status_code = 503
    error_code = ErrorCode.PERSISTENCE_UNAVAILABLE


class TurnFailedAPIError(RehearsalAPIError):
    """Raised when a turn fails after the trainee message was accepted."""

    status_code = 502
    error_code = ErrorCode.TURN_FAILED
