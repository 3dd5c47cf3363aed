"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Standardized error codes for API responses."""

    INVALID_REQUEST = "INVALID_REQUEST"
    """Request validation failed (empty message, missing fields, etc.)."""

    SCENARIO_NOT_FOUND = "SCENARIO_NOT_FOUND"
    """The scenario needed to brief the character does not exist."""

    SERVICE_NOT_CONFIGURED = "SERVICE_NOT_CONFIGURED"
    """A provider has no credentials or endpoint configured."""

    TURN_FAILED = "TURN_FAILED"
    """The chat provider or persistence failed; the trainee may resend."""

    PERSISTENCE_UNAVAILABLE = "PERSISTENCE_UNAVAILABLE"
    """The transcript store cannot be reached."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorDetail(BaseModel):
    """Field-level error information for validation failures."""

    field: str | None = None
    """The field that caused the error, if applicable."""

    message: str
    """Human-readable error description."""


class ErrorBody(BaseModel):
    """Error body content for API error responses."""

    code: ErrorCode
    """Machine-readable error code."""

    message: str
    """Message safe to show to the trainee."""

    details: list[ErrorDetail] | None = None
    """Additional error details for validation failures."""

    conversation_id: str | None = None
    """Conversation the failed turn belongs to, when one was resolved."""


class ErrorResponse(BaseModel):
    """Standard error response format for all API errors.

    Example:
        {
            "error": {
                "code": "TURN_FAILED",
                "message": "The conversation service is not responding."
            }
        }
    """

    error: ErrorBody
