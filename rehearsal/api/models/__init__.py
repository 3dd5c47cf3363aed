"""API request and response models."""

from rehearsal.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from rehearsal.api.models.turns import (
    ExchangeResponse,
    TranscriptResponse,
    TurnRequest,
    TurnResponse,
)

__all__ = [
    "ErrorBody",
    "ErrorCode",
    "ErrorDetail",
    "ErrorResponse",
    "ExchangeResponse",
    "TranscriptResponse",
    "TurnRequest",
    "TurnResponse",
]
