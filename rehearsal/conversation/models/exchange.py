"""Exchange model: one turn of a conversation transcript."""

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from rehearsal.conversation.models.enums import ExchangeRole


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class Exchange(BaseModel):
    """A single trainee or simulated-character message.

    Immutable once created; appended to the conversation transcript
    exactly once.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()), description="Exchange ID")
    role: ExchangeRole = Field(..., description="Author of the message")
    content: str = Field(..., description="Message text")
    timestamp: datetime = Field(default_factory=utc_now, description="Creation time")
