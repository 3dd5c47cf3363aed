"""Request and response models for turns and transcripts."""

from datetime import datetime

from pydantic import BaseModel, Field

from rehearsal.conversation.models import ExchangeRole, ExchangeStatus


class TurnRequest(BaseModel):
    """One trainee message."""

    scenario_id: str | None = Field(
        default=None,
        description="Scenario for a new conversation; ignored for known ones",
    )
    conversation_id: str | None = Field(
        default=None,
        description="Existing conversation; omit to start a new one",
    )
    message: str = Field(..., description="Trainee text")


class TurnResponse(BaseModel):
    """The simulated character's reply."""

    conversation_id: str
    assistant_text: str
    audio: str | None = Field(default=None, description="Base64-encoded narration")
    audio_media_type: str | None = None
    deferred: bool = Field(
        default=False,
        description="Some exchanges are waiting to be saved",
    )


class ExchangeResponse(BaseModel):
    """One transcript entry."""

    id: str
    role: ExchangeRole
    content: str
    timestamp: datetime
    status: ExchangeStatus


class TranscriptResponse(BaseModel):
    """A conversation transcript, oldest first."""

    conversation_id: str
    exchanges: list[ExchangeResponse]
