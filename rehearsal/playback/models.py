"""Audio segment model."""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class AudioSegment(BaseModel):
    """Narrated audio for one character exchange.

    Sequence is implicit: segments play in the order they are enqueued.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()), description="Segment ID")
    payload: bytes = Field(..., description="Decodable audio bytes")
    media_type: str = Field(default="audio/mpeg", description="MIME type of payload")
    exchange_id: str | None = Field(default=None, description="Exchange this narrates")
