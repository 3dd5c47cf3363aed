"""Conversation session model."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from rehearsal.conversation.models.exchange import utc_now


class CharacterBrief(BaseModel):
    """Everything a session takes from the scenario, captured once."""

    model_config = ConfigDict(frozen=True)

    scenario_id: str | None = Field(default=None, description="Source scenario")
    instruction_context: str = Field(..., description="System-level character brief")
    voice_id: str | None = Field(default=None, description="Narration voice override")


class ConversationSession(BaseModel):
    """Runtime state of one active conversation.

    The brief is frozen for the life of the session so the simulated
    character cannot drift mid-chat; only ``last_activity`` changes.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(
        default_factory=lambda: str(uuid4()),
        frozen=True,
        description="Conversation identifier",
    )
    brief: CharacterBrief = Field(..., frozen=True, description="Character brief")
    created_at: datetime = Field(default_factory=utc_now, frozen=True)
    last_activity: datetime = Field(default_factory=utc_now, description="Last exchange time")

    @property
    def instruction_context(self) -> str:
        return self.brief.instruction_context
