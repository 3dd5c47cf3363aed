"""Provider request and response models."""

from typing import Any, Literal

from pydantic import BaseModel, Field

ChatRole = Literal["user", "assistant"]


class ChatMessage(BaseModel):
    """One message of the role/content list sent to the chat provider."""

    role: ChatRole = Field(..., description="user (trainee) or assistant (character)")
    content: str = Field(..., description="Message text")


class ChatResponse(BaseModel):
    """Reply from the chat provider."""

    text: str = Field(..., description="Reply text")
    model: str = Field(..., description="Model used")
    stop_reason: str | None = Field(default=None, description="Why generation stopped")
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Execution metadata"
    )
