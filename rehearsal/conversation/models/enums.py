"""Enums for the conversation domain."""

from enum import Enum


class ExchangeRole(str, Enum):
    """Who authored an exchange."""

    TRAINEE = "trainee"
    CHARACTER = "character"

    @property
    def chat_role(self) -> str:
        """Role name understood by the chat provider."""
        return "user" if self is ExchangeRole.TRAINEE else "assistant"


class ExchangeStatus(str, Enum):
    """Local persistence status of an exchange shown in a transcript view."""

    PENDING = "pending"
    CONFIRMED = "confirmed"


class TurnState(str, Enum):
    """States of one trainee -> character turn."""

    IDLE = "idle"
    SENDING_USER_MESSAGE = "sending_user_message"
    AWAITING_CHAT_REPLY = "awaiting_chat_reply"
    PERSISTING_REPLY = "persisting_reply"
    REQUESTING_NARRATION = "requesting_narration"
    FAILED = "failed"
