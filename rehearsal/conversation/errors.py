"""Conversation error types.

``TurnFailedError.user_message`` is the single message shown to the
trainee; it never contains provider payloads.
"""

from rehearsal.conversation.models.enums import TurnState


class ConversationError(Exception):
    """Base exception for the conversation domain."""

    def __init__(self, message: str, *, user_message: str | None = None) -> None:
        super().__init__(message)
        self.user_message = user_message or message


class EmptyMessageError(ConversationError):
    """Trainee message is empty or whitespace. Raised before any I/O."""

    def __init__(self) -> None:
        super().__init__("Message must not be empty")


class ScenarioNotFoundError(ConversationError):
    """The scenario needed to start a conversation does not exist."""

    def __init__(self, scenario_id: str | None) -> None:
        super().__init__(
            f"Scenario not found: {scenario_id}",
            user_message="This scenario is no longer available.",
        )
        self.scenario_id = scenario_id


class PersistenceUnavailableError(ConversationError):
    """Transcript store unreachable (client offline). Deferral, not failure."""


class NarrationFailure(ConversationError):
    """Narration could not be produced. Logged and dropped by the orchestrator."""


class TurnFailedError(ConversationError):
    """A turn ended in the FAILED state.

    Attributes:
        conversation_id: Conversation the turn belonged to, if resolved
        failed_at: State the turn was in when it failed
        states: States visited, ending with FAILED
    """

    def __init__(
        self,
        message: str,
        *,
        user_message: str,
        conversation_id: str | None,
        failed_at: TurnState,
        states: list[TurnState],
    ) -> None:
        super().__init__(message, user_message=user_message)
        self.conversation_id = conversation_id
        self.failed_at = failed_at
        self.states = states
