"""Exchange orchestrator.

Turns one trainee message into a persisted character reply:

    IDLE -> SENDING_USER_MESSAGE -> AWAITING_CHAT_REPLY -> PERSISTING_REPLY
         -> REQUESTING_NARRATION (optional) -> IDLE

with FAILED reachable from any step. Chat and narration calls go through
the ResilientCallExecutor; narration failures never fail the turn.
"""

import time
from dataclasses import dataclass, field
from uuid import uuid4

from structlog.contextvars import bind_contextvars, unbind_contextvars

from rehearsal.conversation.brief import build_character_brief
from rehearsal.conversation.connectivity import ConnectivityMonitor
from rehearsal.conversation.errors import (
    ConversationError,
    EmptyMessageError,
    NarrationFailure,
    PersistenceUnavailableError,
    ScenarioNotFoundError,
    TurnFailedError,
)
from rehearsal.conversation.models import (
    CharacterBrief,
    ConversationSession,
    Exchange,
    ExchangeRole,
    TurnState,
)
from rehearsal.conversation.pending import PendingExchangeBuffer
from rehearsal.conversation.store import ScenarioSource, SessionStore, TranscriptStore
from rehearsal.conversation.view import TranscriptView
from rehearsal.observability.logging import get_logger
from rehearsal.observability.metrics import NARRATION_FAILURES, TURN_LATENCY, TURNS
from rehearsal.playback import AudioPlaybackQueue, AudioSegment
from rehearsal.providers import (
    ChatMessage,
    ChatProvider,
    NarrationProvider,
    ProviderError,
    ResilientCallExecutor,
)

logger = get_logger(__name__)

PERSISTENCE_FAILED_MESSAGE = "Your message could not be saved. Please try again."
HISTORY_FAILED_MESSAGE = "The conversation could not be loaded. Please try again."


@dataclass
class TurnResult:
    """Outcome of a successful turn.

    Attributes:
        conversation_id: Conversation the turn belongs to (new or existing)
        assistant_text: The simulated character's reply
        audio: Narration of the reply, if narration is configured and succeeded
        deferred: True if any exchange of the turn is waiting in the pending buffer
        states: States visited during the turn
    """

    conversation_id: str
    assistant_text: str
    audio: AudioSegment | None = None
    deferred: bool = False
    states: list[TurnState] = field(default_factory=list)


class ExchangeOrchestrator:
    """Runs trainee -> character turns.

    Collaborators are injected; the orchestrator holds no per-conversation
    state of its own. Callers must not run two turns of the same
    conversation concurrently.
    """

    def __init__(
        self,
        sessions: SessionStore,
        transcript: TranscriptStore,
        scenarios: ScenarioSource,
        chat_provider: ChatProvider,
        executor: ResilientCallExecutor,
        narration_provider: NarrationProvider | None = None,
        playback: AudioPlaybackQueue | None = None,
        pending: PendingExchangeBuffer | None = None,
        monitor: ConnectivityMonitor | None = None,
        view: TranscriptView | None = None,
    ) -> None:
        self._sessions = sessions
        self._transcript = transcript
        self._scenarios = scenarios
        self._chat = chat_provider
        self._executor = executor
        self._narration = narration_provider
        self._playback = playback
        self._pending = pending if pending is not None else PendingExchangeBuffer()
        self._monitor = monitor
        self._view = view

    @property
    def pending(self) -> PendingExchangeBuffer:
        return self._pending

    async def send_turn(
        self,
        message: str,
        conversation_id: str | None = None,
        scenario_id: str | None = None,
    ) -> TurnResult:
        """Process one trainee message.

        Args:
            message: Trainee text
            conversation_id: Existing conversation, or None to start one
            scenario_id: Scenario used to brief the character of a new
                conversation; ignored for known conversations

        Returns:
            TurnResult with the reply and, if produced, its narration

        Raises:
            EmptyMessageError: Message is empty or whitespace (no I/O done)
            ScenarioNotFoundError: A new conversation's scenario is missing
            TurnFailedError: Persistence or the chat call failed
        """
        if not message or not message.strip():
            raise EmptyMessageError()

        turn_id = str(uuid4())
        states = [TurnState.IDLE]
        start_time = time.perf_counter()
        bind_contextvars(turn_id=turn_id)

        try:
            session = await self._sessions.resolve(
                conversation_id, lambda: self._build_brief(scenario_id)
            )
            bind_contextvars(conversation_id=session.id)

            logger.info(
                "turn_started",
                message_length=len(message),
                new_conversation=session.id != conversation_id,
            )

            states.append(TurnState.SENDING_USER_MESSAGE)
            trainee = Exchange(role=ExchangeRole.TRAINEE, content=message)
            deferred = await self._persist(session.id, trainee, states)

            states.append(TurnState.AWAITING_CHAT_REPLY)
            reply_text = await self._request_reply(session, states)

            states.append(TurnState.PERSISTING_REPLY)
            reply = Exchange(role=ExchangeRole.CHARACTER, content=reply_text)
            deferred = await self._persist(session.id, reply, states) or deferred

            audio = None
            if self._narration is not None:
                states.append(TurnState.REQUESTING_NARRATION)
                try:
                    audio = await self._narrate(self._narration, session, reply)
                except NarrationFailure as e:
                    NARRATION_FAILURES.inc()
                    logger.warning("narration_failed", error=str(e))

            states.append(TurnState.IDLE)
            TURNS.labels(outcome="deferred" if deferred else "completed").inc()
            elapsed = time.perf_counter() - start_time
            TURN_LATENCY.observe(elapsed)

            logger.info(
                "turn_completed",
                reply_length=len(reply_text),
                deferred=deferred,
                narrated=audio is not None,
                latency_ms=elapsed * 1000,
            )

            return TurnResult(
                conversation_id=session.id,
                assistant_text=reply_text,
                audio=audio,
                deferred=deferred,
                states=states,
            )
        except ConversationError as e:
            TURNS.labels(outcome="failed").inc()
            logger.warning(
                "turn_failed",
                error=str(e),
                error_type=type(e).__name__,
                failed_at=states[-1].value,
            )
            raise
        finally:
            unbind_contextvars("turn_id", "conversation_id")

    async def _build_brief(self, scenario_id: str | None) -> CharacterBrief:
        if scenario_id is None:
            raise ScenarioNotFoundError(None)
        scenario = await self._scenarios.get(scenario_id)
        return build_character_brief(scenario)

    async def _persist(
        self,
        conversation_id: str,
        exchange: Exchange,
        states: list[TurnState],
    ) -> bool:
        """Append an exchange, deferring it if the store is unreachable.

        Returns:
            True if the exchange was buffered instead of persisted
        """
        if self._view is not None:
            self._view.apply(conversation_id, exchange)

        # Keep transcript order: once a conversation has buffered entries,
        # later exchanges queue behind them until a replay drains them
        if self._pending.has_pending(conversation_id) and self._monitor is not None:
            await self._monitor.recover()
        if self._pending.has_pending(conversation_id):
            self._defer(conversation_id, exchange)
            return True

        try:
            await self._transcript.append(conversation_id, exchange)
        except PersistenceUnavailableError:
            self._defer(conversation_id, exchange)
            return True
        except Exception as e:
            if self._view is not None:
                self._view.rollback(conversation_id, exchange.id)
            failed_at = states[-1]
            states.append(TurnState.FAILED)
            raise TurnFailedError(
                f"Persisting {exchange.role.value} exchange failed: {e}",
                user_message=PERSISTENCE_FAILED_MESSAGE,
                conversation_id=conversation_id,
                failed_at=failed_at,
                states=states,
            ) from e

        if self._view is not None:
            self._view.confirm(conversation_id, exchange.id)
        return False

    def _defer(self, conversation_id: str, exchange: Exchange) -> None:
        self._pending.add(conversation_id, exchange)
        logger.info(
            "exchange_deferred",
            exchange_id=exchange.id,
            role=exchange.role.value,
            pending=len(self._pending),
        )
        if self._monitor is not None:
            self._monitor.handle_offline()

    async def _request_reply(
        self, session: ConversationSession, states: list[TurnState]
    ) -> str:
        history = await self._history(session.id, states)
        try:
            response = await self._executor.execute(
                lambda: self._chat.complete(session.instruction_context, history),
                operation="chat",
            )
        except ProviderError as e:
            states.append(TurnState.FAILED)
            raise TurnFailedError(
                f"Chat call failed: {e}",
                user_message=e.user_message,
                conversation_id=session.id,
                failed_at=TurnState.AWAITING_CHAT_REPLY,
                states=states,
            ) from e
        return response.text

    async def _history(
        self, conversation_id: str, states: list[TurnState]
    ) -> list[ChatMessage]:
        """Full prior transcript plus buffered exchanges, oldest first.

        The new trainee exchange is already persisted or buffered, so it
        is the last entry.

        Raises:
            TurnFailedError: The transcript could not be read for a reason
                other than the store being unreachable
        """
        try:
            persisted = await self._transcript.list(conversation_id)
        except PersistenceUnavailableError:
            persisted = []
            logger.info("history_unavailable", conversation_id=conversation_id)
            if self._monitor is not None:
                self._monitor.handle_offline()
        except Exception as e:
            states.append(TurnState.FAILED)
            raise TurnFailedError(
                f"Reading transcript failed: {e}",
                user_message=HISTORY_FAILED_MESSAGE,
                conversation_id=conversation_id,
                failed_at=TurnState.AWAITING_CHAT_REPLY,
                states=states,
            ) from e

        seen = {exchange.id for exchange in persisted}
        buffered = [
            exchange
            for exchange in self._pending.for_conversation(conversation_id)
            if exchange.id not in seen
        ]
        return [
            ChatMessage(role=exchange.role.chat_role, content=exchange.content)
            for exchange in persisted + buffered
        ]

    async def _narrate(
        self,
        narration: NarrationProvider,
        session: ConversationSession,
        reply: Exchange,
    ) -> AudioSegment:
        """Synthesize the reply and hand it to the playback queue.

        Raises:
            NarrationFailure: Narration could not be produced
        """
        try:
            payload = await self._executor.execute(
                lambda: narration.synthesize(reply.content, voice_id=session.brief.voice_id),
                operation="narration",
            )
        except ProviderError as e:
            raise NarrationFailure(f"Narration failed: {type(e).__name__}: {e}") from e

        segment = AudioSegment(
            payload=payload,
            media_type=narration.media_type,
            exchange_id=reply.id,
        )
        if self._playback is not None:
            self._playback.enqueue(segment)
        return segment
