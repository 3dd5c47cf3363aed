"""In-memory implementations of the conversation stores."""

from collections.abc import Callable
from datetime import datetime, timedelta
from pathlib import Path

from rehearsal.conversation.errors import PersistenceUnavailableError, ScenarioNotFoundError
from rehearsal.conversation.models import ConversationSession, Exchange, Scenario, utc_now
from rehearsal.conversation.store import BriefBuilder, ScenarioSource, SessionStore, TranscriptStore
from rehearsal.observability.logging import get_logger
from rehearsal.observability.metrics import ACTIVE_SESSIONS, SESSIONS_EVICTED

logger = get_logger(__name__)

Clock = Callable[[], datetime]


class InMemorySessionStore(SessionStore):
    """Dict-backed session store with an injectable clock.

    Memory is bounded only by the sweep cadence. All mutation happens
    between awaits, so a single event loop needs no locking.
    """

    def __init__(
        self,
        idle_window: timedelta = timedelta(hours=1),
        clock: Clock = utc_now,
    ) -> None:
        self._sessions: dict[str, ConversationSession] = {}
        self._idle_window = idle_window
        self._clock = clock

    @property
    def idle_window(self) -> timedelta:
        return self._idle_window

    async def resolve(
        self,
        conversation_id: str | None,
        build_brief: BriefBuilder,
    ) -> ConversationSession:
        if conversation_id is not None:
            session = self._sessions.get(conversation_id)
            if session is not None:
                session.last_activity = self._clock()
                return session

        brief = await build_brief()

        now = self._clock()
        session = ConversationSession(brief=brief, created_at=now, last_activity=now)
        self._sessions[session.id] = session
        ACTIVE_SESSIONS.set(len(self._sessions))

        logger.info(
            "session_created",
            conversation_id=session.id,
            requested_id=conversation_id,
            scenario_id=brief.scenario_id,
        )
        return session

    async def sweep(self) -> None:
        cutoff = self._clock() - self._idle_window
        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if session.last_activity <= cutoff
        ]
        for session_id in expired:
            del self._sessions[session_id]

        ACTIVE_SESSIONS.set(len(self._sessions))
        if expired:
            SESSIONS_EVICTED.inc(len(expired))
        logger.info("sessions_swept", evicted=len(expired), remaining=len(self._sessions))

    async def get(self, conversation_id: str) -> ConversationSession | None:
        return self._sessions.get(conversation_id)

    async def count(self) -> int:
        return len(self._sessions)


class InMemoryTranscriptStore(TranscriptStore):
    """Dict-backed transcript store.

    ``offline`` simulates an unreachable backend: while set, every call
    raises PersistenceUnavailableError.
    """

    def __init__(self) -> None:
        self._transcripts: dict[str, list[Exchange]] = {}
        self.offline = False

    def _check_reachable(self) -> None:
        if self.offline:
            raise PersistenceUnavailableError("Transcript store unreachable")

    async def append(self, conversation_id: str, exchange: Exchange) -> None:
        self._check_reachable()
        self._transcripts.setdefault(conversation_id, []).append(exchange)

    async def list(self, conversation_id: str) -> list[Exchange]:
        self._check_reachable()
        return list(self._transcripts.get(conversation_id, []))


class InMemoryScenarioSource(ScenarioSource):
    """Scenario source over a fixed set of scenarios."""

    def __init__(self, scenarios: list[Scenario] | None = None) -> None:
        self._scenarios: dict[str, Scenario] = {s.id: s for s in scenarios or []}

    @classmethod
    def from_directory(cls, directory: Path | str) -> "InMemoryScenarioSource":
        """Load every *.json scenario document in a directory.

        A missing directory yields an empty source.

        Raises:
            pydantic.ValidationError: A document is not a valid scenario
        """
        path = Path(directory)
        if not path.is_dir():
            logger.warning("scenario_directory_missing", directory=str(path))
            return cls()

        scenarios = [
            Scenario.model_validate_json(file.read_text(encoding="utf-8"))
            for file in sorted(path.glob("*.json"))
        ]
        logger.info("scenarios_loaded", directory=str(path), count=len(scenarios))
        return cls(scenarios)

    def add(self, scenario: Scenario) -> None:
        self._scenarios[scenario.id] = scenario

    async def get(self, scenario_id: str) -> Scenario:
        scenario = self._scenarios.get(scenario_id)
        if scenario is None:
            raise ScenarioNotFoundError(scenario_id)
        return scenario
