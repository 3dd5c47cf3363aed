"""Bootstrap module wiring a complete Rehearsal stack from settings.

Used by the HTTP API and for local, in-process sessions such as
notebooks or a terminal client. Handles:
- Creating the session, transcript and scenario stores
- Creating chat and narration providers and the call executor
- Wiring the pending buffer, connectivity monitor and transcript view
- Creating the orchestrator, the idle sweeper and (with a sink) playback

Example usage:

    from rehearsal.bootstrap import bootstrap

    stack = await bootstrap(sink=my_sink)

    result = await stack.orchestrator.send_turn(
        "Welcome to Hillcrest Cellars!",
        scenario_id="first-time-wine-club",
    )
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta

from rehearsal.config import get_settings
from rehearsal.config.settings import Settings
from rehearsal.conversation import (
    ConnectivityMonitor,
    ExchangeOrchestrator,
    InMemoryScenarioSource,
    InMemorySessionStore,
    InMemoryTranscriptStore,
    PendingExchangeBuffer,
    ScenarioSource,
    SessionSweeper,
    TranscriptStore,
    TranscriptView,
)
from rehearsal.observability.logging import get_logger, setup_logging
from rehearsal.playback import AudioPlaybackQueue, AudioSink, probe_autoplay
from rehearsal.providers import (
    ChatProvider,
    NarrationProvider,
    ResilientCallExecutor,
    create_chat_provider,
    create_narration_provider,
)

logger = get_logger(__name__)


@dataclass
class RehearsalStack:
    """Every wired component, for callers that need more than the orchestrator."""

    settings: Settings
    sessions: InMemorySessionStore
    transcript: TranscriptStore
    scenarios: ScenarioSource
    pending: PendingExchangeBuffer
    view: TranscriptView
    monitor: ConnectivityMonitor
    executor: ResilientCallExecutor
    chat_provider: ChatProvider
    narration_provider: NarrationProvider | None
    orchestrator: ExchangeOrchestrator
    sweeper: SessionSweeper
    playback: AudioPlaybackQueue | None = None


def build_stack(
    settings: Settings | None = None,
    *,
    transcript: TranscriptStore | None = None,
    scenarios: ScenarioSource | None = None,
    chat_provider: ChatProvider | None = None,
    narration_provider: NarrationProvider | None = None,
    playback: AudioPlaybackQueue | None = None,
    notify: Callable[[str], None] | None = None,
) -> RehearsalStack:
    """Wire a stack from settings.

    Any collaborator passed in replaces the one settings would build.

    Args:
        settings: Settings (defaults to get_settings())
        transcript: Transcript store (default: in-memory)
        scenarios: Scenario source (default: settings.scenarios.directory)
        chat_provider: Chat provider override
        narration_provider: Narration provider override
        playback: Playback queue narration segments are enqueued to
        notify: Receives the offline banner

    Returns:
        RehearsalStack
    """
    settings = settings or get_settings()

    sessions = InMemorySessionStore(
        idle_window=timedelta(seconds=settings.sessions.idle_window_seconds)
    )
    if transcript is None:
        transcript = InMemoryTranscriptStore()
    if scenarios is None:
        scenarios = InMemoryScenarioSource.from_directory(settings.scenarios.directory)
    if chat_provider is None:
        chat_provider = create_chat_provider(settings.providers.chat)
    if narration_provider is None:
        narration_provider = create_narration_provider(settings.providers.narration)

    pending = PendingExchangeBuffer()
    view = TranscriptView()
    monitor = ConnectivityMonitor(transcript, pending, view=view, notify=notify)
    executor = ResilientCallExecutor.from_config(settings.retry)

    orchestrator = ExchangeOrchestrator(
        sessions=sessions,
        transcript=transcript,
        scenarios=scenarios,
        chat_provider=chat_provider,
        executor=executor,
        narration_provider=narration_provider,
        playback=playback,
        pending=pending,
        monitor=monitor,
        view=view,
    )
    sweeper = SessionSweeper(sessions, settings.sessions.sweep_interval_seconds)

    logger.info(
        "stack_built",
        chat_provider=chat_provider.provider_name,
        narration_provider=narration_provider.provider_name if narration_provider else None,
        playback=playback is not None,
    )

    return RehearsalStack(
        settings=settings,
        sessions=sessions,
        transcript=transcript,
        scenarios=scenarios,
        pending=pending,
        view=view,
        monitor=monitor,
        executor=executor,
        chat_provider=chat_provider,
        narration_provider=narration_provider,
        orchestrator=orchestrator,
        sweeper=sweeper,
        playback=playback,
    )


async def bootstrap(
    settings: Settings | None = None,
    *,
    sink: AudioSink | None = None,
    notify: Callable[[str], None] | None = None,
) -> RehearsalStack:
    """Configure logging and build a local stack with optional playback.

    With a sink, autoplay is probed once and the playback queue starts
    in gesture-required mode if the platform refuses autonomous audio.
    """
    settings = settings or get_settings()
    logging_config = settings.observability.logging
    setup_logging(
        level=logging_config.level,
        format=logging_config.format,
        redact_pii=logging_config.redact_pii,
        cache_loggers=logging_config.cache_loggers,
    )

    playback = None
    if sink is not None:
        autoplay_allowed = await probe_autoplay(sink)
        playback = AudioPlaybackQueue(sink, autoplay_allowed=autoplay_allowed)
        logger.info("playback_ready", autoplay_allowed=autoplay_allowed)

    return build_stack(settings, playback=playback, notify=notify)


async def close_stack(stack: RehearsalStack) -> None:
    """Stop background work and release provider connections."""
    await stack.sweeper.stop()
    if stack.playback is not None:
        await stack.playback.close()
    await stack.chat_provider.close()
    if stack.narration_provider is not None:
        await stack.narration_provider.close()
