"""Conversation transcript endpoints."""

from fastapi import APIRouter, Query, Response

from rehearsal.api.dependencies import StackDep
from rehearsal.api.exceptions import PersistenceUnavailableAPIError, ScenarioNotFoundAPIError
from rehearsal.api.models.turns import ExchangeResponse, TranscriptResponse
from rehearsal.bootstrap import RehearsalStack
from rehearsal.conversation import (
    PersistenceUnavailableError,
    ScenarioNotFoundError,
    export_filename,
    transcript_to_markdown,
)
from rehearsal.conversation.models import Exchange, ExchangeStatus, Scenario
from rehearsal.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/conversations")


def _to_response(exchange: Exchange, status: ExchangeStatus) -> ExchangeResponse:
    return ExchangeResponse(
        id=exchange.id,
        role=exchange.role,
        content=exchange.content,
        timestamp=exchange.timestamp,
        status=status,
    )


async def _load_transcript(
    stack: RehearsalStack, conversation_id: str
) -> list[tuple[Exchange, ExchangeStatus]]:
    """Persisted exchanges followed by those still waiting in the pending buffer."""
    try:
        persisted = await stack.transcript.list(conversation_id)
    except PersistenceUnavailableError as e:
        raise PersistenceUnavailableAPIError(e.user_message) from e

    seen = {exchange.id for exchange in persisted}
    buffered = [
        exchange
        for exchange in stack.pending.for_conversation(conversation_id)
        if exchange.id not in seen
    ]
    return [(e, ExchangeStatus.CONFIRMED) for e in persisted] + [
        (e, ExchangeStatus.PENDING) for e in buffered
    ]


@router.get("/{conversation_id}/transcript", response_model=TranscriptResponse)
async def get_transcript(conversation_id: str, stack: StackDep) -> TranscriptResponse:
    """Get a conversation transcript, oldest first.

    Exchanges that are still waiting to be saved are included with
    status ``pending``.
    """
    entries = await _load_transcript(stack, conversation_id)
    return TranscriptResponse(
        conversation_id=conversation_id,
        exchanges=[_to_response(exchange, status) for exchange, status in entries],
    )


@router.get("/{conversation_id}/export")
async def export_transcript(
    conversation_id: str,
    stack: StackDep,
    scenario_id: str | None = Query(default=None, description="Scenario for the header"),
) -> Response:
    """Download a conversation as Markdown.

    The scenario defaults to the one the conversation was started with,
    while its session is still active.
    """
    if scenario_id is None:
        session = await stack.sessions.get(conversation_id)
        scenario_id = session.brief.scenario_id if session else None

    scenario: Scenario | None = None
    if scenario_id is not None:
        try:
            scenario = await stack.scenarios.get(scenario_id)
        except ScenarioNotFoundError as e:
            raise ScenarioNotFoundAPIError(e.user_message) from e

    entries = await _load_transcript(stack, conversation_id)
    markdown = transcript_to_markdown(scenario, [exchange for exchange, _ in entries])

    logger.info("transcript_exported", conversation_id=conversation_id, exchanges=len(entries))

    return Response(
        content=markdown,
        media_type="text/markdown",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )
