"""Turn endpoint: one trainee message in, one character reply out."""

import base64

from fastapi import APIRouter

from rehearsal.api.dependencies import OrchestratorDep
from rehearsal.api.exceptions import (
    InvalidRequestError,
    ScenarioNotFoundAPIError,
    ServiceNotConfiguredAPIError,
    TurnFailedAPIError,
)
from rehearsal.api.models.turns import TurnRequest, TurnResponse
from rehearsal.conversation import EmptyMessageError, ScenarioNotFoundError, TurnFailedError
from rehearsal.observability.logging import get_logger
from rehearsal.providers import ServiceNotConfiguredError

logger = get_logger(__name__)

router = APIRouter()


@router.post("/turns", response_model=TurnResponse)
async def send_turn(request: TurnRequest, orchestrator: OrchestratorDep) -> TurnResponse:
    """Send a trainee message and get the simulated character's reply.

    Omitting ``conversation_id`` starts a new conversation briefed from
    ``scenario_id``. Narration, when configured and successful, is
    returned base64-encoded; its absence never fails the turn.

    Args:
        request: Trainee message and conversation reference
        orchestrator: Exchange orchestrator

    Returns:
        TurnResponse with the reply

    Raises:
        InvalidRequestError: Message is empty
        ScenarioNotFoundAPIError: Scenario for a new conversation is missing
        ServiceNotConfiguredAPIError: Chat provider has no credentials
        TurnFailedAPIError: Chat call or persistence failed
    """
    logger.debug(
        "turn_request",
        conversation_id=request.conversation_id,
        scenario_id=request.scenario_id,
        message_length=len(request.message),
    )

    try:
        result = await orchestrator.send_turn(
            request.message,
            conversation_id=request.conversation_id,
            scenario_id=request.scenario_id,
        )
    except EmptyMessageError as e:
        raise InvalidRequestError(e.user_message) from e
    except ScenarioNotFoundError as e:
        raise ScenarioNotFoundAPIError(e.user_message) from e
    except TurnFailedError as e:
        if isinstance(e.__cause__, ServiceNotConfiguredError):
            raise ServiceNotConfiguredAPIError(
                e.user_message, conversation_id=e.conversation_id
            ) from e
        raise TurnFailedAPIError(e.user_message, conversation_id=e.conversation_id) from e

    audio = result.audio
    return TurnResponse(
        conversation_id=result.conversation_id,
        assistant_text=result.assistant_text,
        audio=base64.b64encode(audio.payload).decode("ascii") if audio else None,
        audio_media_type=audio.media_type if audio else None,
        deferred=result.deferred,
    )
