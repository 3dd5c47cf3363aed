"""Connectivity endpoint: clients report that their connection returned."""

from fastapi import APIRouter
from pydantic import BaseModel

from rehearsal.api.dependencies import StackDep
from rehearsal.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/connectivity")


class ReplayResponse(BaseModel):
    """Outcome of replaying buffered exchanges."""

    replayed: int
    pending: int


@router.post("/online", response_model=ReplayResponse)
async def report_online(stack: StackDep) -> ReplayResponse:
    """Replay every buffered exchange in original order.

    Entries that still cannot be saved stay buffered for the next call.
    """
    replayed = await stack.monitor.handle_online()
    logger.debug("online_reported", replayed=replayed)
    return ReplayResponse(replayed=replayed, pending=len(stack.pending))
