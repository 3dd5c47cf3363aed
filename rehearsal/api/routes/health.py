"""Health check and metrics endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel

from rehearsal import __version__
from rehearsal.api.dependencies import StackDep
from rehearsal.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Service status."""

    status: str
    version: str
    chat_provider: str
    narration_enabled: bool
    active_sessions: int
    pending_exchanges: int
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(stack: StackDep) -> HealthResponse:
    """Check service health status.

    The service is ``degraded`` while exchanges are waiting for the
    transcript store.
    """
    pending = len(stack.pending)
    response = HealthResponse(
        status="degraded" if pending else "healthy",
        version=__version__,
        chat_provider=stack.chat_provider.provider_name,
        narration_enabled=stack.narration_provider is not None,
        active_sessions=await stack.sessions.count(),
        pending_exchanges=pending,
        timestamp=datetime.now(UTC),
    )

    logger.debug("health_check_completed", status=response.status)

    return response


@router.get("/metrics")
async def get_metrics() -> Response:
    """Get Prometheus metrics in text format for scraping."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
