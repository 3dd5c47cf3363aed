"""API route registration."""

from fastapi import APIRouter, FastAPI

from rehearsal.observability.logging import get_logger

logger = get_logger(__name__)


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all routes.

    Returns:
        APIRouter with all v1 routes registered
    """
    router = APIRouter(prefix="/v1")

    from rehearsal.api.routes.connectivity import router as connectivity_router
    from rehearsal.api.routes.conversations import router as conversations_router
    from rehearsal.api.routes.turns import router as turns_router

    router.include_router(turns_router, tags=["Turns"])
    router.include_router(conversations_router, tags=["Conversations"])
    router.include_router(connectivity_router, tags=["Connectivity"])

    logger.debug("v1_router_created", routes=["turns", "conversations", "connectivity"])

    return router


def register_routes(app: FastAPI) -> None:
    """Register all routes with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.include_router(create_v1_router())

    # Health and metrics at root level
    from rehearsal.api.routes.health import router as health_router

    app.include_router(health_router, tags=["Health"])

    logger.info("routes_registered")
