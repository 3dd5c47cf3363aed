"""FastAPI application factory.

Creates and configures the FastAPI application with middleware,
exception handlers, route registration and the idle-session sweeper.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rehearsal import __version__
from rehearsal.api.dependencies import get_stack, reset_dependencies
from rehearsal.api.exceptions import RehearsalAPIError
from rehearsal.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from rehearsal.api.routes import register_routes
from rehearsal.config import get_settings
from rehearsal.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run the idle-session sweeper for the lifetime of the app."""
    stack = app.dependency_overrides.get(get_stack, get_stack)()
    await stack.sweeper.start()
    try:
        yield
    finally:
        await stack.sweeper.stop()
        await reset_dependencies()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()
    logging_config = settings.observability.logging
    setup_logging(
        level=logging_config.level,
        format=logging_config.format,
        redact_pii=logging_config.redact_pii,
        cache_loggers=logging_config.cache_loggers,
    )

    app = FastAPI(
        title="Rehearsal API",
        description="Role-play training conversations with a simulated guest",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=settings.api.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)
    register_routes(app)

    logger.info(
        "app_created",
        debug=settings.debug,
        cors_origins=settings.api.cors_origins,
    )

    return app


def _error_response(status_code: int, body: ErrorBody) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=body).model_dump(mode="json", exclude_none=True),
    )


def _register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(RehearsalAPIError)
    async def rehearsal_api_error_handler(
        request: Request, exc: RehearsalAPIError
    ) -> JSONResponse:
        """Handle RehearsalAPIError and its subclasses."""
        logger.warning(
            "api_error",
            error_code=exc.error_code.value,
            message=exc.message,
            path=request.url.path,
        )
        return _error_response(
            exc.status_code,
            ErrorBody(
                code=exc.error_code,
                message=exc.message,
                conversation_id=exc.conversation_id,
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle FastAPI request validation errors."""
        logger.warning(
            "validation_error",
            errors=len(exc.errors()),
            path=request.url.path,
        )

        details = [
            ErrorDetail(
                field=".".join(str(loc) for loc in error["loc"]),
                message=error["msg"],
            )
            for error in exc.errors()
        ]
        return _error_response(
            400,
            ErrorBody(
                code=ErrorCode.INVALID_REQUEST,
                message="Request validation failed",
                details=details,
            ),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unexpected_error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )
        return _error_response(
            500,
            ErrorBody(
                code=ErrorCode.INTERNAL_ERROR,
                message="An unexpected error occurred",
            ),
        )

    logger.debug("exception_handlers_registered")


# Create the app instance for uvicorn
app = create_app()
