"""Dependency injection for API routes.

Provides FastAPI dependencies for the wired Rehearsal stack. The stack
is built once from settings and can be overridden for testing with
``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends

from rehearsal.bootstrap import RehearsalStack, build_stack, close_stack
from rehearsal.config import get_settings
from rehearsal.config.settings import Settings
from rehearsal.conversation import ExchangeOrchestrator
from rehearsal.observability.logging import get_logger

logger = get_logger(__name__)

# Stack instance - created once and reused
_stack: RehearsalStack | None = None


def get_stack() -> RehearsalStack:
    """Get the shared Rehearsal stack, building it on first access.

    Returns:
        RehearsalStack wired from settings
    """
    global _stack
    if _stack is None:
        _stack = build_stack(get_settings())
        logger.info("stack_initialized")
    return _stack


def get_orchestrator(
    stack: Annotated[RehearsalStack, Depends(get_stack)],
) -> ExchangeOrchestrator:
    """Get the ExchangeOrchestrator of the shared stack."""
    return stack.orchestrator


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
StackDep = Annotated[RehearsalStack, Depends(get_stack)]
OrchestratorDep = Annotated[ExchangeOrchestrator, Depends(get_orchestrator)]


async def reset_dependencies() -> None:
    """Reset all cached dependencies.

    Used for testing to ensure fresh instances.
    Closes provider connections before resetting.
    """
    global _stack

    if _stack is not None:
        await close_stack(_stack)
        _stack = None

    get_settings.cache_clear()
