"""Fixtures for API tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from rehearsal.api.app import create_app
from rehearsal.api.dependencies import get_stack
from rehearsal.bootstrap import RehearsalStack, build_stack
from rehearsal.config.settings import Settings
from rehearsal.conversation import InMemoryScenarioSource, InMemoryTranscriptStore
from rehearsal.providers import MockChatProvider


@pytest.fixture
def chat_provider() -> MockChatProvider:
    return MockChatProvider(default_response="Welcome!")


@pytest.fixture
def narration_provider():
    """No narration unless a test overrides this fixture."""
    return None


@pytest.fixture
def transcript() -> InMemoryTranscriptStore:
    return InMemoryTranscriptStore()


@pytest.fixture
def stack(scenario, chat_provider, narration_provider, transcript) -> RehearsalStack:
    settings = Settings(providers={"narration": {"provider": "none"}})
    return build_stack(
        settings,
        transcript=transcript,
        scenarios=InMemoryScenarioSource([scenario]),
        chat_provider=chat_provider,
        narration_provider=narration_provider,
    )


@pytest.fixture
def app(stack: RehearsalStack) -> FastAPI:
    """Create test FastAPI app."""
    app = create_app()
    app.dependency_overrides[get_stack] = lambda: stack

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client."""
    return TestClient(app)
