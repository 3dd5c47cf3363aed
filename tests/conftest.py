"""Shared test fixtures for the Rehearsal test suite."""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog

from rehearsal.conversation.models import (
    BehavioralInstructions,
    ClientPersonality,
    CustomerProfile,
    Preferences,
    Scenario,
    WineryInfo,
)


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            toml_file = test_config_dir / filename
            toml_file.write_text(content)

    return _create_toml_files


class EnvOverrideContext:
    """Context manager for temporarily setting environment variables."""

    def __init__(self, overrides: dict[str, str]) -> None:
        self.overrides = overrides
        self.original_env: dict[str, str | None] = {}

    def __enter__(self) -> None:
        for key, value in self.overrides.items():
            self.original_env[key] = os.environ.get(key)
            os.environ[key] = value

    def __exit__(self, *args: Any) -> None:
        for key in self.overrides:
            if self.original_env[key] is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = self.original_env[key]


@pytest.fixture
def env_override() -> Generator[Callable[[dict[str, str]], EnvOverrideContext], None, None]:
    """Context manager for temporarily setting environment variables.

    Usage:
        def test_something(env_override):
            with env_override({"REHEARSAL_DEBUG": "true"}):
                # test code here
    """

    def _env_override(overrides: dict[str, str]) -> EnvOverrideContext:
        return EnvOverrideContext(overrides)

    yield _env_override


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache and TOML source before and after each test.

    This ensures test isolation for configuration tests.
    """
    from rehearsal.config import get_settings
    from rehearsal.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Restore structlog defaults around each test.

    Loggers configured by one test must not keep writing to a capture
    stream pytest has already closed.
    """
    monkeypatch.setenv("REHEARSAL_OBSERVABILITY__LOGGING__CACHE_LOGGERS", "false")
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def scenario() -> Scenario:
    """A fully populated tasting-room scenario."""
    return Scenario(
        id="club-visit",
        title="First-Time Wine Club Member",
        description="Help a first-time visitor understand wine club benefits.",
        difficulty="Beginner",
        voice_id="voice-guest",
        winery_info=WineryInfo(
            name="Hillcrest Cellars",
            location="Sonoma County",
            specialties=["Pinot Noir", "Chardonnay"],
        ),
        customer_profile=CustomerProfile(
            names=["Sarah Thompson", "James Thompson"],
            home_location="San Francisco",
            occupation="Teacher",
            visit_reason="Anniversary weekend",
        ),
        client_personality=ClientPersonality(
            knowledge_level="Beginner",
            budget="Moderate",
            traits=["curious", "value-conscious"],
            preferences=Preferences(
                favorite_wines=["Rosé"],
                dislikes=["Oaky whites"],
                interests=["Food pairing"],
            ),
        ),
        behavioral_instructions=BehavioralInstructions(
            general_behavior=["Ask what the club includes"],
            tasting_behavior=["Ask for simple flavor descriptions"],
            purchase_intentions=["Buy two bottles of the favorite"],
        ),
        evaluation_criteria=["Explains club benefits"],
    )
