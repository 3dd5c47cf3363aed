"""Unit tests for Settings class and get_settings function."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from rehearsal.config import get_settings, reload_settings
from rehearsal.config.settings import Settings


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        settings = Settings()
        assert settings.app_name == "rehearsal"
        assert settings.debug is False
        assert settings.api.port == 8000

    def test_retry_defaults(self) -> None:
        """Three attempts, 1s base delay doubling, 30s per attempt."""
        retry = Settings().retry
        assert retry.max_attempts == 3
        assert retry.base_delay_seconds == 1.0
        assert retry.multiplier == 2.0
        assert retry.attempt_timeout_seconds == 30.0

    def test_session_defaults(self) -> None:
        sessions = Settings().sessions
        assert sessions.idle_window_seconds == 3600
        assert sessions.sweep_interval_seconds == 3600

    def test_provider_defaults(self) -> None:
        providers = Settings().providers
        assert providers.chat.provider == "anthropic"
        assert providers.chat.max_tokens == 1000
        assert providers.chat.temperature == 0.7
        assert providers.narration.provider == "elevenlabs"
        assert providers.narration.model_id == "eleven_monolingual_v1"

    def test_env_var_overrides_nested_value(self, env_override) -> None:
        with env_override({"REHEARSAL_RETRY__MAX_ATTEMPTS": "5"}):
            settings = Settings()
        assert settings.retry.max_attempts == 5

    def test_invalid_value_fails_fast(self, env_override) -> None:
        with env_override({"REHEARSAL_RETRY__MAX_ATTEMPTS": "0"}):
            with pytest.raises(ValidationError):
                Settings()


class TestGetSettings:
    """Tests for get_settings function."""

    @pytest.fixture
    def config_env(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> Path:
        monkeypatch.setenv("REHEARSAL_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("REHEARSAL_ENV", "nonexistent")
        return test_config_dir

    def test_reads_toml(self, config_env: Path, mock_toml_files) -> None:
        mock_toml_files(
            {"default.toml": "app_name = 'test'\n[providers.chat]\nprovider = 'mock'"}
        )

        settings = get_settings()

        assert settings.app_name == "test"
        assert settings.providers.chat.provider == "mock"

    def test_env_var_beats_toml(
        self, config_env: Path, mock_toml_files, env_override
    ) -> None:
        mock_toml_files({"default.toml": "[sessions]\nidle_window_seconds = 60"})

        with env_override({"REHEARSAL_SESSIONS__IDLE_WINDOW_SECONDS": "120"}):
            settings = get_settings()

        assert settings.sessions.idle_window_seconds == 120

    def test_settings_cached(self, config_env: Path, mock_toml_files) -> None:
        mock_toml_files({"default.toml": "app_name = 'test'"})
        assert get_settings() is get_settings()

    def test_reload_settings(self, config_env: Path, mock_toml_files) -> None:
        mock_toml_files({"default.toml": "app_name = 'first'"})
        assert get_settings().app_name == "first"

        mock_toml_files({"default.toml": "app_name = 'second'"})
        assert reload_settings().app_name == "second"
