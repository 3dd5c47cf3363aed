"""Unit tests for configuration section models."""

import pytest
from pydantic import SecretStr, ValidationError

from rehearsal.config.models import (
    APIConfig,
    ChatProviderConfig,
    NarrationProviderConfig,
    RetryConfig,
    ScenarioConfig,
)


class TestAPIConfig:
    def test_cors_origins_from_comma_string(self) -> None:
        config = APIConfig(cors_origins="http://a.test, http://b.test")
        assert config.cors_origins == ["http://a.test", "http://b.test"]

    def test_port_range(self) -> None:
        with pytest.raises(ValidationError):
            APIConfig(port=0)


class TestRetryConfig:
    def test_rejects_zero_attempts(self) -> None:
        with pytest.raises(ValidationError):
            RetryConfig(max_attempts=0)

    def test_timeout_can_be_disabled(self) -> None:
        assert RetryConfig(attempt_timeout_seconds=None).attempt_timeout_seconds is None


class TestProviderConfigs:
    def test_chat_api_key_is_secret(self) -> None:
        config = ChatProviderConfig(api_key="sk-test")
        assert isinstance(config.api_key, SecretStr)
        assert "sk-test" not in repr(config)

    def test_unknown_chat_provider_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChatProviderConfig(provider="gpt")

    def test_narration_can_be_disabled(self) -> None:
        assert NarrationProviderConfig(provider="none").provider == "none"


def test_scenario_directory_default() -> None:
    assert ScenarioConfig().directory == "scenarios"
