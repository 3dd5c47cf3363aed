"""Tests for structured logging."""

import json

import pytest
import structlog

from rehearsal.observability.logging import (
    PIIRedactor,
    get_logger,
    setup_logging,
)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_json_format_renders_event_and_context(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        setup_logging(level="INFO", format="json", redact_pii=False, cache_loggers=False)
        structlog.contextvars.bind_contextvars(conversation_id="conv-1")
        try:
            get_logger("test").info("turn_started", message_length=5)
        finally:
            structlog.contextvars.clear_contextvars()

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "turn_started"
        assert record["conversation_id"] == "conv-1"
        assert record["message_length"] == 5
        assert record["level"] == "info"

    def test_level_filters_lower_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(level="WARNING", format="json", redact_pii=False, cache_loggers=False)
        logger = get_logger("test")

        logger.info("ignored")
        logger.warning("kept")

        err = capsys.readouterr().err
        assert "ignored" not in err
        assert "kept" in err

    def test_console_format(self) -> None:
        setup_logging(level="DEBUG", format="console", redact_pii=False, cache_loggers=False)
        # Should not raise
        get_logger("test").debug("test_message")

    def test_redaction_applied_when_enabled(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        setup_logging(level="INFO", format="json", redact_pii=True, cache_loggers=False)
        get_logger("test").info("provider_call", api_key="sk-live-123")

        assert "sk-live-123" not in capsys.readouterr().err


class TestPIIRedactor:
    """Tests for PII redaction."""

    @pytest.fixture
    def redactor(self) -> PIIRedactor:
        return PIIRedactor()

    def test_redacts_provider_keys(self, redactor: PIIRedactor) -> None:
        event_dict = {"x-api-key": "abc", "xi-api-key": "def", "operation": "chat"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["x-api-key"] == "[REDACTED]"
        assert result["xi-api-key"] == "[REDACTED]"
        assert result["operation"] == "chat"

    def test_redacts_message_bodies(self, redactor: PIIRedactor) -> None:
        """Transcript text never reaches the log output."""
        event_dict = {"content": "I'd like the Pinot", "message_length": 18}
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["content"] == "[REDACTED]"
        assert result["message_length"] == 18

    def test_redacts_email_pattern_in_string_value(self, redactor: PIIRedactor) -> None:
        event_dict = {"error": "Contact user@example.com for help"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert "user@example.com" not in result["error"]
        assert "[EMAIL]" in result["error"]

    def test_redacts_phone_pattern_in_string_value(self, redactor: PIIRedactor) -> None:
        event_dict = {"error": "Call me at +1-555-123-4567 please"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert "+1-555-123-4567" not in result["error"]
        assert "[PHONE]" in result["error"]

    def test_handles_nested_dicts(self, redactor: PIIRedactor) -> None:
        event_dict = {"headers": {"authorization": "Bearer x", "accept": "audio/mpeg"}}
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["headers"]["authorization"] == "[REDACTED]"
        assert result["headers"]["accept"] == "audio/mpeg"
