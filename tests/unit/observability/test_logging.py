"""Tests for structured logging."""

import json

import pytest
import structlog

from domain_agent.observability.logging import (
    PIIRedactor,
    get_logger,
    setup_logging,
)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_json_output_is_valid_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON format emits one JSON object per event."""
        setup_logging(level="INFO", format="json", redact_pii=False)
        get_logger("test").info("turn_finished", outcome="verified")

        parsed = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert parsed["event"] == "turn_finished"
        assert parsed["outcome"] == "verified"
        assert parsed["level"] == "info"
        assert "timestamp" in parsed

    def test_level_filters_lower_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Events below the configured level are dropped."""
        setup_logging(level="WARNING", format="json", redact_pii=False)
        logger = get_logger("test")
        logger.info("quiet_event")
        logger.warning("loud_event")

        err = capsys.readouterr().err
        assert "quiet_event" not in err
        assert "loud_event" in err

    def test_console_format(self) -> None:
        """Console format is accepted for development."""
        setup_logging(level="DEBUG", format="console", redact_pii=False)
        get_logger("test").debug("test_message")

    def test_pii_redacted_in_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """With redaction on, user text in events is scrubbed."""
        setup_logging(level="INFO", format="json", redact_pii=True)
        get_logger("test").info("user_text", content="mail me at jane@example.com")

        parsed = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert parsed["content"] == "mail me at [EMAIL]"

    def test_app_name_on_every_event(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The configured application name is stamped on each event."""
        setup_logging(level="INFO", format="json", redact_pii=False, app_name="domain-agent")
        get_logger("test").info("turn_finished")

        parsed = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert parsed["app"] == "domain-agent"

    def test_bound_context_appears(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Context bound through contextvars is merged into events."""
        setup_logging(level="INFO", format="json", redact_pii=False)
        with structlog.contextvars.bound_contextvars(turn_number=3):
            get_logger("test").info("inside_turn")

        parsed = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert parsed["turn_number"] == 3


class TestPIIRedactor:
    """Tests for PII redaction."""

    @pytest.fixture
    def redactor(self) -> PIIRedactor:
        """Create a PIIRedactor instance."""
        return PIIRedactor()

    def test_redacts_sensitive_keys(self, redactor: PIIRedactor) -> None:
        """Values under sensitive key names are replaced."""
        event_dict = {"token": "abc123xyz", "api_key": "key123", "other": "value"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["token"] == "[REDACTED]"
        assert result["api_key"] == "[REDACTED]"
        assert result["other"] == "value"

    def test_redacts_phone_pattern(self, redactor: PIIRedactor) -> None:
        """Phone numbers in free text are replaced."""
        event_dict = {"message": "Call me at +1-555-123-4567 please"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert "[PHONE]" in result["message"]

    def test_handles_nested_structures(self, redactor: PIIRedactor) -> None:
        """Dicts and lists are walked recursively."""
        event_dict = {
            "user": {"email": "user@example.com", "name": "John"},
            "notes": ["write to a@b.io", 7],
        }
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["user"] == {"email": "[REDACTED]", "name": "John"}
        assert result["notes"] == ["write to [EMAIL]", 7]

    def test_preserves_domain_names(self, redactor: PIIRedactor) -> None:
        """Domain names are not mistaken for PII."""
        event_dict = {
            "event": "verification_result_missing",
            "domain": "freshbakery.com",
            "candidates": 2,
        }
        result = redactor(None, None, event_dict)  # type: ignore
        assert result == event_dict

    def test_domain_keys_never_scrubbed(self, redactor: PIIRedactor) -> None:
        """Digit-heavy domains under domain keys are logged verbatim."""
        event_dict = {
            "domain": "1-800-555-0199.com",
            "domains": ["18005550199.com", "call-555-123-4567.io"],
        }
        result = redactor(None, None, event_dict)  # type: ignore
        assert result == event_dict

    def test_domain_in_free_text_kept(self, redactor: PIIRedactor) -> None:
        """Domain-like digit runs inside text are not taken for phone numbers."""
        event_dict = {"reason": "1-800-555-0199.com reads like a hotline"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["reason"] == "1-800-555-0199.com reads like a hotline"

    def test_phone_at_sentence_end(self, redactor: PIIRedactor) -> None:
        """A number closing a sentence is still redacted."""
        event_dict = {"content": "Reach me on (555) 123-4567."}
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["content"] == "Reach me on [PHONE]."
