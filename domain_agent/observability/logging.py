"""Structured logging configuration using structlog.

JSON lines for production, colored console output for development.
Every event carries the application name and any per-turn context bound
through structlog contextvars.

Users type free text into the chat, so events are scrubbed of contact
details before rendering unless `redact_pii` is off. Domain names are
never scrubbed: they are the payload this package exists to log.
"""

import re
import sys
from collections.abc import Mapping
from typing import Any, cast

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

SENSITIVE_KEYS: frozenset[str] = frozenset({
    "password",
    "secret",
    "token",
    "api_key",
    "authorization",
    "access_token",
    "refresh_token",
    "email",
    "phone",
})

# Values under these keys are domain names or endpoints, logged verbatim.
DOMAIN_KEYS: frozenset[str] = frozenset({
    "domain",
    "domains",
    "base_url",
    "url",
})

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# Ten or more digits with common separators, not glued to a word, hyphen
# or domain label (so "1-800-555-0199.com" is left alone).
PHONE_PATTERN = re.compile(r"(?<![\w.-])\+?\(?\d[\d\s().-]{8,}\d(?![\w-]|\.\w)")

LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}


class PIIRedactor:
    """Processor that scrubs contact details from log events.

    Values under SENSITIVE_KEYS are replaced outright. Other strings are
    scanned for email addresses and phone numbers, except values under
    DOMAIN_KEYS.
    """

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        return cast(EventDict, self._redact_mapping(event_dict))

    def _redact_mapping(self, data: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in data.items():
            lowered = key.lower()
            if lowered in SENSITIVE_KEYS:
                result[key] = "[REDACTED]"
            elif lowered in DOMAIN_KEYS:
                result[key] = value
            else:
                result[key] = self._redact_value(value)
        return result

    def _redact_value(self, value: Any) -> Any:
        if isinstance(value, str):
            value = EMAIL_PATTERN.sub("[EMAIL]", value)
            return PHONE_PATTERN.sub("[PHONE]", value)
        if isinstance(value, Mapping):
            return self._redact_mapping(value)
        if isinstance(value, list | tuple):
            return [self._redact_value(item) for item in value]
        return value


def add_app_name(app_name: str) -> Processor:
    """Build a processor stamping every event with `app`."""

    def processor(_logger: WrappedLogger, _method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("app", app_name)
        return event_dict

    return processor


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    redact_pii: bool = True,
    app_name: str | None = None,
) -> None:
    """Configure structured logging.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        format: "json" for production, "console" for development
        redact_pii: Whether to scrub contact details from events
        app_name: Added to every event as `app` when given
    """
    processors: list[Processor] = [structlog.contextvars.merge_contextvars]
    if app_name:
        processors.append(add_app_name(app_name))
    processors += [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    if redact_pii:
        processors.append(PIIRedactor())

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(LEVELS.get(level.upper(), 20)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound to the given module name."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
