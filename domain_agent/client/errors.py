"""Client exception hierarchy.

Everything the HTTP clients raise derives from DomainAgentClientError.
Transport-level failures (network errors, non-success statuses, bodies
that do not match the wire contract) are TransportError subclasses, one
per backend, so callers can tell a chat failure from a verification
failure.
"""

from typing import Any


class DomainAgentClientError(Exception):
    """Base exception for client errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class TransportError(DomainAgentClientError):
    """Backend unreachable, returned a non-success status, or sent garbage."""


class ChatTransportError(TransportError):
    """Raised when the chat endpoint fails."""


class MalformedResponseError(ChatTransportError):
    """Raised when a chat response cannot be interpreted."""


class VerificationTransportError(TransportError):
    """Raised when the domain check or suggestion endpoint fails."""
