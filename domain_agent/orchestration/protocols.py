"""Backends the turn orchestrator depends on.

ChatClient and DomainsClient satisfy these; tests pass doubles.
"""

from typing import Protocol, runtime_checkable

from domain_agent.api.models.chat import ChatResponse
from domain_agent.api.models.domains import VerificationResult


@runtime_checkable
class ChatBackend(Protocol):
    """Sends a user message and returns the assistant's reply."""

    async def send_turn(self, message: str, session_id: str = "") -> ChatResponse:
        """Raise ChatTransportError on failure."""
        ...


@runtime_checkable
class VerificationBackend(Protocol):
    """Checks availability for a batch of domains in one call."""

    async def check_domains(self, domains: list[str]) -> list[VerificationResult]:
        """Raise VerificationTransportError on failure."""
        ...
