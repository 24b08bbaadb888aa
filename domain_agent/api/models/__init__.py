"""API wire models.

    from domain_agent.api.models import ChatResponse, VerificationResult
"""

from domain_agent.api.models.chat import (
    ChatPayload,
    ChatRequest,
    ChatResponse,
    DomainReason,
)
from domain_agent.api.models.domains import (
    CheckDomainsRequest,
    CheckDomainsResponse,
    DomainSuggestion,
    SuggestDomainsRequest,
    SuggestDomainsResponse,
    VerificationResult,
)
from domain_agent.api.models.session import SessionMessage, SessionSnapshot

__all__ = [
    # Chat
    "ChatPayload",
    "ChatRequest",
    "ChatResponse",
    "DomainReason",
    # Domains
    "CheckDomainsRequest",
    "CheckDomainsResponse",
    "DomainSuggestion",
    "SuggestDomainsRequest",
    "SuggestDomainsResponse",
    "VerificationResult",
    # Session
    "SessionMessage",
    "SessionSnapshot",
]
