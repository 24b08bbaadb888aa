"""Backend API clients.

Usage:
    from domain_agent.client import ChatClient, DomainsClient

    async with ChatClient() as chat, DomainsClient() as domains:
        reply = await chat.send_turn("I need a domain for a bakery")
        if reply.data and reply.data.domains:
            results = await domains.check_domains(reply.data.domains)
"""

from domain_agent.client.chat import ChatClient
from domain_agent.client.domains import DomainsClient
from domain_agent.client.errors import (
    ChatTransportError,
    DomainAgentClientError,
    MalformedResponseError,
    TransportError,
    VerificationTransportError,
)

__all__ = [
    "ChatClient",
    "DomainsClient",
    "ChatTransportError",
    "DomainAgentClientError",
    "MalformedResponseError",
    "TransportError",
    "VerificationTransportError",
]
