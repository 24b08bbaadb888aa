"""Per-turn orchestration of chat, verification and result reconciliation.

Usage:
    from domain_agent.client import ChatClient, DomainsClient
    from domain_agent.orchestration import TurnOrchestrator

    async with ChatClient() as chat, DomainsClient() as domains:
        orchestrator = TurnOrchestrator(chat, domains)
        turn = await orchestrator.send("I need a domain for a bakery")
        for row in orchestrator.results:
            print(row.domain, row.available, row.reason)
"""

from domain_agent.orchestration.enums import TurnOutcome, TurnState
from domain_agent.orchestration.models import TurnResult
from domain_agent.orchestration.orchestrator import TurnOrchestrator, parse_timestamp
from domain_agent.orchestration.protocols import ChatBackend, VerificationBackend

__all__ = [
    "ChatBackend",
    "TurnOrchestrator",
    "TurnOutcome",
    "TurnResult",
    "TurnState",
    "VerificationBackend",
    "parse_timestamp",
]
