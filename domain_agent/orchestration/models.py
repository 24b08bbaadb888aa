"""Turn result model."""

from pydantic import BaseModel, Field

from domain_agent.conversation.models import Message
from domain_agent.orchestration.enums import TurnOutcome
from domain_agent.reconciliation.models import ReconciledResult


class TurnResult(BaseModel):
    """What one call to `TurnOrchestrator.send` did."""

    outcome: TurnOutcome = Field(..., description="How the turn ended")
    reply: Message | None = Field(
        default=None,
        description="Assistant message appended this turn (the fallback on failure)",
    )
    results: list[ReconciledResult] | None = Field(
        default=None,
        description="Result list emitted this turn; None if none was emitted",
    )
    session_id: str = Field(default="", description="Session identifier after the turn")
    error: str | None = Field(default=None, description="Failure detail, if any")

    @property
    def accepted(self) -> bool:
        return self.outcome is not TurnOutcome.REJECTED
