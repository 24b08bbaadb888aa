"""Reconciliation models.

A turn's candidate domains are reconciled into exactly one
ReconciledResult each. What feeds the merge is one of two explicit
verification outcomes: VerificationSucceeded carries the backend's
verdicts, VerificationUnavailable records why there are none and sends
the merge down the placeholder path.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from domain_agent.api.models.domains import VerificationResult


class CandidateDomain(BaseModel):
    """A domain proposed by the chat backend, not yet verified."""

    model_config = ConfigDict(frozen=True)

    domain: str
    reason: str = ""


class ReconciledResult(BaseModel):
    """The per-domain record shown to the user.

    Combines verification truth (or a placeholder) with the reason the
    backend gave when it generated the domain.
    """

    model_config = ConfigDict(frozen=True)

    domain: str = Field(..., description="Domain exactly as the chat backend sent it")
    available: bool = Field(..., description="Whether the domain can be registered")
    score: int | float | None = Field(default=None, description="Quality score, if known")
    signatures: list[str] | None = Field(
        default=None,
        description="Evidence kinds behind the verdict; None for placeholders",
    )
    reason: str = Field(default="", description="Generation-time rationale")
    price: str | None = Field(default=None, description="Price tier, if known")
    verified: bool = Field(
        default=True,
        description="False when the verdict is a placeholder or missing",
    )


@dataclass(frozen=True)
class VerificationSucceeded:
    """The verification backend answered."""

    results: list[VerificationResult]


@dataclass(frozen=True)
class VerificationUnavailable:
    """The verification backend could not be used for this turn."""

    error: Exception

    @property
    def reason(self) -> str:
        return str(self.error) or type(self.error).__name__


VerificationOutcome = VerificationSucceeded | VerificationUnavailable
