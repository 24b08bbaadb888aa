"""Enums for turn orchestration."""

from enum import Enum


class TurnState(str, Enum):
    """Where the orchestrator is in the current turn."""

    IDLE = "idle"
    SENDING = "sending"
    AWAITING_VERIFICATION = "awaiting_verification"


class TurnOutcome(str, Enum):
    """How a call to `TurnOrchestrator.send` ended."""

    REJECTED = "rejected"  # empty input or a turn already in flight
    COMPLETED = "completed"  # reply without candidate domains
    VERIFIED = "verified"  # candidates reconciled with verification results
    DEGRADED = "degraded"  # candidates reconciled with placeholders
    FAILED = "failed"  # chat failed, fallback message appended
