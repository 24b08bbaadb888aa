"""Reconciling generated domain candidates with verification results.

    from domain_agent.reconciliation import (
        DomainMatcher,
        ReasonIndex,
        candidates_from_payload,
        reconcile_verified,
    )
"""

from domain_agent.reconciliation.matching import DomainMatcher, ReasonIndex
from domain_agent.reconciliation.merge import (
    candidates_from_payload,
    reconcile_unverified,
    reconcile_verified,
)
from domain_agent.reconciliation.models import (
    CandidateDomain,
    ReconciledResult,
    VerificationOutcome,
    VerificationSucceeded,
    VerificationUnavailable,
)
from domain_agent.reconciliation.placeholder import (
    PlaceholderPolicy,
    RandomPlaceholderPolicy,
)

__all__ = [
    "CandidateDomain",
    "DomainMatcher",
    "PlaceholderPolicy",
    "RandomPlaceholderPolicy",
    "ReasonIndex",
    "ReconciledResult",
    "VerificationOutcome",
    "VerificationSucceeded",
    "VerificationUnavailable",
    "candidates_from_payload",
    "reconcile_unverified",
    "reconcile_verified",
]
