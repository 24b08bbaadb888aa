"""Merging generated candidates with verification results."""

from domain_agent.api.models.chat import ChatPayload
from domain_agent.api.models.domains import VerificationResult
from domain_agent.observability.logging import get_logger
from domain_agent.reconciliation.matching import DomainMatcher, ReasonIndex
from domain_agent.reconciliation.models import CandidateDomain, ReconciledResult
from domain_agent.reconciliation.placeholder import PlaceholderPolicy

logger = get_logger(__name__)


def candidates_from_payload(
    payload: ChatPayload,
    index: ReasonIndex,
) -> list[CandidateDomain]:
    """Pair each proposed domain with its reason, keeping payload order.

    Duplicates are kept: every proposed entry becomes one candidate.
    """
    return [
        CandidateDomain(domain=domain, reason=index.reason_for(domain))
        for domain in payload.domains
    ]


def reconcile_verified(
    candidates: list[CandidateDomain],
    results: list[VerificationResult],
    matcher: DomainMatcher | None = None,
) -> list[ReconciledResult]:
    """Attach verification verdicts to candidates.

    Returns one row per candidate, in candidate order regardless of the
    order the verifier answered in. A candidate without a verdict is
    reported unavailable and unverified. Verdicts for domains nobody
    asked about are dropped.
    """
    matcher = matcher or DomainMatcher()
    verdicts: dict[str, VerificationResult] = {}
    for result in results:
        verdicts.setdefault(matcher.key(result.domain), result)

    reconciled: list[ReconciledResult] = []
    matched: set[str] = set()
    for candidate in candidates:
        key = matcher.key(candidate.domain)
        verdict = verdicts.get(key)
        if verdict is None:
            logger.warning("verification_result_missing", domain=candidate.domain)
            reconciled.append(
                ReconciledResult(
                    domain=candidate.domain,
                    available=False,
                    signatures=[],
                    reason=candidate.reason,
                    verified=False,
                )
            )
            continue

        matched.add(key)
        reconciled.append(
            ReconciledResult(
                domain=candidate.domain,
                available=verdict.available,
                score=verdict.score,
                signatures=list(verdict.signatures),
                reason=candidate.reason,
                price=verdict.price,
            )
        )

    unexpected = [result.domain for result in results if matcher.key(result.domain) not in matched]
    if unexpected:
        logger.warning("verification_result_unexpected", domains=unexpected)

    return reconciled


def reconcile_unverified(
    candidates: list[CandidateDomain],
    policy: PlaceholderPolicy,
) -> list[ReconciledResult]:
    """Degraded mode: one placeholder row per candidate, candidate order."""
    reconciled = []
    for candidate in candidates:
        available, score = policy.placeholder(candidate.domain)
        reconciled.append(
            ReconciledResult(
                domain=candidate.domain,
                available=available,
                score=score,
                reason=candidate.reason,
                verified=False,
            )
        )
    return reconciled
