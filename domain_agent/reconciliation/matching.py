"""Domain string matching.

The chat and verification backends are not guaranteed to normalize
domain names the same way, so how two domain strings are compared is a
configuration choice rather than a guess:

- ``exact``: byte-for-byte equality
- ``casefold``: lower-case, one trailing root dot removed
- ``idna``: casefold, then each label IDNA (punycode) encoded
"""

from collections.abc import Iterable

from domain_agent.api.models.chat import DomainReason
from domain_agent.config.models.reconciliation import DomainMatchMode
from domain_agent.observability.logging import get_logger
from domain_agent.observability.metrics import REASON_MISSES

logger = get_logger(__name__)


class DomainMatcher:
    """Maps domain strings to comparison keys for one match mode."""

    def __init__(self, mode: DomainMatchMode = "exact") -> None:
        if mode not in ("exact", "casefold", "idna"):
            raise ValueError(f"Unknown domain match mode: {mode}")
        self.mode = mode

    def key(self, domain: str) -> str:
        if self.mode == "exact":
            return domain

        folded = domain.strip().lower()
        if folded.endswith("."):
            folded = folded[:-1]
        if self.mode == "casefold":
            return folded

        return ".".join(_idna_label(label) for label in folded.split("."))

    def same(self, left: str, right: str) -> bool:
        return self.key(left) == self.key(right)


def _idna_label(label: str) -> str:
    if label.isascii():
        return label
    try:
        return label.encode("idna").decode("ascii")
    except UnicodeError:
        return label


class ReasonIndex:
    """Lookup from domain to its generation-time reason.

    The first reason given for a key wins. A miss is not an error: it
    resolves to an empty string and is logged at debug level.
    """

    def __init__(
        self,
        reasons: Iterable[DomainReason] | None,
        matcher: DomainMatcher | None = None,
    ) -> None:
        self._matcher = matcher or DomainMatcher()
        self._reasons: dict[str, str] = {}
        for item in reasons or ():
            self._reasons.setdefault(self._matcher.key(item.domain), item.reason)

    def __len__(self) -> int:
        return len(self._reasons)

    def reason_for(self, domain: str) -> str:
        reason = self._reasons.get(self._matcher.key(domain))
        if reason is None:
            REASON_MISSES.inc()
            logger.debug("reason_not_found", domain=domain, match_mode=self._matcher.mode)
            return ""
        return reason
