"""Tests for domain matching and reason lookup."""

import pytest

from domain_agent.api.models.chat import DomainReason
from domain_agent.reconciliation import DomainMatcher, ReasonIndex


class TestDomainMatcher:
    """Tests for DomainMatcher."""

    def test_exact_is_byte_for_byte(self) -> None:
        """Exact mode does not normalize anything."""
        matcher = DomainMatcher("exact")
        assert matcher.same("bakery.com", "bakery.com")
        assert not matcher.same("Bakery.com", "bakery.com")
        assert not matcher.same("bakery.com.", "bakery.com")

    def test_casefold_ignores_case_and_root_dot(self) -> None:
        """Casefold mode lower-cases and drops a trailing dot."""
        matcher = DomainMatcher("casefold")
        assert matcher.same("Bakery.COM.", "bakery.com")
        assert not matcher.same("bakery.com", "bakery.net")

    def test_idna_matches_punycode(self) -> None:
        """IDNA mode compares unicode and punycode forms equally."""
        matcher = DomainMatcher("idna")
        assert matcher.same("München.de", "xn--mnchen-3ya.de")
        assert matcher.same("bakery.com", "BAKERY.com.")

    def test_unknown_mode_rejected(self) -> None:
        """Unsupported modes fail fast."""
        with pytest.raises(ValueError):
            DomainMatcher("fuzzy")  # type: ignore[arg-type]


class TestReasonIndex:
    """Tests for ReasonIndex."""

    def test_lookup_and_miss(self) -> None:
        """Known domains return their reason, others an empty string."""
        index = ReasonIndex([DomainReason(domain="a.com", reason="short")])

        assert index.reason_for("a.com") == "short"
        assert index.reason_for("b.com") == ""

    def test_no_reasons(self) -> None:
        """A payload without reasons yields empty reasons everywhere."""
        index = ReasonIndex(None)
        assert len(index) == 0
        assert index.reason_for("a.com") == ""

    def test_first_reason_wins(self) -> None:
        """Duplicate entries keep the first reason."""
        index = ReasonIndex([
            DomainReason(domain="a.com", reason="first"),
            DomainReason(domain="a.com", reason="second"),
        ])
        assert index.reason_for("a.com") == "first"

    def test_uses_matcher(self) -> None:
        """Lookups go through the configured matcher."""
        reasons = [DomainReason(domain="Bakery.com", reason="brandable")]

        assert ReasonIndex(reasons).reason_for("bakery.com") == ""
        assert ReasonIndex(reasons, DomainMatcher("casefold")).reason_for("bakery.com") == (
            "brandable"
        )
