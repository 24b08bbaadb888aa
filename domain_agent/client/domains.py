"""Domain check and suggestion endpoint client."""

from pydantic import ValidationError

from domain_agent.api.models.domains import (
    CheckDomainsRequest,
    CheckDomainsResponse,
    DomainSuggestion,
    SuggestDomainsRequest,
    SuggestDomainsResponse,
    VerificationResult,
)
from domain_agent.client.base import BackendClient
from domain_agent.client.errors import VerificationTransportError


class DomainsClient(BackendClient):
    """Client for the `/domains` endpoints.

    `check_domains` always issues a single batched request. Results come
    back in whatever order the backend finished them; callers match them
    to their input by domain string.
    """

    error_class = VerificationTransportError

    async def check_domains(self, domains: list[str]) -> list[VerificationResult]:
        """Check availability for a batch of domains.

        Duplicates are forwarded as-is. An empty batch returns [] without
        a request.

        Raises:
            VerificationTransportError: On network failure, non-success
                status, or a malformed body
        """
        if not domains:
            return []

        payload = CheckDomainsRequest(domains=list(domains))
        data = await self._request(
            "POST",
            "/domains/check",
            endpoint="domains_check",
            json=payload.model_dump(),
        )
        try:
            return CheckDomainsResponse.model_validate(data).results
        except ValidationError as exc:
            raise VerificationTransportError(
                "domain check response does not match the expected shape",
                details=exc.errors(include_url=False),
            ) from exc

    async def suggest_domains(
        self,
        keywords: list[str],
        *,
        tlds: list[str] | None = None,
        max_len: int | None = None,
        min_len: int | None = None,
        count: int | None = None,
    ) -> list[DomainSuggestion]:
        """Ask the backend for domain suggestions built from keywords."""
        payload = SuggestDomainsRequest(
            keywords=keywords,
            tlds=tlds,
            max_len=max_len,
            min_len=min_len,
            count=count,
        )
        data = await self._request(
            "POST",
            "/domains/suggest",
            endpoint="domains_suggest",
            json=payload.model_dump(exclude_none=True),
        )
        try:
            return SuggestDomainsResponse.model_validate(data).suggestions
        except ValidationError as exc:
            raise VerificationTransportError(
                "suggestion response does not match the expected shape",
                details=exc.errors(include_url=False),
            ) from exc
