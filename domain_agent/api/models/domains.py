"""Domain check and suggestion models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CheckDomainsRequest(BaseModel):
    """Request body for POST /domains/check."""

    domains: list[str] = Field(min_length=1)


class VerificationResult(BaseModel):
    """Availability verdict for one domain.

    `signatures` lists the evidence kinds (DNS, WHOIS, SSL) that showed
    the domain is registered; it is empty for available domains.
    """

    domain: str
    available: bool
    signatures: list[str] = Field(default_factory=list)
    score: float | None = None
    price: str | None = None

    @field_validator("signatures", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class CheckDomainsResponse(BaseModel):
    """Response body for POST /domains/check."""

    results: list[VerificationResult] = Field(default_factory=list)
    total: int = 0

    @field_validator("results", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class SuggestDomainsRequest(BaseModel):
    """Request body for POST /domains/suggest."""

    keywords: list[str] = Field(min_length=1)
    tlds: list[str] | None = None
    max_len: int | None = Field(default=None, gt=0)
    min_len: int | None = Field(default=None, gt=0)
    count: int | None = Field(default=None, gt=0)


class DomainSuggestion(BaseModel):
    """A generated domain suggestion."""

    model_config = ConfigDict(extra="ignore")

    domain: str
    score: float = 0.0
    reason: str = ""
    length: int = 0
    memorability: float = 0.0


class SuggestDomainsResponse(BaseModel):
    """Response body for POST /domains/suggest."""

    suggestions: list[DomainSuggestion] = Field(default_factory=list)
    count: int = 0
