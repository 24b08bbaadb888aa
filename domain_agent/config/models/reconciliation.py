"""Result reconciliation configuration models."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

DomainMatchMode = Literal["exact", "casefold", "idna"]


class PlaceholderConfig(BaseModel):
    """Degraded-mode placeholder generation."""

    score_min: int = Field(default=0, ge=0, description="Lowest placeholder score")
    score_max: int = Field(
        default=100,
        gt=0,
        description="Upper bound (exclusive) for placeholder scores",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the placeholder generator (None for entropy)",
    )

    @model_validator(mode="after")
    def check_range(self) -> "PlaceholderConfig":
        """Ensure the score range is not empty."""
        if self.score_max <= self.score_min:
            raise ValueError("score_max must be greater than score_min")
        return self


class ReconciliationConfig(BaseModel):
    """How verification results and generated reasons are merged."""

    domain_match: DomainMatchMode = Field(
        default="exact",
        description="Domain comparison: exact, casefold, or idna",
    )
    placeholder: PlaceholderConfig = Field(
        default_factory=PlaceholderConfig,
        description="Placeholder policy used when verification is unavailable",
    )
