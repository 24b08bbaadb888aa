"""Chat request and response models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChatRequest(BaseModel):
    """Request body for POST /agent/chat."""

    message: str = Field(min_length=1)
    """The user's message text."""

    session_id: str = ""
    """Session identifier. Empty on the first turn of a conversation."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "I need a domain for a bakery",
                "session_id": "",
            }
        }
    )


class DomainReason(BaseModel):
    """Why the backend proposed a given domain."""

    domain: str
    reason: str = ""

    @field_validator("reason", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class ChatPayload(BaseModel):
    """Structured data attached to an assistant reply.

    Only present when the backend generated or recognised candidate
    domains. Unknown keys are kept but never interpreted.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    domains: list[str] = Field(default_factory=list)
    """Candidate domain names, in the order the backend proposed them."""

    domain_reasons: list[DomainReason] | None = Field(default=None, alias="domainReasons")
    """Per-domain rationale, when the backend produced any."""

    keywords: list[str] = Field(default_factory=list)
    """Keywords the backend extracted from the user's message."""

    @field_validator("domains", "keywords", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def has_domains(self) -> bool:
        return bool(self.domains)


class ChatResponse(BaseModel):
    """Response body for POST /agent/chat."""

    session_id: str = ""
    """Session identifier (assigned by the backend on the first turn)."""

    message: str
    """The assistant's reply text."""

    intent: str = ""
    """Backend intent classification. Opaque to the client."""

    action: str = ""
    """Backend action tag. Opaque to the client."""

    data: ChatPayload | None = None
    """Candidate domains and reasons, absent for plain replies."""

    timestamp: str
    """Reply time as sent by the backend (RFC 3339)."""
