"""Transcript message model."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from domain_agent.conversation.models.enums import MessageRole


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class Message(BaseModel):
    """One entry of the conversation transcript. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    role: MessageRole = Field(..., description="Author of the message")
    content: str = Field(..., description="Message text")
    timestamp: datetime = Field(default_factory=utc_now, description="When it was said")

    @classmethod
    def user(cls, content: str, timestamp: datetime | None = None) -> "Message":
        return cls(role=MessageRole.USER, content=content, timestamp=timestamp or utc_now())

    @classmethod
    def assistant(cls, content: str, timestamp: datetime | None = None) -> "Message":
        return cls(
            role=MessageRole.ASSISTANT,
            content=content,
            timestamp=timestamp or utc_now(),
        )
