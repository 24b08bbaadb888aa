"""Session lookup models (GET /agent/session/{id})."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class SessionMessage(BaseModel):
    """One message as recorded by the backend."""

    role: str
    content: str
    timestamp: datetime


class SessionSnapshot(BaseModel):
    """Server-side view of a conversation session."""

    id: str
    messages: list[SessionMessage] = Field(default_factory=list)
    context: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime
