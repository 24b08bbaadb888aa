"""Backend endpoint configuration models."""

from pydantic import BaseModel, Field


class BackendConfig(BaseModel):
    """Where the chat and domain-check endpoints live.

    Both endpoints share one API root (`/agent/*` and `/domains/*`).
    """

    base_url: str = Field(
        default="http://localhost:8080/api",
        description="API root shared by the chat and domain endpoints",
    )
    chat_timeout: float = Field(
        default=60.0,
        gt=0,
        description="Chat request timeout in seconds",
    )
    verification_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Domain check request timeout in seconds",
    )
