"""Conversation configuration models."""

from pydantic import BaseModel, Field

DEFAULT_GREETING = (
    "Hello! I'm Domain Agent. Tell me about your project "
    "and I'll help you find the perfect domain."
)
DEFAULT_ERROR_MESSAGE = "Sorry, something went wrong. Please try again later."


class ConversationConfig(BaseModel):
    """Conversation transcript configuration."""

    greeting: str = Field(
        default=DEFAULT_GREETING,
        description="Assistant message opening every conversation (empty disables)",
    )
    error_message: str = Field(
        default=DEFAULT_ERROR_MESSAGE,
        min_length=1,
        description="Assistant message appended when a chat turn fails",
    )
