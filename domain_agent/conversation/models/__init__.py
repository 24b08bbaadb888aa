"""Conversation domain models."""

from domain_agent.conversation.models.enums import MessageRole
from domain_agent.conversation.models.message import Message, utc_now

__all__ = ["Message", "MessageRole", "utc_now"]
