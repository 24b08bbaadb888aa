"""Conversation transcript and session identity."""

from domain_agent.conversation.models import Message, MessageRole
from domain_agent.conversation.state import ConversationState

__all__ = ["ConversationState", "Message", "MessageRole"]
