"""Enums for the conversation domain."""

from enum import Enum


class MessageRole(str, Enum):
    """Who authored a transcript message."""

    USER = "user"
    ASSISTANT = "assistant"
