"""Test factories for creating test data."""

from tests.factories.chat import ChatResponseFactory, VerificationResultFactory

__all__ = [
    "ChatResponseFactory",
    "VerificationResultFactory",
]
