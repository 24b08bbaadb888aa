"""Domain Agent: conversational domain-name discovery.

A user chats with an AI backend that proposes candidate domains; every
candidate is independently checked for availability and shown together
with the reason it was proposed.
"""

__version__ = "0.1.0"
