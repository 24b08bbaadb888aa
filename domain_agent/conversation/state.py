"""Conversation state: the transcript and the session identifier."""

from collections.abc import Sequence

from domain_agent.conversation.models import Message
from domain_agent.observability.logging import get_logger

logger = get_logger(__name__)


class ConversationState:
    """Append-only transcript plus a write-once session identifier.

    This is the only place either is mutated. The transcript keeps
    insertion order; entries are never reordered or removed. The session
    identifier starts empty and takes the first non-empty value offered
    through `set_session_if_unset`.
    """

    def __init__(self, greeting: str | None = None) -> None:
        self._messages: list[Message] = []
        self._session_id = ""
        if greeting:
            self._messages.append(Message.assistant(greeting))

    @property
    def messages(self) -> Sequence[Message]:
        """Read-only view of the transcript, oldest first."""
        return tuple(self._messages)

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def has_session(self) -> bool:
        return bool(self._session_id)

    def __len__(self) -> int:
        return len(self._messages)

    def append_message(self, message: Message) -> None:
        """Append a message to the end of the transcript."""
        self._messages.append(message)

    def set_session_if_unset(self, session_id: str) -> bool:
        """Adopt `session_id` unless one is already set.

        Empty values are ignored so that a backend omitting the ID does
        not consume the one assignment.

        Returns:
            True if the value was assigned
        """
        if self._session_id or not session_id:
            return False
        self._session_id = session_id
        logger.debug("session_assigned", session_id=session_id)
        return True
