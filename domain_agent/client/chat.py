"""Chat endpoint client."""

from pydantic import ValidationError

from domain_agent.api.models.chat import ChatRequest, ChatResponse
from domain_agent.api.models.session import SessionSnapshot
from domain_agent.client.base import BackendClient
from domain_agent.client.errors import ChatTransportError, MalformedResponseError


class ChatClient(BackendClient):
    """Client for the conversational `/agent` endpoints.

    Usage:
        async with ChatClient(base_url="http://localhost:8080/api") as chat:
            response = await chat.send_turn("I need a domain for a bakery")
            follow_up = await chat.send_turn("shorter please", response.session_id)
    """

    error_class = ChatTransportError

    async def send_turn(self, message: str, session_id: str = "") -> ChatResponse:
        """Send one user message.

        Args:
            message: The user's text, sent verbatim
            session_id: Empty on the first turn, then the backend-assigned ID

        Raises:
            ChatTransportError: On network failure or non-success status
            MalformedResponseError: If the body does not match ChatResponse
        """
        payload = ChatRequest(message=message, session_id=session_id)
        data = await self._request(
            "POST",
            "/agent/chat",
            endpoint="chat",
            json=payload.model_dump(),
        )
        try:
            return ChatResponse.model_validate(data)
        except ValidationError as exc:
            raise MalformedResponseError(
                "chat response does not match the expected shape",
                details=exc.errors(include_url=False),
            ) from exc

    async def get_session(self, session_id: str) -> SessionSnapshot:
        """Fetch the backend's record of a session."""
        data = await self._request(
            "GET",
            f"/agent/session/{session_id}",
            endpoint="session",
        )
        try:
            return SessionSnapshot.model_validate(data)
        except ValidationError as exc:
            raise MalformedResponseError(
                "session response does not match the expected shape",
                details=exc.errors(include_url=False),
            ) from exc
