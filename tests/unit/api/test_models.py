"""Tests for API wire models."""

import pytest
from pydantic import ValidationError

from domain_agent.api.models import (
    ChatRequest,
    ChatResponse,
    CheckDomainsResponse,
    SuggestDomainsRequest,
    VerificationResult,
)
from tests.factories import ChatResponseFactory


class TestChatResponse:
    """Tests for ChatResponse parsing."""

    def test_parses_backend_body(self) -> None:
        """The backend's camelCase domainReasons key is understood."""
        response = ChatResponse.model_validate(ChatResponseFactory.wire())

        assert response.session_id == "abc123"
        assert response.data is not None
        assert response.data.domains == ["freshbakery.com", "bakerylove.com"]
        assert response.data.domain_reasons is not None
        assert response.data.domain_reasons[0].reason == "Says what you sell"
        assert response.data.keywords == ["bakery"]

    def test_data_absent(self) -> None:
        """A reply without data has no payload."""
        body = ChatResponseFactory.wire()
        del body["data"]

        assert ChatResponse.model_validate(body).data is None

    def test_null_domains_read_as_empty(self) -> None:
        """A null domain list means no candidates."""
        body = ChatResponseFactory.wire(data={"domains": None, "keywords": ["x"]})

        data = ChatResponse.model_validate(body).data
        assert data is not None
        assert data.domains == []
        assert data.has_domains is False
        assert data.domain_reasons is None

    def test_null_reason_read_as_empty(self) -> None:
        """A reason entry with a null reason becomes an empty string."""
        body = ChatResponseFactory.wire(
            data={"domains": ["a.com"], "domainReasons": [{"domain": "a.com", "reason": None}]}
        )

        data = ChatResponse.model_validate(body).data
        assert data is not None and data.domain_reasons is not None
        assert data.domain_reasons[0].reason == ""

    def test_unknown_payload_keys_kept(self) -> None:
        """Backend-defined extra keys do not break parsing."""
        body = ChatResponseFactory.wire(data={"domains": ["a.com"], "tone": "playful"})

        data = ChatResponse.model_validate(body).data
        assert data is not None
        assert data.domains == ["a.com"]

    def test_message_required(self) -> None:
        """A body without a message is rejected."""
        body = ChatResponseFactory.wire()
        del body["message"]

        with pytest.raises(ValidationError):
            ChatResponse.model_validate(body)


class TestRequests:
    """Tests for request models."""

    def test_chat_request_defaults_to_empty_session(self) -> None:
        """The first turn carries an empty session_id."""
        assert ChatRequest(message="hi").model_dump() == {"message": "hi", "session_id": ""}

    def test_suggest_request_omits_unset_options(self) -> None:
        """Only given options are serialised."""
        payload = SuggestDomainsRequest(keywords=["bake"], count=5)

        assert payload.model_dump(exclude_none=True) == {"keywords": ["bake"], "count": 5}


class TestVerificationModels:
    """Tests for domain check models."""

    def test_null_signatures_read_as_empty(self) -> None:
        """signatures: null becomes []."""
        result = VerificationResult.model_validate(
            {"domain": "a.com", "available": True, "signatures": None}
        )
        assert result.signatures == []

    def test_response_with_extra_fields(self) -> None:
        """Score, price and total are carried through."""
        response = CheckDomainsResponse.model_validate({
            "results": [
                {
                    "domain": "a.com",
                    "available": False,
                    "signatures": ["DNS", "WHOIS"],
                    "score": 72.5,
                    "price": "standard",
                }
            ],
            "total": 1,
        })
        assert response.results[0].signatures == ["DNS", "WHOIS"]
        assert response.results[0].score == 72.5
        assert response.results[0].price == "standard"
