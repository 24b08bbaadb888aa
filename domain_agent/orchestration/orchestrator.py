"""Turn orchestrator.

Drives one user message through the chat backend, verifies any candidate
domains the reply carries, and merges the verdicts with the reasons the
chat backend gave. Turn lifecycle:

    IDLE -> SENDING -> (AWAITING_VERIFICATION) -> IDLE

Failure handling:
- Chat failures (transport, malformed body, unparsable timestamp) append
  a fixed assistant message and leave the result list alone.
- Verification failures take the VerificationUnavailable branch and emit
  placeholder rows, one per candidate.
- Nothing raised inside a turn escapes `send`.
"""

import inspect
import time
from collections.abc import Awaitable, Callable, Sequence
from datetime import UTC, datetime

import structlog

from domain_agent.api.models.chat import ChatPayload
from domain_agent.client.errors import MalformedResponseError, TransportError
from domain_agent.config.models.conversation import DEFAULT_ERROR_MESSAGE
from domain_agent.config.settings import Settings
from domain_agent.conversation.models import Message
from domain_agent.conversation.state import ConversationState
from domain_agent.observability.logging import get_logger
from domain_agent.observability.metrics import (
    RECONCILED_RESULTS,
    TURN_COUNT,
    TURN_LATENCY,
    VERIFICATION_FALLBACKS,
)
from domain_agent.orchestration.enums import TurnOutcome, TurnState
from domain_agent.orchestration.models import TurnResult
from domain_agent.orchestration.protocols import ChatBackend, VerificationBackend
from domain_agent.reconciliation.matching import DomainMatcher, ReasonIndex
from domain_agent.reconciliation.merge import (
    candidates_from_payload,
    reconcile_unverified,
    reconcile_verified,
)
from domain_agent.reconciliation.models import (
    ReconciledResult,
    VerificationOutcome,
    VerificationSucceeded,
    VerificationUnavailable,
)
from domain_agent.reconciliation.placeholder import (
    PlaceholderPolicy,
    RandomPlaceholderPolicy,
)

logger = get_logger(__name__)

ResultsCallback = Callable[[list[ReconciledResult]], Awaitable[None] | None]


def parse_timestamp(value: str) -> datetime:
    """Parse a backend RFC 3339 timestamp; naive values are taken as UTC.

    Raises:
        MalformedResponseError: If the value cannot be parsed
    """
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise MalformedResponseError(f"unparsable timestamp: {value!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


class TurnOrchestrator:
    """Single-flight state machine for conversation turns.

    Owns the ConversationState and the current result list; both are
    mutated only from inside a turn. Only one turn runs at a time: a
    `send` issued while another is in flight returns a REJECTED result
    without touching anything.
    """

    def __init__(
        self,
        chat: ChatBackend,
        verifier: VerificationBackend,
        *,
        conversation: ConversationState | None = None,
        matcher: DomainMatcher | None = None,
        placeholder_policy: PlaceholderPolicy | None = None,
        error_message: str = DEFAULT_ERROR_MESSAGE,
        on_results: ResultsCallback | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            chat: Chat backend (usually a ChatClient)
            verifier: Verification backend (usually a DomainsClient)
            conversation: Existing conversation to continue; a new empty
                one is created if omitted
            matcher: How domain strings are compared (exact by default)
            placeholder_policy: Degraded-mode verdicts (random by default)
            error_message: Assistant text appended when a chat turn fails
            on_results: Called with every emitted result list; may be async
        """
        self._chat = chat
        self._verifier = verifier
        self._conversation = conversation if conversation is not None else ConversationState()
        self._matcher = matcher or DomainMatcher()
        self._placeholder_policy = placeholder_policy or RandomPlaceholderPolicy()
        self._error_message = error_message
        self._on_results = on_results
        self._state = TurnState.IDLE
        self._results: list[ReconciledResult] = []
        self._turn_number = 0

    @classmethod
    def from_settings(
        cls,
        chat: ChatBackend,
        verifier: VerificationBackend,
        settings: Settings,
        *,
        on_results: ResultsCallback | None = None,
    ) -> "TurnOrchestrator":
        """Build an orchestrator with a fresh conversation from settings."""
        placeholder = settings.reconciliation.placeholder
        return cls(
            chat,
            verifier,
            conversation=ConversationState(greeting=settings.conversation.greeting),
            matcher=DomainMatcher(settings.reconciliation.domain_match),
            placeholder_policy=RandomPlaceholderPolicy(
                score_min=placeholder.score_min,
                score_max=placeholder.score_max,
                seed=placeholder.seed,
            ),
            error_message=settings.conversation.error_message,
            on_results=on_results,
        )

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._state is not TurnState.IDLE

    @property
    def conversation(self) -> ConversationState:
        return self._conversation

    @property
    def messages(self) -> Sequence[Message]:
        return self._conversation.messages

    @property
    def session_id(self) -> str:
        return self._conversation.session_id

    @property
    def results(self) -> list[ReconciledResult]:
        """The most recently emitted result list (copy)."""
        return list(self._results)

    async def send(self, text: str) -> TurnResult:
        """Run one turn for the user's text.

        Never raises for backend or payload problems; the outcome is in
        the returned TurnResult.
        """
        if not text or not text.strip():
            logger.debug("turn_rejected", reason="empty_input")
            return self._rejected()
        if self.busy:
            logger.info("turn_rejected", reason="turn_in_flight", state=self._state.value)
            return self._rejected()

        # No await between the busy check and this assignment.
        self._state = TurnState.SENDING
        self._turn_number += 1
        start = time.perf_counter()
        outcome = TurnOutcome.FAILED

        with structlog.contextvars.bound_contextvars(
            turn_number=self._turn_number, session_id=self._conversation.session_id
        ):
            try:
                self._conversation.append_message(Message.user(text))
                result = await self._run_turn(text)
                outcome = result.outcome
                return result
            finally:
                self._state = TurnState.IDLE
                TURN_COUNT.labels(outcome=outcome.value).inc()
                TURN_LATENCY.observe(time.perf_counter() - start)
                logger.info(
                    "turn_finished",
                    outcome=outcome.value,
                    session_id=self._conversation.session_id,
                )

    async def _run_turn(self, text: str) -> TurnResult:
        try:
            response = await self._chat.send_turn(text, self._conversation.session_id)
            self._conversation.set_session_if_unset(response.session_id)
            reply = Message.assistant(response.message, parse_timestamp(response.timestamp))
        except TransportError as exc:
            logger.warning(
                "chat_turn_failed",
                error=exc.message,
                error_type=type(exc).__name__,
                status_code=exc.status_code,
            )
            return self._failed(exc)
        except Exception as exc:
            logger.exception("chat_turn_crashed")
            return self._failed(exc)

        self._conversation.append_message(reply)
        logger.debug("assistant_reply_received", intent=response.intent, action=response.action)

        payload = response.data
        if payload is None or not payload.has_domains:
            return TurnResult(
                outcome=TurnOutcome.COMPLETED,
                reply=reply,
                session_id=self._conversation.session_id,
            )

        try:
            results, outcome = await self._reconcile(payload)
        except Exception as exc:
            logger.exception("reconciliation_crashed")
            return self._failed(exc)

        await self._emit(results)
        return TurnResult(
            outcome=outcome,
            reply=reply,
            results=results,
            session_id=self._conversation.session_id,
        )

    async def _reconcile(
        self, payload: ChatPayload
    ) -> tuple[list[ReconciledResult], TurnOutcome]:
        index = ReasonIndex(payload.domain_reasons, self._matcher)
        candidates = candidates_from_payload(payload, index)

        self._state = TurnState.AWAITING_VERIFICATION
        verification = await self._verify([c.domain for c in candidates])

        if isinstance(verification, VerificationUnavailable):
            VERIFICATION_FALLBACKS.inc()
            logger.warning(
                "verification_unavailable",
                reason=verification.reason,
                candidates=len(candidates),
            )
            return reconcile_unverified(candidates, self._placeholder_policy), TurnOutcome.DEGRADED

        return (
            reconcile_verified(candidates, verification.results, self._matcher),
            TurnOutcome.VERIFIED,
        )

    async def _verify(self, domains: list[str]) -> VerificationOutcome:
        try:
            results = await self._verifier.check_domains(domains)
        except TransportError as exc:
            return VerificationUnavailable(exc)
        except Exception as exc:
            logger.exception("verification_crashed")
            return VerificationUnavailable(exc)
        logger.debug("verification_completed", requested=len(domains), returned=len(results))
        return VerificationSucceeded(list(results))

    async def _emit(self, results: list[ReconciledResult]) -> None:
        """Replace the current result list and notify the listener."""
        self._results = list(results)
        for result in results:
            RECONCILED_RESULTS.labels(verified=str(result.verified).lower()).inc()

        if self._on_results is None:
            return
        try:
            outcome = self._on_results(list(results))
            if inspect.isawaitable(outcome):
                await outcome
        except Exception:
            logger.exception("results_listener_failed")

    def _failed(self, exc: Exception) -> TurnResult:
        fallback = Message.assistant(self._error_message)
        self._conversation.append_message(fallback)
        return TurnResult(
            outcome=TurnOutcome.FAILED,
            reply=fallback,
            session_id=self._conversation.session_id,
            error=str(exc) or type(exc).__name__,
        )

    def _rejected(self) -> TurnResult:
        return TurnResult(
            outcome=TurnOutcome.REJECTED,
            session_id=self._conversation.session_id,
        )
