"""Prometheus metrics for domain-agent.

Tracks turn outcomes and latency, backend request latency, and how often
verification falls back to placeholder results.
"""

from prometheus_client import Counter, Histogram, start_http_server

from domain_agent.observability.logging import get_logger

logger = get_logger(__name__)

TURN_COUNT = Counter(
    "domain_agent_turns_total",
    "Total number of conversation turns processed",
    labelnames=["outcome"],
)

TURN_LATENCY = Histogram(
    "domain_agent_turn_latency_seconds",
    "End-to-end turn latency in seconds",
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0),
)

BACKEND_REQUEST_LATENCY = Histogram(
    "domain_agent_backend_request_latency_seconds",
    "Backend request latency in seconds",
    labelnames=["endpoint", "status"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

VERIFICATION_FALLBACKS = Counter(
    "domain_agent_verification_fallbacks_total",
    "Turns that used placeholder results because verification was unavailable",
)

RECONCILED_RESULTS = Counter(
    "domain_agent_reconciled_results_total",
    "Reconciled result rows emitted",
    labelnames=["verified"],
)

REASON_MISSES = Counter(
    "domain_agent_reason_misses_total",
    "Domains for which no generated reason was found",
)


def setup_metrics(port: int) -> None:
    """Start the Prometheus exporter on the given port."""
    start_http_server(port)
    logger.info("metrics_server_started", port=port)
