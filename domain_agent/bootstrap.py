"""Bootstrap module for wiring a ready-to-use orchestrator from config.

Handles:
- Loading configuration (TOML files + DOMAIN_AGENT_* env vars)
- Configuring structured logging and, if enabled, the metrics exporter
- Creating the chat and domain-check clients
- Creating the TurnOrchestrator with a fresh conversation

Example usage:

    from domain_agent.bootstrap import bootstrap

    async with bootstrap() as orchestrator:
        turn = await orchestrator.send("I need a domain for a bakery")
        print(turn.reply.content)
        for row in orchestrator.results:
            print(row.domain, row.available, row.reason)
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from domain_agent.client.chat import ChatClient
from domain_agent.client.domains import DomainsClient
from domain_agent.config import get_settings
from domain_agent.config.settings import Settings
from domain_agent.observability.logging import get_logger, setup_logging
from domain_agent.observability.metrics import setup_metrics
from domain_agent.orchestration.orchestrator import ResultsCallback, TurnOrchestrator

logger = get_logger(__name__)


def configure_observability(settings: Settings) -> None:
    """Apply logging and metrics settings."""
    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_pii=log_config.redact_pii,
        app_name=settings.app_name,
    )
    if settings.observability.metrics.enabled:
        setup_metrics(settings.observability.metrics.port)


@asynccontextmanager
async def bootstrap(
    settings: Settings | None = None,
    *,
    on_results: ResultsCallback | None = None,
    http_client: httpx.AsyncClient | None = None,
    configure: bool = True,
) -> AsyncIterator[TurnOrchestrator]:
    """Yield a TurnOrchestrator backed by real HTTP clients.

    Args:
        settings: Settings to use (defaults to get_settings())
        on_results: Listener for emitted result lists
        http_client: Shared httpx client for both backends (not closed here)
        configure: Whether to set up logging and metrics
    """
    settings = settings or get_settings()
    if configure:
        configure_observability(settings)

    backend = settings.backend
    async with (
        ChatClient(
            base_url=backend.base_url,
            timeout=backend.chat_timeout,
            http_client=http_client,
        ) as chat,
        DomainsClient(
            base_url=backend.base_url,
            timeout=backend.verification_timeout,
            http_client=http_client,
        ) as domains,
    ):
        logger.info("orchestrator_ready", base_url=backend.base_url)
        yield TurnOrchestrator.from_settings(chat, domains, settings, on_results=on_results)
