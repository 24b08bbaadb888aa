"""Configuration model exports.

    from domain_agent.config.models import BackendConfig, ReconciliationConfig
"""

from domain_agent.config.models.backend import BackendConfig
from domain_agent.config.models.conversation import ConversationConfig
from domain_agent.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from domain_agent.config.models.reconciliation import (
    DomainMatchMode,
    PlaceholderConfig,
    ReconciliationConfig,
)

__all__ = [
    # Backend
    "BackendConfig",
    # Conversation
    "ConversationConfig",
    # Observability
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    # Reconciliation
    "DomainMatchMode",
    "PlaceholderConfig",
    "ReconciliationConfig",
]
