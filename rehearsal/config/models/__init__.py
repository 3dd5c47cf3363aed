"""Configuration model exports.

    from rehearsal.config.models import RetryConfig, ScenarioConfig, SessionConfig
"""

from rehearsal.config.models.api import APIConfig
from rehearsal.config.models.conversation import RetryConfig, ScenarioConfig, SessionConfig
from rehearsal.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from rehearsal.config.models.providers import (
    ChatProviderConfig,
    NarrationProviderConfig,
    ProvidersConfig,
)

__all__ = [
    "APIConfig",
    "ChatProviderConfig",
    "LoggingConfig",
    "MetricsConfig",
    "NarrationProviderConfig",
    "ObservabilityConfig",
    "ProvidersConfig",
    "RetryConfig",
    "ScenarioConfig",
    "SessionConfig",
]
