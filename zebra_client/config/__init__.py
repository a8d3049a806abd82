"""Client configuration, process settings and the logging preset."""

from .client_config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    ClientConfig,
    ResolvedConfig,
    RetryConfig,
    RetryPolicy,
    resolve_config,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    "ClientConfig",
    "ResolvedConfig",
    "RetryConfig",
    "RetryPolicy",
    "resolve_config",
]
