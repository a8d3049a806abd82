"""
Client options and their resolution.

``ClientConfig`` is what callers pass in: everything except the API key may be
left unset. ``resolve_config`` merges it over the defaults once, validates the
result and returns a frozen ``ResolvedConfig`` the client keeps for its whole
lifetime.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.exceptions import ConfigurationError
from ..core.transport import HttpxTransport, Transport
from ..telemetry import NoopTelemetryProvider, TelemetryProvider

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL           = "https://api.zebra.com/v2"
DEFAULT_TIMEOUT_MS         = 30_000
DEFAULT_MAX_RETRIES        = 3
DEFAULT_INITIAL_DELAY_MS   = 1_000
DEFAULT_MAX_DELAY_MS       = 30_000
DEFAULT_BACKOFF_MULTIPLIER = 2.0


###############################################################################
# 1. CALLER OPTIONS -----------------------------------------------------------
###############################################################################

@dataclass(frozen=True, slots=True)
class RetryConfig:
    max_retries: Optional[int] = None
    initial_delay_ms: Optional[float] = None
    max_delay_ms: Optional[float] = None
    backoff_multiplier: Optional[float] = None


@dataclass(frozen=True, slots=True)
class ClientConfig:
    api_key: str
    base_url: Optional[str] = None
    timeout_ms: Optional[float] = None
    retry: Optional[RetryConfig] = None
    telemetry_provider: Optional[TelemetryProvider] = None
    transport: Optional[Transport] = None


###############################################################################
# 2. RESOLVED -----------------------------------------------------------------
###############################################################################

@dataclass(frozen=True, slots=True)
class RetryPolicy:
    max_retries: int = DEFAULT_MAX_RETRIES
    initial_delay_ms: float = DEFAULT_INITIAL_DELAY_MS
    max_delay_ms: float = DEFAULT_MAX_DELAY_MS
    backoff_multiplier: float = DEFAULT_BACKOFF_MULTIPLIER

    def delay_ms(self, attempt: int) -> float:
        """Backoff before retry ``attempt`` (1-based), clamped to ``max_delay_ms``."""
        return min(self.initial_delay_ms * self.backoff_multiplier ** (attempt - 1),
                   self.max_delay_ms)


@dataclass(frozen=True, slots=True)
class ResolvedConfig:
    api_key: str
    base_url: str
    timeout_ms: float
    retry: RetryPolicy
    telemetry_provider: TelemetryProvider
    transport: Transport
    owns_transport: bool = False


def _pick(value, default):
    return default if value is None else value


def resolve_config(config: ClientConfig) -> ResolvedConfig:
    if not config.api_key or not config.api_key.strip():
        raise ConfigurationError("api_key is required")

    retry = config.retry or RetryConfig()
    policy = RetryPolicy(
        max_retries        = int(_pick(retry.max_retries, DEFAULT_MAX_RETRIES)),
        initial_delay_ms   = float(_pick(retry.initial_delay_ms, DEFAULT_INITIAL_DELAY_MS)),
        max_delay_ms       = float(_pick(retry.max_delay_ms, DEFAULT_MAX_DELAY_MS)),
        backoff_multiplier = float(_pick(retry.backoff_multiplier, DEFAULT_BACKOFF_MULTIPLIER)),
    )
    if policy.max_retries < 0:
        raise ConfigurationError(f"max_retries must be >= 0, got {policy.max_retries}")
    if policy.initial_delay_ms < 0:
        raise ConfigurationError(f"initial_delay_ms must be >= 0, got {policy.initial_delay_ms}")
    if policy.max_delay_ms < policy.initial_delay_ms:
        raise ConfigurationError("max_delay_ms must not be smaller than initial_delay_ms")
    if policy.backoff_multiplier < 1:
        raise ConfigurationError(f"backoff_multiplier must be >= 1, got {policy.backoff_multiplier}")

    timeout_ms = float(_pick(config.timeout_ms, DEFAULT_TIMEOUT_MS))
    if timeout_ms <= 0:
        raise ConfigurationError(f"timeout_ms must be positive, got {timeout_ms}")

    base_url = config.base_url or DEFAULT_BASE_URL
    transport = config.transport
    owns_transport = transport is None
    if transport is None:
        transport = HttpxTransport(timeout=timeout_ms / 1000)

    resolved = ResolvedConfig(
        api_key            = config.api_key,
        base_url           = base_url,
        timeout_ms         = timeout_ms,
        retry              = policy,
        telemetry_provider = config.telemetry_provider or NoopTelemetryProvider(),
        transport          = transport,
        owns_transport     = owns_transport,
    )
    logger.debug(f"Resolved client config: base_url={base_url} timeout_ms={timeout_ms} retry={policy}")
    return resolved
