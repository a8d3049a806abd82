# zebra_client/core/__init__.py
"""Core infrastructure: error model, transport boundary and the request pipeline."""

# Import order: most fundamental to most specific

from .exceptions import (
    ZebraClientError,
    ConfigurationError,
    ZebraError,
    ZebraErrorBody,
    ZebraTransportError,
    ZebraTimeoutError,
    SensorNotFoundError,
)
from .transport import RequestOptions, Transport, HttpxTransport
from .patterns.state_machine import AttemptState, AttemptStateMachine
from .pipeline import RequestPipeline, compute_backoff_delay, parse_retry_after, resolve_url


__all__ = [
    "ZebraClientError",
    "ConfigurationError",
    "ZebraError",
    "ZebraErrorBody",
    "ZebraTransportError",
    "ZebraTimeoutError",
    "SensorNotFoundError",
    "RequestOptions",
    "Transport",
    "HttpxTransport",
    "AttemptState",
    "AttemptStateMachine",
    "RequestPipeline",
    "compute_backoff_delay",
    "parse_retry_after",
    "resolve_url",
]
