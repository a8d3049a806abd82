"""Pluggable request telemetry."""

from .types import AttributeValue, RequestContext, RequestResult, TelemetryProvider
from .noop import NoopTelemetryProvider
from .logging_provider import LoggingTelemetryProvider

__all__ = [
    "AttributeValue",
    "RequestContext",
    "RequestResult",
    "TelemetryProvider",
    "NoopTelemetryProvider",
    "LoggingTelemetryProvider",
]
