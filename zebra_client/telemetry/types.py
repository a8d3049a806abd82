"""
Telemetry contract for the request pipeline.

A provider is any object with the four lifecycle callbacks below; nothing has
to inherit from a base class. Callbacks run inline in the pipeline and should
return quickly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Union, runtime_checkable

AttributeValue = Union[str, int, float, bool]


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Immutable descriptor of one logical operation, shared by every attempt."""
    method: str
    endpoint: str
    operation_name: str               # e.g. "readings.get_log"
    start_time: float                 # epoch milliseconds
    route: Optional[str] = None       # e.g. "environmental/tasks/:taskId"
    trace_id: Optional[str] = None
    attributes: Optional[Dict[str, AttributeValue]] = None

    @property
    def route_or_endpoint(self) -> str:
        return self.route or self.endpoint


@dataclass(frozen=True, slots=True)
class RequestResult:
    """Final summary handed to ``on_request_end`` exactly once per operation."""
    status_code: int                  # 0 when no response was ever obtained
    success: bool
    duration_ms: float
    rate_limited: bool
    retry_count: int
    error: Optional[BaseException] = None
    response_size: Optional[int] = None


@runtime_checkable
class TelemetryProvider(Protocol):

    def on_request_start(self, context: RequestContext) -> None:
        """Called once, before the first network attempt."""

    def on_request_end(self, context: RequestContext, result: RequestResult) -> None:
        """Called once, after the operation succeeded or failed for good."""

    def on_rate_limit_hit(self, context: RequestContext, retry_after: Optional[int] = None) -> None:
        """Called for every 429 response with the ``retry-after`` hint in seconds."""

    def on_retry(self, context: RequestContext, attempt: int, reason: str) -> None:
        """Called before each retry; ``attempt`` is 1-based."""
