from __future__ import annotations

from typing import Any, List, Optional, Tuple

from ..telemetry import RequestContext, RequestResult


class RecordingTelemetryProvider:
    """Telemetry double that keeps every callback in order."""

    def __init__(self):
        self.events: List[Tuple[str, RequestContext, Any]] = []

    def on_request_start(self, context: RequestContext) -> None:
        self.events.append(("start", context, None))

    def on_request_end(self, context: RequestContext, result: RequestResult) -> None:
        self.events.append(("end", context, result))

    def on_rate_limit_hit(self, context: RequestContext, retry_after: Optional[int] = None) -> None:
        self.events.append(("rate_limit", context, retry_after))

    def on_retry(self, context: RequestContext, attempt: int, reason: str) -> None:
        self.events.append(("retry", context, (attempt, reason)))

    def _of(self, kind: str) -> List[Tuple[str, RequestContext, Any]]:
        return [event for event in self.events if event[0] == kind]

    @property
    def starts(self) -> List[RequestContext]:
        return [ctx for _, ctx, _ in self._of("start")]

    @property
    def results(self) -> List[RequestResult]:
        return [result for _, _, result in self._of("end")]

    @property
    def rate_limits(self) -> List[Optional[int]]:
        return [retry_after for _, _, retry_after in self._of("rate_limit")]

    @property
    def retries(self) -> List[Tuple[int, str]]:
        return [payload for _, _, payload in self._of("retry")]

    @property
    def kinds(self) -> List[str]:
        return [kind for kind, _, _ in self.events]

    def clear(self) -> None:
        self.events.clear()
