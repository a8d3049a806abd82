from typing import Optional

from .types import RequestContext, RequestResult


class NoopTelemetryProvider:
    """Default provider; every callback does nothing."""

    def on_request_start(self, context: RequestContext) -> None: pass

    def on_request_end(self, context: RequestContext, result: RequestResult) -> None: pass

    def on_rate_limit_hit(self, context: RequestContext, retry_after: Optional[int] = None) -> None: pass

    def on_retry(self, context: RequestContext, attempt: int, reason: str) -> None: pass
