"""Telemetry provider that reports request lifecycle events through ``logging``."""
from __future__ import annotations

import logging
from typing import Optional

from .types import RequestContext, RequestResult


class LoggingTelemetryProvider:

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        self._logger = logger or logging.getLogger(self.__class__.__name__)
        self._level = level

    def on_request_start(self, context: RequestContext) -> None:
        self._logger.log(self._level,
                         f"→ {context.operation_name} {context.method} {context.route_or_endpoint}")

    def on_request_end(self, context: RequestContext, result: RequestResult) -> None:
        summary = (f"{context.operation_name} status={result.status_code} "
                   f"retries={result.retry_count} duration={result.duration_ms:.0f}ms")
        if result.success:
            self._logger.log(self._level, f"✓ {summary}")
        else:
            self._logger.warning(f"✗ {summary} error={result.error}")

    def on_rate_limit_hit(self, context: RequestContext, retry_after: Optional[int] = None) -> None:
        self._logger.warning(f"{context.operation_name} rate limited (retry-after={retry_after})")

    def on_retry(self, context: RequestContext, attempt: int, reason: str) -> None:
        self._logger.info(f"{context.operation_name} retry #{attempt}: {reason}")
