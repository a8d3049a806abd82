"""
The main client for the Zebra Savannah environmental-monitoring APIs.

``ZebraClient`` resolves its configuration once, builds a single
``RequestPipeline`` and exposes one service per API resource::

    async with ZebraClient(ClientConfig(api_key="...")) as client:
        sensor = await client.sensors.get_status("SN12345")
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .config.app_config import settings
from .config.client_config import ClientConfig, ResolvedConfig, RetryConfig, resolve_config
from .core.pipeline import RequestPipeline
from .core.transport import RequestOptions
from .services import (
    AlarmsService,
    AuthService,
    ReadingsService,
    SensorsService,
    TasksService,
    WebhooksService,
)

logger = logging.getLogger(__name__)


class ZebraClient:

    def __init__(self, config: ClientConfig):
        self.config: ResolvedConfig = resolve_config(config)
        self.pipeline = RequestPipeline(self.config)

        self.readings = ReadingsService(self.pipeline)
        self.sensors  = SensorsService(self.pipeline)
        self.alarms   = AlarmsService(self.pipeline)
        self.tasks    = TasksService(self.pipeline)
        self.auth     = AuthService(self.pipeline)
        self.webhooks = WebhooksService(self.pipeline)

    @classmethod
    def from_env(cls, **overrides: Any) -> "ZebraClient":
        """Build a client from ``ZEBRA_*`` environment settings; keyword overrides win."""
        options: Dict[str, Any] = {
            "api_key":    settings.ZEBRA_API_KEY,
            "base_url":   settings.ZEBRA_BASE_URL,
            "timeout_ms": settings.ZEBRA_TIMEOUT_MS,
            "retry":      RetryConfig(max_retries=settings.ZEBRA_MAX_RETRIES),
        }
        options.update(overrides)
        return cls(ClientConfig(**options))

    async def request(self,
                      operation_name: str,
                      endpoint: str,
                      options: Optional[RequestOptions] = None,
                      route: Optional[str] = None) -> Any:
        """
        Low-level request with the client's retry, timeout and telemetry behaviour.

        Args:
            operation_name: telemetry name, e.g. ``"tasks.create"``
            endpoint: path relative to the base URL (may carry a query string) or absolute URL
            options: method, extra headers and body
            route: parameterized route such as ``"tasks/:id"`` for telemetry grouping

        Raises:
            ZebraError: non-2xx status or network failure once retries are exhausted.
        """
        return await self.pipeline.execute(operation_name, endpoint, options, route)

    async def aclose(self) -> None:
        """Release the default transport; caller-supplied transports are left alone."""
        if self.config.owns_transport:
            aclose = getattr(self.config.transport, "aclose", None)
            if aclose is not None:
                await aclose()

    async def __aenter__(self) -> "ZebraClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False
