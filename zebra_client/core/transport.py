"""HTTP transport boundary: ``(url, options) -> httpx.Response``."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Mapping, Optional, Union

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RequestOptions:
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[Union[str, bytes]] = None


Transport = Callable[[str, RequestOptions], Awaitable[httpx.Response]]


class HttpxTransport:
    """Default transport backed by a single lazily created ``httpx.AsyncClient``."""

    def __init__(self, timeout: Optional[float] = None, client: Optional[httpx.AsyncClient] = None):
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def __call__(self, url: str, options: RequestOptions) -> httpx.Response:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return await self._client.request(
            options.method, url, headers=options.headers, content=options.body,
        )

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            logger.debug("httpx client closed")
        self._client = None if self._owns_client else self._client
