from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote, urlencode

from ..core.pipeline import RequestPipeline
from ..core.transport import RequestOptions


class BaseService:
    """Shared plumbing for the resource services; all traffic goes through the pipeline."""

    def __init__(self, pipeline: RequestPipeline):
        self.pipeline = pipeline
        self.log = logging.getLogger(self.__class__.__name__)

    async def _request(self,
                       operation_name: str,
                       endpoint: str,
                       method: str = "GET",
                       body: Optional[Any] = None,
                       route: Optional[str] = None) -> Any:
        options = RequestOptions(
            method=method,
            body=json.dumps(body) if body is not None else None,
        )
        return await self.pipeline.execute(operation_name, endpoint, options, route)


def path_segment(value: str) -> str:
    return quote(str(value), safe="")


def with_query(path: str, params: Dict[str, Any]) -> str:
    """Append the non-``None`` params as a query string."""
    present = {k: v for k, v in params.items() if v is not None}
    return f"{path}?{urlencode(present)}" if present else path
