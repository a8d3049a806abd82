# pipeline.py

"""
Request execution pipeline.

Every API operation goes through ``RequestPipeline.execute``: one telemetry
start, an explicit attempt loop (classify -> retry or stop -> backoff), one
telemetry end, and either the decoded JSON payload or a ``ZebraError``.

Retry policy:
    * 2xx             -> success, payload returned (204 / empty body -> None)
    * 429             -> rate-limit callback, retried
    * >= 500          -> retried
    * other 4xx       -> terminal, raised immediately
    * network/timeout -> wrapped in ZebraTransportError, retried (a failed body
                         read counts as a network error)
    * ZebraError from the transport -> kept as is, classified by its status
                         (None counts as a network error)
"""
from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any, Dict, Mapping, NoReturn, Optional
from urllib.parse import urljoin

import httpx

from ..config.client_config import ResolvedConfig, RetryPolicy
from ..telemetry import RequestContext, RequestResult
from .exceptions import ZebraError, ZebraTimeoutError, ZebraTransportError
from .patterns import AttemptState, AttemptStateMachine
from .transport import RequestOptions

logger = logging.getLogger(__name__)


def compute_backoff_delay(policy: RetryPolicy, attempt: int) -> float:
    """Delay in milliseconds before retry ``attempt`` (1-based)."""
    return policy.delay_ms(attempt)


def resolve_url(base_url: str, endpoint: str) -> str:
    base = base_url if base_url.endswith("/") else f"{base_url}/"
    return urljoin(base, endpoint)


def parse_retry_after(value: Optional[str]) -> int:
    """Seconds from a ``retry-after`` header; 0 when absent or not an integer."""
    if not value:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


def _is_retryable(status: int) -> bool:
    return status == 429 or status >= 500


def _now_ms() -> float:
    return time.time() * 1000


class RequestPipeline:
    """Executes operations against one immutable ``ResolvedConfig``; holds no per-call state."""

    def __init__(self, config: ResolvedConfig):
        self.config = config

    def _headers(self, extra: Optional[Mapping[str, str]]) -> httpx.Headers:
        headers = httpx.Headers({"Content-Type": "application/json", "apikey": self.config.api_key})
        if extra:
            headers.update(extra)   # case-insensitive, caller wins
        return headers

    async def _send(self, url: str, options: RequestOptions) -> httpx.Response:
        response = await self.config.transport(url, options)
        await response.aread()
        return response

    async def execute(self,
                      operation_name: str,
                      endpoint: str,
                      options: Optional[RequestOptions] = None,
                      route: Optional[str] = None,
                      attributes: Optional[Dict[str, Any]] = None) -> Any:
        """
        Run one logical operation to completion.

        Returns the decoded JSON body (``None`` for 204 or an empty body) or
        raises the last ``ZebraError`` observed once no retry is left.
        """
        options = options or RequestOptions()
        telemetry = self.config.telemetry_provider
        policy = self.config.retry

        context = RequestContext(
            method         = options.method.upper(),
            endpoint       = endpoint,
            operation_name = operation_name,
            start_time     = _now_ms(),
            route          = route,
            attributes     = attributes,
        )
        telemetry.on_request_start(context)

        url = resolve_url(self.config.base_url, endpoint)
        request_options = RequestOptions(
            method  = context.method,
            headers = self._headers(options.headers),
            body    = options.body,
        )
        machine = AttemptStateMachine()
        last_error: Optional[ZebraError] = None
        rate_limited = False
        attempt = 0

        while attempt <= policy.max_retries:
            if attempt > 0:
                machine.transition(AttemptState.RETRY_WAIT)
                delay_ms = compute_backoff_delay(policy, attempt)
                reason = str(last_error or "") or "Unknown error"
                telemetry.on_retry(context, attempt, reason)
                logger.warning(f"{operation_name}: retry {attempt}/{policy.max_retries} "
                               f"in {delay_ms:.0f}ms ({reason})")
                await asyncio.sleep(delay_ms / 1000)
                machine.transition(AttemptState.ATTEMPTING)

            logger.debug(f"{operation_name}: {context.method} {url} (attempt {attempt + 1})")
            try:
                response = await asyncio.wait_for(
                    self._send(url, request_options),
                    timeout=self.config.timeout_ms / 1000,
                )
            except ZebraError as exc:
                # already typed by the transport: keep it, classify by its status
                last_error = exc
                if exc.status_code == 429:
                    rate_limited = True
                    retry_after = exc.response.headers.get("retry-after") if exc.response is not None else None
                    telemetry.on_rate_limit_hit(context, parse_retry_after(retry_after))
                if exc.status_code is not None and not _is_retryable(exc.status_code):
                    return self._fail(machine, context, exc, attempt, rate_limited)
                attempt += 1
                continue
            except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
                last_error = ZebraTimeoutError(
                    f"Request timed out after {self.config.timeout_ms:.0f}ms")
                last_error.__cause__ = exc
                attempt += 1
                continue
            except Exception as exc:
                last_error = ZebraTransportError(f"Network error: {exc}" if str(exc) else
                                                 f"Network error: {exc.__class__.__name__}")
                last_error.__cause__ = exc
                attempt += 1
                continue

            if response.is_success:
                payload, size, error = self._decode(response)
                if error is None:
                    machine.transition(AttemptState.SUCCESS)
                    telemetry.on_request_end(context, RequestResult(
                        status_code   = response.status_code,
                        success       = True,
                        duration_ms   = _now_ms() - context.start_time,
                        rate_limited  = rate_limited,
                        retry_count   = attempt,
                        response_size = size,
                    ))
                    return payload
                return self._fail(machine, context, error, attempt, rate_limited)

            if response.status_code == 429:
                rate_limited = True
                telemetry.on_rate_limit_hit(context, parse_retry_after(response.headers.get("retry-after")))
                last_error = await ZebraError.from_response("Rate limit exceeded", response)
            else:
                last_error = await ZebraError.from_response(
                    f"Zebra API error: {response.status_code} {response.reason_phrase}".rstrip(), response)

            if not _is_retryable(response.status_code):
                return self._fail(machine, context, last_error, attempt, rate_limited)

            attempt += 1

        return self._fail(machine, context, last_error, attempt - 1, rate_limited)

    def _decode(self, response: httpx.Response):
        """Decode an already read 2xx body; returns ``(payload, size, error)``."""
        if response.status_code == 204:
            return None, 0, None
        raw = response.content
        if not raw:
            return None, 0, None
        try:
            return json.loads(raw), len(raw), None
        except ValueError:
            text = raw.decode(response.encoding or "utf-8", errors="replace")
            return None, len(raw), ZebraError(
                "Invalid JSON in response body", response.status_code, response, text)

    def _fail(self,
              machine: AttemptStateMachine,
              context: RequestContext,
              error: Optional[ZebraError],
              retry_count: int,
              rate_limited: bool) -> NoReturn:
        if error is None:
            error = ZebraError("Request failed without a recorded error")
        machine.transition(AttemptState.TERMINAL_FAILURE)
        self.config.telemetry_provider.on_request_end(context, RequestResult(
            status_code  = error.status_code or 0,
            success      = False,
            duration_ms  = _now_ms() - context.start_time,
            rate_limited = rate_limited,
            retry_count  = retry_count,
            error        = error,
        ))
        logger.error(f"{context.operation_name} failed after {retry_count + 1} attempt(s): {error}")
        raise error
