"""
Centralised exception definitions for the Zebra Savannah API client.
All custom exceptions should inherit from ZebraClientError.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Union

import httpx

# Parsed error body: decoded JSON, raw text, or None when empty/unreadable.
ZebraErrorBody = Optional[Union[Dict[str, Any], List[Any], str]]


class ZebraClientError(Exception):
    """Base class for every custom exception thrown by this project."""


class ConfigurationError(ZebraClientError):
    """Raised when client options or environment variables are invalid."""


class ZebraError(ZebraClientError):
    """
    Typed failure for any non-success outcome of an API operation.

    ``status_code`` is the HTTP status (``None`` when no response was received),
    ``response`` the raw ``httpx.Response`` and ``response_body`` the body read
    once and parsed as JSON, falling back to the raw text.

    Example::

        try:
            await client.sensors.get_status("SN-404")
        except ZebraError as err:
            if isinstance(err.response_body, dict):
                print(err.status_code, err.response_body.get("message"))
    """

    def __init__(self,
                 message: str,
                 status_code: Optional[int] = None,
                 response: Optional[httpx.Response] = None,
                 response_body: ZebraErrorBody = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
        self.response_body = response_body

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, status_code={self.status_code!r})"

    @classmethod
    async def from_response(cls, message: str, response: httpx.Response) -> "ZebraError":
        """
        Build an error from a failed response, consuming its body exactly once.

        Never raises: read or decode failures leave ``response_body`` unset.
        """
        body: ZebraErrorBody = None
        try:
            raw = await response.aread()
            text = raw.decode(response.encoding or "utf-8", errors="replace") if raw else ""
        except Exception:
            text = ""
        if text:
            try:
                body = json.loads(text)
            except ValueError:
                body = text
        return cls(message, response.status_code, response, body)


class ZebraTransportError(ZebraError):
    """Network-level failure; no HTTP status was obtained for the attempt."""


class ZebraTimeoutError(ZebraTransportError):
    """The attempt did not complete within the configured timeout."""


class SensorNotFoundError(ZebraClientError, LookupError):
    """Raised when a serial-number lookup matches no sensor."""

    def __init__(self, serial_number: str):
        super().__init__(f"No sensor found with serial number: {serial_number}")
        self.serial_number = serial_number
