"""Shared pytest fixtures for zebra_client tests."""

from __future__ import annotations

import pytest

from zebra_client import ClientConfig, RetryConfig, ZebraClient
from zebra_client.testing import RecordingTelemetryProvider, ScriptedTransport

BASE_URL = "https://api.example.test/v2"


@pytest.fixture(autouse=True)
def sleeps(monkeypatch) -> list:
    """Record backoff delays (seconds) instead of sleeping; transports that need to hang wait on an Event."""
    delays: list = []

    async def _fake_sleep(seconds: float) -> None:
        delays.append(seconds)

    monkeypatch.setattr("zebra_client.core.pipeline.asyncio.sleep", _fake_sleep)
    return delays


@pytest.fixture
def telemetry() -> RecordingTelemetryProvider:
    return RecordingTelemetryProvider()


@pytest.fixture
def make_client(telemetry):
    """Build a client around a transport; retry keyword arguments go to RetryConfig."""

    def _make(transport, *, timeout_ms=None, base_url=BASE_URL, **retry) -> ZebraClient:
        return ZebraClient(ClientConfig(
            api_key="test-key",
            base_url=base_url,
            timeout_ms=timeout_ms,
            retry=RetryConfig(**retry),
            telemetry_provider=telemetry,
            transport=transport,
        ))

    return _make


@pytest.fixture
def scripted():
    """Shortcut for ``ScriptedTransport(*items)``."""
    return ScriptedTransport
