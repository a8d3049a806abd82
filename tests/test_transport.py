"""Tests for the default httpx transport and client lifecycle."""

import json

import httpx
import pytest

from zebra_client import ClientConfig, HttpxTransport, RequestOptions, ZebraClient


@pytest.mark.asyncio
async def test_httpx_transport_sends_request():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"id": "sub-1"})

    transport = HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    response = await transport("https://api.example.test/v2/subscription", RequestOptions(
        method="POST", headers={"apikey": "k"}, body=json.dumps({"webhookUrl": "https://x"})))

    assert response.status_code == 201
    assert response.json() == {"id": "sub-1"}
    request = seen[0]
    assert request.method == "POST"
    assert request.headers["apikey"] == "k"
    assert json.loads(request.content) == {"webhookUrl": "https://x"}


@pytest.mark.asyncio
async def test_client_uses_httpx_transport_end_to_end(telemetry):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v2/environmental/tasks/task-1"
        assert request.headers["content-type"] == "application/json"
        return httpx.Response(200, json={"id": "task-1"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        client = ZebraClient(ClientConfig(
            api_key="k",
            base_url="https://api.example.test/v2",
            telemetry_provider=telemetry,
            transport=HttpxTransport(client=http),
        ))
        assert await client.tasks.get("task-1") == {"id": "task-1"}
        await client.aclose()
        assert not http.is_closed

    assert telemetry.results[0].status_code == 200


@pytest.mark.asyncio
async def test_owned_transport_is_closed_on_exit():
    async with ZebraClient(ClientConfig(api_key="k")) as client:
        transport = client.config.transport
        assert isinstance(transport, HttpxTransport)
        transport._client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(204)))
        inner = transport._client
        assert await client.request("ping", "ping") is None

    assert inner.is_closed
