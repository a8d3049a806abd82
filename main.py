#!/usr/bin/env python3
"""Smoke run against the live API using ZEBRA_* settings from the environment / .env."""
import asyncio
import logging
import sys
from rich.pretty import pprint
from zebra_client import ZebraClient, ZebraClientError
from zebra_client import ListTasksOptions, LoggingTelemetryProvider
from zebra_client.config.logging_config import configure

async def async_main():
    configure()
    telemetry = LoggingTelemetryProvider(level=logging.INFO)
    async with ZebraClient.from_env(telemetry_provider=telemetry) as client:
        sensors = await client.sensors.list()
        print(f"Sensors ({len((sensors or {}).get('sensors', []))}):")
        pprint((sensors or {}).get("sensors", [])[:2])

        tasks = await client.tasks.list(ListTasksOptions(page_size=10))
        print(f"Tasks ({len((tasks or {}).get('tasks', []))}):")
        pprint((tasks or {}).get("tasks", [])[:2])

        subscriptions = await client.webhooks.list() or []
        print(f"Webhook subscriptions ({len(subscriptions)}):")
        pprint(subscriptions[:2])

if __name__ == "__main__":
    try:
        asyncio.run(async_main())
    except ZebraClientError as exc:
        status = getattr(exc, "status_code", None)
        sys.exit(f"✗ {exc}" + (f" (status {status})" if status else ""))
    except KeyboardInterrupt:
        sys.exit("🌙  interrupted")
