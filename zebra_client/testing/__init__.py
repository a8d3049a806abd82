"""Test doubles for code that depends on the Zebra client."""

from .mock_client import MockCall, MockZebraClient
from .transport import ScriptedTransport
from .telemetry import RecordingTelemetryProvider
from .factories import (
    create_mock_page_response,
    create_mock_reading,
    create_mock_readings_response,
    create_mock_sensor_status,
    create_mock_sensor_list_response,
    create_mock_alarm,
    create_mock_alarms_response,
    create_mock_task,
    create_mock_task_list_response,
    create_mock_webhook_subscription,
    json_response,
    text_response,
    empty_response,
)

__all__ = [
    'MockCall',
    'MockZebraClient',
    'ScriptedTransport',
    'RecordingTelemetryProvider',
    'create_mock_page_response',
    'create_mock_reading',
    'create_mock_readings_response',
    'create_mock_sensor_status',
    'create_mock_sensor_list_response',
    'create_mock_alarm',
    'create_mock_alarms_response',
    'create_mock_task',
    'create_mock_task_list_response',
    'create_mock_webhook_subscription',
    'json_response',
    'text_response',
    'empty_response',
]
