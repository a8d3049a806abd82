"""Zebra Savannah API client - Main Package"""

__version__ = '1.0.0'
__description__ = 'Async client for the Zebra Savannah sensor-monitoring API with retries and pluggable telemetry'

# Core - most fundamental
from .core import (
    ZebraClientError,
    ConfigurationError,
    ZebraError,
    ZebraErrorBody,
    ZebraTransportError,
    ZebraTimeoutError,
    SensorNotFoundError,
    RequestOptions,
    Transport,
    HttpxTransport,
)

# Configuration
from .config import ClientConfig, RetryConfig, ResolvedConfig, DEFAULT_BASE_URL

# Telemetry
from .telemetry import (
    TelemetryProvider,
    RequestContext,
    RequestResult,
    NoopTelemetryProvider,
    LoggingTelemetryProvider,
)

# Client
from .client import ZebraClient

# Models - request options (response shapes live in zebra_client.models)
from .models import (
    GetReadingsLogOptions,
    ListAlarmsOptions,
    ListSensorsOptions,
    ListTasksOptions,
    CreateTaskOptions,
    CreateWebhookSubscriptionOptions,
)

__all__ = [
    # Core
    'ZebraClientError',
    'ConfigurationError',
    'ZebraError',
    'ZebraErrorBody',
    'ZebraTransportError',
    'ZebraTimeoutError',
    'SensorNotFoundError',
    'RequestOptions',
    'Transport',
    'HttpxTransport',

    # Configuration
    'ClientConfig',
    'RetryConfig',
    'ResolvedConfig',
    'DEFAULT_BASE_URL',

    # Telemetry
    'TelemetryProvider',
    'RequestContext',
    'RequestResult',
    'NoopTelemetryProvider',
    'LoggingTelemetryProvider',

    # Client
    'ZebraClient',

    # Models
    'GetReadingsLogOptions',
    'ListAlarmsOptions',
    'ListSensorsOptions',
    'ListTasksOptions',
    'CreateTaskOptions',
    'CreateWebhookSubscriptionOptions',
]
