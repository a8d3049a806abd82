"""Request options and response shapes of the Zebra Savannah API."""

from .api_models import (
    PageResponse,
    Reading,
    ReadingsResponse,
    GetReadingsLogOptions,
    Alarm,
    AlarmsResponse,
    ListAlarmsOptions,
    SensorStatus,
    SensorListResponse,
    ListSensorsOptions,
    Task,
    TaskListResponse,
    AssociatedSensor,
    FailedSensor,
    AssignSensorsResponse,
    AssetAssociation,
    ListTasksOptions,
    CreateTaskOptions,
    ZSFinderTokenResponse,
    WebhookSubscription,
    CreateWebhookSubscriptionOptions,
    to_iso8601,
)

__all__ = [
    'PageResponse',
    'Reading',
    'ReadingsResponse',
    'GetReadingsLogOptions',
    'Alarm',
    'AlarmsResponse',
    'ListAlarmsOptions',
    'SensorStatus',
    'SensorListResponse',
    'ListSensorsOptions',
    'Task',
    'TaskListResponse',
    'AssociatedSensor',
    'FailedSensor',
    'AssignSensorsResponse',
    'AssetAssociation',
    'ListTasksOptions',
    'CreateTaskOptions',
    'ZSFinderTokenResponse',
    'WebhookSubscription',
    'CreateWebhookSubscriptionOptions',
    'to_iso8601',
]
