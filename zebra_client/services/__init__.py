"""Resource services: thin endpoint mappings over the request pipeline."""

from .readings import ReadingsService
from .sensors import SensorsService
from .alarms import AlarmsService
from .tasks import TasksService
from .auth import AuthService
from .webhooks import WebhooksService

__all__ = [
    'ReadingsService',
    'SensorsService',
    'AlarmsService',
    'TasksService',
    'AuthService',
    'WebhooksService',
]
