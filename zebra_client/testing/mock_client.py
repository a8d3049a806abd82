"""
Recording fake of ``ZebraClient``.

``MockZebraClient`` exposes the same services and method signatures as the
real client but never touches the network: each call is appended to
``calls`` and answered from ``mock_responses``::

    mock = MockZebraClient()
    mock.set_response("sensors.get_status", create_mock_sensor_status())
    await service_under_test(mock)
    assert mock.was_called("sensors.get_status")
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..core.exceptions import ZebraClientError
from ..models import (
    AlarmsResponse,
    AssetAssociation,
    AssignSensorsResponse,
    CreateTaskOptions,
    CreateWebhookSubscriptionOptions,
    GetReadingsLogOptions,
    ListAlarmsOptions,
    ListSensorsOptions,
    ListTasksOptions,
    ReadingsResponse,
    SensorListResponse,
    SensorStatus,
    Task,
    TaskListResponse,
    WebhookSubscription,
    ZSFinderTokenResponse,
)

RESOURCES = ("readings", "sensors", "alarms", "tasks", "auth", "webhooks")

# operations that return nothing; an unset response is fine for them
_VOID_METHODS = frozenset({
    "tasks.stop", "tasks.delete",
    "webhooks.stop", "webhooks.start", "webhooks.delete",
})


@dataclass(frozen=True, slots=True)
class MockCall:
    method: str
    args: Tuple[Any, ...]
    timestamp: float
    result: Any = None
    error: Optional[BaseException] = None


class MockZebraClient:

    def __init__(self):
        self._calls: List[MockCall] = []
        self.mock_responses: Dict[str, Dict[str, Any]] = {name: {} for name in RESOURCES}

        self.readings = _MockReadings(self)
        self.sensors  = _MockSensors(self)
        self.alarms   = _MockAlarms(self)
        self.tasks    = _MockTasks(self)
        self.auth     = _MockAuth(self)
        self.webhooks = _MockWebhooks(self)

    # ---- call log -------------------------------------------------------- #
    @property
    def calls(self) -> Tuple[MockCall, ...]:
        return tuple(self._calls)

    def get_calls(self, method: str) -> List[MockCall]:
        return [call for call in self._calls if call.method == method]

    def get_last_call(self, method: str) -> Optional[MockCall]:
        matching = self.get_calls(method)
        return matching[-1] if matching else None

    def was_called(self, method: str) -> bool:
        return bool(self.get_calls(method))

    def clear_calls(self) -> None:
        self._calls = []

    # ---- canned responses ------------------------------------------------ #
    def set_response(self, method: str, value: Any) -> None:
        """Configure ``"resource.method"``; an exception instance is raised when called."""
        resource, name = self._split(method)
        self.mock_responses[resource][name] = value

    @staticmethod
    def _split(method: str) -> Tuple[str, str]:
        resource, _, name = method.partition(".")
        if resource not in RESOURCES or not name:
            raise ValueError(f"Unknown mock method '{method}'")
        return resource, name

    async def _invoke(self, method: str, *args: Any) -> Any:
        resource, name = self._split(method)
        response = self.mock_responses[resource].get(name)
        failed = isinstance(response, BaseException)
        self._calls.append(MockCall(
            method    = method,
            args      = args,
            timestamp = time.time(),
            result    = None if failed else response,
            error     = response if failed else None,
        ))
        if failed:
            raise response
        if response is None and method not in _VOID_METHODS:
            raise ZebraClientError(f"No mock response configured for {method}")
        return response


class _MockResource:
    def __init__(self, owner: MockZebraClient):
        self._owner = owner


class _MockReadings(_MockResource):
    async def get_log(self, options: GetReadingsLogOptions) -> ReadingsResponse:
        return await self._owner._invoke("readings.get_log", options)


class _MockSensors(_MockResource):
    async def get_status(self, serial_number: str) -> SensorStatus:
        return await self._owner._invoke("sensors.get_status", serial_number)

    async def list(self, options: Optional[ListSensorsOptions] = None) -> SensorListResponse:
        return await self._owner._invoke("sensors.list", options)


class _MockAlarms(_MockResource):
    async def list(self, options: ListAlarmsOptions) -> AlarmsResponse:
        return await self._owner._invoke("alarms.list", options)


class _MockTasks(_MockResource):
    async def create(self, options: CreateTaskOptions) -> Task:
        return await self._owner._invoke("tasks.create", options)

    async def get(self, task_id: str) -> Task:
        return await self._owner._invoke("tasks.get", task_id)

    async def list(self, options: Optional[ListTasksOptions] = None) -> TaskListResponse:
        return await self._owner._invoke("tasks.list", options)

    async def stop(self, task_id: str) -> None:
        await self._owner._invoke("tasks.stop", task_id)

    async def delete(self, task_id: str) -> None:
        await self._owner._invoke("tasks.delete", task_id)

    async def assign_sensors(self, task_id: str, sensor_ids: Sequence[str]) -> AssignSensorsResponse:
        return await self._owner._invoke("tasks.assign_sensors", task_id, sensor_ids)

    async def assign_assets(self, task_id: str, asset_ids: Sequence[str]) -> List[AssetAssociation]:
        return await self._owner._invoke("tasks.assign_assets", task_id, asset_ids)


class _MockAuth(_MockResource):
    async def create_zsfinder_token(self) -> ZSFinderTokenResponse:
        return await self._owner._invoke("auth.create_zsfinder_token")


class _MockWebhooks(_MockResource):
    async def register(self, options: CreateWebhookSubscriptionOptions) -> WebhookSubscription:
        return await self._owner._invoke("webhooks.register", options)

    async def list(self) -> List[WebhookSubscription]:
        return await self._owner._invoke("webhooks.list")

    async def stop(self, subscription_id: str) -> None:
        await self._owner._invoke("webhooks.stop", subscription_id)

    async def start(self, subscription_id: str) -> None:
        await self._owner._invoke("webhooks.start", subscription_id)

    async def delete(self, subscription_id: str) -> None:
        await self._owner._invoke("webhooks.delete", subscription_id)
