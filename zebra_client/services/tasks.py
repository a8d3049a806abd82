from __future__ import annotations

from typing import List, Optional, Sequence

from ..models import (
    AssetAssociation,
    AssignSensorsResponse,
    CreateTaskOptions,
    ListTasksOptions,
    Task,
    TaskListResponse,
)
from ._base import BaseService, path_segment, with_query


class TasksService(BaseService):
    """Environmental monitoring tasks."""

    async def create(self, options: CreateTaskOptions) -> Task:
        return await self._request(
            "tasks.create", "environmental/tasks", "POST",
            body=options.to_request_body(), route="environmental/tasks")

    async def get(self, task_id: str) -> Task:
        return await self._request(
            "tasks.get", f"environmental/tasks/{path_segment(task_id)}",
            route="environmental/tasks/:taskId")

    async def list(self, options: Optional[ListTasksOptions] = None) -> TaskListResponse:
        options = options or ListTasksOptions()
        endpoint = with_query("environmental/tasks", {
            "page.page": options.page,
            "page.size": options.page_size,
            "status":    options.status,
        })
        return await self._request("tasks.list", endpoint, route="environmental/tasks")

    async def stop(self, task_id: str) -> None:
        await self._request(
            "tasks.stop", f"environmental/tasks/{path_segment(task_id)}/stop", "POST",
            route="environmental/tasks/:taskId/stop")

    async def delete(self, task_id: str) -> None:
        await self._request(
            "tasks.delete", f"environmental/tasks/{path_segment(task_id)}", "DELETE",
            route="environmental/tasks/:taskId")

    async def assign_sensors(self, task_id: str, sensor_ids: Sequence[str]) -> AssignSensorsResponse:
        """Attach sensors to a task; partial failures come back in ``failed_sensors``."""
        return await self._request(
            "tasks.assign_sensors", f"environmental/tasks/{path_segment(task_id)}/sensors", "POST",
            body={"sensor_ids": list(sensor_ids)}, route="environmental/tasks/:taskId/sensors")

    async def assign_assets(self, task_id: str, asset_ids: Sequence[str]) -> List[AssetAssociation]:
        return await self._request(
            "tasks.assign_assets", f"environmental/tasks/{path_segment(task_id)}/assets", "POST",
            body={"asset_ids": list(asset_ids)}, route="environmental/tasks/:taskId/assets")
