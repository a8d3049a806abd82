from __future__ import annotations

from ..models import AlarmsResponse, ListAlarmsOptions, to_iso8601
from ._base import BaseService, path_segment, with_query


class AlarmsService(BaseService):

    async def list(self, options: ListAlarmsOptions) -> AlarmsResponse:
        """List the alarms raised for a task, optionally since a point in time."""
        endpoint = with_query(f"environmental/tasks/{path_segment(options.task_id)}/alarms", {
            "since":     to_iso8601(options.since) if options.since else None,
            "page.page": options.page,
            "page.size": options.page_size,
        })
        return await self._request(
            "alarms.list", endpoint, route="environmental/tasks/:taskId/alarms")
