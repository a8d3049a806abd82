from __future__ import annotations

from ..models import GetReadingsLogOptions, ReadingsResponse, to_iso8601
from ._base import BaseService, path_segment, with_query


class ReadingsService(BaseService):
    """Environmental readings log."""

    async def get_log(self, options: GetReadingsLogOptions) -> ReadingsResponse:
        """
        Fetch the readings log of one sensor within a task.

        ``cursor`` continues a previous page; pass the ``cursor`` value of the
        last response until it comes back empty.
        """
        endpoint = with_query(f"data/environmental/tasks/{path_segment(options.task_id)}/log", {
            "savannah_sensor_task_id": options.sensor_task_id,
            "since":  to_iso8601(options.start_time),
            "until":  to_iso8601(options.end_time) if options.end_time else None,
            "cursor": options.cursor or None,
        })
        return await self._request(
            "readings.get_log", endpoint, route="data/environmental/tasks/:taskId/log")
