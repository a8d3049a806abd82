from __future__ import annotations

from typing import Optional

from ..core.exceptions import SensorNotFoundError
from ..models import ListSensorsOptions, SensorListResponse, SensorStatus
from ._base import BaseService, with_query


class SensorsService(BaseService):

    async def get_status(self, serial_number: str) -> SensorStatus:
        """
        Resolve a single sensor by serial number.

        The API only offers a text filter, so this issues a filtered list query
        and returns the first match. Raises ``SensorNotFoundError`` when the
        list is empty; several matches only log a warning.
        """
        endpoint = with_query("devices/environmental-sensors", {"text_filter": serial_number})
        response = await self._request(
            "sensors.get_status", endpoint, route="devices/environmental-sensors")

        sensors = (response or {}).get("sensors") or []
        if not sensors:
            raise SensorNotFoundError(serial_number)
        if len(sensors) > 1:
            self.log.warning(f"Multiple sensors found for serial number {serial_number}, "
                             f"returning the first one")
        return sensors[0]

    async def list(self, options: Optional[ListSensorsOptions] = None) -> SensorListResponse:
        options = options or ListSensorsOptions()
        endpoint = with_query("environmental/sensors", {
            "page.page": options.page,
            "page.size": options.page_size,
        })
        return await self._request("sensors.list", endpoint, route="environmental/sensors")
