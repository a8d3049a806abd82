from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, TypedDict


###############################################################################
# 1. SHARED -------------------------------------------------------------------
###############################################################################

class PageResponse(TypedDict):
    total_pages: int
    page_size: int
    current_page: int


###############################################################################
# 2. READINGS -----------------------------------------------------------------
###############################################################################

class Reading(TypedDict, total=False):
    id: str
    sensor_id: str
    occurred: str                      # ISO-8601
    temperature: float
    humidity: float
    battery_level: int
    signal_strength: int


class ReadingsResponse(TypedDict, total=False):
    sensors_readings: List[Reading]
    cursor: Optional[str]
    page_response: PageResponse


@dataclass(frozen=True, slots=True)
class GetReadingsLogOptions:
    task_id: str
    sensor_task_id: str
    start_time: datetime
    end_time: Optional[datetime] = None
    cursor: Optional[str] = None


###############################################################################
# 3. ALARMS -------------------------------------------------------------------
###############################################################################

class Alarm(TypedDict, total=False):
    id: str
    sensor_id: str
    task_id: str
    alarm_type: str                    # e.g. "HIGH_TEMPERATURE"
    occurred: str
    temperature: float
    threshold_min: float
    threshold_max: float


class AlarmsResponse(TypedDict):
    sensors_alarms: List[Alarm]
    page_response: PageResponse


@dataclass(frozen=True, slots=True)
class ListAlarmsOptions:
    task_id: str
    since: Optional[datetime] = None
    page: Optional[int] = None         # starts at 1
    page_size: Optional[int] = None


###############################################################################
# 4. SENSORS ------------------------------------------------------------------
###############################################################################

class SensorStatus(TypedDict, total=False):
    serial_number: str
    battery_level: int
    signal_strength: int
    last_seen: str
    firmware_version: str


class SensorListResponse(TypedDict):
    sensors: List[SensorStatus]
    page_response: PageResponse


@dataclass(frozen=True, slots=True)
class ListSensorsOptions:
    page: Optional[int] = None
    page_size: Optional[int] = None


###############################################################################
# 5. TASKS --------------------------------------------------------------------
###############################################################################

class Task(TypedDict, total=False):
    id: str
    name: str
    status: str                        # e.g. "TASK_STATUS_ACTIVE"
    sensor_count: int
    alarm_count: int
    created_at: str


class TaskListResponse(TypedDict):
    tasks: List[Task]
    page_response: PageResponse


class AssociatedSensor(TypedDict):
    sensor_id: str
    sensor_task_id: str
    status: str


class FailedSensor(TypedDict):
    sensor_id: str
    failed_sensor_error: str


class AssignSensorsResponse(TypedDict):
    associated_sensors: List[AssociatedSensor]
    failed_sensors: List[FailedSensor]


class AssetAssociation(TypedDict):
    asset_id: str
    status: str


@dataclass(frozen=True, slots=True)
class ListTasksOptions:
    page: Optional[int] = None
    page_size: Optional[int] = None
    status: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CreateTaskOptions:
    """Options for a new environmental task; unset values are omitted from the request."""
    name: str
    interval_minutes: Optional[int] = None
    interval_seconds: Optional[int] = None
    loop_reads: bool = True
    sensor_type: str = "SENSOR_TYPE_TEMPERATURE"
    alarm_low_temp: Optional[float] = None
    alarm_high_temp: Optional[float] = None
    low_duration_minutes: Optional[int] = None
    high_duration_minutes: Optional[int] = None
    notes: Optional[str] = None
    start_immediately: bool = True

    # ---------- serialiser ------------------------------------------------ #
    def to_request_body(self) -> Dict[str, Any]:
        details: Dict[str, Any] = {"name": self.name}
        if self.interval_minutes:
            details["interval_minutes"] = self.interval_minutes
        elif self.interval_seconds:
            details["interval_seconds"] = self.interval_seconds
        else:
            details["interval_minutes"] = 5
        details["loop_reads"] = self.loop_reads
        details["sensor_type"] = self.sensor_type
        optional = {
            "alarm_low_temp":        self.alarm_low_temp,
            "alarm_high_temp":       self.alarm_high_temp,
            "low_duration_minutes":  self.low_duration_minutes,
            "high_duration_minutes": self.high_duration_minutes,
            "notes":                 self.notes,
        }
        details.update({k: v for k, v in optional.items() if v is not None})
        # protobuf-style empty message marks "start now"
        if self.start_immediately:
            details["start_immediately"] = {}
        return {"task_from_details": {"task_details": details}}


###############################################################################
# 6. AUTH ---------------------------------------------------------------------
###############################################################################

class ZSFinderTokenResponse(TypedDict):
    token: str
    expires_at: str


###############################################################################
# 7. WEBHOOKS -----------------------------------------------------------------
###############################################################################

class WebhookSubscription(TypedDict, total=False):
    id: str
    webhookUrl: str
    name: str
    status: str                        # e.g. "ACTIVE"


@dataclass(frozen=True, slots=True)
class CreateWebhookSubscriptionOptions:
    webhook_url: str
    name: Optional[str] = None

    def to_request_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"webhookUrl": self.webhook_url}
        if self.name is not None:
            body["name"] = self.name
        return body


###############################################################################
# 8. HELPERS ------------------------------------------------------------------
###############################################################################

def to_iso8601(value: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a ``Z`` suffix; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
