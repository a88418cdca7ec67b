from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Any, Mapping, Optional

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class GeoLocation:
    latitude: float
    longitude: float

    @classmethod
    def from_payload(cls, payload: Optional[Mapping[str, Any]]) -> Optional["GeoLocation"]:
        """Accept the client's `{lat, lon}` shape (or `{latitude, longitude}`)."""

        if payload is None:
            return None
        if not isinstance(payload, Mapping):
            raise ValidationError("Invalid location.")
        lat = payload.get("lat", payload.get("latitude"))
        lon = payload.get("lon", payload.get("longitude"))
        try:
            return cls(latitude=float(lat), longitude=float(lon))
        except (TypeError, ValueError):
            raise ValidationError("Invalid location.")

    def to_payload(self) -> dict:
        return {"lat": self.latitude, "lon": self.longitude}


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day.

    `attendance_id` is None for the synthesized "Absent" record returned when
    nothing is stored for today; such a record is never persisted.
    """

    attendance_id: Optional[int]
    employee_id: int
    employee_name: Optional[str]
    work_date: date
    check_in: Optional[time]
    check_out: Optional[time]
    status: AttendanceStatus
    check_in_photo: Optional[str] = None
    check_in_location: Optional[GeoLocation] = None
