from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, GeoLocation


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int, limit: Optional[int] = None) -> Sequence[AttendanceRecord]:
        """Most recent day first."""

        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def count_for_date(self, work_date: date, status: AttendanceStatus) -> int:
        raise NotImplementedError

    def record_checkin(
        self,
        *,
        employee_id: int,
        employee_name: str,
        work_date: date,
        check_in: time,
        photo: Optional[str],
        location: Optional[GeoLocation],
    ) -> bool:
        """Atomically create or overwrite the (employee, day) record as Present.

        Returns False, writing nothing, when that record is already Present.
        """

        raise NotImplementedError

    def record_checkout(self, *, employee_id: int, work_date: date, check_out: time) -> bool:
        """Set check-out only if the day's record is checked in and not yet checked out."""

        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        employee_name: str,
        work_date: date,
        check_in: Optional[time],
        check_out: Optional[time],
        status: AttendanceStatus,
    ) -> int:
        """Plain insert, used for seeding and imports."""

        raise NotImplementedError
