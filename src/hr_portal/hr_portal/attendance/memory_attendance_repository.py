from __future__ import annotations

from dataclasses import replace
from datetime import date, time
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.memory_store import MemoryStore
from .model import AttendanceRecord, GeoLocation
from .repository import AttendanceRepository


class MemoryAttendanceRepository(AttendanceRepository):
    """Rows keyed by (employee_id, work_date), which enforces one record per day."""

    def __init__(self, store: MemoryStore):
        self._store = store
        self._rows = store.table("attendance")

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return self._rows.get((int(employee_id), work_date))

    def list_for_employee(self, employee_id: int, limit: Optional[int] = None) -> Sequence[AttendanceRecord]:
        with self._store.lock:
            items = [r for r in self._rows.values() if r.employee_id == int(employee_id)]
        items.sort(key=lambda r: r.work_date, reverse=True)
        return items if limit is None else items[: int(limit)]

    def list_all(self) -> Sequence[AttendanceRecord]:
        with self._store.lock:
            items = list(self._rows.values())
        items.sort(key=lambda r: (-r.work_date.toordinal(), r.employee_id))
        return items

    def count_for_date(self, work_date: date, status: AttendanceStatus) -> int:
        with self._store.lock:
            return sum(1 for r in self._rows.values() if r.work_date == work_date and r.status == status)

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
        key = (int(employee_id), work_date)
        with self._store.lock:
            existing = self._rows.get(key)
            if existing and existing.status == AttendanceStatus.PRESENT:
                return False
            attendance_id = existing.attendance_id if existing else self._store.next_id("attendance")
            self._rows[key] = AttendanceRecord(
                attendance_id=attendance_id,
                employee_id=int(employee_id),
                employee_name=employee_name,
                work_date=work_date,
                check_in=check_in,
                check_out=None,
                status=AttendanceStatus.PRESENT,
                check_in_photo=photo,
                check_in_location=location,
            )
            return True

    def record_checkout(self, *, employee_id: int, work_date: date, check_out: time) -> bool:
        key = (int(employee_id), work_date)
        with self._store.lock:
            existing = self._rows.get(key)
            if not existing or existing.check_in is None or existing.check_out is not None:
                return False
            self._rows[key] = replace(existing, check_out=check_out)
            return True

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
        key = (int(employee_id), work_date)
        with self._store.lock:
            if key in self._rows:
                raise ValueError(f"attendance already recorded for {key}")
            attendance_id = self._store.next_id("attendance")
            self._rows[key] = AttendanceRecord(
                attendance_id=attendance_id,
                employee_id=int(employee_id),
                employee_name=employee_name,
                work_date=work_date,
                check_in=check_in,
                check_out=check_out,
                status=status,
            )
            return attendance_id
