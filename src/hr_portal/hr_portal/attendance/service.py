from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..audit.service import AuditRecorder
from ..common.datetime_utils import now_local, time_of_day
from ..core.enums import AttendanceAction, AttendanceStatus
from ..core.exceptions import (
    AlreadyCheckedInError,
    AlreadyCheckedOutError,
    NotCheckedInError,
    UserNotFoundError,
    ValidationError,
)
from ..users.repository import UserRepository
from .model import AttendanceRecord, GeoLocation
from .repository import AttendanceRepository

log = logging.getLogger(__name__)


class AttendanceService:
    """Check-in / check-out for the current calendar day.

    "Today" is the date in the configured timezone (server local time when
    none is configured). Both transitions are conditional writes in the
    repository, so concurrent requests for the same employee and day cannot
    produce two records or lose an update.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        audit: AuditRecorder,
        *,
        timezone: Optional[str] = None,
    ):
        self._attendance = attendance
        self._users = users
        self._audit = audit
        self._timezone = timezone

    def _now(self, now: Optional[datetime]) -> datetime:
        return now or now_local(self._timezone)

    def resolve_today(self, employee_id: int, *, now: Optional[datetime] = None) -> AttendanceRecord:
        today = self._now(now).date()
        record = self._attendance.get_for_employee_and_date(int(employee_id), today)
        if record:
            return record

        user = self._users.get_by_id(int(employee_id))
        return AttendanceRecord(
            attendance_id=None,
            employee_id=int(employee_id),
            employee_name=user.name if user else None,
            work_date=today,
            check_in=None,
            check_out=None,
            status=AttendanceStatus.ABSENT,
        )

    def check_in(
        self,
        employee_id: int,
        photo: Optional[str] = None,
        location: Optional[GeoLocation] = None,
        *,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        now = self._now(now)
        today = now.date()

        user = self._users.get_by_id(int(employee_id))
        if not user:
            raise UserNotFoundError()

        existing = self._attendance.get_for_employee_and_date(user.user_id, today)
        if existing and existing.status == AttendanceStatus.PRESENT:
            raise AlreadyCheckedInError()

        written = self._attendance.record_checkin(
            employee_id=user.user_id,
            employee_name=user.name,
            work_date=today,
            check_in=time_of_day(now),
            photo=photo,
            location=location,
        )
        if not written:
            # Lost the race against a concurrent check-in for the same day.
            raise AlreadyCheckedInError()

        log.info("employee %s checked in on %s", user.user_id, today)
        self._audit.record(user, "Checked In")
        return self._attendance.get_for_employee_and_date(user.user_id, today)

    def check_out(self, employee_id: int, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = self._now(now)
        today = now.date()

        record = self._attendance.get_for_employee_and_date(int(employee_id), today)
        if not record or record.check_in is None:
            raise NotCheckedInError()
        if record.check_out is not None:
            raise AlreadyCheckedOutError()

        if not self._attendance.record_checkout(employee_id=int(employee_id), work_date=today, check_out=time_of_day(now)):
            raise AlreadyCheckedOutError()

        log.info("employee %s checked out on %s", employee_id, today)
        self._audit.record(self._users.get_by_id(int(employee_id)), "Checked Out")
        return self._attendance.get_for_employee_and_date(int(employee_id), today)

    def mark(
        self,
        employee_id: int,
        action: str,
        *,
        photo: Optional[str] = None,
        location: Optional[Mapping[str, Any]] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        try:
            kind = AttendanceAction(action)
        except ValueError:
            raise ValidationError("Invalid attendance action.")

        if kind == AttendanceAction.CHECK_IN:
            return self.check_in(employee_id, photo, GeoLocation.from_payload(location), now=now)
        return self.check_out(employee_id, now=now)

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_employee(int(employee_id))

    def recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_employee(int(employee_id), limit=limit)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def count_today(self, status: AttendanceStatus, *, now: Optional[datetime] = None) -> int:
        return self._attendance.count_for_date(self._now(now).date(), status)
