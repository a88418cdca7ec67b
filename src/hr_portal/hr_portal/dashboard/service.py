from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..attendance.service import AttendanceService
from ..core.enums import AttendanceStatus, Role
from ..gamification.model import GamificationProgress
from ..gamification.service import GamificationService
from ..users.repository import UserRepository


@dataclass(frozen=True)
class AdminSnapshot:
    total_employees: int
    present_today: int
    on_leave: int


@dataclass(frozen=True)
class EmployeeSnapshot:
    today_attendance: AttendanceRecord
    gamification: GamificationProgress


class DashboardService:
    """Counts computed on every call; no caching."""

    def __init__(self, users: UserRepository, attendance: AttendanceService, gamification: GamificationService):
        self._users = users
        self._attendance = attendance
        self._gamification = gamification

    def admin_snapshot(self, *, now: Optional[datetime] = None) -> AdminSnapshot:
        return AdminSnapshot(
            total_employees=self._users.count_by_role(Role.EMPLOYEE),
            present_today=self._attendance.count_today(AttendanceStatus.PRESENT, now=now),
            on_leave=self._attendance.count_today(AttendanceStatus.ON_LEAVE, now=now),
        )

    def employee_snapshot(self, employee_id: int, *, now: Optional[datetime] = None) -> EmployeeSnapshot:
        return EmployeeSnapshot(
            today_attendance=self._attendance.resolve_today(employee_id, now=now),
            gamification=self._gamification.progress_for(employee_id),
        )
