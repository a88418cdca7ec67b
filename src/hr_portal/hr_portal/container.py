from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .assistant.client import TextGenerator
from .assistant.service import AssistantService
from .attendance.memory_attendance_repository import MemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .audit.memory_audit_repository import MemoryAuditLogRepository
from .audit.mysql_audit_repository import MySQLAuditLogRepository
from .audit.repository import AuditLogRepository
from .audit.service import AuditRecorder
from .common.datetime_utils import now_local
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .database.memory_store import MemoryStore
from .gamification.memory_gamification_repository import MemoryGamificationRepository
from .gamification.mysql_gamification_repository import MySQLGamificationRepository
from .gamification.repository import GamificationRepository
from .gamification.service import GamificationService
from .leaves.memory_leave_repository import MemoryLeaveRepository
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .salaries.memory_salary_repository import MemorySalaryRepository
from .salaries.mysql_salary_repository import MySQLSalaryRepository
from .salaries.repository import SalaryRepository
from .salaries.service import SalaryService
from .users.memory_user_repository import MemoryUserRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService

BACKENDS = ("mysql", "memory")


@dataclass(frozen=True)
class Container:
    backend: str

    users_repo: UserRepository
    attendance_repo: AttendanceRepository
    salaries_repo: SalaryRepository
    leaves_repo: LeaveRepository
    gamification_repo: GamificationRepository
    audit_repo: AuditLogRepository

    audit: AuditRecorder
    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService
    salary_service: SalaryService
    leave_service: LeaveService
    gamification_service: GamificationService
    dashboard_service: DashboardService
    assistant_service: AssistantService


def build_container(
    *,
    backend: str = "mysql",
    db_config: Optional[dict] = None,
    store: Optional[MemoryStore] = None,
    timezone: Optional[str] = None,
    text_generator: Optional[TextGenerator] = None,
) -> Container:
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        users_repo = MySQLUserRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
        salaries_repo = MySQLSalaryRepository(conn)
        leaves_repo = MySQLLeaveRepository(conn)
        gamification_repo = MySQLGamificationRepository(conn)
        audit_repo = MySQLAuditLogRepository(conn)
    elif backend == "memory":
        store = store or MemoryStore()
        users_repo = MemoryUserRepository(store)
        attendance_repo = MemoryAttendanceRepository(store)
        salaries_repo = MemorySalaryRepository(store)
        leaves_repo = MemoryLeaveRepository(store)
        gamification_repo = MemoryGamificationRepository(store)
        audit_repo = MemoryAuditLogRepository(store)
    else:
        raise ValueError(f"Unknown STORE_BACKEND {backend!r}; expected one of {BACKENDS}")

    audit = AuditRecorder(audit_repo, clock=lambda: now_local(timezone))
    auth_service = AuthService(users_repo, audit, timezone=timezone)
    user_service = UserService(users_repo, audit)
    attendance_service = AttendanceService(attendance_repo, users_repo, audit, timezone=timezone)
    salary_service = SalaryService(salaries_repo)
    leave_service = LeaveService(leaves_repo, users_repo, audit, timezone=timezone)
    gamification_service = GamificationService(gamification_repo, audit)
    dashboard_service = DashboardService(users_repo, attendance_service, gamification_service)
    assistant_service = AssistantService(
        attendance_service,
        salary_service,
        leave_service,
        gamification_service,
        generator=text_generator,
    )

    return Container(
        backend=backend,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        salaries_repo=salaries_repo,
        leaves_repo=leaves_repo,
        gamification_repo=gamification_repo,
        audit_repo=audit_repo,
        audit=audit,
        auth_service=auth_service,
        user_service=user_service,
        attendance_service=attendance_service,
        salary_service=salary_service,
        leave_service=leave_service,
        gamification_service=gamification_service,
        dashboard_service=dashboard_service,
        assistant_service=assistant_service,
    )
