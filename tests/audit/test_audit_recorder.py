from __future__ import annotations

import itertools
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from werkzeug.security import generate_password_hash

from src.hr_portal.hr_portal.attendance.service import AttendanceService
from src.hr_portal.hr_portal.audit.memory_audit_repository import MemoryAuditLogRepository
from src.hr_portal.hr_portal.audit.service import AuditRecorder
from src.hr_portal.hr_portal.container import build_container
from src.hr_portal.hr_portal.core.enums import AttendanceStatus, Role
from src.hr_portal.hr_portal.database.memory_store import MemoryStore
from src.hr_portal.hr_portal.users.model import User

ALEX = User(
    user_id=1,
    name="Alex Johnson",
    email="admin@example.com",
    password_hash="x",
    role=Role.ADMIN,
    team="Management",
    join_date=date(2020, 1, 15),
)


class FailingAuditLogs:
    def __init__(self):
        self.calls = 0

    def append(self, **kwargs):
        self.calls += 1
        raise RuntimeError("audit store down")

    def list_recent(self, limit):
        return []


def _ticking_clock(start: datetime):
    ticks = itertools.count()
    return lambda: start + timedelta(seconds=next(ticks))


def test_entries_are_listed_newest_first():
    recorder = AuditRecorder(MemoryAuditLogRepository(MemoryStore()), clock=_ticking_clock(datetime(2024, 5, 6, 8, 0)))

    for action in ("first", "second", "third"):
        recorder.record(ALEX, action)

    entries = recorder.list_recent()
    assert [e.action for e in entries] == ["third", "second", "first"]
    assert entries[0].timestamp == datetime(2024, 5, 6, 8, 0, 2)
    assert entries[0].user_name == "Alex Johnson"
    assert entries[0].details == ""


def test_same_timestamp_keeps_insertion_order_newest_first():
    fixed = datetime(2024, 5, 6, 8, 0)
    recorder = AuditRecorder(MemoryAuditLogRepository(MemoryStore()), clock=lambda: fixed)

    recorder.record(ALEX, "a")
    recorder.record(ALEX, "b")

    assert [e.action for e in recorder.list_recent()] == ["b", "a"]


def test_list_is_capped_at_one_hundred():
    recorder = AuditRecorder(MemoryAuditLogRepository(MemoryStore()), clock=_ticking_clock(datetime(2024, 1, 1)))

    for i in range(105):
        recorder.record(ALEX, f"action {i}")

    entries = recorder.list_recent()
    assert len(entries) == 100
    assert entries[0].action == "action 104"
    assert entries[-1].action == "action 5"


def test_missing_actor_is_dropped():
    repo = MemoryAuditLogRepository(MemoryStore())
    recorder = AuditRecorder(repo)

    recorder.record(None, "Leave Request Approved")

    assert repo.list_recent(10) == []


def test_failing_store_does_not_raise():
    logs = FailingAuditLogs()
    recorder = AuditRecorder(logs)

    recorder.record(ALEX, "User Login")

    assert logs.calls == 1


def test_failing_audit_does_not_abort_check_in(container):
    emp_id = container.users_repo.create_user(
        name="Jane Doe",
        email="jane@example.com",
        password_hash=generate_password_hash("secret"),
        role=Role.EMPLOYEE,
        team="Engineering",
        join_date=date(2022, 3, 10),
    )
    service = AttendanceService(container.attendance_repo, container.users_repo, AuditRecorder(FailingAuditLogs()))

    rec = service.check_in(emp_id, now=datetime(2024, 5, 6, 9, 0))

    assert rec.status == AttendanceStatus.PRESENT
    assert container.attendance_repo.get_for_employee_and_date(emp_id, date(2024, 5, 6)) is not None


def test_timestamps_follow_configured_timezone():
    tz = "Pacific/Kiritimati"
    c = build_container(backend="memory", store=MemoryStore(), timezone=tz)
    emp_id = c.auth_service.signup(name="Sam Lee", email="sam@example.com", password="pw").user_id

    req = c.leave_service.submit(emp_id, start_date="2024-08-01", end_date="2024-08-02", reason="Trip")

    expected = datetime.now(ZoneInfo(tz)).replace(tzinfo=None)
    assert abs(c.audit.list_recent()[0].timestamp - expected) < timedelta(minutes=1)
    assert abs(req.created_at - expected) < timedelta(minutes=1)
