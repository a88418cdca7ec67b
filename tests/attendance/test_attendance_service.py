from __future__ import annotations

import threading
from datetime import date, datetime, time

import pytest
from werkzeug.security import generate_password_hash

from src.hr_portal.hr_portal.attendance.model import GeoLocation
from src.hr_portal.hr_portal.core.enums import AttendanceStatus, Role
from src.hr_portal.hr_portal.core.exceptions import (
    AlreadyCheckedInError,
    AlreadyCheckedOutError,
    ConflictError,
    NotCheckedInError,
    UserNotFoundError,
    ValidationError,
)

MORNING = datetime(2024, 5, 6, 9, 3, 27)
EVENING = datetime(2024, 5, 6, 17, 45, 10)


def _add_employee(container, name="Jane Doe", email="jane@example.com") -> int:
    return container.users_repo.create_user(
        name=name,
        email=email,
        password_hash=generate_password_hash("secret"),
        role=Role.EMPLOYEE,
        team="Engineering",
        join_date=date(2022, 3, 10),
    )


def test_check_in_creates_present_record_at_minute_precision(container):
    emp_id = _add_employee(container)

    rec = container.attendance_service.check_in(
        emp_id,
        "data:image/jpeg;base64,AAAA",
        GeoLocation(latitude=10.5, longitude=106.7),
        now=MORNING,
    )

    assert rec.status == AttendanceStatus.PRESENT
    assert rec.work_date == date(2024, 5, 6)
    assert rec.check_in == time(9, 3)
    assert rec.check_out is None
    assert rec.employee_name == "Jane Doe"
    assert rec.check_in_photo == "data:image/jpeg;base64,AAAA"
    assert rec.check_in_location == GeoLocation(latitude=10.5, longitude=106.7)


def test_second_check_in_same_day_is_a_conflict(container):
    emp_id = _add_employee(container)
    container.attendance_service.check_in(emp_id, now=MORNING)

    with pytest.raises(AlreadyCheckedInError) as exc:
        container.attendance_service.check_in(emp_id, now=EVENING)

    assert isinstance(exc.value, ConflictError)
    assert str(exc.value) == "You have already checked in today."
    assert len(container.attendance_service.list_for_employee(emp_id)) == 1


def test_check_out_before_check_in_is_a_conflict(container):
    emp_id = _add_employee(container)

    with pytest.raises(NotCheckedInError):
        container.attendance_service.check_out(emp_id, now=EVENING)

    assert container.attendance_service.list_for_employee(emp_id) == []


def test_check_out_then_second_check_out_is_a_conflict(container):
    emp_id = _add_employee(container)
    container.attendance_service.check_in(emp_id, now=MORNING)

    rec = container.attendance_service.check_out(emp_id, now=EVENING)
    assert rec.check_out == time(17, 45)
    assert rec.check_in == time(9, 3)

    with pytest.raises(AlreadyCheckedOutError):
        container.attendance_service.check_out(emp_id, now=datetime(2024, 5, 6, 18, 0))

    assert container.attendance_service.resolve_today(emp_id, now=EVENING).check_out == time(17, 45)


def test_check_out_on_leave_record_without_check_in_is_rejected(container):
    emp_id = _add_employee(container)
    container.attendance_repo.create(
        employee_id=emp_id,
        employee_name="Jane Doe",
        work_date=MORNING.date(),
        check_in=None,
        check_out=None,
        status=AttendanceStatus.ON_LEAVE,
    )

    with pytest.raises(NotCheckedInError):
        container.attendance_service.check_out(emp_id, now=EVENING)


def test_check_in_replaces_non_present_record_for_the_day(container):
    emp_id = _add_employee(container)
    container.attendance_repo.create(
        employee_id=emp_id,
        employee_name="Jane Doe",
        work_date=MORNING.date(),
        check_in=None,
        check_out=None,
        status=AttendanceStatus.ON_LEAVE,
    )

    rec = container.attendance_service.check_in(emp_id, now=MORNING)

    assert rec.status == AttendanceStatus.PRESENT
    assert len(container.attendance_service.list_for_employee(emp_id)) == 1


def test_check_in_unknown_employee(container):
    with pytest.raises(UserNotFoundError):
        container.attendance_service.check_in(999, now=MORNING)


def test_concurrent_check_ins_produce_one_record(container):
    emp_id = _add_employee(container)
    workers = 8
    barrier = threading.Barrier(workers)
    outcomes = []
    outcomes_lock = threading.Lock()

    def attempt():
        barrier.wait()
        try:
            container.attendance_service.check_in(emp_id, now=MORNING)
            result = "ok"
        except AlreadyCheckedInError:
            result = "conflict"
        with outcomes_lock:
            outcomes.append(result)

    threads = [threading.Thread(target=attempt) for _ in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes.count("ok") == 1
    assert outcomes.count("conflict") == workers - 1
    assert len(container.attendance_service.list_for_employee(emp_id)) == 1


def test_resolve_today_synthesizes_absent_without_persisting(container):
    emp_id = _add_employee(container)

    rec = container.attendance_service.resolve_today(emp_id, now=MORNING)

    assert rec.status == AttendanceStatus.ABSENT
    assert rec.attendance_id is None
    assert rec.check_in is None and rec.check_out is None
    assert rec.work_date == MORNING.date()
    assert container.attendance_service.list_for_employee(emp_id) == []
    assert container.attendance_service.list_all() == []


def test_mark_dispatches_on_action_type(container):
    emp_id = _add_employee(container)

    rec = container.attendance_service.mark(
        emp_id, "check-in", location={"lat": 1.25, "lon": 103.8}, now=MORNING
    )
    assert rec.check_in_location == GeoLocation(latitude=1.25, longitude=103.8)

    rec = container.attendance_service.mark(emp_id, "check-out", now=EVENING)
    assert rec.check_out == time(17, 45)


def test_mark_rejects_unknown_action(container):
    emp_id = _add_employee(container)

    with pytest.raises(ValidationError):
        container.attendance_service.mark(emp_id, "lunch-break", now=MORNING)


def test_mark_rejects_malformed_location(container):
    emp_id = _add_employee(container)

    with pytest.raises(ValidationError):
        container.attendance_service.mark(emp_id, "check-in", location={"lat": "north"}, now=MORNING)

    assert container.attendance_service.list_for_employee(emp_id) == []


def test_check_in_and_out_are_audited(container):
    emp_id = _add_employee(container)
    container.attendance_service.check_in(emp_id, now=MORNING)
    container.attendance_service.check_out(emp_id, now=EVENING)

    actions = [e.action for e in container.audit.list_recent()]
    assert set(actions) == {"Checked In", "Checked Out"}
    assert all(e.user_name == "Jane Doe" for e in container.audit.list_recent())


def test_count_today_by_status(container):
    a = _add_employee(container)
    b = _add_employee(container, name="John Smith", email="john@example.com")
    container.attendance_service.check_in(a, now=MORNING)
    container.attendance_repo.create(
        employee_id=b,
        employee_name="John Smith",
        work_date=MORNING.date(),
        check_in=None,
        check_out=None,
        status=AttendanceStatus.ON_LEAVE,
    )

    assert container.attendance_service.count_today(AttendanceStatus.PRESENT, now=MORNING) == 1
    assert container.attendance_service.count_today(AttendanceStatus.ON_LEAVE, now=MORNING) == 1
    assert container.attendance_service.count_today(AttendanceStatus.PRESENT, now=datetime(2024, 5, 7, 9, 0)) == 0
