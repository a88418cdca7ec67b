from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING, Optional

from werkzeug.security import generate_password_hash

from ..core.constants import (
    DEFAULT_ANNUAL_LEAVE,
    DEFAULT_POINTS_FOR_PERFECT_WEEK,
    DEFAULT_POINTS_FOR_PUNCTUALITY,
    DEFAULT_SICK_LEAVE,
)
from ..core.enums import AttendanceStatus, LeaveStatus, Role
from ..gamification.model import Badge, GamificationProgress, GamificationSettings
from ..leaves.model import LeaveBalance

if TYPE_CHECKING:
    from ..container import Container

log = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

DEMO_USERS = (
    ("Alex Johnson", "admin@example.com", Role.ADMIN, "Management", date(2020, 1, 15)),
    ("Jane Doe", "employee@example.com", Role.EMPLOYEE, "Engineering", date(2022, 3, 10)),
    ("John Smith", "john@example.com", Role.EMPLOYEE, "Marketing", date(2021, 7, 22)),
)


def seed_demo_data(container: "Container", *, today: Optional[date] = None) -> bool:
    """Populate an empty store with the demo accounts and some history.

    Does nothing (and returns False) when any user already exists.
    """

    if container.users_repo.list_all():
        return False

    log.info("store is empty, seeding demo data")
    today = today or date.today()

    ids = {}
    for name, email, role, team, join_date in DEMO_USERS:
        ids[email] = container.users_repo.create_user(
            name=name,
            email=email,
            password_hash=generate_password_hash(DEMO_PASSWORD),
            role=role,
            team=team,
            join_date=join_date,
        )
    jane = container.users_repo.get_by_id(ids["employee@example.com"])
    john = container.users_repo.get_by_id(ids["john@example.com"])

    two_days_ago = today - timedelta(days=2)
    yesterday = today - timedelta(days=1)
    attendance = (
        (jane, two_days_ago, time(9, 1), time(17, 30), AttendanceStatus.PRESENT),
        (jane, yesterday, time(8, 55), time(17, 35), AttendanceStatus.PRESENT),
        (john, two_days_ago, time(9, 15), time(18, 0), AttendanceStatus.PRESENT),
        (john, yesterday, None, None, AttendanceStatus.ON_LEAVE),
    )
    for user, work_date, check_in, check_out, status in attendance:
        container.attendance_repo.create(
            employee_id=user.user_id,
            employee_name=user.name,
            work_date=work_date,
            check_in=check_in,
            check_out=check_out,
            status=status,
        )

    slips = (
        (jane, "April", 2024, 4000, 1000, 200, 4800),
        (jane, "May", 2024, 4000, 1000, 200, 4800),
        (john, "April", 2024, 3500, 800, 150, 4150),
    )
    for user, month, year, basic, allowances, deductions, net in slips:
        container.salaries_repo.create(
            employee_id=user.user_id,
            month=month,
            year=year,
            basic=basic,
            allowances=allowances,
            deductions=deductions,
            net_salary=net,
        )

    requests = (
        (jane, date(2024, 5, 10), date(2024, 5, 12), "Vacation", LeaveStatus.APPROVED),
        (john, date(2024, 6, 1), date(2024, 6, 1), "Sick Leave", LeaveStatus.APPROVED),
        (jane, date(2024, 7, 20), date(2024, 7, 25), "Family event", LeaveStatus.PENDING),
    )
    for user, start, end, reason, status in requests:
        container.leaves_repo.create(
            employee_id=user.user_id,
            start_date=start,
            end_date=end,
            reason=reason,
            created_at=datetime.combine(today, time.min),
            status=status,
        )

    container.leaves_repo.save_balance(LeaveBalance(employee_id=jane.user_id, annual=12, sick=8))
    container.leaves_repo.save_balance(
        LeaveBalance(employee_id=john.user_id, annual=DEFAULT_ANNUAL_LEAVE, sick=DEFAULT_SICK_LEAVE - 1)
    )

    container.gamification_repo.save_progress(
        GamificationProgress(
            employee_id=jane.user_id,
            points=120,
            badges=(Badge(badge_id="punctual", name="Punctual Pro", description="On time all week", icon="clock"),),
            leaderboard_rank=1,
        )
    )
    container.gamification_repo.save_settings(
        GamificationSettings(
            points_for_punctuality=DEFAULT_POINTS_FOR_PUNCTUALITY,
            points_for_perfect_week=DEFAULT_POINTS_FOR_PERFECT_WEEK,
        )
    )

    log.info("demo data seeded (%d users)", len(DEMO_USERS))
    return True
