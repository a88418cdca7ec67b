"""JSON shapes of the domain entities, in the field names the web client uses."""

from __future__ import annotations

from ..attendance.model import AttendanceRecord
from ..audit.model import AuditLogEntry
from ..dashboard.service import AdminSnapshot, EmployeeSnapshot
from ..gamification.model import GamificationProgress, GamificationSettings
from ..leaves.model import LeaveBalance, LeaveRequest
from ..salaries.model import SalarySlip
from ..users.model import User
from .datetime_utils import format_date, format_time


def user_json(u: User) -> dict:
    # Never exposes the password hash.
    return {
        "id": u.user_id,
        "name": u.name,
        "email": u.email,
        "role": u.role.value,
        "team": u.team,
        "joinDate": format_date(u.join_date),
    }


def attendance_json(r: AttendanceRecord) -> dict:
    data = {
        "id": r.attendance_id,
        "employeeId": r.employee_id,
        "employeeName": r.employee_name,
        "date": format_date(r.work_date),
        "checkIn": format_time(r.check_in),
        "checkOut": format_time(r.check_out),
        "status": r.status.value,
    }
    if r.check_in_photo is not None:
        data["checkInPhoto"] = r.check_in_photo
    if r.check_in_location is not None:
        data["checkInLocation"] = r.check_in_location.to_payload()
    return data


def salary_json(s: SalarySlip) -> dict:
    return {
        "id": s.slip_id,
        "employeeId": s.employee_id,
        "month": s.month,
        "year": s.year,
        "basic": s.basic,
        "allowances": s.allowances,
        "deductions": s.deductions,
        "netSalary": s.net_salary,
    }


def leave_json(r: LeaveRequest) -> dict:
    data = {
        "id": r.request_id,
        "employeeId": r.employee_id,
        "startDate": format_date(r.start_date),
        "endDate": format_date(r.end_date),
        "reason": r.reason,
        "status": r.status.value,
    }
    if r.employee_name is not None:
        data["employeeName"] = r.employee_name
    return data


def leave_balance_json(b: LeaveBalance) -> dict:
    return {"annual": b.annual, "sick": b.sick}


def gamification_json(p: GamificationProgress) -> dict:
    return {
        "points": p.points,
        "badges": [
            {"id": b.badge_id, "name": b.name, "description": b.description, "icon": b.icon}
            for b in p.badges
        ],
        "leaderboardRank": p.leaderboard_rank if p.leaderboard_rank is not None else "N/A",
    }


def settings_json(s: GamificationSettings) -> dict:
    return {
        "pointsForPunctuality": s.points_for_punctuality,
        "pointsForPerfectWeek": s.points_for_perfect_week,
    }


def audit_json(e: AuditLogEntry) -> dict:
    return {
        "id": e.log_id,
        "timestamp": e.timestamp.isoformat(),
        "userId": e.user_id,
        "userName": e.user_name,
        "action": e.action,
        "details": e.details,
    }


def admin_snapshot_json(s: AdminSnapshot) -> dict:
    return {
        "stats": {
            "totalEmployees": s.total_employees,
            "presentToday": s.present_today,
            "onLeave": s.on_leave,
        }
    }


def employee_snapshot_json(s: EmployeeSnapshot) -> dict:
    return {
        "todayAttendance": attendance_json(s.today_attendance),
        "gamification": gamification_json(s.gamification),
    }
