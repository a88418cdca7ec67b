from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role, fixed at account creation."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Status of an employee's attendance for one calendar day."""

    PRESENT = "Present"
    ABSENT = "Absent"
    ON_LEAVE = "On Leave"


class LeaveStatus(str, Enum):
    """Leave request workflow: Pending -> Approved | Rejected."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class AttendanceAction(str, Enum):
    CHECK_IN = "check-in"
    CHECK_OUT = "check-out"
