from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    employee_id: int
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus
    created_at: Optional[datetime] = None
    # Joined from users at read time; not stored on the request.
    employee_name: Optional[str] = None


@dataclass(frozen=True)
class LeaveBalance:
    employee_id: int
    annual: int
    sick: int
