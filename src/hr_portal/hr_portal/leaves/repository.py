from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveBalance, LeaveRequest


class LeaveRepository(Protocol):
    def create(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        reason: str,
        created_at: datetime,
        status: LeaveStatus = LeaveStatus.PENDING,
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[LeaveRequest]:
        """Newest start date first."""

        raise NotImplementedError

    def list_with_employee_names(self) -> Sequence[LeaveRequest]:
        """All requests, newest start date first, with `employee_name` joined."""

        raise NotImplementedError

    def decide(self, *, request_id: int, status: LeaveStatus) -> bool:
        """Move a Pending request to `status`; False if it is missing or already decided."""

        raise NotImplementedError

    def get_balance(self, employee_id: int) -> Optional[LeaveBalance]:
        raise NotImplementedError

    def save_balance(self, balance: LeaveBalance) -> None:
        raise NotImplementedError
