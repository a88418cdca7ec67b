from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.constants import UNKNOWN_EMPLOYEE_NAME
from ..core.enums import LeaveStatus
from ..database.memory_store import MemoryStore
from .model import LeaveBalance, LeaveRequest
from .repository import LeaveRepository


def _newest_first(items: list[LeaveRequest]) -> list[LeaveRequest]:
    return sorted(items, key=lambda r: (r.start_date, r.request_id), reverse=True)


class MemoryLeaveRepository(LeaveRepository):
    def __init__(self, store: MemoryStore):
        self._store = store
        self._rows = store.table("leave_requests")
        self._balances = store.table("leave_balances")
        self._users = store.table("users")

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
        with self._store.lock:
            request_id = self._store.next_id("leave_requests")
            self._rows[request_id] = LeaveRequest(
                request_id=request_id,
                employee_id=int(employee_id),
                start_date=start_date,
                end_date=end_date,
                reason=reason,
                status=status,
                created_at=created_at,
            )
            return request_id

    def get_by_id(self, request_id: int) -> Optional[LeaveRequest]:
        return self._rows.get(int(request_id))

    def list_for_employee(self, employee_id: int) -> Sequence[LeaveRequest]:
        with self._store.lock:
            items = [r for r in self._rows.values() if r.employee_id == int(employee_id)]
        return _newest_first(items)

    def list_with_employee_names(self) -> Sequence[LeaveRequest]:
        with self._store.lock:
            items = []
            for r in self._rows.values():
                user = self._users.get(r.employee_id)
                items.append(replace(r, employee_name=user.name if user else UNKNOWN_EMPLOYEE_NAME))
        return _newest_first(items)

    def decide(self, *, request_id: int, status: LeaveStatus) -> bool:
        with self._store.lock:
            existing = self._rows.get(int(request_id))
            if not existing or existing.status != LeaveStatus.PENDING:
                return False
            self._rows[existing.request_id] = replace(existing, status=status)
            return True

    def get_balance(self, employee_id: int) -> Optional[LeaveBalance]:
        return self._balances.get(int(employee_id))

    def save_balance(self, balance: LeaveBalance) -> None:
        with self._store.lock:
            self._balances[int(balance.employee_id)] = balance
