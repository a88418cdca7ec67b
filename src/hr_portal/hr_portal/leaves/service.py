from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..audit.service import AuditRecorder
from ..common.datetime_utils import format_date, now_local, parse_iso_date
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_ANNUAL_LEAVE, DEFAULT_SICK_LEAVE, UNKNOWN_EMPLOYEE_NAME
from ..core.enums import LeaveStatus
from ..core.exceptions import AlreadyDecidedError, InvalidStatusError, RequestNotFoundError, UserNotFoundError
from ..users.model import User
from ..users.repository import UserRepository
from .model import LeaveBalance, LeaveRequest
from .repository import LeaveRepository

log = logging.getLogger(__name__)

DECISIONS = (LeaveStatus.APPROVED, LeaveStatus.REJECTED)


class LeaveService:
    """Leave workflow: employees submit (Pending), admins decide once.

    A decision is a conditional update on status = Pending; deciding an
    already decided request raises AlreadyDecidedError instead of overwriting.
    """

    def __init__(
        self,
        leaves: LeaveRepository,
        users: UserRepository,
        audit: AuditRecorder,
        *,
        timezone: Optional[str] = None,
    ):
        self._leaves = leaves
        self._users = users
        self._audit = audit
        self._timezone = timezone

    def submit(self, employee_id: int, *, start_date: str, end_date: str, reason: str) -> LeaveRequest:
        user = self._users.get_by_id(int(employee_id))
        if not user:
            raise UserNotFoundError()

        start = parse_iso_date(start_date, "Start date")
        end = parse_iso_date(end_date, "End date")
        reason = require_non_empty(reason, "Reason")

        request_id = self._leaves.create(
            employee_id=user.user_id,
            start_date=start,
            end_date=end,
            reason=reason,
            created_at=now_local(self._timezone),
        )
        self._audit.record(user, "Submitted Leave Request", f"From {format_date(start)} to {format_date(end)}")
        return self._leaves.get_by_id(request_id)

    def decide(self, request_id: int, status: str, *, actor: Optional[User] = None) -> LeaveRequest:
        try:
            decision = LeaveStatus(status)
        except ValueError:
            decision = None
        if decision not in DECISIONS:
            raise InvalidStatusError("Invalid status.")

        request = self._leaves.get_by_id(int(request_id))
        if not request:
            raise RequestNotFoundError()
        if request.status != LeaveStatus.PENDING:
            raise AlreadyDecidedError()

        if not self._leaves.decide(request_id=request.request_id, status=decision):
            raise AlreadyDecidedError()

        employee = self._users.get_by_id(request.employee_id)
        employee_name = employee.name if employee else UNKNOWN_EMPLOYEE_NAME
        log.info("leave request %s %s", request.request_id, decision.value.lower())
        self._audit.record(actor, f"Leave Request {decision.value}", f"Request for {employee_name}")
        return self._leaves.get_by_id(request.request_id)

    def list_for_admin(self) -> Sequence[LeaveRequest]:
        return self._leaves.list_with_employee_names()

    def list_for_employee(self, employee_id: int) -> Sequence[LeaveRequest]:
        return self._leaves.list_for_employee(int(employee_id))

    def leave_balance(self, employee_id: int) -> LeaveBalance:
        balance = self._leaves.get_balance(int(employee_id))
        if balance:
            return balance
        return LeaveBalance(employee_id=int(employee_id), annual=DEFAULT_ANNUAL_LEAVE, sick=DEFAULT_SICK_LEAVE)
