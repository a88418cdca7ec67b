from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.constants import UNKNOWN_EMPLOYEE_NAME
from ..core.enums import LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LeaveBalance, LeaveRequest
from .repository import LeaveRepository


def _to_request(r: dict) -> LeaveRequest:
    return LeaveRequest(
        request_id=int(r["request_id"]),
        employee_id=int(r["employee_id"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        reason=r["reason"],
        status=LeaveStatus(r["status"]),
        created_at=r.get("created_at"),
        employee_name=r.get("employee_name"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(employee_id, start_date, end_date, reason, status, created_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (employee_id, start_date, end_date, reason, status.value, created_at),
            )
            return int(cur.lastrowid)

    def get_by_id(self, request_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT request_id, employee_id, start_date, end_date, reason, status, created_at
                FROM leave_requests
                WHERE request_id=%s
                """,
                (int(request_id),),
            )
            r = fetchone(cur)
            return _to_request(r) if r else None

    def list_for_employee(self, employee_id: int) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT request_id, employee_id, start_date, end_date, reason, status, created_at
                FROM leave_requests
                WHERE employee_id=%s
                ORDER BY start_date DESC, request_id DESC
                """,
                (int(employee_id),),
            )
            return [_to_request(r) for r in fetchall(cur)]

    def list_with_employee_names(self) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT lr.request_id, lr.employee_id, lr.start_date, lr.end_date, lr.reason,
                       lr.status, lr.created_at,
                       COALESCE(u.name, %s) AS employee_name
                FROM leave_requests lr
                LEFT JOIN users u ON u.user_id = lr.employee_id
                ORDER BY lr.start_date DESC, lr.request_id DESC
                """,
                (UNKNOWN_EMPLOYEE_NAME,),
            )
            return [_to_request(r) for r in fetchall(cur)]

    def decide(self, *, request_id: int, status: LeaveStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE leave_requests SET status=%s WHERE request_id=%s AND status=%s",
                (status.value, int(request_id), LeaveStatus.PENDING.value),
            )
            return cur.rowcount > 0

    def get_balance(self, employee_id: int) -> Optional[LeaveBalance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT employee_id, annual, sick FROM leave_balances WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            if not r:
                return None
            return LeaveBalance(employee_id=int(r["employee_id"]), annual=int(r["annual"]), sick=int(r["sick"]))

    def save_balance(self, balance: LeaveBalance) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_balances(employee_id, annual, sick) VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE annual=VALUES(annual), sick=VALUES(sick)
                """,
                (balance.employee_id, balance.annual, balance.sick),
            )
