from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import SalarySlip
from .repository import SalaryRepository

_COLUMNS = "slip_id, employee_id, month, year, basic, allowances, deductions, net_salary"


def _to_slip(r: dict) -> SalarySlip:
    return SalarySlip(
        slip_id=int(r["slip_id"]),
        employee_id=int(r["employee_id"]),
        month=r["month"],
        year=int(r["year"]),
        basic=float(r["basic"]),
        allowances=float(r["allowances"]),
        deductions=float(r["deductions"]),
        net_salary=float(r["net_salary"]),
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int) -> Sequence[SalarySlip]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM salaries WHERE employee_id=%s ORDER BY slip_id", (employee_id,))
            return [_to_slip(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[SalarySlip]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM salaries ORDER BY slip_id")
            return [_to_slip(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: int,
        month: str,
        year: int,
        basic: float,
        allowances: float,
        deductions: float,
        net_salary: float,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salaries(employee_id, month, year, basic, allowances, deductions, net_salary)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (employee_id, month, int(year), basic, allowances, deductions, net_salary),
            )
            return int(cur.lastrowid)
