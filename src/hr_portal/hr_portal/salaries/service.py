from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import month_number
from .model import SalarySlip
from .repository import SalaryRepository


class SalaryService:
    def __init__(self, salaries: SalaryRepository):
        self._salaries = salaries

    def list_for_employee(self, employee_id: int) -> Sequence[SalarySlip]:
        return self._salaries.list_for_employee(int(employee_id))

    def list_all(self) -> Sequence[SalarySlip]:
        return self._salaries.list_all()

    def recent_for_employee(self, employee_id: int, limit: int) -> Sequence[SalarySlip]:
        """Latest slips first, by year then calendar month."""

        slips = sorted(
            self._salaries.list_for_employee(int(employee_id)),
            key=lambda s: (s.year, month_number(s.month)),
            reverse=True,
        )
        return slips[: int(limit)]
