from __future__ import annotations

from typing import Protocol, Sequence

from .model import SalarySlip


class SalaryRepository(Protocol):
    def list_for_employee(self, employee_id: int) -> Sequence[SalarySlip]:
        raise NotImplementedError

    def list_all(self) -> Sequence[SalarySlip]:
        raise NotImplementedError

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
        raise NotImplementedError
