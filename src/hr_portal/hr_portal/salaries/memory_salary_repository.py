from __future__ import annotations

from typing import Sequence

from ..database.memory_store import MemoryStore
from .model import SalarySlip
from .repository import SalaryRepository


class MemorySalaryRepository(SalaryRepository):
    def __init__(self, store: MemoryStore):
        self._store = store
        self._rows = store.table("salaries")

    def list_for_employee(self, employee_id: int) -> Sequence[SalarySlip]:
        return [s for s in self.list_all() if s.employee_id == int(employee_id)]

    def list_all(self) -> Sequence[SalarySlip]:
        with self._store.lock:
            return sorted(self._rows.values(), key=lambda s: s.slip_id)

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
        with self._store.lock:
            slip_id = self._store.next_id("salaries")
            self._rows[slip_id] = SalarySlip(
                slip_id=slip_id,
                employee_id=int(employee_id),
                month=month,
                year=int(year),
                basic=float(basic),
                allowances=float(allowances),
                deductions=float(deductions),
                net_salary=float(net_salary),
            )
            return slip_id
