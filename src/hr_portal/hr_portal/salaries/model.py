from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SalarySlip:
    """Monthly salary slip. `net_salary` is stored as issued, never recomputed."""

    slip_id: int
    employee_id: int
    month: str
    year: int
    basic: float
    allowances: float
    deductions: float
    net_salary: float
