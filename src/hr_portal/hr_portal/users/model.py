from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an account (admin or employee).

    Note: plain data object, no DB access code here.
    """

    user_id: int
    name: str
    email: str
    password_hash: str
    role: Role
    team: str
    join_date: date
