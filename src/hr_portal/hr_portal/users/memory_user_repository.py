from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..core.enums import Role
from ..core.exceptions import EmailTakenError
from ..database.memory_store import MemoryStore
from .model import User
from .repository import UserRepository


class MemoryUserRepository(UserRepository):
    def __init__(self, store: MemoryStore):
        self._store = store
        self._rows = store.table("users")

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._rows.get(int(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        with self._store.lock:
            return next((u for u in self._rows.values() if u.email == email), None)

    def list_all(self) -> Sequence[User]:
        with self._store.lock:
            return sorted(self._rows.values(), key=lambda u: u.user_id)

    def first_admin(self) -> Optional[User]:
        return next((u for u in self.list_all() if u.role == Role.ADMIN), None)

    def count_by_role(self, role: Role) -> int:
        with self._store.lock:
            return sum(1 for u in self._rows.values() if u.role == role)

    def create_user(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        role: Role,
        team: str,
        join_date: date,
    ) -> int:
        with self._store.lock:
            if any(u.email == email for u in self._rows.values()):
                raise EmailTakenError()
            user_id = self._store.next_id("users")
            self._rows[user_id] = User(
                user_id=user_id,
                name=name,
                email=email,
                password_hash=password_hash,
                role=role,
                team=team,
                join_date=join_date,
            )
            return user_id

    def update_profile(
        self,
        user_id: int,
        *,
        name: Optional[str] = None,
        team: Optional[str] = None,
        join_date: Optional[date] = None,
        password_hash: Optional[str] = None,
    ) -> bool:
        fields = {"name": name, "team": team, "join_date": join_date, "password_hash": password_hash}
        changes = {k: v for k, v in fields.items() if v is not None}
        with self._store.lock:
            user = self._rows.get(int(user_id))
            if not user:
                return False
            self._rows[user.user_id] = replace(user, **changes)
            return True
