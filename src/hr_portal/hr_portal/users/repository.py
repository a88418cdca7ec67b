from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, never on a concrete store.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def first_admin(self) -> Optional[User]:
        raise NotImplementedError

    def count_by_role(self, role: Role) -> int:
        raise NotImplementedError

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
        """Insert a user; raises EmailTakenError when the email is already registered."""

        raise NotImplementedError

    def update_profile(
        self,
        user_id: int,
        *,
        name: Optional[str] = None,
        team: Optional[str] = None,
        join_date: Optional[date] = None,
        password_hash: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError
