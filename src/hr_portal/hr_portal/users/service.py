from __future__ import annotations

import csv
import io
import logging
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..audit.service import AuditRecorder
from ..common.datetime_utils import format_date, now_local, parse_iso_date
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_TEAM, EMPLOYEE_CSV_HEADER
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, UserNotFoundError, ValidationError
from .model import User
from .repository import UserRepository

log = logging.getLogger(__name__)

# Client field name -> repository keyword. Anything else in an update payload
# (role, email, id, password) is ignored.
PROFILE_FIELDS = {"name": "name", "team": "team", "joinDate": "join_date"}


class AuthService:
    """Use case: authenticate (login) and self-register (signup)."""

    def __init__(self, users: UserRepository, audit: AuditRecorder, *, timezone: Optional[str] = None):
        self._users = users
        self._audit = audit
        self._timezone = timezone

    def login(self, email: str, password: str) -> User:
        if not isinstance(email, str) or not isinstance(password, str):
            raise AuthenticationError("Invalid email or password")

        user = self._users.get_by_email(email.strip())
        if not user:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except Exception:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")

        self._audit.record(user, "User Login")
        return user

    def signup(
        self,
        *,
        name: str,
        email: str,
        password: str,
        role: Optional[str] = None,
        today: Optional[date] = None,
    ) -> User:
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email")
        password = require_non_empty(password, "Password")
        try:
            role_value = Role(role or Role.EMPLOYEE.value)
        except ValueError:
            raise ValidationError("Invalid role.")

        user_id = self._users.create_user(
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            role=role_value,
            team=DEFAULT_TEAM,
            join_date=today or now_local(self._timezone).date(),
        )
        created = self._users.get_by_id(user_id)
        log.info("user %s signed up as %s", user_id, role_value.value)
        self._audit.record(created, "User Signed Up")
        return created


class UserService:
    """Use case: read and maintain user profiles."""

    def __init__(self, users: UserRepository, audit: AuditRecorder):
        self._users = users
        self._audit = audit

    def find(self, user_id: Optional[int]) -> Optional[User]:
        if user_id is None:
            return None
        return self._users.get_by_id(int(user_id))

    def get(self, user_id: int) -> User:
        user = self.find(user_id)
        if not user:
            raise UserNotFoundError()
        return user

    def list_all(self) -> Sequence[User]:
        return self._users.list_all()

    def resolve_actor(self, user_id: Optional[int]) -> Optional[User]:
        """The acting user for audit purposes; falls back to the first admin account."""

        return self.find(user_id) or self._users.first_admin()

    def update_profile(
        self,
        user_id: int,
        updates: Optional[Mapping[str, Any]],
        new_password: Optional[str] = None,
    ) -> User:
        user = self.get(user_id)

        changes: dict[str, Any] = {}
        for field, kwarg in PROFILE_FIELDS.items():
            if updates and field in updates and updates[field] is not None:
                value = updates[field]
                if kwarg == "join_date":
                    value = parse_iso_date(str(value), "Join date")
                else:
                    value = require_non_empty(value, field.capitalize())
                changes[kwarg] = value

        if new_password:
            changes["password_hash"] = generate_password_hash(new_password)

        if not self._users.update_profile(user.user_id, **changes):
            raise UserNotFoundError()

        updated = self.get(user.user_id)
        self._audit.record(updated, "Updated User Profile")
        return updated

    def export_employees_csv(self, actor: Optional[User]) -> str:
        self._audit.record(actor, "Exported Employee Data (CSV)")

        out = io.StringIO()
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(EMPLOYEE_CSV_HEADER)
        for u in self._users.list_all():
            writer.writerow([u.user_id, u.name, u.email, u.role.value, u.team, format_date(u.join_date)])
        return out.getvalue()
