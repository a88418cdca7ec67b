from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.enums import Role
from ..core.exceptions import EmailTakenError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, name, email, password_hash, role, team, join_date"


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        name=row["name"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        team=row.get("team") or "",
        join_date=row["join_date"],
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users ORDER BY user_id")
            return [_to_user(r) for r in fetchall(cur)]

    def first_admin(self) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM users WHERE role=%s ORDER BY user_id LIMIT 1",
                (Role.ADMIN.value,),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def count_by_role(self, role: Role) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM users WHERE role=%s", (role.value,))
            return int(fetchone(cur)["n"])

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
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO users(name, email, password_hash, role, team, join_date)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (name, email, password_hash, role.value, team, join_date),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if e.errno == errorcode.ER_DUP_ENTRY:
                raise EmailTakenError() from e
            raise

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
        if not changes:
            return self.get_by_id(user_id) is not None

        assignments = ", ".join(f"{col}=%s" for col in changes)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE users SET {assignments} WHERE user_id=%s",
                (*changes.values(), int(user_id)),
            )
            # MySQL reports 0 affected rows when values are unchanged, so check existence.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS ok FROM users WHERE user_id=%s", (int(user_id),))
            return fetchone(cur) is not None
