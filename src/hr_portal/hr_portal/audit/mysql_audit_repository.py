from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AuditLogEntry
from .repository import AuditLogRepository


class MySQLAuditLogRepository(AuditLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(
        self,
        *,
        timestamp: datetime,
        user_id: Optional[int],
        user_name: Optional[str],
        action: str,
        details: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO audit_logs(created_at, user_id, user_name, action, details)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (timestamp, user_id, user_name, action, details),
            )
            return int(cur.lastrowid)

    def list_recent(self, limit: int) -> Sequence[AuditLogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT log_id, created_at, user_id, user_name, action, details
                FROM audit_logs
                ORDER BY created_at DESC, log_id DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [
                AuditLogEntry(
                    log_id=int(r["log_id"]),
                    timestamp=r["created_at"],
                    user_id=r.get("user_id"),
                    user_name=r.get("user_name"),
                    action=r["action"],
                    details=r.get("details") or "",
                )
                for r in fetchall(cur)
            ]
