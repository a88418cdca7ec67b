from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.memory_store import MemoryStore
from .model import AuditLogEntry
from .repository import AuditLogRepository


class MemoryAuditLogRepository(AuditLogRepository):
    def __init__(self, store: MemoryStore):
        self._store = store
        self._rows = store.table("audit_logs")

    def append(
        self,
        *,
        timestamp: datetime,
        user_id: Optional[int],
        user_name: Optional[str],
        action: str,
        details: str,
    ) -> int:
        with self._store.lock:
            log_id = self._store.next_id("audit_logs")
            self._rows[log_id] = AuditLogEntry(
                log_id=log_id,
                timestamp=timestamp,
                user_id=user_id,
                user_name=user_name,
                action=action,
                details=details,
            )
            return log_id

    def list_recent(self, limit: int) -> Sequence[AuditLogEntry]:
        with self._store.lock:
            entries = sorted(self._rows.values(), key=lambda e: (e.timestamp, e.log_id), reverse=True)
        return entries[: int(limit)]
