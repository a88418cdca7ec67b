from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AuditLogEntry


class AuditLogRepository(Protocol):
    def append(
        self,
        *,
        timestamp: datetime,
        user_id: Optional[int],
        user_name: Optional[str],
        action: str,
        details: str,
    ) -> int:
        raise NotImplementedError

    def list_recent(self, limit: int) -> Sequence[AuditLogEntry]:
        """Newest first: timestamp descending, ties broken by id descending."""

        raise NotImplementedError
