from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AuditLogEntry:
    """Append-only record of who did what and when."""

    log_id: int
    timestamp: datetime
    user_id: Optional[int]
    user_name: Optional[str]
    action: str
    details: str = ""
