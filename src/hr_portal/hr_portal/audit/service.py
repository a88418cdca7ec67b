from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import AUDIT_LOG_PAGE_SIZE
from ..users.model import User
from .model import AuditLogEntry
from .repository import AuditLogRepository

log = logging.getLogger(__name__)


class AuditRecorder:
    """Appends audit entries for mutating actions.

    Recording is best-effort: a failing store is logged and never aborts the
    business operation being annotated.
    """

    def __init__(self, logs: AuditLogRepository, *, clock: Optional[Callable[[], datetime]] = None):
        self._logs = logs
        self._clock = clock or now_local

    def record(self, actor: Optional[User], action: str, details: str = "") -> None:
        if actor is None:
            log.warning("audit entry %r dropped: no acting user", action)
            return
        try:
            self._logs.append(
                timestamp=self._clock(),
                user_id=actor.user_id,
                user_name=actor.name,
                action=action,
                details=details or "",
            )
        except Exception:
            log.exception("failed to record audit entry %r for user %s", action, actor.user_id)

    def list_recent(self, limit: int = AUDIT_LOG_PAGE_SIZE) -> Sequence[AuditLogEntry]:
        return self._logs.list_recent(limit)
