from __future__ import annotations

import itertools
import threading
from typing import Any, Dict, Iterator


class MemoryStore:
    """In-process table storage shared by the in-memory repositories.

    Rows live in `tables[name][row_id]`. Repositories hold `lock` around every
    read-then-write sequence, so conditional writes (check-in, leave decision,
    unique email) behave like their SQL counterparts under concurrent requests.
    """

    TABLES = (
        "users",
        "attendance",
        "salaries",
        "leave_requests",
        "leave_balances",
        "gamification",
        "audit_logs",
        "settings",
    )

    def __init__(self):
        self.lock = threading.RLock()
        self.tables: Dict[str, Dict[Any, Any]] = {name: {} for name in self.TABLES}
        self._sequences: Dict[str, Iterator[int]] = {name: itertools.count(1) for name in self.TABLES}

    def table(self, name: str) -> Dict[Any, Any]:
        return self.tables[name]

    def next_id(self, name: str) -> int:
        with self.lock:
            return next(self._sequences[name])
