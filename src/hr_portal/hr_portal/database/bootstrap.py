from __future__ import annotations

import logging
import re
import threading
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

import mysql.connector

from ..core.exceptions import ServiceUnavailableError
from .connection import DBConfig, DatabaseConnection
from .mysql_base import DB_UNAVAILABLE_MESSAGE

log = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


def _strip_create_db_and_use(sql: str) -> str:
    # The target database comes from DB_CONFIG, not from the script.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a script on ';' outside of quoted strings."""

    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    config = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(config).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: Optional[str | Path] = None) -> None:
    """Create the database (if needed) and every table. Idempotent."""

    ensure_database_exists(db_config)
    sql = Path(schema_path or SCHEMA_PATH).read_text(encoding="utf-8")
    sql = _strip_comments(_strip_create_db_and_use(sql))

    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


class StartupTasks:
    """Store preparation (schema, demo seed) that must succeed once.

    A failed run is reported as ServiceUnavailableError and retried on the
    next `run()`; every step is idempotent, so a partial run is safe to repeat.
    """

    def __init__(self, steps: Sequence[Callable[[], None]] = ()):
        self._steps = tuple(steps)
        self._done = not self._steps
        self._lock = threading.Lock()

    @property
    def done(self) -> bool:
        return self._done

    def run(self) -> None:
        if self._done:
            return
        with self._lock:
            if self._done:
                return
            try:
                for step in self._steps:
                    step()
            except mysql.connector.Error as e:
                log.error("store preparation failed: %s", e)
                raise ServiceUnavailableError(DB_UNAVAILABLE_MESSAGE) from e
            self._done = True
            log.info("store ready")
