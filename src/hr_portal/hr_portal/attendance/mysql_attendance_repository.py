from __future__ import annotations

from datetime import date, time
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json, fetchall, fetchone, load_json, normalize_mysql_time
from .model import AttendanceRecord, GeoLocation
from .repository import AttendanceRepository

_COLUMNS = (
    "attendance_id, employee_id, employee_name, work_date, check_in, check_out, "
    "status, check_in_photo, check_in_location"
)


def _to_record(r: dict) -> AttendanceRecord:
    location = load_json(r.get("check_in_location"))
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        employee_name=r.get("employee_name"),
        work_date=r["work_date"],
        check_in=normalize_mysql_time(r.get("check_in")),
        check_out=normalize_mysql_time(r.get("check_out")),
        status=AttendanceStatus(r["status"]),
        check_in_photo=r.get("check_in_photo"),
        check_in_location=GeoLocation.from_payload(location) if location else None,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE employee_id=%s AND work_date=%s",
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_employee(self, employee_id: int, limit: Optional[int] = None) -> Sequence[AttendanceRecord]:
        sql = f"SELECT {_COLUMNS} FROM attendance WHERE employee_id=%s ORDER BY work_date DESC"
        params: tuple = (employee_id,)
        if limit is not None:
            sql += " LIMIT %s"
            params += (int(limit),)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_to_record(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance ORDER BY work_date DESC, employee_id ASC")
            return [_to_record(r) for r in fetchall(cur)]

    def count_for_date(self, work_date: date, status: AttendanceStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS n FROM attendance WHERE work_date=%s AND status=%s",
                (work_date, status.value),
            )
            return int(fetchone(cur)["n"])

    def record_checkin(
        self,
        *,
        employee_id: int,
        employee_name: str,
        work_date: date,
        check_in: time,
        photo: Optional[str],
        location: Optional[GeoLocation],
    ) -> bool:
        location_json = dump_json(location.to_payload()) if location else None
        with db_cursor(self._conn_factory) as (_, cur):
            # Overwrite a non-Present record for the day (e.g. Absent / On Leave).
            cur.execute(
                """
                UPDATE attendance
                SET employee_name=%s, check_in=%s, check_out=NULL, status=%s,
                    check_in_photo=%s, check_in_location=%s
                WHERE employee_id=%s AND work_date=%s AND status<>%s
                """,
                (
                    employee_name,
                    check_in,
                    AttendanceStatus.PRESENT.value,
                    photo,
                    location_json,
                    employee_id,
                    work_date,
                    AttendanceStatus.PRESENT.value,
                ),
            )
            if cur.rowcount > 0:
                return True

            # No row, or a Present row: the unique (employee_id, work_date) key
            # turns a concurrent duplicate into a no-op.
            cur.execute(
                """
                INSERT IGNORE INTO attendance(
                    employee_id, employee_name, work_date, check_in, check_out,
                    status, check_in_photo, check_in_location
                )
                VALUES(%s,%s,%s,%s,NULL,%s,%s,%s)
                """,
                (
                    employee_id,
                    employee_name,
                    work_date,
                    check_in,
                    AttendanceStatus.PRESENT.value,
                    photo,
                    location_json,
                ),
            )
            return cur.rowcount > 0

    def record_checkout(self, *, employee_id: int, work_date: date, check_out: time) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET check_out=%s
                WHERE employee_id=%s AND work_date=%s
                  AND check_in IS NOT NULL AND check_out IS NULL
                """,
                (check_out, employee_id, work_date),
            )
            return cur.rowcount > 0

    def create(
        self,
        *,
        employee_id: int,
        employee_name: str,
        work_date: date,
        check_in: Optional[time],
        check_out: Optional[time],
        status: AttendanceStatus,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(employee_id, employee_name, work_date, check_in, check_out, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (employee_id, employee_name, work_date, check_in, check_out, status.value),
            )
            return int(cur.lastrowid)
