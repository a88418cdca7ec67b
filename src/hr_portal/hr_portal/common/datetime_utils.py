from __future__ import annotations

import calendar
from datetime import date, datetime, time
from typing import Optional
from zoneinfo import ZoneInfo

from ..core.exceptions import ValidationError


def parse_iso_date(value: str, field_name: str = "Date") -> date:
    """Parse YYYY-MM-DD string into date."""
    message = f"{field_name} must be a date in YYYY-MM-DD format."
    if not isinstance(value, str):
        raise ValidationError(message)
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(message)


def now_local(timezone: Optional[str] = None) -> datetime:
    """Current wall-clock time in `timezone` (IANA name), or server local time.

    Returned naive so it compares with the DATE/TIME values read back from storage.
    """
    if timezone:
        return datetime.now(ZoneInfo(timezone)).replace(tzinfo=None)
    return datetime.now()


def format_date(value: Optional[date]) -> Optional[str]:
    return value.strftime("%Y-%m-%d") if value else None


def format_time(value: Optional[time]) -> Optional[str]:
    return value.strftime("%H:%M") if value else None


def time_of_day(now: datetime) -> time:
    """Time-of-day at minute precision, the granularity attendance is kept in."""
    return now.time().replace(second=0, microsecond=0)


def month_number(month: str) -> int:
    """Calendar index of an English month name ("May" -> 5); 0 if unrecognised."""
    names = [m.lower() for m in calendar.month_name]
    try:
        return names.index((month or "").strip().lower())
    except ValueError:
        return 0
