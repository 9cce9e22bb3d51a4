from __future__ import annotations

import re
from datetime import date, datetime

# Two-digit years always land in 2000-2099.
CENTURY = 2000

_DATE_RE = re.compile(r"(?P<day>[0-9]{2})/(?P<month>[0-9]{2})/(?P<year>[0-9]{2})")
_DATETIME_RE = re.compile(
    r"(?P<day>[0-9]{2})/(?P<month>[0-9]{2})/(?P<year>[0-9]{2})\s+(?P<hour>[0-9]{2})(?P<minute>[0-9]{2})"
)


def parse_date(text: str) -> date:
    """
    Parse DD/MM/YY into a date.

    Raises ValueError on a bad shape or out-of-range fields.
    """
    m = _DATE_RE.fullmatch(text.strip())
    if not m:
        raise ValueError(f"Invalid date '{text}'. Use DD/MM/YY.")
    return date(CENTURY + int(m["year"]), int(m["month"]), int(m["day"]))


def parse_datetime(text: str) -> datetime:
    """
    Parse DD/MM/YY HHMM (24-hour) into a naive local datetime.

    Raises ValueError on a bad shape or out-of-range fields.
    """
    m = _DATETIME_RE.fullmatch(text.strip())
    if not m:
        raise ValueError(f"Invalid date and time '{text}'. Use DD/MM/YY HHMM.")
    return datetime(
        CENTURY + int(m["year"]),
        int(m["month"]),
        int(m["day"]),
        int(m["hour"]),
        int(m["minute"]),
    )


def format_datetime(dt: datetime) -> str:
    return dt.strftime("%d %b %Y %H:%M")


def format_time(dt: datetime) -> str:
    return dt.strftime("%H:%M")
