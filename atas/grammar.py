from __future__ import annotations

import re

from . import messages
from .dates import parse_datetime
from .errors import (
    BadTimeOrderError,
    IncorrectFormatError,
    MalformedDateError,
    MalformedDateRangeError,
)
from .models import Assignment, Event

ASSIGNMENT_WORD = "assignment"
EVENT_WORD = "event"

# Field values: no '|' or '/', and no leading whitespace.
_VALUE = r"[^|/\s][^|/]*"

ASSIGNMENT_FORMAT = re.compile(
    rf"(?i:{ASSIGNMENT_WORD})\b"
    rf"\s+n/\s*(?P<name>{_VALUE})"
    rf"\s+m/\s*(?P<module>{_VALUE})"
    r"\s+d/\s*(?P<date_time>[0-9]{2}/[0-9]{2}/[0-9]{2}\s+[0-9]{4})"
    rf"\s+c/\s*(?P<comments>{_VALUE})"
)

EVENT_FORMAT = re.compile(
    rf"(?i:{EVENT_WORD})\b"
    rf"\s+n/\s*(?P<name>{_VALUE})"
    rf"\s+l/\s*(?P<location>{_VALUE})"
    r"\s+d/\s*(?P<date_time>[0-9]{2}/[0-9]{2}/[0-9]{2}\s+[0-9]{4}\s*-\s*[0-9]{4})"
    rf"\s+c/\s*(?P<comments>{_VALUE})"
)


def capitalize(text: str) -> str:
    """Uppercase the first character of the trimmed text; keep the rest as is."""
    text = text.strip()
    return text[:1].upper() + text[1:]


def command_word(line: str) -> str:
    parts = line.split(None, 1)
    return parts[0].lower() if parts else ""


def parse_assignment(line: str) -> Assignment:
    m = ASSIGNMENT_FORMAT.fullmatch(line.strip())
    if not m:
        raise IncorrectFormatError(
            messages.INCORRECT_FORMAT_ERROR.format(
                task_type=capitalize(ASSIGNMENT_WORD), usage=messages.ASSIGNMENT_USAGE
            )
        )

    try:
        due = parse_datetime(m["date_time"])
    except ValueError as e:
        raise MalformedDateError(messages.DATE_INCORRECT_OR_INVALID_ERROR) from e

    return Assignment(
        name=capitalize(m["name"]),
        module=m["module"].strip(),
        date_time=due,
        comments=capitalize(m["comments"]),
    )


def parse_event(line: str) -> Event:
    m = EVENT_FORMAT.fullmatch(line.strip())
    if not m:
        raise IncorrectFormatError(
            messages.INCORRECT_FORMAT_ERROR.format(
                task_type=capitalize(EVENT_WORD), usage=messages.EVENT_USAGE
            )
        )

    day, times = m["date_time"].split(None, 1)
    start_time, end_time = times.split("-", 1)
    try:
        start = parse_datetime(f"{day} {start_time.strip()}")
        end = parse_datetime(f"{day} {end_time.strip()}")
    except ValueError as e:
        raise MalformedDateRangeError(messages.START_END_DATE_INCORRECT_OR_INVALID_ERROR) from e

    if end <= start:
        raise BadTimeOrderError(messages.INCORRECT_START_END_TIME_ERROR)

    return Event(
        name=capitalize(m["name"]),
        location=m["location"].strip(),
        date_time=start,
        end_date_time=end,
        comments=capitalize(m["comments"]),
    )
