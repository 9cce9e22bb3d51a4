from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional

from .models import Assignment, Event, PeriodType, RepeatEvent, Task

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS tasks (
    position            INTEGER PRIMARY KEY,
    kind                TEXT NOT NULL, -- assignment | event | repeat_event
    name                TEXT NOT NULL,
    comments            TEXT NOT NULL DEFAULT '',
    date_time           TEXT NOT NULL, -- ISO datetime, local time
    done                INTEGER NOT NULL DEFAULT 0,
    module              TEXT,
    location            TEXT,
    end_date_time       TEXT,
    num_of_period       INTEGER,
    period_type         TEXT, -- d | w | m | y
    original_date_time  TEXT,
    period_counter      INTEGER
);
"""

_COLUMNS = (
    "position",
    "kind",
    "name",
    "comments",
    "date_time",
    "done",
    "module",
    "location",
    "end_date_time",
    "num_of_period",
    "period_type",
    "original_date_time",
    "period_counter",
)


@contextmanager
def connect(db_path: Path) -> Iterator[sqlite3.Connection]:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()


def init_db(db_path: Path) -> None:
    with connect(db_path) as conn:
        conn.executescript(SCHEMA_SQL)


def _parse_dt(text: Optional[str]) -> Optional[datetime]:
    if text is None:
        return None
    return datetime.fromisoformat(text)


def _kind(task: Task) -> str:
    if isinstance(task, RepeatEvent):
        return "repeat_event"
    if isinstance(task, Event):
        return "event"
    if isinstance(task, Assignment):
        return "assignment"
    raise TypeError(f"Cannot store task of type {type(task).__name__}")


def _task_to_row(position: int, task: Task) -> dict[str, Any]:
    row: dict[str, Any] = {c: None for c in _COLUMNS}
    row.update(
        position=position,
        kind=_kind(task),
        name=task.name,
        comments=task.comments,
        date_time=task.date_time.isoformat(),
        done=int(task.done),
    )
    if isinstance(task, Assignment):
        row["module"] = task.module
    if isinstance(task, Event):
        row["location"] = task.location
        row["end_date_time"] = task.end_date_time.isoformat()
    if isinstance(task, RepeatEvent):
        row["num_of_period"] = task.num_of_period
        row["period_type"] = task.period_type.value
        row["original_date_time"] = task.original_date_time.isoformat()
        row["period_counter"] = task.period_counter
    return row


def _row_to_task(row: sqlite3.Row) -> Task:
    kind = str(row["kind"])
    common = dict(
        name=str(row["name"]),
        comments=str(row["comments"]),
        date_time=_parse_dt(row["date_time"]),
        done=bool(row["done"]),
    )
    if kind == "assignment":
        return Assignment(module=str(row["module"]), **common)
    if kind == "event":
        return Event(
            location=str(row["location"]),
            end_date_time=_parse_dt(row["end_date_time"]),
            **common,
        )
    if kind == "repeat_event":
        return RepeatEvent(
            location=str(row["location"]),
            end_date_time=_parse_dt(row["end_date_time"]),
            num_of_period=int(row["num_of_period"]),
            period_type=PeriodType(row["period_type"]),
            original_date_time=_parse_dt(row["original_date_time"]),
            period_counter=int(row["period_counter"]),
            **common,
        )
    raise ValueError(f"Unknown task kind '{kind}' at position {row['position']}")


def save_tasks(db_path: Path, tasks: Iterable[Task]) -> None:
    """
    Replace the stored list with `tasks`, keeping their order.
    """
    rows = [_task_to_row(i, t) for i, t in enumerate(tasks)]
    placeholders = ", ".join("?" for _ in _COLUMNS)
    with connect(db_path) as conn:
        conn.executescript(SCHEMA_SQL)
        conn.execute("DELETE FROM tasks")
        conn.executemany(
            f"INSERT INTO tasks ({', '.join(_COLUMNS)}) VALUES ({placeholders})",
            [tuple(r[c] for c in _COLUMNS) for r in rows],
        )
    logger.debug("Saved %d task(s) to %s", len(rows), db_path)


def load_tasks(db_path: Path) -> list[Task]:
    if not db_path.exists():
        return []
    with connect(db_path) as conn:
        conn.executescript(SCHEMA_SQL)
        rows = conn.execute("SELECT * FROM tasks ORDER BY position ASC").fetchall()
        tasks = [_row_to_task(r) for r in rows]
    logger.debug("Loaded %d task(s) from %s", len(tasks), db_path)
    return tasks
