from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Iterator, Optional

from .models import Assignment, Event, Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered, in-memory collection of tasks. Indices are zero-based and stay
    valid only until the next removal. Filters return new lists.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None) -> None:
        self._tasks: list[Task] = list(tasks) if tasks is not None else []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def size(self) -> int:
        return len(self._tasks)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"Task index {index} out of range for {len(self._tasks)} task(s).")

    def range_of_valid_index(self) -> str:
        """One-based range of task numbers, as shown to the user."""
        n = len(self._tasks)
        return "1" if n == 1 else f"1 - {n}"

    def append(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def replace(self, index: int, task: Task) -> None:
        self._check_index(index)
        self._tasks[index] = task

    def remove(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks.pop(index)

    def remove_many(self, indices: Iterable[int]) -> None:
        """
        Remove every index in `indices` (duplicates ignored). Removal runs in
        descending order so the remaining indices stay valid.
        """
        ordered = sorted(set(indices), reverse=True)
        for index in ordered:
            self._check_index(index)
        for index in ordered:
            del self._tasks[index]
        logger.debug("Removed %d task(s)", len(ordered))

    def clear(self) -> None:
        self._tasks.clear()

    def mark_done(self, index: int) -> Task:
        task = self.get(index)
        task.mark_done()
        return task

    def contains_equivalent(self, candidate: Task, ignore_index: Optional[int] = None) -> bool:
        """Whether any task, other than the one at `ignore_index`, equals `candidate`."""
        return any(task == candidate for i, task in enumerate(self._tasks) if i != ignore_index)

    def done_indices(self) -> list[int]:
        return [i for i, t in enumerate(self._tasks) if t.done]

    def assignments(self) -> list[Task]:
        return [t for t in self._tasks if isinstance(t, Assignment)]

    def events(self) -> list[Task]:
        return [t for t in self._tasks if isinstance(t, Event)]

    def incomplete_assignments(self) -> list[Task]:
        return [t for t in self._tasks if isinstance(t, Assignment) and not t.done]

    def upcoming_events(self, now: Optional[datetime] = None) -> list[Task]:
        now = now or datetime.now()
        return [t for t in self._tasks if isinstance(t, Event) and t.start > now]

    def by_days_from_today(self, days: int, today: Optional[date] = None) -> list[Task]:
        if days < 0:
            raise ValueError("days must not be negative")
        today = today or date.today()
        return self.by_range(today, today + timedelta(days=days))

    def by_range(self, start: date, end: date) -> list[Task]:
        """Tasks whose calendar day lies in [start, end]."""
        return [t for t in self._tasks if start <= t.date <= end]
