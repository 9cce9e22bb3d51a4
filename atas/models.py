from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from .dates import format_datetime, format_time


class PeriodType(Enum):
    DAY = "d"
    WEEK = "w"
    MONTH = "m"
    YEAR = "y"

    @property
    def noun(self) -> str:
        return self.name.lower()


@dataclass
class Task(ABC):
    """
    Abstract base; only Assignment, Event and RepeatEvent are instantiated.
    Equality covers the user-visible fields of the concrete class only;
    `done` is excluded so it can drive duplicate checks.
    """

    name: str
    comments: str
    date_time: datetime
    done: bool = field(default=False, compare=False, kw_only=True)

    TAG = "T"

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Task name must not be empty.")

    @property
    def date(self) -> date:
        return self.date_time.date()

    def mark_done(self) -> None:
        self.done = True

    @abstractmethod
    def __str__(self) -> str:
        ...

    def _header(self) -> str:
        return f"[{self.TAG}][{'X' if self.done else ' '}] {self.name}"


@dataclass
class Assignment(Task):
    module: str

    TAG = "A"

    def __str__(self) -> str:
        return "\n".join(
            [
                f"{self._header()} ({self.module})",
                f"    Due: {format_datetime(self.date_time)}",
                f"    Notes: {self.comments}",
            ]
        )


@dataclass
class Event(Task):
    location: str
    end_date_time: datetime

    TAG = "E"

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.end_date_time <= self.date_time:
            raise ValueError("Event end must be after its start.")

    @property
    def start(self) -> datetime:
        return self.date_time

    @property
    def end(self) -> datetime:
        return self.end_date_time

    def _when(self) -> str:
        if self.end_date_time.date() == self.date_time.date():
            end = format_time(self.end_date_time)
        else:
            end = format_datetime(self.end_date_time)
        return f"{format_datetime(self.date_time)} - {end}"

    def __str__(self) -> str:
        return "\n".join(
            [
                f"{self._header()} (at: {self.location})",
                f"    Date: {self._when()}",
                f"    Notes: {self.comments}",
            ]
        )


@dataclass
class RepeatEvent(Event):
    """
    One occurrence of a periodic series. The series fields are hidden from
    the edit grammars and excluded from equality.
    """

    num_of_period: int = field(compare=False)
    period_type: PeriodType = field(compare=False)
    original_date_time: datetime = field(compare=False)
    period_counter: int = field(default=0, compare=False)

    TAG = "R"

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.num_of_period < 1:
            raise ValueError("Repeat period count must be positive.")
        if self.period_counter < 0:
            raise ValueError("Repeat period counter must not be negative.")

    @classmethod
    def from_event(cls, event: Event, series: RepeatEvent) -> RepeatEvent:
        """Take the visible fields of `event` and the series state of `series`."""
        return cls(
            name=event.name,
            comments=event.comments,
            date_time=event.date_time,
            location=event.location,
            end_date_time=event.end_date_time,
            num_of_period=series.num_of_period,
            period_type=series.period_type,
            original_date_time=series.original_date_time,
            period_counter=series.period_counter,
            done=event.done,
        )

    def __str__(self) -> str:
        unit = self.period_type.noun if self.num_of_period == 1 else f"{self.period_type.noun}s"
        return "\n".join(
            [
                super().__str__(),
                f"    Repeats every {self.num_of_period} {unit}"
                f" since {format_datetime(self.original_date_time)}",
            ]
        )
