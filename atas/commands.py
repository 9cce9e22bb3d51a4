from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable

from . import messages
from .errors import AtasError
from .grammar import parse_assignment, parse_event
from .models import Event, PeriodType, RepeatEvent, Task
from .tasklist import TaskList

logger = logging.getLogger(__name__)

REPEAT_FORMAT = re.compile(r"p/\s*(?P<count>[0-9]+)\s*(?P<unit>[dwmy])", re.IGNORECASE)


@dataclass(frozen=True)
class CommandResult:
    message: str
    ok: bool = True
    exit: bool = False


def _invalid_index(tasks: TaskList) -> CommandResult:
    if tasks.size() == 0:
        return CommandResult(messages.NO_TASKS_MSG, ok=False)
    return CommandResult(
        messages.INVALID_ID_ERROR.format(valid_range=tasks.range_of_valid_index()),
        ok=False,
    )


def _add(line: str, tasks: TaskList, parse: Callable[[str], Task]) -> CommandResult:
    try:
        task = parse(line)
    except AtasError as e:
        return CommandResult(str(e), ok=False)
    if tasks.contains_equivalent(task):
        return CommandResult(messages.SAME_TASK_ERROR, ok=False)
    tasks.append(task)
    logger.debug("Added %s at index %d", type(task).__name__, tasks.size() - 1)
    return CommandResult(messages.ADD_SUCCESS_MESSAGE.format(task=task, count=tasks.size()))


def add_assignment(line: str, tasks: TaskList) -> CommandResult:
    return _add(line, tasks, parse_assignment)


def add_event(line: str, tasks: TaskList) -> CommandResult:
    return _add(line, tasks, parse_event)


def format_task_list(tasks: TaskList, selected: list[Task]) -> str:
    """Number selected tasks by their position in the full list."""
    if not selected:
        return messages.NO_MATCHING_TASKS_MSG
    wanted = {id(t) for t in selected}
    lines = [f"{i + 1}. {t}" for i, t in enumerate(tasks) if id(t) in wanted]
    return "\n".join(lines)


def mark_done(index: int, tasks: TaskList) -> CommandResult:
    if not 0 <= index < tasks.size():
        return _invalid_index(tasks)
    task = tasks.mark_done(index)
    return CommandResult(messages.DONE_SUCCESS_MESSAGE.format(task=task))


def delete(index: int, tasks: TaskList) -> CommandResult:
    if not 0 <= index < tasks.size():
        return _invalid_index(tasks)
    task = tasks.remove(index)
    return CommandResult(messages.DELETE_SUCCESS_MESSAGE.format(task=task, count=tasks.size()))


def clear(scope: str, tasks: TaskList) -> CommandResult:
    if scope == "all":
        tasks.clear()
        return CommandResult(messages.CLEAR_ALL_SUCCESS_MESSAGE)
    if scope == "done":
        done = tasks.done_indices()
        tasks.remove_many(done)
        return CommandResult(messages.CLEAR_DONE_SUCCESS_MESSAGE.format(count=len(done)))
    return CommandResult(
        messages.INCORRECT_FORMAT_ERROR.format(task_type="Clear", usage=messages.CLEAR_USAGE),
        ok=False,
    )


def repeat(index: int, period: str, tasks: TaskList) -> CommandResult:
    """
    Attach series metadata to an event. The occurrence itself is left where
    it is; the anchor is its current start and the cursor starts at zero.
    """
    m = REPEAT_FORMAT.fullmatch(period.strip())
    if not m:
        return CommandResult(
            messages.INCORRECT_FORMAT_ERROR.format(task_type="Repeat", usage=messages.REPEAT_USAGE),
            ok=False,
        )
    if not 0 <= index < tasks.size():
        return _invalid_index(tasks)

    count = int(m["count"])
    if count < 1:
        return CommandResult(messages.REPEAT_PERIOD_ERROR, ok=False)

    event = tasks.get(index)
    if not isinstance(event, Event):
        return CommandResult(messages.REPEAT_NOT_EVENT_ERROR, ok=False)

    repeating = RepeatEvent(
        name=event.name,
        comments=event.comments,
        date_time=event.date_time,
        location=event.location,
        end_date_time=event.end_date_time,
        num_of_period=count,
        period_type=PeriodType(m["unit"].lower()),
        original_date_time=event.date_time,
        period_counter=0,
        done=event.done,
    )
    tasks.replace(index, repeating)
    return CommandResult(messages.REPEAT_SUCCESS_MESSAGE.format(task=repeating))
