"""
Edit pipeline: replace the task at an index with a freshly entered one.

Order of effects: validate index, prompt, read one line, parse, duplicate
check, mutate. Any failure returns before the collection is touched.
"""
from __future__ import annotations

import logging

from . import messages
from .commands import CommandResult
from .errors import AtasError
from .grammar import ASSIGNMENT_WORD, EVENT_WORD, command_word, parse_assignment, parse_event
from .models import Event, RepeatEvent, Task
from .tasklist import TaskList
from .ui import Ui

logger = logging.getLogger(__name__)


def parse_replacement(line: str) -> Task:
    """
    Build the candidate task from a re-prompt line.

    Raises AtasError for an unknown task type or a grammar/date failure.
    """
    word = command_word(line)
    if word == ASSIGNMENT_WORD:
        return parse_assignment(line)
    if word == EVENT_WORD:
        return parse_event(line)
    raise AtasError(messages.UNKNOWN_COMMAND_ERROR)


def merge_with_current(current: Task, candidate: Task) -> Task:
    """A RepeatEvent edited into an Event keeps its series state."""
    if isinstance(current, RepeatEvent) and type(candidate) is Event:
        return RepeatEvent.from_event(candidate, current)
    return candidate


def edit(index: int, tasks: TaskList, ui: Ui) -> CommandResult:
    if tasks.size() == 0:
        return CommandResult(messages.NO_TASKS_MSG, ok=False)

    if index < 0 or index >= tasks.size():
        return CommandResult(
            messages.INVALID_ID_ERROR.format(valid_range=tasks.range_of_valid_index()),
            ok=False,
        )

    ui.show(messages.EDIT_PROMPT, messages.DIVIDER)
    line = ui.read_line() or ""

    try:
        candidate = parse_replacement(line)
    except AtasError as e:
        logger.debug("Edit of task %d rejected: %s", index, e)
        return CommandResult(str(e), ok=False)

    if tasks.contains_equivalent(candidate):
        logger.debug("Edit of task %d rejected as duplicate", index)
        return CommandResult(messages.SAME_TASK_ERROR, ok=False)

    edited = merge_with_current(tasks.get(index), candidate)
    if edited is not candidate and tasks.contains_equivalent(edited, ignore_index=index):
        logger.debug("Edit of task %d rejected as duplicate after merge", index)
        return CommandResult(messages.SAME_TASK_ERROR, ok=False)

    tasks.replace(index, edited)
    logger.debug("Task %d replaced with %s", index, type(edited).__name__)
    return CommandResult(messages.EDIT_SUCCESS_MESSAGE.format(task=edited))
