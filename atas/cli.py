from __future__ import annotations

import argparse
import logging
import sqlite3
import sys
from pathlib import Path
from typing import Callable, Optional

from . import commands, db, messages
from .commands import CommandResult
from .config import log_level, resolve_db_path
from .dates import parse_date
from .edit import edit
from .grammar import ASSIGNMENT_WORD, EVENT_WORD, command_word
from .tasklist import TaskList
from .ui import Ui

logger = logging.getLogger(__name__)


def _parse_index(arg: str) -> Optional[int]:
    """One-based task number from the user to a zero-based index."""
    try:
        return int(arg.strip()) - 1
    except ValueError:
        return None


def _with_index(arg: str, tasks: TaskList, action: Callable[[int], CommandResult]) -> CommandResult:
    index = _parse_index(arg)
    if index is None:
        if tasks.size() == 0:
            return CommandResult(messages.NO_TASKS_MSG, ok=False)
        return CommandResult(
            messages.INVALID_ID_ERROR.format(valid_range=tasks.range_of_valid_index()),
            ok=False,
        )
    return action(index)


def cmd_list(arg: str, tasks: TaskList) -> CommandResult:
    if tasks.size() == 0:
        return CommandResult(messages.NO_TASKS_MSG)

    scope = " ".join(arg.lower().split())
    filters = {
        "": lambda: list(tasks),
        "assignments": tasks.assignments,
        "incomplete assignments": tasks.incomplete_assignments,
        "events": tasks.events,
        "upcoming events": tasks.upcoming_events,
        "today": lambda: tasks.by_days_from_today(0),
        "week": lambda: tasks.by_days_from_today(7),
    }
    if scope in filters:
        return CommandResult(commands.format_task_list(tasks, filters[scope]()))

    parts = scope.split()
    if len(parts) == 3 and parts[0] == "range":
        try:
            start, end = parse_date(parts[1]), parse_date(parts[2])
        except ValueError:
            return CommandResult(messages.DATE_INCORRECT_OR_INVALID_ERROR, ok=False)
        if start > end:
            return CommandResult(messages.INVALID_RANGE_ERROR, ok=False)
        return CommandResult(commands.format_task_list(tasks, tasks.by_range(start, end)))

    return CommandResult(
        messages.INCORRECT_FORMAT_ERROR.format(task_type="List", usage=messages.LIST_USAGE),
        ok=False,
    )


def cmd_repeat(arg: str, tasks: TaskList) -> CommandResult:
    number, _, period = arg.strip().partition(" ")
    return _with_index(number, tasks, lambda i: commands.repeat(i, period, tasks))


def dispatch(line: str, tasks: TaskList, ui: Ui) -> CommandResult:
    word = command_word(line)
    parts = line.strip().split(None, 1)
    arg = parts[1] if len(parts) > 1 else ""
    logger.debug("Dispatching '%s'", word)

    if word == ASSIGNMENT_WORD:
        return commands.add_assignment(line, tasks)
    if word == EVENT_WORD:
        return commands.add_event(line, tasks)
    if word == "list":
        return cmd_list(arg, tasks)
    if word == "done":
        return _with_index(arg, tasks, lambda i: commands.mark_done(i, tasks))
    if word == "delete":
        return _with_index(arg, tasks, lambda i: commands.delete(i, tasks))
    if word == "clear":
        return commands.clear(arg.strip().lower(), tasks)
    if word == "repeat":
        return cmd_repeat(arg, tasks)
    if word == "edit":
        return _with_index(arg, tasks, lambda i: edit(i, tasks, ui))
    if word == "help":
        return CommandResult(messages.HELP_MESSAGE)
    if word == "exit":
        return CommandResult(messages.GOODBYE, exit=True)
    return CommandResult(messages.UNKNOWN_COMMAND_ERROR, ok=False)


def run_session(tasks: TaskList, ui: Ui, save: Callable[[TaskList], None]) -> None:
    ui.show(messages.GREETING, messages.DIVIDER)
    while True:
        line = ui.read_line()
        if line is None:
            break
        if not line.strip():
            continue
        result = dispatch(line, tasks, ui)
        ui.show(result.message, messages.DIVIDER)
        if result.ok:
            save(tasks)
        if result.exit:
            break


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="atas",
        description="ATAS: an interactive assignment and event tracker for students.",
    )
    p.add_argument(
        "--db",
        help="Path to SQLite DB (default: ~/.atas/atas.db or ATAS_DB env var)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(
        level=log_level(ns.verbose),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    path: Path = resolve_db_path(ns.db)
    try:
        db.init_db(path)
        tasks = TaskList(db.load_tasks(path))
    except (sqlite3.Error, OSError, ValueError) as e:
        print(f"Could not load tasks from {path}: {e}", file=sys.stderr)
        return 1

    try:
        run_session(tasks, Ui(), lambda t: db.save_tasks(path, t))
    except (sqlite3.Error, OSError) as e:
        logger.debug("Save failed", exc_info=True)
        print(f"Could not save tasks to {path}: {e}", file=sys.stderr)
        return 1
    return 0
