import io
from datetime import datetime

import pytest

from atas import messages
from atas.edit import edit
from atas.models import Assignment, Event, PeriodType, RepeatEvent
from atas.tasklist import TaskList
from atas.ui import Ui

ASSIGNMENT_LINE = "assignment n/lab 3 m/CS2113 d/01/11/21 2359 c/submit zip"


def _ui(*lines):
    out = io.StringIO()
    return Ui(io.StringIO("".join(f"{line}\n" for line in lines)), out), out


def _snapshot(tasks):
    return [repr(t) for t in tasks]


def test_assignment_edit_happy_path(event):
    tasks = TaskList([event])
    ui, out = _ui(ASSIGNMENT_LINE)

    result = edit(0, tasks, ui)

    assert result.ok is True
    edited = tasks.get(0)
    assert type(edited) is Assignment
    assert edited.name == "Lab 3"
    assert edited.module == "CS2113"
    assert edited.date_time == datetime(2021, 11, 1, 23, 59)
    assert edited.comments == "Submit zip"
    assert edited.done is False
    assert result.message == messages.EDIT_SUCCESS_MESSAGE.format(task=edited)
    assert out.getvalue() == f"{messages.EDIT_PROMPT}\n{messages.DIVIDER}\n"


def test_event_edit_preserves_repeat_metadata(repeat_event):
    tasks = TaskList([repeat_event])
    ui, _ = _ui("event n/tutorial l/COM1 d/15/10/21 1000-1100 c/week 3")

    result = edit(0, tasks, ui)

    assert result.ok is True
    edited = tasks.get(0)
    assert type(edited) is RepeatEvent
    assert edited.name == "Tutorial"
    assert edited.start == datetime(2021, 10, 15, 10, 0)
    assert edited.end == datetime(2021, 10, 15, 11, 0)
    assert edited.comments == "Week 3"
    assert (edited.num_of_period, edited.period_type, edited.original_date_time, edited.period_counter) == (
        1,
        PeriodType.WEEK,
        datetime(2021, 10, 1, 10, 0),
        3,
    )
    assert "Repeats every 1 week" in result.message


def test_event_over_event(event):
    tasks = TaskList([event])
    ui, _ = _ui("event n/lab session l/COM2 d/06/11/21 0900-1100 c/bring laptop")
    result = edit(0, tasks, ui)
    assert result.ok is True
    assert type(tasks.get(0)) is Event
    assert tasks.get(0).location == "COM2"


def test_event_over_assignment_replaces(assignment):
    tasks = TaskList([assignment])
    ui, _ = _ui("event n/demo l/COM1 d/01/11/21 1000-1200 c/prepare slides")
    result = edit(0, tasks, ui)
    assert result.ok is True
    assert type(tasks.get(0)) is Event
    assert tasks.get(0).name == "Demo"


def test_assignment_over_repeat_event_drops_series(repeat_event):
    tasks = TaskList([repeat_event])
    ui, _ = _ui(ASSIGNMENT_LINE)
    assert edit(0, tasks, ui).ok is True
    assert type(tasks.get(0)) is Assignment


def test_other_indices_untouched(assignment, event, repeat_event):
    tasks = TaskList([assignment, event, repeat_event])
    before = _snapshot(tasks)
    ui, _ = _ui("event n/seminar l/LT19 d/10/11/21 1400-1500 c/guest talk")

    assert edit(1, tasks, ui).ok is True

    after = _snapshot(tasks)
    assert tasks.size() == 3
    assert after[0] == before[0]
    assert after[2] == before[2]
    assert after[1] != before[1]


def test_duplicate_rejected(event, assignment):
    tasks = TaskList([assignment, event])
    before = _snapshot(tasks)
    ui, _ = _ui(ASSIGNMENT_LINE)

    result = edit(1, tasks, ui)

    assert result.ok is False
    assert result.message == messages.SAME_TASK_ERROR
    assert _snapshot(tasks) == before


def test_duplicate_rejection_ignores_done_flag(assignment, event):
    assignment.mark_done()
    tasks = TaskList([assignment, event])
    ui, _ = _ui(ASSIGNMENT_LINE)
    assert edit(1, tasks, ui).message == messages.SAME_TASK_ERROR


def test_editing_repeat_event_to_its_own_fields_is_allowed(repeat_event):
    tasks = TaskList([repeat_event])
    ui, _ = _ui("event n/Tutorial l/COM1 d/22/10/21 1000-1100 c/Week 4")
    result = edit(0, tasks, ui)
    assert result.ok is True
    assert tasks.get(0) == repeat_event
    assert tasks.get(0).period_counter == 3


def test_bad_time_order(event):
    tasks = TaskList([event])
    before = _snapshot(tasks)
    ui, _ = _ui("event n/x l/y d/01/11/21 1200-1100 c/z")

    result = edit(0, tasks, ui)

    assert result.ok is False
    assert result.message == messages.INCORRECT_START_END_TIME_ERROR
    assert _snapshot(tasks) == before


def test_unknown_command(event):
    tasks = TaskList([event])
    before = _snapshot(tasks)
    ui, _ = _ui("deadline n/x l/y d/01/11/21 1000-1100 c/z")

    result = edit(0, tasks, ui)

    assert result.ok is False
    assert result.message == messages.UNKNOWN_COMMAND_ERROR
    assert _snapshot(tasks) == before


def test_end_of_input_is_unknown_command(event):
    tasks = TaskList([event])
    ui, _ = _ui()
    assert edit(0, tasks, ui).message == messages.UNKNOWN_COMMAND_ERROR


@pytest.mark.parametrize(
    "line, expected",
    [
        ("assignment n/lab m/CS2113 c/zip", "Incorrect format for Assignment"),
        ("event n/x l/y d/01/11/21 c/z", "Incorrect format for Event"),
        ("assignment n/lab m/CS2113 d/30/02/21 2359 c/zip", messages.DATE_INCORRECT_OR_INVALID_ERROR),
        ("event n/x l/y d/01/13/21 1000-1100 c/z", messages.START_END_DATE_INCORRECT_OR_INVALID_ERROR),
    ],
)
def test_parse_failures_leave_collection_unchanged(event, line, expected):
    tasks = TaskList([event])
    before = _snapshot(tasks)
    ui, _ = _ui(line)

    result = edit(0, tasks, ui)

    assert result.ok is False
    assert expected in result.message
    assert _snapshot(tasks) == before


@pytest.mark.parametrize("index", [0, -1, 3])
def test_empty_collection_never_prompts(index):
    tasks = TaskList()
    ui, out = _ui(ASSIGNMENT_LINE)

    result = edit(index, tasks, ui)

    assert result.ok is False
    assert result.message == messages.NO_TASKS_MSG
    assert out.getvalue() == ""


@pytest.mark.parametrize("index", [-1, 2])
def test_invalid_index(assignment, event, index):
    tasks = TaskList([assignment, event])
    ui, out = _ui(ASSIGNMENT_LINE)

    result = edit(index, tasks, ui)

    assert result.ok is False
    assert result.message == messages.INVALID_ID_ERROR.format(valid_range="1 - 2")
    assert out.getvalue() == ""


def test_trailing_whitespace_accepted(event):
    tasks = TaskList([event])
    ui, _ = _ui(ASSIGNMENT_LINE + "   \t")
    assert edit(0, tasks, ui).ok is True
    assert tasks.get(0).comments == "Submit zip"


def test_merged_repeat_event_cannot_duplicate_another(repeat_event):
    other = RepeatEvent(
        name="Other",
        location="COM2",
        date_time=datetime(2021, 10, 23, 10, 0),
        end_date_time=datetime(2021, 10, 23, 11, 0),
        comments="Week 4",
        num_of_period=2,
        period_type=PeriodType.DAY,
        original_date_time=datetime(2021, 10, 1, 10, 0),
    )
    tasks = TaskList([repeat_event, other])
    before = _snapshot(tasks)
    ui, _ = _ui("event n/Tutorial l/COM1 d/22/10/21 1000-1100 c/Week 4")

    result = edit(1, tasks, ui)

    assert result.ok is False
    assert result.message == messages.SAME_TASK_ERROR
    assert _snapshot(tasks) == before
