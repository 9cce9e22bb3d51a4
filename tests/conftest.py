from datetime import datetime

import pytest

from atas.models import Assignment, Event, PeriodType, RepeatEvent


@pytest.fixture
def assignment():
    return Assignment(
        name="Lab 3",
        module="CS2113",
        date_time=datetime(2021, 11, 1, 23, 59),
        comments="Submit zip",
    )


@pytest.fixture
def event():
    return Event(
        name="Lecture",
        location="LT27",
        date_time=datetime(2021, 11, 5, 14, 0),
        end_date_time=datetime(2021, 11, 5, 16, 0),
        comments="Bring notes",
    )


@pytest.fixture
def repeat_event():
    return RepeatEvent(
        name="Tutorial",
        location="COM1",
        date_time=datetime(2021, 10, 22, 10, 0),
        end_date_time=datetime(2021, 10, 22, 11, 0),
        comments="Week 4",
        num_of_period=1,
        period_type=PeriodType.WEEK,
        original_date_time=datetime(2021, 10, 1, 10, 0),
        period_counter=3,
    )
