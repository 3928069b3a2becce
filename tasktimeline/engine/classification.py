"""Urgency classification for tasktimeline.

Classifies a task by the whole days left until its due date. "Today" is
always passed in by the caller and pinned once per refresh pass, so every
record of a pass is measured against the same day.
"""

import math
from datetime import date, datetime
from typing import Iterable, List, Union

from tasktimeline.models.constants import SOON_THRESHOLD_DAYS
from tasktimeline.models.task import TaskRecord, UrgencyTier

_SECONDS_PER_DAY = 86400


def as_date(value: Union[date, datetime]) -> date:
    # datetime is a date subclass; reduce to the calendar day (local midnight)
    if isinstance(value, datetime):
        return value.date()
    return value


def days_between(today: Union[date, datetime], due: Union[date, datetime]) -> int:
    """Whole days from ``today`` until ``due``, rounded up.

    Both values are reduced to their calendar day first, so the result is
    exact: 0 for the same day, 1 for the next, -1 for the day before.
    """
    delta = as_date(due) - as_date(today)
    return math.ceil(delta.total_seconds() / _SECONDS_PER_DAY)


def classify_days_left(days_left: int) -> UrgencyTier:
    """Map days left to an urgency tier (first matching band wins)."""
    if days_left < 0:
        return UrgencyTier.OVERDUE
    if days_left == 0:
        return UrgencyTier.TODAY
    if days_left == 1:
        return UrgencyTier.TOMORROW
    if days_left <= SOON_THRESHOLD_DAYS:
        return UrgencyTier.SOON
    return UrgencyTier.NORMAL


def urgency_label(days_left: int) -> str:
    """Human-readable countdown for a task."""
    tier = classify_days_left(days_left)
    if tier == UrgencyTier.OVERDUE:
        return "Overdue"
    if tier == UrgencyTier.TODAY:
        return "Today"
    if tier == UrgencyTier.TOMORROW:
        return "Tomorrow"
    return f"{days_left} days left"


def classify_record(record: TaskRecord, today: date) -> TaskRecord:
    """Return a copy of ``record`` with days_left, overdue and urgency filled in."""
    days_left = days_between(today, record.due_date)
    return record.model_copy(
        update={
            "days_left": days_left,
            "overdue": days_left < 0,
            "urgency": classify_days_left(days_left).value,
        }
    )


def classify_records(records: Iterable[TaskRecord], today: date) -> List[TaskRecord]:
    today = as_date(today)
    return [classify_record(record, today) for record in records]
