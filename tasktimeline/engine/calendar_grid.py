"""Calendar bucketing for tasktimeline.

Lays task records out as Sunday-first month grids covering every month from
the earliest to the latest due date, including months without tasks.
"""

import calendar
from datetime import date
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from tasktimeline.engine.classification import as_date
from tasktimeline.models.calendar import CalendarCell, CalendarResult, MonthGrid
from tasktimeline.models.constants import DAYS_PER_WEEK, MAX_VISIBLE_PER_DAY_CELL
from tasktimeline.models.task import TaskRecord


def bucket_by_day(records: Iterable[TaskRecord]) -> Dict[date, List[TaskRecord]]:
    buckets: Dict[date, List[TaskRecord]] = {}
    for record in records:
        buckets.setdefault(record.due_date, []).append(record)
    return buckets


def iter_months(first: date, last: date) -> Iterator[Tuple[int, int]]:
    """Yield (year, month) from first's month through last's month inclusive."""
    year, month = first.year, first.month
    while (year, month) <= (last.year, last.month):
        yield year, month
        month += 1
        if month > 12:
            year, month = year + 1, 1


def first_weekday_index(year: int, month: int) -> int:
    """Weekday of the 1st of the month, 0 = Sunday."""
    # date.weekday(): Monday = 0 ... Sunday = 6
    return (date(year, month, 1).weekday() + 1) % DAYS_PER_WEEK


def build_month_grid(
    year: int,
    month: int,
    buckets: Dict[date, List[TaskRecord]],
    today: Optional[date] = None,
    max_visible: int = MAX_VISIBLE_PER_DAY_CELL,
) -> MonthGrid:
    """Build one month grid with leading and trailing blank cells."""
    cells: List[Optional[CalendarCell]] = [None] * first_weekday_index(year, month)
    for day_number in range(1, calendar.monthrange(year, month)[1] + 1):
        day = date(year, month, day_number)
        tasks = buckets.get(day, [])
        cells.append(
            CalendarCell(
                day=day,
                tasks=tasks,
                visible=tasks[:max_visible],
                overflow=max(0, len(tasks) - max_visible),
                is_today=day == today,
            )
        )
    trailing = (-len(cells)) % DAYS_PER_WEEK
    cells.extend([None] * trailing)
    return MonthGrid(year=year, month=month, cells=cells)


def bucketize(
    records: Iterable[TaskRecord],
    today: Optional[date] = None,
    max_visible: int = MAX_VISIBLE_PER_DAY_CELL,
) -> CalendarResult:
    """Bucket records by due date and build month grids.

    Args:
        records: Dated task records
        today: Current day, flagged on its cell
        max_visible: Tasks shown per cell before the rest count as overflow

    Returns:
        CalendarResult; ``has_data`` is False and ``months`` empty when there
        are no records
    """
    if max_visible < 1:
        raise ValueError("max_visible must be >= 1")
    if today is not None:
        today = as_date(today)

    buckets = bucket_by_day(records)
    if not buckets:
        return CalendarResult(months=[], cells={}, has_data=False)

    months = [
        build_month_grid(year, month, buckets, today=today, max_visible=max_visible)
        for year, month in iter_months(min(buckets), max(buckets))
    ]
    return CalendarResult(months=months, cells=buckets, has_data=True)
