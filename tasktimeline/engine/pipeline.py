"""Refresh pass for tasktimeline.

One pass turns a snapshot of documents and settings into the structures a
renderer consumes: ordered tag groups and month grids. A pass is synchronous
and deterministic; callers serialize overlapping passes themselves.
"""

import logging
from datetime import date
from typing import Iterable, List, Optional

from tasktimeline.engine.aggregation import aggregate, filter_completed
from tasktimeline.engine.calendar_grid import bucketize
from tasktimeline.engine.classification import as_date, classify_records
from tasktimeline.extraction.extractor import extract_tasks
from tasktimeline.extraction.pattern import PatternCompiler, PatternError
from tasktimeline.models.calendar import CalendarResult
from tasktimeline.models.settings import TimelineSettings, ViewMode
from tasktimeline.models.tag_group import TagGroup
from tasktimeline.models.task import SourceDocument, TaskRecord

logger = logging.getLogger(__name__)


class RefreshResult:
    """Result of one refresh pass."""

    def __init__(self, today: date, view_mode: str = ViewMode.TIMELINE):
        self.today: date = today
        self.view_mode: str = view_mode
        self.records: List[TaskRecord] = []
        self.groups: List[TagGroup] = []
        self.calendar: CalendarResult = CalendarResult()
        self.pattern_error: Optional[PatternError] = None

    @property
    def is_empty(self) -> bool:
        return not self.groups


def run_refresh(
    documents: Iterable[SourceDocument],
    settings: TimelineSettings,
    today: date,
    compiler: Optional[PatternCompiler] = None,
) -> RefreshResult:
    """Run one extraction and aggregation pass.

    Args:
        documents: Documents to scan, in the order tasks should be extracted
        settings: Configuration snapshot read once for the whole pass
        today: Current day, pinned for every classification in the pass
        compiler: Reuse across passes to keep the last good pattern when the
            configured pattern stops compiling

    Returns:
        RefreshResult with classified records, tag groups and the calendar.
        If no pattern is usable the result is empty and carries the error.
    """
    today = as_date(today)
    compiler = compiler or PatternCompiler()
    result = RefreshResult(today=today, view_mode=settings.view_mode)

    pattern, error = compiler.resolve(settings.task_pattern)
    result.pattern_error = error
    if pattern is None:
        logger.warning("No usable task pattern; refresh produced no tasks")
        return result

    records = classify_records(extract_tasks(documents, pattern), today)
    result.records = records
    result.groups = aggregate(
        records,
        tag_order=settings.tag_order,
        sort_order=settings.sort_order,
        include_completed=settings.show_completed,
        tag_colors=settings.tag_colors,
        use_custom_colors=settings.use_custom_colors,
        default_color=settings.default_tag_color,
    )
    result.calendar = bucketize(
        filter_completed(records, settings.show_completed),
        today=today,
        max_visible=settings.max_visible_per_day,
    )
    logger.debug(
        f"Refresh for {today.isoformat()}: {len(records)} tasks, "
        f"{len(result.groups)} tags, {len(result.calendar.months)} months"
    )
    return result
