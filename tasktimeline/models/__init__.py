"""Data models for tasktimeline."""

from tasktimeline.models.task import TaskRecord, TaskPosition, SourceDocument, UrgencyTier
from tasktimeline.models.tag_group import TagGroup
from tasktimeline.models.calendar import CalendarCell, MonthGrid, CalendarResult
from tasktimeline.models.settings import TimelineSettings, SortOrder, ViewMode, load_settings, reset_settings

__all__ = [
    "TaskRecord",
    "TaskPosition",
    "SourceDocument",
    "UrgencyTier",
    "TagGroup",
    "CalendarCell",
    "MonthGrid",
    "CalendarResult",
    "TimelineSettings",
    "SortOrder",
    "ViewMode",
    "load_settings",
    "reset_settings",
]
