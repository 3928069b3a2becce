"""Temporal aggregation engine for tasktimeline."""

from tasktimeline.engine.classification import days_between, classify_days_left, urgency_label, classify_records
from tasktimeline.engine.aggregation import aggregate, sort_records, filter_completed, group_by_tag
from tasktimeline.engine.tags import move_tag, order_tags, color_for, apply_tag_move, apply_tag_color
from tasktimeline.engine.calendar_grid import bucketize, build_month_grid
from tasktimeline.engine.pipeline import run_refresh, RefreshResult

__all__ = [
    "days_between",
    "classify_days_left",
    "urgency_label",
    "classify_records",
    "aggregate",
    "sort_records",
    "filter_completed",
    "group_by_tag",
    "move_tag",
    "order_tags",
    "color_for",
    "apply_tag_move",
    "apply_tag_color",
    "bucketize",
    "build_month_grid",
    "run_refresh",
    "RefreshResult",
]
