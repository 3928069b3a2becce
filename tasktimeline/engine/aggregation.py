"""Grouping and sorting of task records for tasktimeline.

Records are filtered, sorted by the selected policy, then partitioned by
exact tag string. Tag groups are ordered by the caller's tag order.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from tasktimeline.engine.tags import color_for, order_tags, tag_sort_key
from tasktimeline.models.constants import DEFAULT_TAG_COLOR
from tasktimeline.models.settings import SortOrder
from tasktimeline.models.tag_group import TagGroup
from tasktimeline.models.task import TaskRecord


def filter_completed(records: Iterable[TaskRecord], include_completed: bool) -> List[TaskRecord]:
    if include_completed:
        return list(records)
    return [record for record in records if not record.completed]


def sort_records(records: Iterable[TaskRecord], sort_order: str) -> List[TaskRecord]:
    """Sort records by the given policy.

    Sorting is stable, so records that tie keep their extraction order.

    Args:
        records: Records to sort
        sort_order: "date-asc", "date-desc" or "tag"

    Returns:
        New sorted list

    Raises:
        ValueError: If sort_order is unknown
    """
    sort_order = SortOrder(sort_order)
    if sort_order == SortOrder.DATE_ASC:
        return sorted(records, key=lambda r: r.due_date)
    if sort_order == SortOrder.DATE_DESC:
        return sorted(records, key=lambda r: r.due_date, reverse=True)
    return sorted(records, key=lambda r: tag_sort_key(r.tag))


def group_by_tag(records: Iterable[TaskRecord]) -> Dict[str, List[TaskRecord]]:
    """Partition records by exact tag, keeping their order within each tag."""
    groups: Dict[str, List[TaskRecord]] = {}
    for record in records:
        groups.setdefault(record.tag, []).append(record)
    return groups


def aggregate(
    records: Iterable[TaskRecord],
    tag_order: Sequence[str] = (),
    sort_order: str = SortOrder.DATE_ASC,
    include_completed: bool = False,
    tag_colors: Optional[Mapping[str, str]] = None,
    use_custom_colors: bool = False,
    default_color: str = DEFAULT_TAG_COLOR,
) -> List[TagGroup]:
    """Filter, sort and group records into ordered tag groups.

    Returns:
        Tag groups in display order, each with its resolved color
    """
    visible = filter_completed(records, include_completed)
    grouped = group_by_tag(sort_records(visible, sort_order))
    return [
        TagGroup(
            tag=tag,
            color=color_for(tag, tag_colors, use_custom_colors, default_color),
            tasks=grouped[tag],
        )
        for tag in order_tags(grouped.keys(), tag_order)
    ]
