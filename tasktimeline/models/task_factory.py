"""Task record creation for tasktimeline.

This module centralizes record construction so every extraction path
applies the same trimming and completion rules.
"""

from datetime import date

from tasktimeline.models.constants import COMPLETION_MARKERS
from tasktimeline.models.task import TaskPosition, TaskRecord


def determine_completed(text: str) -> bool:
    """Determine if a task is completed based on its text.

    A task is completed if its trimmed text starts with ``[x]`` or ``- [x]``
    (case-sensitive).

    Args:
        text: Task text to check

    Returns:
        True if the text carries a completion marker, False otherwise
    """
    return text.strip().startswith(COMPLETION_MARKERS) if text else False


def create_task_record(
    text: str,
    date_text: str,
    due_date: date,
    tag: str,
    source_id: str,
    source_label: str,
    line: int,
    column: int,
    offset_start: int,
    offset_end: int,
) -> TaskRecord:
    """Create a task record from the pieces of one pattern match.

    Text fields are trimmed here; derived urgency fields are left unset for
    the temporal classifier.

    Returns:
        TaskRecord for the match
    """
    text = text.strip()
    return TaskRecord(
        text=text,
        date_text=date_text.strip(),
        due_date=due_date,
        tag=tag.strip(),
        source_id=source_id,
        source_label=source_label,
        position=TaskPosition(
            line=line,
            column=column,
            offset_start=offset_start,
            offset_end=offset_end,
        ),
        completed=determine_completed(text),
    )
