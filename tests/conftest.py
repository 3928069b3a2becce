"""Pytest fixtures and configuration for tasktimeline tests."""

import pytest
from datetime import date

from tasktimeline.models.settings import TimelineSettings
from tasktimeline.models.task import SourceDocument, TaskPosition, TaskRecord


@pytest.fixture
def today():
    """Pinned current day used by every time-dependent test."""
    return date(2024, 3, 15)


@pytest.fixture
def sample_record_base():
    """Base record data for creating test records.

    Returns a dict with default record attributes that can be overridden.
    """
    return {
        "text": "Write report",
        "date_text": "15-Mar-2024",
        "due_date": date(2024, 3, 15),
        "tag": "#Work",
        "source_id": "notes/Work.md",
        "source_label": "Work",
        "position": TaskPosition(line=0, column=0, offset_start=0, offset_end=40),
        "completed": False,
    }


@pytest.fixture
def make_record(sample_record_base):
    """Factory for TaskRecord objects with overrides."""
    def _make(**overrides):
        return TaskRecord(**{**sample_record_base, **overrides})
    return _make


@pytest.fixture
def default_settings():
    """Settings with every value at its default."""
    return TimelineSettings()


@pytest.fixture
def work_document():
    """A document with two tasks, one completed, and one undated match."""
    text = (
        "# Work\n"
        "Write report -> _20-Mar-2024_ #Work\n"
        "Some notes without a task.\n"
        "- [x] File taxes -> _10-Mar-2024_ #Admin\n"
        "Broken -> _31-Feb-2024_ #Work\n"
        "Plan offsite -> _02-apr-2024_ #Work\n"
    )
    return SourceDocument(source_id="notes/Work.md", text=text)


@pytest.fixture
def home_document():
    """A second document with a single task."""
    return SourceDocument(
        source_id="notes/Home.md",
        source_label="Home notes",
        text="Fix the sink -> _16-Mar-2024_ #Home",
    )
