"""Task data models for tasktimeline."""

from datetime import date
from enum import Enum
from pathlib import PurePath
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class UrgencyTier(str, Enum):
    """Urgency classification of a task's days remaining."""
    OVERDUE = "overdue"
    TODAY = "today"
    TOMORROW = "tomorrow"
    SOON = "soon"
    NORMAL = "normal"


class SourceDocument(BaseModel):
    """One document handed to the engine for a refresh pass."""

    source_id: str = Field(..., description="Opaque identifier of the document (e.g. vault path)")
    source_label: str = Field(
        "",
        validate_default=True,
        description="Human-readable name (defaults to the file stem of source_id)",
    )
    text: str = Field("", description="Raw document text")

    @field_validator("source_label")
    @classmethod
    def _default_label(cls, v, info):
        if v:
            return v
        return PurePath(info.data.get("source_id", "")).stem


class TaskPosition(BaseModel):
    """0-based location of a full pattern match within its document."""

    line: int = Field(..., ge=0, description="Number of newlines before the match")
    column: int = Field(..., ge=0, description="Offset since the most recent newline")
    offset_start: int = Field(..., ge=0, description="Match start offset")
    offset_end: int = Field(..., ge=0, description="Match end offset (exclusive)")

    class Config:
        """Pydantic configuration."""
        frozen = True


class TaskRecord(BaseModel):
    """One extracted, dated and tagged task."""

    text: str = Field(..., description="Task text (capture group 1, trimmed)")
    date_text: str = Field(..., description="Raw date token (capture group 2, trimmed)")
    due_date: date = Field(..., description="Parsed due date")
    tag: str = Field(..., min_length=1, description="Tag token as captured, used verbatim for grouping")
    source_id: str = Field(..., description="Identifier of the originating document")
    source_label: str = Field(..., description="Human-readable document name")
    position: TaskPosition = Field(..., description="Location of the match in the document")
    completed: bool = Field(False, description="Whether the text carries a completion marker")

    # Derived per refresh pass by the temporal classifier
    days_left: Optional[int] = Field(None, description="Whole days from today until due_date")
    overdue: Optional[bool] = Field(None, description="days_left < 0")
    urgency: Optional[UrgencyTier] = Field(None, description="Urgency tier for days_left")

    class Config:
        """Pydantic configuration."""
        frozen = True
        use_enum_values = True
