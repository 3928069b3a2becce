"""Timeline settings for tasktimeline.

The caller owns and persists these values. The engine reads a snapshot at the
start of each refresh pass and hands back new snapshots for any change
(see ``tasktimeline.engine.tags`` for tag reordering and recoloring).
"""

import os
import re
from enum import Enum
from typing import Dict, List
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from tasktimeline.models.constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_TASK_PATTERN,
    DEFAULT_TAG_COLOR,
    DEFAULT_REFRESH_INTERVAL_MS,
    MAX_VISIBLE_PER_DAY_CELL,
)

load_dotenv()

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


class SortOrder(str, Enum):
    """Record sort policy."""
    DATE_ASC = "date-asc"
    DATE_DESC = "date-desc"
    TAG = "tag"


class ViewMode(str, Enum):
    """Which view the caller renders by default."""
    TIMELINE = "timeline"
    CALENDAR = "calendar"


def _check_color(value: str) -> str:
    if not _HEX_COLOR_RE.match(value or ""):
        raise ValueError(f"Invalid color {value!r}, expected #RRGGBB")
    return value


class TimelineSettings(BaseModel):
    """Configuration snapshot for one refresh pass."""

    date_format: str = Field(DEFAULT_DATE_FORMAT, description="User-facing date format (DD, MMM, YYYY tokens)")
    task_pattern: str = Field(DEFAULT_TASK_PATTERN, description="Extraction regex with text, date and tag groups")
    use_custom_colors: bool = Field(False, description="Use tag_colors instead of generated colors")
    default_tag_color: str = Field(DEFAULT_TAG_COLOR, description="Color for tags without a custom color")
    tag_colors: Dict[str, str] = Field(default_factory=dict, description="Tag (without leading #) to #RRGGBB")
    sort_order: SortOrder = Field(SortOrder.DATE_ASC, description="How records are sorted")
    show_completed: bool = Field(False, description="Include completed tasks")
    refresh_interval_ms: int = Field(
        DEFAULT_REFRESH_INTERVAL_MS, ge=0, description="Caller's auto-refresh interval (0 disables)"
    )
    tag_order: List[str] = Field(default_factory=list, description="Display precedence of tag groups")
    view_mode: ViewMode = Field(ViewMode.TIMELINE, description="Default view")
    max_visible_per_day: int = Field(
        MAX_VISIBLE_PER_DAY_CELL, ge=1, description="Tasks shown per calendar cell before overflow"
    )

    class Config:
        """Pydantic configuration."""
        use_enum_values = True

    @field_validator("default_tag_color")
    @classmethod
    def _validate_default_color(cls, v):
        return _check_color(v)

    @field_validator("tag_colors")
    @classmethod
    def _validate_tag_colors(cls, v):
        for color in v.values():
            _check_color(color)
        return v


def reset_settings() -> TimelineSettings:
    """Return a fresh snapshot with every setting at its default."""
    return TimelineSettings()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() == "true"


def load_settings() -> TimelineSettings:
    """Build settings from defaults overlaid with TASK_TIMELINE_* environment variables.

    Raises:
        pydantic.ValidationError: If an environment value is invalid
    """
    defaults = TimelineSettings()
    overrides = {
        "task_pattern": os.getenv("TASK_TIMELINE_PATTERN"),
        "date_format": os.getenv("TASK_TIMELINE_DATE_FORMAT"),
        "sort_order": os.getenv("TASK_TIMELINE_SORT_ORDER"),
        "default_tag_color": os.getenv("TASK_TIMELINE_DEFAULT_TAG_COLOR"),
        "refresh_interval_ms": os.getenv("TASK_TIMELINE_REFRESH_INTERVAL_MS"),
        "view_mode": os.getenv("TASK_TIMELINE_VIEW_MODE"),
        "max_visible_per_day": os.getenv("TASK_TIMELINE_MAX_VISIBLE_PER_DAY"),
    }
    values = {key: value for key, value in overrides.items() if value is not None}
    values["show_completed"] = _env_bool("TASK_TIMELINE_SHOW_COMPLETED", defaults.show_completed)
    values["use_custom_colors"] = _env_bool("TASK_TIMELINE_USE_CUSTOM_COLORS", defaults.use_custom_colors)
    return TimelineSettings(**values)
