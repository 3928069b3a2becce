"""Tests for settings defaults, validation and environment overrides."""

import pytest
from pydantic import ValidationError

from tasktimeline.models.constants import DEFAULT_TASK_PATTERN
from tasktimeline.models.settings import SortOrder, TimelineSettings, ViewMode, load_settings, reset_settings

_ENV_VARS = [
    "TASK_TIMELINE_PATTERN",
    "TASK_TIMELINE_DATE_FORMAT",
    "TASK_TIMELINE_SORT_ORDER",
    "TASK_TIMELINE_SHOW_COMPLETED",
    "TASK_TIMELINE_USE_CUSTOM_COLORS",
    "TASK_TIMELINE_DEFAULT_TAG_COLOR",
    "TASK_TIMELINE_REFRESH_INTERVAL_MS",
    "TASK_TIMELINE_VIEW_MODE",
    "TASK_TIMELINE_MAX_VISIBLE_PER_DAY",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDefaults:

    def test_default_values(self, default_settings):
        assert default_settings.date_format == "DD-MMM-YYYY"
        assert default_settings.task_pattern == DEFAULT_TASK_PATTERN
        assert default_settings.use_custom_colors is False
        assert default_settings.default_tag_color == "#5a8eee"
        assert default_settings.tag_colors == {}
        assert default_settings.sort_order == SortOrder.DATE_ASC
        assert default_settings.show_completed is False
        assert default_settings.refresh_interval_ms == 5000
        assert default_settings.tag_order == []
        assert default_settings.view_mode == ViewMode.TIMELINE
        assert default_settings.max_visible_per_day == 3

    def test_reset_returns_defaults(self):
        assert reset_settings() == TimelineSettings()


class TestValidation:

    def test_bad_default_color(self):
        with pytest.raises(ValidationError):
            TimelineSettings(default_tag_color="blue")

    def test_bad_tag_color(self):
        with pytest.raises(ValidationError):
            TimelineSettings(tag_colors={"Work": "#12345"})

    def test_bad_sort_order(self):
        with pytest.raises(ValidationError):
            TimelineSettings(sort_order="priority")

    def test_negative_refresh_interval(self):
        with pytest.raises(ValidationError):
            TimelineSettings(refresh_interval_ms=-1)

    def test_zero_visible_per_day(self):
        with pytest.raises(ValidationError):
            TimelineSettings(max_visible_per_day=0)


class TestLoadSettings:
    """Test load_settings() environment overrides."""

    def test_no_environment_gives_defaults(self, clean_env):
        assert load_settings() == TimelineSettings()

    def test_overrides(self, clean_env):
        clean_env.setenv("TASK_TIMELINE_PATTERN", r"(\w+) @(\S+) (#\w+)")
        clean_env.setenv("TASK_TIMELINE_SORT_ORDER", "tag")
        clean_env.setenv("TASK_TIMELINE_SHOW_COMPLETED", "True")
        clean_env.setenv("TASK_TIMELINE_USE_CUSTOM_COLORS", "false")
        clean_env.setenv("TASK_TIMELINE_REFRESH_INTERVAL_MS", "0")
        clean_env.setenv("TASK_TIMELINE_VIEW_MODE", "calendar")
        clean_env.setenv("TASK_TIMELINE_MAX_VISIBLE_PER_DAY", "5")

        settings = load_settings()

        assert settings.task_pattern == r"(\w+) @(\S+) (#\w+)"
        assert settings.sort_order == SortOrder.TAG
        assert settings.show_completed is True
        assert settings.use_custom_colors is False
        assert settings.refresh_interval_ms == 0
        assert settings.view_mode == ViewMode.CALENDAR
        assert settings.max_visible_per_day == 5

    def test_invalid_environment_value(self, clean_env):
        clean_env.setenv("TASK_TIMELINE_DEFAULT_TAG_COLOR", "not-a-color")
        with pytest.raises(ValidationError):
            load_settings()
