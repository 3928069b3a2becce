"""Tests for tag ordering and color resolution."""

import pytest
from pydantic import ValidationError

from tasktimeline.engine.tags import (
    apply_tag_color,
    apply_tag_move,
    color_for,
    generated_color,
    move_tag,
    order_tags,
    settings_color_for,
    tag_hash,
)
from tasktimeline.models.settings import TimelineSettings


def _to_int32(value):
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _reference_color(tag):
    """Color computed the way a JavaScript engine evaluates the hash.

    The running hash is an unbounded number; only the shift converts it to
    32 bits, and the final byte extraction converts the result.
    """
    value = 0
    data = tag.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        code = data[i] | (data[i + 1] << 8)
        value = code + (_to_int32(_to_int32(value) << 5) - value)
    value = _to_int32(value)
    return "#" + "".join(f"{100 + (((value >> (i * 8)) & 0xFF) % 100):02x}" for i in range(3))


class TestMoveTag:
    """Test move_tag() reordering."""

    def test_move_before_existing_target(self):
        assert move_tag(["A", "B", "C"], "C", "A") == ["C", "A", "B"]

    def test_insert_new_tag_before_target(self):
        assert move_tag(["A", "B"], "Z", "A") == ["Z", "A", "B"]

    def test_missing_target_appends(self):
        assert move_tag(["A", "B"], "A", "Q") == ["B", "A"]

    def test_new_tag_and_missing_target_appends(self):
        assert move_tag(["A", "B"], "Z", "Q") == ["A", "B", "Z"]

    def test_move_forward(self):
        assert move_tag(["A", "B", "C", "D"], "A", "D") == ["B", "C", "A", "D"]

    def test_idempotent(self):
        once = move_tag(["A", "B", "C"], "C", "A")
        assert move_tag(once, "C", "A") == once

    def test_input_is_not_mutated(self):
        order = ["A", "B", "C"]
        move_tag(order, "C", "A")
        assert order == ["A", "B", "C"]


class TestOrderTags:
    """Test tag display order (listed first, then lexicographic)."""

    def test_listed_tags_first_in_list_order(self):
        assert order_tags(["#b", "#a", "#c"], ["#c", "#a"]) == ["#c", "#a", "#b"]

    def test_unlisted_tags_lexicographic(self):
        assert order_tags(["#work", "#Home", "#admin"], []) == ["#admin", "#Home", "#work"]

    def test_case_ties_put_lowercase_first(self):
        assert order_tags(["#B", "#a", "#b", "#A"], []) == ["#a", "#A", "#b", "#B"]

    def test_listed_tags_absent_from_input_are_ignored(self):
        assert order_tags(["#a"], ["#z", "#a"]) == ["#a"]

    def test_duplicate_tags_collapse(self):
        assert order_tags(["#a", "#a", "#b"], []) == ["#a", "#b"]


class TestColorFor:
    """Test deterministic and custom colors."""

    def test_known_values(self):
        assert generated_color("a") == "#c56464"
        assert generated_color("ab") == "#857064"
        assert generated_color("") == "#646464"

    def test_deterministic(self):
        first = color_for("#Work", {}, False, "#5a8eee")
        assert all(color_for("#Work", {}, False, "#5a8eee") == first for _ in range(5))

    def test_tags_get_different_colors(self):
        assert color_for("#Work", {}, False, "#5a8eee") != color_for("#Home", {}, False, "#5a8eee")

    @pytest.mark.parametrize("tag", [
        "#Work",
        "#Home",
        "#a_very_long_project_tag_name_that_overflows_32_bits",
        "#über",
        "#\U0001F600",
    ])
    def test_matches_reference_arithmetic(self, tag):
        assert generated_color(tag) == _reference_color(tag)

    def test_hash_stays_in_int32_range(self):
        value = tag_hash("#" + "z" * 200)
        assert -(2 ** 31) <= value < 2 ** 31

    def test_channels_in_range(self):
        color = generated_color("#Anything")
        channels = [int(color[i:i + 2], 16) for i in (1, 3, 5)]
        assert all(100 <= c <= 199 for c in channels)

    def test_custom_override_strips_hash(self):
        assert color_for("#Work", {"Work": "#112233"}, True, "#5a8eee") == "#112233"

    def test_custom_missing_override_uses_default(self):
        assert color_for("#Home", {"Work": "#112233"}, True, "#5a8eee") == "#5a8eee"

    def test_overrides_ignored_without_custom(self):
        assert color_for("#Work", {"Work": "#112233"}, False, "#5a8eee") == generated_color("#Work")


class TestSettingsMutations:
    """Test copy-on-write settings changes."""

    def test_apply_tag_move_returns_new_settings(self, default_settings):
        settings = default_settings.model_copy(update={"tag_order": ["#a", "#b"]})
        moved = apply_tag_move(settings, "#b", "#a")

        assert moved.tag_order == ["#b", "#a"]
        assert settings.tag_order == ["#a", "#b"]

    def test_apply_tag_move_onto_itself_is_noop(self, default_settings):
        settings = default_settings.model_copy(update={"tag_order": ["#a", "#b"]})
        assert apply_tag_move(settings, "#a", "#a") is settings

    def test_apply_tag_color_enables_custom_colors(self, default_settings):
        colored = apply_tag_color(default_settings, "#Work", "#123456")

        assert colored.tag_colors == {"Work": "#123456"}
        assert colored.use_custom_colors is True
        assert default_settings.tag_colors == {}
        assert default_settings.use_custom_colors is False
        assert settings_color_for("#Work", colored) == "#123456"
        assert settings_color_for("#Home", colored) == colored.default_tag_color

    def test_apply_tag_color_rejects_bad_color(self, default_settings):
        with pytest.raises(ValidationError):
            apply_tag_color(default_settings, "#Work", "red")

    def test_settings_color_for_generated(self):
        settings = TimelineSettings()
        assert settings_color_for("#Work", settings) == generated_color("#Work")
