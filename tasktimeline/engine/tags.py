"""Tag ordering and coloring for tasktimeline.

Tag order and custom colors belong to the caller. Functions here never
mutate their inputs; changes come back as new lists or new settings.
"""

import logging
import struct
from typing import Iterable, List, Mapping, Optional, Sequence

from tasktimeline.models.settings import TimelineSettings

logger = logging.getLogger(__name__)


def tag_sort_key(tag: str) -> tuple:
    """Locale-aware lexicographic key: case-insensitive, ties lowercase first (``#a`` before ``#A``)."""
    return (tag.casefold(), tag.swapcase())


def order_tags(tags: Iterable[str], tag_order: Sequence[str]) -> List[str]:
    """Order tags for display.

    Tags in ``tag_order`` come first, in that order. The rest follow in
    lexicographic order.
    """
    positions = {}
    for index, tag in enumerate(tag_order):
        positions.setdefault(tag, index)

    def key(tag: str) -> tuple:
        if tag in positions:
            return (0, positions[tag], ())
        return (1, 0, tag_sort_key(tag))

    return sorted(set(tags), key=key)


def move_tag(order: Sequence[str], moved: str, target: str) -> List[str]:
    """Move ``moved`` directly before ``target``.

    ``moved`` is removed from its current position (if any). It is inserted
    before ``target`` when ``target`` is in the remaining list, otherwise
    appended to the end.

    Returns:
        New tag order list
    """
    new_order = [tag for tag in order if tag != moved]
    if target in new_order:
        new_order.insert(new_order.index(target), moved)
    else:
        new_order.append(moved)
    return new_order


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _utf16_code_units(text: str) -> Sequence[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


def tag_hash(tag: str) -> int:
    """32-bit string hash of ``hash * 31 + code_unit`` over UTF-16 code units."""
    value = 0
    for code in _utf16_code_units(tag):
        value = _to_int32(code + ((value << 5) - value))
    return value


def generated_color(tag: str) -> str:
    """Deterministic #RRGGBB color for a tag, each channel in 100..199."""
    value = tag_hash(tag)
    color = "#"
    for i in range(3):
        byte = (value >> (i * 8)) & 0xFF
        color += f"{100 + (byte % 100):02x}"
    return color


def _strip_hash(tag: str) -> str:
    return tag[1:] if tag.startswith("#") else tag


def color_for(
    tag: str,
    overrides: Optional[Mapping[str, str]],
    use_custom: bool,
    default_color: str,
) -> str:
    """Resolve the display color of a tag.

    With ``use_custom`` the override for the tag (looked up without its
    leading ``#``) wins, falling back to ``default_color``. Otherwise the
    color is generated from the tag text.
    """
    if use_custom:
        return (overrides or {}).get(_strip_hash(tag)) or default_color
    return generated_color(tag)


def settings_color_for(tag: str, settings: TimelineSettings) -> str:
    return color_for(tag, settings.tag_colors, settings.use_custom_colors, settings.default_tag_color)


def apply_tag_move(settings: TimelineSettings, moved: str, target: str) -> TimelineSettings:
    """Return new settings with ``moved`` placed before ``target`` in the tag order."""
    if moved == target:
        return settings
    new_order = move_tag(settings.tag_order, moved, target)
    logger.debug(f"Moved tag {moved} before {target}: {new_order}")
    return settings.model_copy(update={"tag_order": new_order})


def apply_tag_color(settings: TimelineSettings, tag: str, color: str) -> TimelineSettings:
    """Return new settings with a custom color for ``tag``; custom colors are switched on.

    Raises:
        pydantic.ValidationError: If ``color`` is not #RRGGBB
    """
    tag_colors = {**settings.tag_colors, _strip_hash(tag): color}
    return TimelineSettings(
        **{**settings.model_dump(), "tag_colors": tag_colors, "use_custom_colors": True}
    )
