"""Extraction pattern compilation for tasktimeline.

A task pattern is a regular expression with exactly three capture groups, in
order: task text, date token, tag. Patterns are user-supplied, so compilation
failures are expected; ``PatternCompiler`` keeps the last pattern that
compiled so a refresh pass can continue with it.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from tasktimeline.models.constants import DEFAULT_DATE_FORMAT, REQUIRED_CAPTURE_GROUPS

logger = logging.getLogger(__name__)

DATE_REGEX_PLACEHOLDER = "DATE_REGEX_PLACEHOLDER"


class PatternErrorKind(str, Enum):
    """Pattern error classification."""
    INVALID_SYNTAX = "invalid_syntax"


class PatternError(ValueError):
    """Structured pattern error that callers surface as a non-fatal warning."""

    def __init__(self, message: str, *, source: str, kind: PatternErrorKind = PatternErrorKind.INVALID_SYNTAX):
        super().__init__(message)
        self.source = source
        self.kind = kind


def compile_pattern(source: str) -> re.Pattern:
    """Compile and validate a task extraction pattern.

    Args:
        source: Regular expression source in Python ``re`` syntax

    Returns:
        The compiled pattern

    Raises:
        PatternError: If the source does not compile or does not define
            exactly three capture groups
    """
    try:
        compiled = re.compile(source)
    except (re.error, TypeError) as e:
        raise PatternError(f"Invalid task pattern: {e}", source=source) from e

    if compiled.groups != REQUIRED_CAPTURE_GROUPS:
        raise PatternError(
            f"Task pattern must define {REQUIRED_CAPTURE_GROUPS} capture groups "
            f"(text, date, tag), found {compiled.groups}",
            source=source,
        )
    return compiled


class PatternCompiler:
    """Compiles task patterns, retaining the last one that compiled."""

    def __init__(self):
        self.last_good: Optional[re.Pattern] = None

    def resolve(self, source: str) -> Tuple[Optional[re.Pattern], Optional[PatternError]]:
        """Compile ``source``, falling back to the last good pattern on failure.

        Returns:
            (pattern, error). On success error is None. On failure pattern is
            the previous good pattern (None if there never was one).
        """
        if self.last_good is not None and self.last_good.pattern == source:
            return self.last_good, None
        try:
            compiled = compile_pattern(source)
        except PatternError as e:
            logger.warning(f"Keeping previous task pattern: {e}")
            return self.last_good, e
        self.last_good = compiled
        return compiled, None


# ---------------------------------------------------------------------------
# Date-format driven patterns and presets
# ---------------------------------------------------------------------------

def date_format_to_regex(date_format: str) -> str:
    """Convert a user date format (DD, MMM, YYYY tokens) to a regex fragment."""
    return (
        date_format
        .replace("DD", r"[\d]{1,2}", 1)
        .replace("MMM", r"[A-Za-z]{3}", 1)
        .replace("YYYY", r"\d{4}", 1)
    )


@dataclass(frozen=True)
class FormatPreset:
    name: str
    pattern_template: str
    example_template: str


FORMAT_PRESETS: List[FormatPreset] = [
    FormatPreset(
        name="Default Arrow Format",
        pattern_template=r"(.+?)\s*->\s*_DATE_REGEX_PLACEHOLDER_\s*(#[A-Za-z0-9_]+)",
        example_template="Complete project -> _DD-MMM-YYYY_ #Work",
    ),
    FormatPreset(
        name="Checkbox Format",
        pattern_template=r"(- \[[ x]\] .+?)\s*\|\s*DATE_REGEX_PLACEHOLDER\s*(#[A-Za-z0-9_]+)",
        example_template="- [ ] Complete project | DD-MMM-YYYY #Work",
    ),
    FormatPreset(
        name="Colon Format",
        pattern_template=r"(.+?)\s*:\s*DATE_REGEX_PLACEHOLDER\s*(#[A-Za-z0-9_]+)",
        example_template="Complete project: DD-MMM-YYYY #Work",
    ),
    FormatPreset(
        name="Due Date Format",
        pattern_template=r"(.+?)\s*due\s*DATE_REGEX_PLACEHOLDER\s*(#[A-Za-z0-9_]+)",
        example_template="Complete project due DD-MMM-YYYY #Work",
    ),
]


def get_preset(name: str) -> Optional[FormatPreset]:
    for preset in FORMAT_PRESETS:
        if preset.name == name:
            return preset
    return None


def build_preset_pattern(preset: FormatPreset, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Build a three-group task pattern from a preset and a date format."""
    date_group = f"({date_format_to_regex(date_format)})"
    return preset.pattern_template.replace(DATE_REGEX_PLACEHOLDER, date_group)


def preset_example(preset: FormatPreset, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    return preset.example_template.replace(DEFAULT_DATE_FORMAT, date_format)


def find_preset_for_pattern(pattern: str, date_format: str = DEFAULT_DATE_FORMAT) -> Optional[FormatPreset]:
    """Return the preset that generates ``pattern``, or None for a custom pattern."""
    for preset in FORMAT_PRESETS:
        if build_preset_pattern(preset, date_format) == pattern:
            return preset
    return None
