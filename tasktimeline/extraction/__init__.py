"""Task extraction for tasktimeline."""

from tasktimeline.extraction.pattern import (
    PatternError,
    PatternErrorKind,
    PatternCompiler,
    compile_pattern,
    FORMAT_PRESETS,
    build_preset_pattern,
    find_preset_for_pattern,
)
from tasktimeline.extraction.date_parser import parse_date, format_date
from tasktimeline.extraction.extractor import RawMatch, extract_matches, extract_tasks

__all__ = [
    "PatternError",
    "PatternErrorKind",
    "PatternCompiler",
    "compile_pattern",
    "FORMAT_PRESETS",
    "build_preset_pattern",
    "find_preset_for_pattern",
    "parse_date",
    "format_date",
    "RawMatch",
    "extract_matches",
    "extract_tasks",
]
