"""Date token parsing for tasktimeline.

Dates are written ``day-mon-year`` (``15-Mar-2024``). Parsing is strict:
anything that is not a real calendar day yields ``None`` so the surrounding
match is dropped instead of producing a task on a rolled-over date.
"""

import re
from datetime import date
from typing import Optional


_MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}
_MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

_INT_RE = re.compile(r"\d+", re.ASCII)


def month_number(token: str) -> Optional[int]:
    """Map a three-letter month abbreviation (any case) to 1-12."""
    return _MONTHS.get(token.strip().lower())


def _parse_int(token: str) -> Optional[int]:
    token = token.strip()
    if not _INT_RE.fullmatch(token):
        return None
    try:
        return int(token)
    except ValueError:
        # Longer than the interpreter's int conversion digit limit
        return None


def parse_date(date_text: str) -> Optional[date]:
    """Parse a ``day-mon-year`` token.

    Args:
        date_text: Raw date token, e.g. ``"5-mar-2024"``

    Returns:
        The parsed date, or None if the token has a part count other than
        three, a non-integer day or year, an unknown month, or names a day
        that does not exist (``31-feb-2024``)
    """
    parts = (date_text or "").split("-")
    if len(parts) != 3:
        return None

    day = _parse_int(parts[0])
    month = month_number(parts[1])
    year = _parse_int(parts[2])
    if day is None or month is None or year is None:
        return None

    try:
        return date(year, month, day)
    except ValueError:
        # Out-of-range day or year: rejected rather than rolled over
        return None


def format_date(value: date) -> str:
    """Format a date as ``DD-Mon-YYYY`` (``05-Mar-2024``)."""
    return f"{value.day:02d}-{_MONTH_NAMES[value.month - 1]}-{value.year}"
