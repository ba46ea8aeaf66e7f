from __future__ import annotations
from datetime import date, datetime
from typing import Optional, Union

from .errors import MissingDateError

DateLike = Union[date, datetime, str]


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def civil_date(d: date) -> date:
    """Drop any time-of-day (and tzinfo) so only the calendar date remains."""
    if isinstance(d, datetime):
        return d.date()
    return d

def day_diff(start: date, end: date) -> int:
    """Signed whole days from start to end (positive if end is later)."""
    return to_jdn(civil_date(end)) - to_jdn(civil_date(start))

def parse_date(value: Optional[DateLike]) -> date:
    """
    Accept a date, a datetime, or a 'YYYY-MM-DD' string and return a plain date.

    Raises MissingDateError for None, empty strings and anything unparseable.
    """
    if value is None:
        raise MissingDateError("date is required")
    if isinstance(value, date):
        return civil_date(value)
    if not isinstance(value, str):
        raise MissingDateError(f"cannot interpret {value!r} as a date")
    s = value.strip()
    if not s:
        raise MissingDateError("date is required")
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as exc:
        raise MissingDateError(f"invalid date {value!r}, expected YYYY-MM-DD") from exc

def format_date(d: date) -> str:
    return civil_date(d).isoformat()
