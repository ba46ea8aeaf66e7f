"""marketday public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

import logging

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    get_calendar,
    get_anchor,
    register_calendar,
    resolve_day_name,
    day_index_of,
    today_index,
    find_day,
    resolve_query,
    day_info,
    days_between,
)
from .engines.cycle import day_index_at, safe_mod
from .engines.specs import make_spec
from .core.time import parse_date
from .core.types import Anchor, Calendar, CalendarSpec, CalendarSummary, MarketDayInfo, Query
from .core.errors import (
    MarketDayError,
    UnknownCalendarError,
    DuplicateCalendarError,
    InvalidDayIndexError,
    IndexOutOfRangeError,
    MissingDateError,
    UnknownAttributeError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "list_calendars",
    "get_calendar",
    "get_anchor",
    "register_calendar",
    "resolve_day_name",
    "day_index_of",
    "today_index",
    "find_day",
    "resolve_query",
    "day_info",
    "days_between",
    "day_index_at",
    "safe_mod",
    "make_spec",
    "parse_date",
    "Anchor",
    "Calendar",
    "CalendarSpec",
    "CalendarSummary",
    "MarketDayInfo",
    "Query",
    "MarketDayError",
    "UnknownCalendarError",
    "DuplicateCalendarError",
    "InvalidDayIndexError",
    "IndexOutOfRangeError",
    "MissingDateError",
    "UnknownAttributeError",
]
