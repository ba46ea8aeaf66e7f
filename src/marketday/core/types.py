from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Tuple

from .errors import InvalidDayIndexError

@dataclass(frozen=True)
class Calendar:
    id: str
    display_name: str
    day_names: Tuple[str, ...]

    @property
    def cycle_length(self) -> int:
        return len(self.day_names)

@dataclass(frozen=True)
class Anchor:
    """A civil date known to fall on day_index of its calendar."""
    date: date
    day_index: int

@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for registering one calendar with its anchor."""
    calendar: Calendar
    anchor: Anchor

    def __post_init__(self):
        n = self.calendar.cycle_length
        if n == 0:
            raise ValueError(f"Calendar '{self.calendar.id}' needs at least one day name")
        i = self.anchor.day_index
        if isinstance(i, bool) or not isinstance(i, int) or not (0 <= i < n):
            raise InvalidDayIndexError(
                f"Anchor index {i!r} out of range for calendar '{self.calendar.id}' (cycle length {n})"
            )

    @property
    def id(self) -> str:
        return self.calendar.id

@dataclass(frozen=True)
class CalendarSummary:
    id: str
    display_name: str
    cycle_length: int
    day_names: Tuple[str, ...]

@dataclass(frozen=True)
class Query:
    calendar_id: str
    reference_date: date
    reference_index: int
    target_date: date

@dataclass(frozen=True)
class MarketDayInfo:
    civil_date: date
    calendar_id: str
    day_index: int
    day_name: str
    attributes: Optional[Dict[str, Any]] = None
