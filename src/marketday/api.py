from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from .core.errors import IndexOutOfRangeError, InvalidDayIndexError
from .core.registry import CalendarRegistry
from .core.time import DateLike, parse_date
from .core.types import Anchor, Calendar, CalendarSpec, CalendarSummary, MarketDayInfo, Query
from .attributes.registry import compute_attributes
from .config import load_config
from .engines.cycle import dates_between, day_index_at, day_indices_between

logger = logging.getLogger(__name__)

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def _check_index(cal: Calendar, index: int, *, err=InvalidDayIndexError) -> int:
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise err(f"Day index must be an int, got {index!r}")
    index = int(index)
    if not (0 <= index < cal.cycle_length):
        raise err(f"Day index {index} out of range for calendar '{cal.id}' (cycle length {cal.cycle_length})")
    return index

# ============================================================
# Registry lookups
# ============================================================

def list_calendars() -> List[CalendarSummary]:
    out = []
    for name in _reg().list():
        cal = _reg().calendar(name)
        out.append(CalendarSummary(
            id=cal.id,
            display_name=cal.display_name,
            cycle_length=cal.cycle_length,
            day_names=cal.day_names,
        ))
    return out

def get_calendar(calendar_id: str) -> Calendar:
    return _reg().calendar(calendar_id)

def get_anchor(calendar_id: str) -> Anchor:
    return _reg().anchor(calendar_id)

def register_calendar(spec: CalendarSpec, *, overwrite: bool = False) -> None:
    _reg().register(spec, overwrite=overwrite)

def resolve_day_name(calendar_id: str, index: int) -> str:
    cal = _reg().calendar(calendar_id)
    return cal.day_names[_check_index(cal, index, err=IndexOutOfRangeError)]

def day_index_of(calendar_id: str, day: Union[str, int]) -> int:
    """
    Resolve a day given either as an index or as a name (case-insensitive).

    Numeric strings are read as indices, so "1" and "Orie" are the same day
    in the Igbo calendar.
    """
    cal = _reg().calendar(calendar_id)
    if isinstance(day, str):
        s = day.strip()
        if s.lstrip("-").isdigit():
            try:
                n = int(s)
            except ValueError as exc:
                raise InvalidDayIndexError(f"invalid day index {day!r} for calendar '{cal.id}'") from exc
            return _check_index(cal, n)
        folded = s.casefold()
        for i, name in enumerate(cal.day_names):
            if name.casefold() == folded:
                return i
        raise InvalidDayIndexError(f"Unknown day '{day}' for calendar '{cal.id}'. Available: {list(cal.day_names)}")
    return _check_index(cal, day)

# ============================================================
# Projections
# ============================================================

def today_index(calendar_id: str, *, today: Optional[DateLike] = None) -> int:
    """Day index of today (or the given date) projected from the registry anchor."""
    spec = _reg().get(calendar_id)
    d = parse_date(today) if today is not None else load_config().resolve_today()
    idx = day_index_at(spec.anchor.date, spec.anchor.day_index, spec.calendar.cycle_length, d)
    logger.debug("today_index %s on %s -> %d", calendar_id, d, idx)
    return idx

def find_day(
    calendar_id: str,
    reference_date: Optional[DateLike],
    reference_index: int,
    target_date: Optional[DateLike],
) -> str:
    """Day name on target_date, given that reference_date falls on reference_index."""
    cal = _reg().calendar(calendar_id)
    ref = parse_date(reference_date)
    target = parse_date(target_date)
    reference_index = _check_index(cal, reference_index)
    idx = day_index_at(ref, reference_index, cal.cycle_length, target)
    logger.debug("find_day %s: %s@%d -> %s@%d", calendar_id, ref, reference_index, target, idx)
    return cal.day_names[idx]

def resolve_query(q: Query) -> str:
    return find_day(q.calendar_id, q.reference_date, q.reference_index, q.target_date)

def day_info(
    d: DateLike,
    *,
    calendar: Optional[str] = None,
    attributes: Sequence[str] = (),
) -> MarketDayInfo:
    spec = _reg().get(calendar or load_config().default_calendar)
    civil = parse_date(d)
    idx = day_index_at(spec.anchor.date, spec.anchor.day_index, spec.calendar.cycle_length, civil)
    info = MarketDayInfo(
        civil_date=civil,
        calendar_id=spec.id,
        day_index=idx,
        day_name=spec.calendar.day_names[idx],
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, spec, attributes))
    return info

def days_between(start: DateLike, end: DateLike, *, calendar: Optional[str] = None) -> List[Tuple[date, str]]:
    """(date, day name) for every date in [start, end], inclusive."""
    spec = _reg().get(calendar or load_config().default_calendar)
    d0, d1 = parse_date(start), parse_date(end)
    idx = day_indices_between(spec.anchor.date, spec.anchor.day_index, spec.calendar.cycle_length, d0, d1)
    names = spec.calendar.day_names
    return [(d, names[int(i)]) for d, i in zip(dates_between(d0, d1), idx)]
