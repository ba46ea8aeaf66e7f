from __future__ import annotations
from typing import Any, Dict

from ..core.time import day_diff
from ..engines.cycle import cycle_number
from .registry import register_attribute, jdn

def weekday(info, spec) -> Dict[str, Any]:
    # Convention: 0=Mon..6=Sun, same as date.weekday().
    return {"weekday": int(jdn(info) % 7)}

def cycle(info, spec) -> Dict[str, Any]:
    a = spec.anchor
    return {
        "days_from_anchor": day_diff(a.date, info.civil_date),
        "cycle_number": cycle_number(a.date, a.day_index, spec.calendar.cycle_length, info.civil_date),
    }

register_attribute("weekday", weekday)
register_attribute("cycle", cycle)
