from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence

from ..core.errors import UnknownAttributeError
from ..core.types import CalendarSpec, MarketDayInfo
from ..core.time import to_jdn

AttrFunc = Callable[[MarketDayInfo, CalendarSpec], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def available_attributes() -> List[str]:
    return sorted(_REGISTRY)

def compute_attributes(info: MarketDayInfo, spec: CalendarSpec, names: Sequence[str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise UnknownAttributeError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        out.update(_REGISTRY[name](info, spec))
    return out

# helper for attribute implementations
def jdn(info: MarketDayInfo) -> int:
    return to_jdn(info.civil_date)
