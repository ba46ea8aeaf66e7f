from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List

from .errors import DuplicateCalendarError, UnknownCalendarError
from .types import Anchor, Calendar, CalendarSpec

logger = logging.getLogger(__name__)

@dataclass
class CalendarRegistry:
    _specs: Dict[str, CalendarSpec]

    def get(self, name: str) -> CalendarSpec:
        if name not in self._specs:
            raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {sorted(self._specs)}")
        return self._specs[name]

    def calendar(self, name: str) -> Calendar:
        return self.get(name).calendar

    def anchor(self, name: str) -> Anchor:
        return self.get(name).anchor

    def list(self) -> List[str]:
        return sorted(self._specs.keys())

    def register(self, spec: CalendarSpec, *, overwrite: bool = False) -> None:
        if (not overwrite) and (spec.id in self._specs):
            raise DuplicateCalendarError(f"Calendar '{spec.id}' already exists. Use overwrite=True to replace.")
        self._specs[spec.id] = spec
        logger.debug("registered calendar %s (cycle length %d)", spec.id, spec.calendar.cycle_length)
