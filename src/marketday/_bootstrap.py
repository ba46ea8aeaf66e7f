from __future__ import annotations
import logging

from marketday.core.registry import CalendarRegistry
from marketday.engines.specs import ALL_SPECS

logger = logging.getLogger(__name__)

def build_registry() -> CalendarRegistry:
    reg = CalendarRegistry({})
    for spec in ALL_SPECS.values():
        reg.register(spec)
    logger.debug("built calendar registry: %s", reg.list())
    return reg
