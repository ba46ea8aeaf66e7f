"""Runtime configuration.

Values can be overridden via environment variables:
- MARKETDAY_DEFAULT_CALENDAR
- MARKETDAY_TODAY (YYYY-MM-DD, pins "today" for reproducible runs)
- MARKETDAY_LOG_LEVEL
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from .core.time import parse_date

logger = logging.getLogger(__name__)


@dataclass
class MarketDayConfig:
    default_calendar: str = field(default="igbo")
    today: Optional[date] = field(default=None)
    log_level: str = field(default="WARNING")

    def __post_init__(self):
        """Apply environment variable overrides."""
        env_calendar = os.getenv("MARKETDAY_DEFAULT_CALENDAR")
        if env_calendar:
            self.default_calendar = env_calendar.strip()
            logger.debug("[CONFIG] default_calendar from env: %s", self.default_calendar)

        env_today = os.getenv("MARKETDAY_TODAY")
        if env_today:
            self.today = parse_date(env_today)
            logger.debug("[CONFIG] today pinned from env: %s", self.today)

        env_level = os.getenv("MARKETDAY_LOG_LEVEL")
        if env_level:
            self.log_level = env_level.strip().upper()

    def resolve_today(self) -> date:
        return self.today if self.today is not None else date.today()

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING


def load_config() -> MarketDayConfig:
    return MarketDayConfig()
