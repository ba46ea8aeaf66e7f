class MarketDayError(Exception):
    """Base error."""

class UnknownCalendarError(MarketDayError, KeyError):
    """Raised when a calendar id is not present in the registry."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""

class DuplicateCalendarError(MarketDayError, KeyError):
    """Raised when registering a calendar id that already exists."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""

class InvalidDayIndexError(MarketDayError, ValueError):
    """Raised when a day index falls outside [0, cycle_length)."""

# resolve_day_name reports an out-of-range index with this name.
IndexOutOfRangeError = InvalidDayIndexError

class MissingDateError(MarketDayError, ValueError):
    """Raised when a date is absent or cannot be parsed."""

class UnknownAttributeError(MarketDayError, KeyError):
    """Raised when a requested day attribute is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
