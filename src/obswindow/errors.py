"""Errors raised while building observation windows."""

from datetime import date
from typing import Iterable, Optional


class WindowError(ValueError):
    """Base class for observation window errors."""


class InvalidIntervalLabel(WindowError):
    """Raised when an interval label is not one of the known choices."""

    def __init__(self, label: object, choices: Optional[Iterable[str]] = None):
        self.label = label
        self.choices = list(choices or [])
        message = f"Unknown interval label: {label!r}"
        if self.choices:
            message += f" (expected one of: {', '.join(self.choices)})"
        super().__init__(message)


class InvalidTimeOfDay(WindowError):
    """Raised when a time-of-day string has no usable two-digit hour."""

    def __init__(self, value: object, reason: str = "expected a two-digit hour between 00 and 23"):
        self.value = value
        super().__init__(f"Invalid time of day {value!r}: {reason}")


class CalendarOverflow(WindowError):
    """Raised when the end of a window falls outside the supported date range."""

    def __init__(self, start_date: date, label: str):
        self.start_date = start_date
        self.label = label
        super().__init__(
            f"Cannot add {label!r} to {start_date.isoformat()}: date out of range"
        )


class InvalidStartDate(WindowError):
    """Raised when a start date is neither a date nor a ``YYYY-MM-DD`` string."""

    def __init__(self, value: object, reason: str = "expected a date or YYYY-MM-DD string"):
        self.value = value
        super().__init__(f"Invalid start date {value!r}: {reason}")
