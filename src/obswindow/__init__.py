"""
Observation window utilities for regional council time-series

Computes the reporting window for a start date, start hour and interval
label, and builds the Hilltop SOS/WFS requests that use it.
"""

from .core import compute_window
from .errors import WindowError, InvalidIntervalLabel, InvalidTimeOfDay, InvalidStartDate, CalendarOverflow
from .models import IntervalLabel, TimeWindow, ServiceConfig

__version__ = "0.1.0"
__all__ = [
    "compute_window",
    "WindowError",
    "InvalidIntervalLabel",
    "InvalidTimeOfDay",
    "InvalidStartDate",
    "CalendarOverflow",
    "IntervalLabel",
    "TimeWindow",
    "ServiceConfig",
]
