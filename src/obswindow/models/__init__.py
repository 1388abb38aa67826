"""Data models and types for observation windows."""

from .interval import IntervalLabel, StepKind, StepRule, STEP_RULES, interval_choices, hour_choices
from .window import TimeWindow, parse_time_of_day, parse_hour, format_hour
from .config import ServiceConfig, CouncilServer, DEFAULT_SERVERS

__all__ = [
    "IntervalLabel",
    "StepKind",
    "StepRule",
    "STEP_RULES",
    "interval_choices",
    "hour_choices",
    "TimeWindow",
    "parse_time_of_day",
    "parse_hour",
    "format_hour",
    "ServiceConfig",
    "CouncilServer",
    "DEFAULT_SERVERS",
]
