"""Observation window models."""

import re
from datetime import date, datetime, time as dt_time, timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..errors import InvalidTimeOfDay
from .interval import IntervalLabel

_TIME_OF_DAY = re.compile(r"^([0-9]{2})(?::([0-9]{2})(?::([0-9]{2}))?)?$")

# Rendering used for end dates in legacy report queries
LEGACY_DATE_FORMAT = "%d-%b-%Y"


def parse_time_of_day(value: str) -> dt_time:
    """Parse ``HH``, ``HH:MM`` or ``HH:MM:SS`` into a time.

    Raises:
        InvalidTimeOfDay: If the value is not a clock string or is out of range
    """
    if not isinstance(value, str):
        raise InvalidTimeOfDay(value, "expected a string")

    match = _TIME_OF_DAY.match(value.strip())
    if not match:
        raise InvalidTimeOfDay(value)

    hour, minute, second = (int(part) if part else 0 for part in match.groups())
    if hour > 23:
        raise InvalidTimeOfDay(value, "hour must be between 00 and 23")
    if minute > 59 or second > 59:
        raise InvalidTimeOfDay(value, "minutes and seconds must be between 00 and 59")
    return dt_time(hour, minute, second)


def parse_hour(value: str) -> int:
    """Get the hour of a time-of-day string."""
    return parse_time_of_day(value).hour


def format_hour(hour: int) -> str:
    """Format an hour as a ``HH:00:00`` clock string."""
    return f"{hour:02d}:00:00"


class TimeWindow(BaseModel):
    """Start and end of one observation query."""
    model_config = ConfigDict(frozen=True)

    start_date: date
    start_time: str = Field(description="Start time of day, HH or HH:MM:SS")
    end_date: date
    end_time: str = Field(description="End time of day, HH or HH:MM:SS")
    interval: Optional[IntervalLabel] = Field(
        default=None, description="Interval the window was computed from"
    )

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_time_of_day(cls, value: str) -> str:
        parse_time_of_day(value)
        return value

    @model_validator(mode="after")
    def _check_order(self) -> "TimeWindow":
        if self.end <= self.start:
            raise ValueError(
                f"window end {self.end.isoformat()} is not after start {self.start.isoformat()}"
            )
        return self

    @property
    def start(self) -> datetime:
        """Window start as a naive local datetime."""
        return datetime.combine(self.start_date, parse_time_of_day(self.start_time))

    @property
    def end(self) -> datetime:
        """Window end as a naive local datetime."""
        return datetime.combine(self.end_date, parse_time_of_day(self.end_time))

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def format_end_date(self) -> str:
        """End date in the ``02-Aug-2014`` style of the legacy report queries."""
        return self.end_date.strftime(LEGACY_DATE_FORMAT)
