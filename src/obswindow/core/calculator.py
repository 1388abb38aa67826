"""Interval end calculation.

Turns a start date, a start time of day and an interval label into the
observation window used to query a council time-series endpoint. Labels are
resolved once through ``STEP_RULES``; hour steps wrap the clock at midnight
and move the end date forward a day, every other step keeps the start time
and moves the date by calendar days, months or years.

Month and year steps use ``dateutil.relativedelta``, which clamps to the last
day of a shorter month: 31 January plus one month is 28 (or 29) February.
"""

from datetime import date, datetime, timedelta
from typing import Tuple, Union

import structlog
from dateutil.relativedelta import relativedelta

from ..errors import CalendarOverflow, InvalidStartDate
from ..models.interval import IntervalLabel, StepKind, StepRule
from ..models.window import TimeWindow, format_hour, parse_hour

logger = structlog.get_logger()

DateLike = Union[date, datetime, str]


def parse_interval(label: Union[IntervalLabel, str]) -> IntervalLabel:
    """Resolve an interval label, raising ``InvalidIntervalLabel`` if unknown."""
    return IntervalLabel.parse(label)


def _coerce_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidStartDate(value, str(e)) from e
    raise InvalidStartDate(value, f"unsupported type {type(value).__name__}")


def _advance_hours(start_date: date, start_hour: int, rule: StepRule, label: str) -> Tuple[date, str]:
    """Add whole hours to an hour of day, rolling the date at midnight."""
    end_hour = start_hour + rule.count
    days = 0
    if end_hour >= 24:
        end_hour -= 24
        days = 1
    return _shift(start_date, timedelta(days=days), label), format_hour(end_hour)


def _advance_calendar(start_date: date, rule: StepRule, label: str) -> date:
    if rule.kind is StepKind.DAYS:
        step = timedelta(days=rule.count)
    elif rule.kind is StepKind.MONTHS:
        step = relativedelta(months=rule.count)
    elif rule.kind is StepKind.YEARS:
        step = relativedelta(years=rule.count)
    else:
        raise TypeError(f"Not a calendar step: {rule.kind}")
    return _shift(start_date, step, label)


def _shift(start_date: date, step: Union[timedelta, relativedelta], label: str) -> date:
    # timedelta overflows with OverflowError, relativedelta with ValueError
    try:
        return start_date + step
    except (OverflowError, ValueError) as e:
        raise CalendarOverflow(start_date, label) from e


def compute_window(
    interval_label: Union[IntervalLabel, str],
    start_date: DateLike,
    start_time_of_day: str
) -> TimeWindow:
    """Compute the observation window for an interval.

    Args:
        interval_label: One of the dashboard intervals, e.g. ``"6 hours"``
        start_date: Calendar date (or ``YYYY-MM-DD`` string) the window starts on
        start_time_of_day: Start hour as ``HH`` or ``HH:MM:SS``

    Returns:
        TimeWindow bounding the requested report

    Raises:
        InvalidIntervalLabel: If the label is not a known interval
        InvalidStartDate: If the start date cannot be read
        InvalidTimeOfDay: If the start time has no valid two-digit hour
        CalendarOverflow: If the end date cannot be represented
    """
    interval = parse_interval(interval_label)
    start = _coerce_date(start_date)
    start_hour = parse_hour(start_time_of_day)
    rule = interval.rule

    if interval.is_hourly:
        end_date, end_time = _advance_hours(start, start_hour, rule, interval.value)
    else:
        end_date = _advance_calendar(start, rule, interval.value)
        end_time = start_time_of_day

    window = TimeWindow(
        start_date=start,
        start_time=start_time_of_day,
        end_date=end_date,
        end_time=end_time,
        interval=interval,
    )

    logger.debug(
        "Computed observation window",
        interval=interval.value,
        start=window.start.isoformat(),
        end=window.end.isoformat()
    )

    return window
