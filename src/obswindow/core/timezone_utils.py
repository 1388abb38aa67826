"""Timezone utilities for observation windows.

Dashboard start times are New Zealand local time (the council servers report
NZST), while downstream tooling often wants UTC. This module provides the
conversions between the two.
"""

from datetime import datetime, tzinfo
from typing import Optional, Tuple
from zoneinfo import ZoneInfo
import structlog

from ..models.window import TimeWindow

logger = structlog.get_logger()

# Timezone constants
NZ_TZ = ZoneInfo("Pacific/Auckland")
UTC_TZ = ZoneInfo("UTC")


def ensure_local(dt: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Ensure a datetime is in local (New Zealand) time.

    Args:
        dt: Datetime that may be naive or in any timezone
        tz: Local zone, defaults to Pacific/Auckland

    Returns:
        Datetime converted to the local zone
    """
    tz = tz or NZ_TZ
    if dt.tzinfo is None:
        # Naive datetimes are dashboard times
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def ensure_utc(dt: datetime) -> datetime:
    """Ensure a datetime is in UTC, treating naive values as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC_TZ)
    return dt.astimezone(UTC_TZ)


def local_to_utc(local_dt: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Convert local datetime to UTC."""
    return ensure_local(local_dt, tz).astimezone(UTC_TZ)


def utc_to_local(utc_dt: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Convert UTC datetime to local time."""
    return ensure_utc(utc_dt).astimezone(tz or NZ_TZ)


def window_bounds(
    window: TimeWindow,
    tz: Optional[tzinfo] = None
) -> Tuple[datetime, datetime, datetime, datetime]:
    """Get the bounds of a window in local time and in UTC.

    Args:
        window: Window whose dates and times are local
        tz: Local zone, defaults to Pacific/Auckland

    Returns:
        Tuple of (start_local, end_local, start_utc, end_utc)
    """
    start_local = ensure_local(window.start, tz)
    end_local = ensure_local(window.end, tz)
    start_utc = start_local.astimezone(UTC_TZ)
    end_utc = end_local.astimezone(UTC_TZ)

    logger.debug(
        "Timezone conversion for window",
        start_local=start_local.isoformat(),
        end_local=end_local.isoformat(),
        start_utc=start_utc.isoformat(),
        end_utc=end_utc.isoformat()
    )

    return start_local, end_local, start_utc, end_utc
