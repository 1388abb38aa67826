"""Core window calculation and request building."""

from .calculator import compute_window, parse_interval
from .query import observation_params, observation_url, site_list_url, temporal_filter
from .timezone_utils import (
    ensure_local,
    ensure_utc,
    local_to_utc,
    utc_to_local,
    window_bounds,
    NZ_TZ,
    UTC_TZ
)

__all__ = [
    "compute_window",
    "parse_interval",
    "observation_params",
    "observation_url",
    "site_list_url",
    "temporal_filter",
    "ensure_local",
    "ensure_utc",
    "local_to_utc",
    "utc_to_local",
    "window_bounds",
    "NZ_TZ",
    "UTC_TZ"
]
