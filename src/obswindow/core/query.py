"""Hilltop WFS and SOS request URLs.

Only builds the URLs; sending them and parsing the WaterML that comes back is
left to the caller.
"""

from typing import Dict, Optional
from urllib.parse import quote, urlencode

import structlog

from ..models.config import CouncilServer
from ..models.window import TimeWindow

logger = structlog.get_logger()

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _encode(params: Dict[str, str]) -> str:
    # Hilltop wants %20 for spaces, not +
    return urlencode(params, quote_via=quote, safe=":,/")


def site_list_params() -> Dict[str, str]:
    """Parameters of a WFS GetFeature request for the site list."""
    return {
        "service": "WFS",
        "request": "GetFeature",
        "typename": "SiteList",
    }


def site_list_url(server: CouncilServer) -> str:
    """URL listing the sites (with gml:pos locations) a server publishes."""
    return f"{server.service_url}?{_encode(site_list_params())}"


def temporal_filter(window: TimeWindow) -> str:
    """SOS temporal filter covering a window."""
    start = window.start.strftime(TIMESTAMP_FORMAT)
    end = window.end.strftime(TIMESTAMP_FORMAT)
    return f"om:phenomenonTime,{start}/{end}"


def observation_params(
    site: str,
    measurement: str,
    window: Optional[TimeWindow] = None
) -> Dict[str, str]:
    """Parameters of an SOS GetObservation request.

    Args:
        site: Site name, used as the feature of interest
        measurement: Observed property, e.g. ``"Flow"``
        window: Time range to request; without one the server returns its
            latest value

    Raises:
        ValueError: If the site or measurement is blank
    """
    if not site or not site.strip():
        raise ValueError("Site name must not be empty")
    if not measurement or not measurement.strip():
        raise ValueError("Measurement name must not be empty")

    params = {
        "service": "SOS",
        "request": "GetObservation",
        "featureOfInterest": site.strip(),
        "observedProperty": measurement.strip(),
    }
    if window is not None:
        params["temporalFilter"] = temporal_filter(window)
    return params


def observation_url(
    server: CouncilServer,
    site: str,
    measurement: str,
    window: Optional[TimeWindow] = None
) -> str:
    """URL of an SOS GetObservation request against a council server."""
    url = f"{server.service_url}?{_encode(observation_params(site, measurement, window))}"
    logger.debug(
        "Built observation request",
        server=server.name,
        site=site,
        measurement=measurement,
        url=url
    )
    return url
