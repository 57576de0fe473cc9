"""
CLI Observer Resolution

Picks the observer location for a command: explicit --lat/--lon (or their
environment variables) first, then the saved location, then the default.
"""

from __future__ import annotations

import math

from altaz.api.core.exceptions import LocationNotSetError
from altaz.api.core.utils import parse_degrees
from altaz.api.location.observer import DEFAULT_LOCATION, ObserverLocation, get_observer_location
from altaz.cli.utils.output import print_warning


def resolve_observer(latitude: str | None, longitude: str | None) -> ObserverLocation:
    """
    Resolve the observer location for a command.

    Args:
        latitude: Latitude text from --lat, sexagesimal or decimal degrees
        longitude: Longitude text from --lon, sexagesimal or decimal degrees

    Returns:
        Observer location in degrees

    Raises:
        LocationNotSetError: If only one of latitude/longitude is given
        InvalidCoordinateError: If either value cannot be parsed
    """
    if latitude is None and longitude is None:
        location = get_observer_location()
        if location == DEFAULT_LOCATION:
            print_warning(f"No location configured, using {DEFAULT_LOCATION.name}")
        return location

    if latitude is None or longitude is None:
        raise LocationNotSetError("Both --lat and --lon must be given together")

    return ObserverLocation(
        latitude=math.degrees(parse_degrees(latitude, "latitude")),
        longitude=math.degrees(parse_degrees(longitude, "longitude")),
    )
