"""
Equatorial to Horizontal Transform

Converts a target's right ascension/declination into altitude/azimuth for an
observer, given Greenwich sidereal time. All angles are radians.

Azimuth is measured from north through east. The azimuth formula divides by
cos(altitude) and cos(latitude), so it is singular for a target exactly at
the zenith or nadir and for an observer exactly at a pole. No guard is
applied: those configurations yield ``nan``/``inf`` or a meaningless but
finite azimuth, and never raise.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime

import numpy as np

from altaz.api.astronomy.sidereal import apparent_sidereal_at
from altaz.api.core.types import EquatorialCoordinates, GeographicCoordinates, HorizontalCoordinates
from altaz.api.core.utils import wrap_radians


logger = logging.getLogger(__name__)


__all__ = [
    "altitude_from_equatorial",
    "apparent_alt_az_at",
    "azimuth_from_equatorial",
    "horizontal_from_equatorial",
    "hour_angle_from_observer_longitude",
]


def hour_angle_from_observer_longitude(greenwich_sidereal: float, longitude: float, right_ascension: float) -> float:
    """
    Local hour angle of a target.

    Local sidereal time is Greenwich sidereal time plus the (east-positive)
    longitude; the hour angle is local sidereal time minus right ascension.
    Astronomical-algorithms libraries that take west-positive longitudes
    subtract instead, which gives the wrong sign with east-positive input.

    Args:
        greenwich_sidereal: Greenwich sidereal time in radians
        longitude: Observer longitude in radians (positive east)
        right_ascension: Target right ascension in radians

    Returns:
        Hour angle in radians (0 to 2π)
    """
    local_sidereal = greenwich_sidereal + longitude
    return wrap_radians(local_sidereal - right_ascension)


def altitude_from_equatorial(hour_angle: float, declination: float, latitude: float) -> float:
    """Altitude in radians from hour angle, declination and observer latitude."""
    sin_alt = math.sin(declination) * math.sin(latitude) + math.cos(declination) * math.cos(latitude) * math.cos(
        hour_angle
    )
    # Rounding can push the sine a hair past ±1 at the zenith; nan passes through
    return float(np.arcsin(np.clip(sin_alt, -1.0, 1.0)))


def azimuth_from_equatorial(hour_angle: float, declination: float, latitude: float, altitude: float) -> float:
    """
    Azimuth in radians (-π to π) from hour angle, declination, latitude and altitude.

    The altitude must be the one computed for the same inputs, see
    ``altitude_from_equatorial``.
    """
    cos_alt = np.float64(math.cos(altitude))
    cos_lat = np.float64(math.cos(latitude))

    with np.errstate(divide="ignore", invalid="ignore"):
        y = -(math.cos(declination) * math.sin(hour_angle)) / cos_alt
        x = (math.sin(declination) - math.sin(altitude) * math.sin(latitude)) / (cos_alt * cos_lat)

    return float(np.arctan2(y, x))


def horizontal_from_equatorial(
    target: EquatorialCoordinates, observer: GeographicCoordinates, sidereal: float
) -> HorizontalCoordinates:
    """
    Horizontal coordinates of a target at a given Greenwich sidereal time.

    Args:
        target: Target equatorial coordinates
        observer: Observer geographic coordinates
        sidereal: Greenwich sidereal time in radians

    Returns:
        Altitude and azimuth, azimuth reduced to 0-2π
    """
    hour_angle = hour_angle_from_observer_longitude(sidereal, observer.longitude, target.right_ascension)
    altitude = altitude_from_equatorial(hour_angle, target.declination, observer.latitude)
    azimuth = azimuth_from_equatorial(hour_angle, target.declination, observer.latitude, altitude)

    return HorizontalCoordinates(altitude=altitude, azimuth=wrap_radians(azimuth))


def apparent_alt_az_at(
    target: EquatorialCoordinates, observer: GeographicCoordinates, instant: datetime
) -> HorizontalCoordinates:
    """
    Altitude and azimuth of a target for an observer at an instant.

    Uses apparent sidereal time, so the result includes the nutation
    correction. This is the main pointing entry point for an alt-az mount.

    Args:
        target: Target equatorial coordinates
        observer: Observer geographic coordinates
        instant: Naive (assumed UTC) or timezone-aware datetime

    Returns:
        Horizontal coordinates in radians

    Example:
        Vega (RA 18h36m56s, Dec +38°47'01") from 40.33°N 74.62°W at
        2025-08-07 15:18:18 UTC is just below the northern horizon, at
        altitude -10.1° and azimuth 9.4°.
    """
    sidereal = apparent_sidereal_at(instant)
    coords = horizontal_from_equatorial(target, observer, sidereal)
    logger.debug(f"{target} seen from {observer} at {instant.isoformat()}: {coords}")
    return coords
