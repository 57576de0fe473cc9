"""
altaz: Alt-Az Pointing for Telescope Mounts

Converts equatorial coordinates (RA/Dec) into the altitude and azimuth an
alt-azimuth mount must point at, for an observer at a given place and time,
together with the angular speeds needed to keep tracking the target.

All angles are radians and all rates radians per second.

Example:
    >>> from datetime import UTC, datetime, timedelta
    >>> from altaz import EquatorialCoordinates, GeographicCoordinates
    >>> from altaz import apparent_alt_az_at, apparent_alt_az_speeds_at
    >>> vega = EquatorialCoordinates.from_hours(18.6156, 38.7836)
    >>> site = GeographicCoordinates.from_degrees(40.3349, -74.6211)
    >>> now = datetime.now(UTC)
    >>> target = apparent_alt_az_at(vega, site, now)
    >>> speeds = apparent_alt_az_speeds_at(vega, site, now, timedelta(seconds=1))
"""

from altaz.api.astronomy.horizontal import apparent_alt_az_at, horizontal_from_equatorial
from altaz.api.astronomy.rates import apparent_alt_az_speeds_at
from altaz.api.astronomy.sidereal import (
    apparent_sidereal_at,
    apparent_sidereal_now,
    julian_day_at,
    mean_sidereal_at,
    mean_sidereal_now,
)
from altaz.api.core.exceptions import (
    AltazError,
    InvalidCoordinateError,
    InvalidTimestampError,
)
from altaz.api.core.types import (
    EquatorialCoordinates,
    GeographicCoordinates,
    HorizontalCoordinates,
    HorizontalRates,
)


__version__ = "0.1.0"

__all__ = [
    "AltazError",
    "EquatorialCoordinates",
    "GeographicCoordinates",
    "HorizontalCoordinates",
    "HorizontalRates",
    "InvalidCoordinateError",
    "InvalidTimestampError",
    "__version__",
    "apparent_alt_az_at",
    "apparent_alt_az_speeds_at",
    "apparent_sidereal_at",
    "apparent_sidereal_now",
    "horizontal_from_equatorial",
    "julian_day_at",
    "mean_sidereal_at",
    "mean_sidereal_now",
]
