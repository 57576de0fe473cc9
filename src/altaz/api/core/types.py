"""
Type definitions for altaz.

Immutable coordinate containers used throughout the library. Every angle is
stored in radians; the ``*_degrees`` properties and ``__str__`` exist for
display only. Nothing is validated or normalised on construction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import ARCSEC_PER_DEGREE, DEGREES_PER_HOUR_ANGLE


__all__ = [
    "EquatorialCoordinates",
    "GeographicCoordinates",
    "HorizontalCoordinates",
    "HorizontalRates",
]


@dataclass(frozen=True, slots=True)
class EquatorialCoordinates:
    """
    Equatorial coordinate system (RA/Dec).

    Fixed relative to the stars, so a target keeps the same equatorial
    coordinates while Earth rotates underneath it.

    Attributes:
        right_ascension: Right Ascension in radians (conventionally 0 to 2π)
        declination: Declination in radians (-π/2 to +π/2)
    """

    right_ascension: float
    declination: float

    @classmethod
    def from_degrees(cls, ra_degrees: float, dec_degrees: float) -> EquatorialCoordinates:
        """Build from RA and Dec both given in degrees."""
        return cls(math.radians(ra_degrees), math.radians(dec_degrees))

    @classmethod
    def from_hours(cls, ra_hours: float, dec_degrees: float) -> EquatorialCoordinates:
        """Build from RA in hours and Dec in degrees, the usual catalog form."""
        return cls(math.radians(ra_hours * DEGREES_PER_HOUR_ANGLE), math.radians(dec_degrees))

    @property
    def ra_hours(self) -> float:
        return math.degrees(self.right_ascension) / DEGREES_PER_HOUR_ANGLE

    @property
    def dec_degrees(self) -> float:
        return math.degrees(self.declination)

    def __str__(self) -> str:
        sign = "+" if self.dec_degrees >= 0 else "-"
        return f"RA {self.ra_hours:.4f}h, Dec {sign}{abs(self.dec_degrees):.4f}°"


@dataclass(frozen=True, slots=True)
class GeographicCoordinates:
    """
    Observer's geographic location on Earth.

    Attributes:
        latitude: Latitude in radians (positive=North, negative=South)
        longitude: Longitude in radians (positive=East, negative=West)
    """

    latitude: float
    longitude: float

    @classmethod
    def from_radians(cls, latitude: float, longitude: float) -> GeographicCoordinates:
        return cls(latitude, longitude)

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float) -> GeographicCoordinates:
        return cls(math.radians(latitude), math.radians(longitude))

    @property
    def latitude_degrees(self) -> float:
        return math.degrees(self.latitude)

    @property
    def longitude_degrees(self) -> float:
        return math.degrees(self.longitude)

    def __str__(self) -> str:
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude_degrees):.4f}°{lat_dir}, {abs(self.longitude_degrees):.4f}°{lon_dir}"


@dataclass(frozen=True, slots=True)
class HorizontalCoordinates:
    """
    Horizontal coordinate system (Alt/Az).

    Relative to the observer's local horizon; changes as Earth rotates.

    Attributes:
        altitude: Altitude in radians (-π/2 to +π/2, 0=horizon, π/2=zenith)
        azimuth: Azimuth in radians (0 to 2π, 0=North, π/2=East)
    """

    altitude: float
    azimuth: float

    @property
    def altitude_degrees(self) -> float:
        return math.degrees(self.altitude)

    @property
    def azimuth_degrees(self) -> float:
        return math.degrees(self.azimuth)

    def __str__(self) -> str:
        return f"Az {self.azimuth_degrees:.2f}°, Alt {self.altitude_degrees:.2f}°"


@dataclass(frozen=True, slots=True)
class HorizontalRates:
    """
    Angular velocity of a target in the horizontal frame.

    Kept apart from HorizontalCoordinates so rates are never mistaken for
    positions.

    Attributes:
        altitude_rate: Rate of change of altitude in radians per second
        azimuth_rate: Rate of change of azimuth in radians per second
    """

    altitude_rate: float
    azimuth_rate: float

    @property
    def altitude_arcsec_per_second(self) -> float:
        return math.degrees(self.altitude_rate) * ARCSEC_PER_DEGREE

    @property
    def azimuth_arcsec_per_second(self) -> float:
        return math.degrees(self.azimuth_rate) * ARCSEC_PER_DEGREE

    def __str__(self) -> str:
        return f'dAz {self.azimuth_arcsec_per_second:+.2f}"/s, dAlt {self.altitude_arcsec_per_second:+.2f}"/s'
