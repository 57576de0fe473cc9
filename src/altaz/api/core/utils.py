"""
Utility functions for altaz unit conversions, parsing and formatting.

Sexagesimal handling is delegated to Astropy's ``Angle`` so that every
accepted text form (``18h36m56s``, ``18:36:56``, ``+38d47m01s``, decimals)
behaves exactly as it does elsewhere in the Astropy ecosystem.
"""

from __future__ import annotations

from datetime import UTC, datetime

from astropy import units as u
from astropy.coordinates import Angle

from .constants import TAU
from .exceptions import InvalidCoordinateError, InvalidTimestampError


__all__ = [
    "dms_to_degrees",
    "ensure_utc",
    "format_degrees",
    "format_hours",
    "hms_to_degrees",
    "parse_declination",
    "parse_degrees",
    "parse_instant",
    "parse_right_ascension",
    "wrap_radians",
]


def wrap_radians(angle: float) -> float:
    """
    Reduce an angle into [0, 2π).

    Python's ``%`` already returns a non-negative result for a positive
    modulus, but a tiny negative input rounds up to exactly 2π, which is
    folded back to 0. ``nan`` and ``inf`` come back as ``nan``.
    """
    wrapped = angle % TAU
    if wrapped >= TAU:
        return 0.0
    return wrapped


def ensure_utc(dt: datetime) -> datetime:
    """
    Normalise a datetime to UTC.

    Args:
        dt: Naive (assumed UTC) or timezone-aware datetime

    Returns:
        Timezone-aware datetime in UTC
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def parse_instant(text: str) -> datetime:
    """
    Parse an ISO 8601 timestamp into a UTC datetime.

    Args:
        text: Timestamp such as "2025-08-07T15:18:18Z" or "2025-08-07 11:18:18-04:00".
            A timestamp without offset is taken as UTC.

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        InvalidTimestampError: If the text is not a valid ISO 8601 timestamp
    """
    try:
        parsed = datetime.fromisoformat(text.strip())
    except ValueError as e:
        raise InvalidTimestampError(f"Invalid timestamp '{text}': expected ISO 8601") from e
    return ensure_utc(parsed)


def hms_to_degrees(hours: float, minutes: float = 0, seconds: float = 0) -> float:
    """
    Convert an hour angle from hours/minutes/seconds to decimal degrees.

    Args:
        hours: Hours (0-24)
        minutes: Minutes (0-59)
        seconds: Seconds (0-59)

    Returns:
        Angle in decimal degrees (0-360)
    """
    total_hours = hours + minutes / 60.0 + seconds / 3600.0
    angle = Angle(total_hours, unit=u.hourangle)
    return float(angle.degree)


def dms_to_degrees(degrees: float, minutes: float = 0, seconds: float = 0, sign: str = "+") -> float:
    """
    Convert an angle from degrees/minutes/seconds to decimal degrees.

    The result is negative when ``sign`` is "-" or ``degrees`` is negative,
    so both ``dms_to_degrees(10, 6, 42.8, "-")`` and
    ``dms_to_degrees(-10, 6, 42.8)`` give -10.1119°.

    Args:
        degrees: Whole degrees
        minutes: Arcminutes (0-59)
        seconds: Arcseconds (0-59)
        sign: '+' or '-'

    Returns:
        Angle in decimal degrees
    """
    total_degrees = abs(degrees) + minutes / 60.0 + seconds / 3600.0
    if sign == "-" or degrees < 0:
        total_degrees = -total_degrees
    angle = Angle(total_degrees, unit=u.deg)
    return float(angle.degree)


def _parse_angle(text: str, unit: u.UnitBase, field: str) -> float:
    # Astropy would silently convert "18h" into 270 degrees
    if unit == u.deg and "h" in text.lower():
        raise InvalidCoordinateError(f"Invalid {field} '{text}': expected degrees, not hours")
    try:
        angle = Angle(text.strip(), unit=unit)
    except (ValueError, TypeError) as e:
        raise InvalidCoordinateError(f"Invalid {field} '{text}': {e}") from e
    return float(angle.radian)


def parse_right_ascension(text: str) -> float:
    """
    Parse a right ascension into radians.

    Accepts "18h36m56s", "18:36:56", "18 36 56" or decimal hours ("18.6156").

    Raises:
        InvalidCoordinateError: If the text cannot be parsed
    """
    return _parse_angle(text, u.hourangle, "right ascension")


def parse_declination(text: str) -> float:
    """
    Parse a declination into radians.

    Accepts "+38d47m01s", "38:47:01", "-10 06 42.8" or decimal degrees.

    Raises:
        InvalidCoordinateError: If the text cannot be parsed
    """
    return _parse_angle(text, u.deg, "declination")


def parse_degrees(text: str, field: str = "angle") -> float:
    """Parse a sexagesimal or decimal degree value into radians."""
    return _parse_angle(text, u.deg, field)


def format_hours(radians: float, precision: int = 2) -> str:
    """
    Format an angle as hours, minutes and seconds.

    Args:
        radians: Angle in radians
        precision: Decimal places for seconds

    Returns:
        Formatted string (e.g., "12h 23m 54.08s")
    """
    angle = Angle(radians, unit=u.rad)
    return str(angle.to_string(unit=u.hourangle, sep=("h ", "m ", "s"), precision=precision, pad=True))


def format_degrees(radians: float, precision: int = 1) -> str:
    """
    Format an angle as signed degrees, arcminutes and arcseconds.

    Args:
        radians: Angle in radians
        precision: Decimal places for arcseconds

    Returns:
        Formatted string (e.g., "-10° 06' 42.8\"")
    """
    angle = Angle(radians, unit=u.rad)
    return str(angle.to_string(unit=u.deg, sep=("° ", "' ", '"'), precision=precision, pad=True, alwayssign=True))
