"""
Sidereal Time

Derives Greenwich mean and apparent sidereal time from a civil timestamp.

The astronomical series (Julian Day, IAU 1982 mean sidereal time, IAU 1980
nutation and mean obliquity) come from ERFA, the library Astropy itself is
built on. Apparent sidereal time adds the equation of the equinoxes,
Δψ·cos(ε), to the mean value, which corrects for the ~20" periodic nutation
of Earth's axis. Apparent sidereal time is what the pointing functions use.

Every call recomputes from scratch; nothing is cached.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime

import deal
import erfa

from altaz.api.core.constants import SECONDS_PER_DAY, TAU
from altaz.api.core.utils import ensure_utc, wrap_radians


__all__ = [
    "apparent_sidereal_at",
    "apparent_sidereal_now",
    "julian_day_at",
    "mean_sidereal_at",
    "mean_sidereal_now",
]


def _julian_day_parts(instant: datetime) -> tuple[float, float]:
    # ERFA two-part date: the MJD zero point and the MJD with the time of day folded in
    dt = ensure_utc(instant)
    seconds = dt.hour * 3600 + dt.minute * 60 + dt.second + dt.microsecond / 1_000_000

    mjd_zero, mjd = erfa.cal2jd(dt.year, dt.month, dt.day)
    return float(mjd_zero), float(mjd) + seconds / SECONDS_PER_DAY


def julian_day_at(instant: datetime) -> float:
    """
    Calculate the Julian Day of an instant on the Gregorian calendar.

    The time of day is folded into a fractional day, with microseconds
    carried in the seconds. The sidereal functions hand ERFA the two parts
    separately, which keeps microsecond resolution that a single float
    Julian Day loses.

    Calendar fields are not validated here. ERFA rejects years before
    -4799 and months outside 1-12 and only warns about a bad day of month.

    Args:
        instant: Naive (assumed UTC) or timezone-aware datetime

    Returns:
        Julian Day
    """
    mjd_zero, mjd = _julian_day_parts(instant)
    return mjd_zero + mjd


@deal.post(lambda result: 0.0 <= result < TAU, message="Sidereal time must be in [0, 2π)")
def mean_sidereal_at(instant: datetime) -> float:
    """
    Greenwich mean sidereal time.

    Args:
        instant: Naive (assumed UTC) or timezone-aware datetime

    Returns:
        Mean sidereal time in radians (0 to 2π)
    """
    date1, date2 = _julian_day_parts(instant)
    return wrap_radians(float(erfa.gmst82(date1, date2)))


@deal.post(lambda result: 0.0 <= result < TAU, message="Sidereal time must be in [0, 2π)")
def apparent_sidereal_at(instant: datetime) -> float:
    """
    Greenwich apparent sidereal time.

    Mean sidereal time corrected by the nutation in longitude projected on
    the true equator, using the true obliquity (mean obliquity plus the
    nutation in obliquity).

    Args:
        instant: Naive (assumed UTC) or timezone-aware datetime

    Returns:
        Apparent sidereal time in radians (0 to 2π)
    """
    date1, date2 = _julian_day_parts(instant)

    nutation_longitude, nutation_obliquity = erfa.nut80(date1, date2)
    true_obliquity = float(erfa.obl80(date1, date2)) + float(nutation_obliquity)
    mean_sidereal = float(erfa.gmst82(date1, date2))

    return wrap_radians(mean_sidereal + float(nutation_longitude) * math.cos(true_obliquity))


def mean_sidereal_now() -> float:
    """Greenwich mean sidereal time at the current UTC time, in radians."""
    return mean_sidereal_at(datetime.now(UTC))


def apparent_sidereal_now() -> float:
    """Greenwich apparent sidereal time at the current UTC time, in radians."""
    return apparent_sidereal_at(datetime.now(UTC))
