"""
Physical and Astronomical Constants

Constants used throughout the altaz API for calculations.
"""

import math
from datetime import timedelta
from typing import Final


__all__ = [
    "ARCSEC_PER_DEGREE",
    "DEFAULT_RATE_EPSILON",
    "DEGREES_PER_HOUR_ANGLE",
    "SECONDS_PER_DAY",
    "TAU",
]


# Angles
TAU: Final[float] = 2.0 * math.pi
"""Full turn in radians."""

ARCSEC_PER_DEGREE: Final[float] = 3600.0
"""Arcseconds per degree."""

DEGREES_PER_HOUR_ANGLE: Final[float] = 15.0
"""Degrees of sky rotation per hour of Right Ascension."""

# Time
SECONDS_PER_DAY: Final[float] = 86400.0
"""SI seconds in a civil day."""

# Rate estimation
DEFAULT_RATE_EPSILON: Final[timedelta] = timedelta(seconds=1)
"""Sampling window used for angular rate estimation when none is given."""
