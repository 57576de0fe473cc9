"""
Horizontal Angular Rates

Estimates how fast a fixed target moves in altitude and azimuth as Earth
rotates, for driving an alt-az mount at tracking speed.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta

from altaz.api.astronomy.horizontal import horizontal_from_equatorial
from altaz.api.astronomy.sidereal import apparent_sidereal_at
from altaz.api.core.constants import DEFAULT_RATE_EPSILON
from altaz.api.core.types import EquatorialCoordinates, GeographicCoordinates, HorizontalRates


logger = logging.getLogger(__name__)


__all__ = ["apparent_alt_az_speeds_at"]


def apparent_alt_az_speeds_at(
    target: EquatorialCoordinates,
    observer: GeographicCoordinates,
    instant: datetime,
    epsilon: timedelta = DEFAULT_RATE_EPSILON,
) -> HorizontalRates:
    """
    Altitude and azimuth angular speeds in rad/s.

    Uses a symmetric difference: the target is placed at ``instant - epsilon/2``
    and ``instant + epsilon/2`` using apparent sidereal time, and the change
    in each angle is divided by ``epsilon``.

    Azimuth is not unwrapped. If the target crosses north (azimuth 0/2π)
    inside the sampling window, the azimuth rate comes out near ±2π/epsilon.

    Args:
        target: Target equatorial coordinates
        observer: Observer geographic coordinates
        instant: Naive (assumed UTC) or timezone-aware datetime
        epsilon: Sampling window, around one second is typical

    Returns:
        Angular rates in radians per second. Both rates are ``nan`` when
        ``epsilon`` is zero.
    """
    epsilon_seconds = epsilon.total_seconds()
    if epsilon_seconds == 0:
        logger.warning("Zero sampling window for rate estimation, returning nan rates")
        return HorizontalRates(altitude_rate=math.nan, azimuth_rate=math.nan)

    half_epsilon = epsilon / 2

    sidereal_before = apparent_sidereal_at(instant - half_epsilon)
    sidereal_after = apparent_sidereal_at(instant + half_epsilon)

    before = horizontal_from_equatorial(target, observer, sidereal_before)
    after = horizontal_from_equatorial(target, observer, sidereal_after)

    rates = HorizontalRates(
        altitude_rate=(after.altitude - before.altitude) / epsilon_seconds,
        azimuth_rate=(after.azimuth - before.azimuth) / epsilon_seconds,
    )
    logger.debug(f"Rates for {target} over {epsilon_seconds}s at {instant.isoformat()}: {rates}")
    return rates
