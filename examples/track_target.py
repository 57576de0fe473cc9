"""
Stepper Offset Tracking Example

Shows how a mount controller can turn alt/az pointing into stepper motor
offsets: the mount is first aimed at a known base star, then slewed to a
target by the difference in altitude and azimuth, and finally driven at the
target's tracking rates.
"""

import math
import time
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from altaz import (
    EquatorialCoordinates,
    GeographicCoordinates,
    apparent_alt_az_at,
    apparent_alt_az_speeds_at,
)


@dataclass
class TrackingParams:
    """What the controller knows about the mount and the sky."""

    observer: GeographicCoordinates
    target: EquatorialCoordinates
    base: EquatorialCoordinates  # Star the mount was aligned on
    base_time: datetime  # When the mount was pointed at the base star
    alt_steps_per_radian: float
    az_steps_per_radian: float


def step_offsets(params: TrackingParams, now: datetime) -> tuple[int, int]:
    """Steps needed to move from the base star to the target."""
    target_coords = apparent_alt_az_at(params.target, params.observer, now)
    base_coords = apparent_alt_az_at(params.base, params.observer, params.base_time)

    alt_delta = target_coords.altitude - base_coords.altitude
    # Take the short way round in azimuth
    az_delta = (target_coords.azimuth - base_coords.azimuth + math.pi) % (2 * math.pi) - math.pi

    return (
        round(alt_delta * params.alt_steps_per_radian),
        round(az_delta * params.az_steps_per_radian),
    )


def main() -> None:
    # 200 step motor, 16 microsteps, 100:1 worm gear
    steps_per_radian = 200 * 16 * 100 / (2 * math.pi)

    params = TrackingParams(
        observer=GeographicCoordinates.from_degrees(40.3349, -74.6211),
        target=EquatorialCoordinates.from_hours(18.6156, 38.7836),  # Vega
        base=EquatorialCoordinates.from_hours(20.6905, 45.2803),  # Deneb
        base_time=datetime.now(UTC) - timedelta(minutes=5),
        alt_steps_per_radian=steps_per_radian,
        az_steps_per_radian=steps_per_radian,
    )

    alt_steps, az_steps = step_offsets(params, datetime.now(UTC))
    print(f"Slew from base: {alt_steps:+d} alt steps, {az_steps:+d} az steps")

    try:
        while True:
            now = datetime.now(UTC)
            rates = apparent_alt_az_speeds_at(params.target, params.observer, now)
            print(
                f"{now:%H:%M:%S}  "
                f"alt {rates.altitude_rate * params.alt_steps_per_radian:+.3f} steps/s  "
                f"az {rates.azimuth_rate * params.az_steps_per_radian:+.3f} steps/s"
            )
            time.sleep(1.0)
    except KeyboardInterrupt:
        print("\nStopped tracking")


if __name__ == "__main__":
    main()
