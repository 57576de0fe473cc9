"""
Target Commands

Commands for pointing at an equatorial target: alt/az position and the
angular rates needed to track it.
"""

import math
import time
from datetime import UTC, datetime, timedelta

import typer
from rich.live import Live

from altaz.api.astronomy.horizontal import apparent_alt_az_at
from altaz.api.astronomy.rates import apparent_alt_az_speeds_at
from altaz.api.core.exceptions import AltazError
from altaz.api.core.types import EquatorialCoordinates
from altaz.api.core.utils import format_degrees, format_hours, parse_declination, parse_instant, parse_right_ascension
from altaz.cli.utils.groups import SortedCommandsGroup
from altaz.cli.utils.observer import resolve_observer
from altaz.cli.utils.output import (
    console,
    horizontal_table,
    print_error,
    print_horizontal_table,
    print_json,
    print_rates_table,
)


app = typer.Typer(help="Target pointing commands", cls=SortedCommandsGroup)

RA_OPTION = typer.Option(..., "--ra", help="Right Ascension (e.g. 18h36m56s, 18:36:56 or 18.6156 hours)")
DEC_OPTION = typer.Option(..., "--dec", help="Declination (e.g. +38d47m01s, 38:47:01 or 38.7836 degrees)")
LAT_OPTION = typer.Option(None, "--lat", help="Observer latitude in degrees, North positive", envvar="ALTAZ_LATITUDE")
LON_OPTION = typer.Option(None, "--lon", help="Observer longitude in degrees, East positive", envvar="ALTAZ_LONGITUDE")
TIME_OPTION = typer.Option(None, "--time", "-t", help="ISO 8601 instant (default: now, UTC if no offset)")
JSON_OPTION = typer.Option(False, "--json", help="Output as JSON")


def _target(ra: str, dec: str) -> EquatorialCoordinates:
    return EquatorialCoordinates(parse_right_ascension(ra), parse_declination(dec))


def _instant(text: str | None) -> datetime:
    return parse_instant(text) if text else datetime.now(UTC)


@app.command("position", rich_help_panel="Pointing")
def position(
    ra: str = RA_OPTION,
    dec: str = DEC_OPTION,
    latitude: str | None = LAT_OPTION,
    longitude: str | None = LON_OPTION,
    when: str | None = TIME_OPTION,
    json_output: bool = JSON_OPTION,
    watch: bool = typer.Option(
        False, "--watch", "-w", help="Continuously update the position at the current time (not with --time or --json)"
    ),
    interval: float = typer.Option(1.0, help="Update interval for watch mode (seconds)"),
) -> None:
    """
    Compute the altitude and azimuth of a target.

    Example:
        altaz target position --ra 18h36m56s --dec +38d47m01s --lat 40.3349 --lon -74.6211
        altaz target position --ra 18:36:56 --dec 38:47:01 --time 2025-08-07T15:18:18Z --json
        altaz target position --ra 5.5 --dec 22.5 --watch
    """
    if watch and (when is not None or json_output):
        print_error("--watch always uses the current time and cannot be combined with --time or --json")
        raise typer.Exit(code=1)

    try:
        target = _target(ra, dec)
        location = resolve_observer(latitude, longitude)
        observer = location.to_geographic()

        if watch:
            try:
                with Live(console=console, refresh_per_second=4) as live:
                    while True:
                        coords = apparent_alt_az_at(target, observer, datetime.now(UTC))
                        live.update(horizontal_table(coords, title="Target Position (Live)"))
                        time.sleep(interval)
            except KeyboardInterrupt:
                console.print("\n[yellow]Stopped watching position[/yellow]")
                return

        instant = _instant(when)
        coords = apparent_alt_az_at(target, observer, instant)

        if json_output:
            print_json(
                {
                    "time": instant.isoformat(),
                    "observer": {"latitude": location.latitude, "longitude": location.longitude},
                    "target": {
                        "ra_radians": target.right_ascension,
                        "dec_radians": target.declination,
                        "ra_formatted": format_hours(target.right_ascension),
                        "dec_formatted": format_degrees(target.declination),
                    },
                    "horizontal": {
                        "altitude": coords.altitude,
                        "azimuth": coords.azimuth,
                        "altitude_degrees": coords.altitude_degrees,
                        "azimuth_degrees": coords.azimuth_degrees,
                    },
                }
            )
        else:
            console.print(f"[dim]{instant.isoformat()} from {location.name or 'observer'} ({observer})[/dim]")
            print_horizontal_table(coords)

    except AltazError as e:
        print_error(f"Failed to compute position: {e}")
        raise typer.Exit(code=1) from e


@app.command("rates", rich_help_panel="Pointing")
def rates(
    ra: str = RA_OPTION,
    dec: str = DEC_OPTION,
    latitude: str | None = LAT_OPTION,
    longitude: str | None = LON_OPTION,
    when: str | None = TIME_OPTION,
    epsilon: float = typer.Option(1.0, "--epsilon", "-e", help="Sampling window in seconds"),
    json_output: bool = JSON_OPTION,
) -> None:
    """
    Compute the altitude and azimuth tracking rates of a target.

    Example:
        altaz target rates --ra 18h36m56s --dec +38d47m01s --lat 40.3349 --lon -74.6211
        altaz target rates --ra 18:36:56 --dec 38:47:01 --epsilon 0.5 --json
    """
    try:
        target = _target(ra, dec)
        location = resolve_observer(latitude, longitude)
        instant = _instant(when)

        speeds = apparent_alt_az_speeds_at(target, location.to_geographic(), instant, timedelta(seconds=epsilon))

        if json_output:
            print_json(
                {
                    "time": instant.isoformat(),
                    "epsilon_seconds": epsilon,
                    # JSON has no nan, report unusable rates as null
                    "altitude_rate": speeds.altitude_rate if math.isfinite(speeds.altitude_rate) else None,
                    "azimuth_rate": speeds.azimuth_rate if math.isfinite(speeds.azimuth_rate) else None,
                }
            )
        else:
            print_rates_table(speeds)

    except AltazError as e:
        print_error(f"Failed to compute rates: {e}")
        raise typer.Exit(code=1) from e
