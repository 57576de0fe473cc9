"""
Sidereal Time Commands

Commands for showing Greenwich and local sidereal time.
"""

import math
from datetime import UTC, datetime

import typer

from altaz.api.astronomy.sidereal import apparent_sidereal_at, julian_day_at, mean_sidereal_at
from altaz.api.core.exceptions import AltazError
from altaz.api.core.utils import format_hours, parse_degrees, parse_instant, wrap_radians
from altaz.cli.utils.groups import SortedCommandsGroup
from altaz.cli.utils.output import console, print_error, print_json, print_sidereal_table


app = typer.Typer(help="Sidereal time commands", cls=SortedCommandsGroup)


@app.command("show", rich_help_panel="Time")
def show(
    when: str | None = typer.Option(None, "--time", "-t", help="ISO 8601 instant (default: now, UTC if no offset)"),
    longitude: str | None = typer.Option(
        None, "--lon", help="Longitude in degrees, East positive, to add local sidereal time", envvar="ALTAZ_LONGITUDE"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show mean and apparent Greenwich sidereal time.

    With a longitude, the local apparent sidereal time is shown as well.

    Example:
        altaz sidereal show
        altaz sidereal show --time 2025-08-07T15:18:18Z
        altaz sidereal show --lon -74.6211 --json
    """
    try:
        instant = parse_instant(when) if when else datetime.now(UTC)
        mean = mean_sidereal_at(instant)
        apparent = apparent_sidereal_at(instant)
        local = wrap_radians(apparent + parse_degrees(longitude, "longitude")) if longitude is not None else None

        if json_output:
            data: dict[str, object] = {
                "time": instant.isoformat(),
                "julian_day": julian_day_at(instant),
                "mean_sidereal": mean,
                "apparent_sidereal": apparent,
                "mean_sidereal_hours": math.degrees(mean) / 15.0,
                "apparent_sidereal_hours": math.degrees(apparent) / 15.0,
            }
            if local is not None:
                data["local_apparent_sidereal"] = local
                data["local_apparent_sidereal_formatted"] = format_hours(local, precision=4)
            print_json(data)
        else:
            console.print(f"[dim]{instant.isoformat()} (JD {julian_day_at(instant):.6f})[/dim]")
            rows = [("Greenwich mean", mean), ("Greenwich apparent", apparent)]
            if local is not None:
                rows.append(("Local apparent", local))
            print_sidereal_table(rows)

    except AltazError as e:
        print_error(f"Failed to compute sidereal time: {e}")
        raise typer.Exit(code=1) from e
