"""
Location Commands

Commands for managing the saved observer location.
"""

import math

import typer
from rich.table import Table

from altaz.api.core.exceptions import AltazError
from altaz.api.core.utils import format_degrees, parse_degrees
from altaz.api.location.observer import (
    DEFAULT_LOCATION,
    ObserverLocation,
    clear_observer_location,
    get_config_path,
    get_observer_location,
    set_observer_location,
)
from altaz.cli.utils.groups import SortedCommandsGroup
from altaz.cli.utils.output import console, print_error, print_info, print_json, print_success


app = typer.Typer(help="Observer location commands", cls=SortedCommandsGroup)


@app.command("set", rich_help_panel="Observer Location")
def set_location(
    latitude: str = typer.Option(..., "--lat", help="Latitude in degrees (-90 to +90, North is positive)"),
    longitude: str = typer.Option(..., "--lon", help="Longitude in degrees (-180 to +180, East is positive)"),
    name: str | None = typer.Option(None, "--name", "-n", help="Optional location name"),
) -> None:
    """
    Save the observer location used by pointing commands.

    Example:
        # Princeton, NJ
        altaz location set --lat 40.3349 --lon -74.6211 --name Princeton

        # Sexagesimal input
        altaz location set --lat "40 20 5.57" --lon "-74 37 16.06"
    """
    try:
        lat_deg = math.degrees(parse_degrees(latitude, "latitude"))
        lon_deg = math.degrees(parse_degrees(longitude, "longitude"))
    except AltazError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not -90 <= lat_deg <= 90:
        print_error("Latitude must be between -90 and +90 degrees")
        raise typer.Exit(code=1) from None
    if not -180 <= lon_deg <= 180:
        print_error("Longitude must be between -180 and +180 degrees")
        raise typer.Exit(code=1) from None

    set_observer_location(ObserverLocation(latitude=lat_deg, longitude=lon_deg, name=name))
    print_success(f"Location saved: {name or 'Unnamed'} ({lat_deg:.4f}°, {lon_deg:.4f}°)")


@app.command("show", rich_help_panel="Observer Location")
def show_location(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show the observer location used by pointing commands.

    Example:
        altaz location show
        altaz location show --json
    """
    location = get_observer_location()
    is_default = location == DEFAULT_LOCATION

    if json_output:
        print_json(
            {
                "latitude": location.latitude,
                "longitude": location.longitude,
                "name": location.name,
                "default": is_default,
                "config_path": str(get_config_path()),
            }
        )
        return

    table = Table(title="Observer Location", show_header=True, header_style="bold magenta")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Name", location.name or "Unnamed")
    table.add_row("Latitude", f"{format_degrees(math.radians(location.latitude))} ({location.latitude:.4f}°)")
    table.add_row("Longitude", f"{format_degrees(math.radians(location.longitude))} ({location.longitude:.4f}°)")
    console.print(table)

    if is_default:
        print_info("No location saved. Use 'altaz location set' to configure one.")


@app.command("clear", rich_help_panel="Observer Location")
def clear_location() -> None:
    """
    Delete the saved observer location.

    Example:
        altaz location clear
    """
    clear_observer_location(delete_saved=True)
    print_success("Saved location cleared")
