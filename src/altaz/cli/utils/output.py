"""
CLI Output Utilities

Rich console formatting utilities for CLI output.
"""

from __future__ import annotations

import json
import math
from typing import Any

from rich.console import Console
from rich.table import Table

from altaz.api.core.types import HorizontalCoordinates, HorizontalRates
from altaz.api.core.utils import format_degrees, format_hours


console = Console()

# Detect if we can safely use unicode symbols
_use_unicode = console.is_terminal and not console.legacy_windows


def print_success(message: str) -> None:
    """Print success message in green."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print error message in red."""
    console.print(f"[red]✗[/red] {message}", style="red")


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_info(message: str) -> None:
    """Print info message in blue."""
    info_icon = "ℹ" if _use_unicode else "i"
    console.print(f"[blue]{info_icon}[/blue] {message}")


def print_json(data: dict[str, Any]) -> None:
    """Print data as JSON."""
    console.print_json(json.dumps(data))


def _angle_text(radians: float) -> str:
    if not math.isfinite(radians):
        return str(radians)
    return f'{format_degrees(radians)} ({math.degrees(radians):.4f}°)'


def horizontal_table(coords: HorizontalCoordinates, title: str = "Target Position") -> Table:
    """Build a table showing altitude and azimuth."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Coordinate", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Radians", style="dim")

    table.add_row("Altitude", _angle_text(coords.altitude), f"{coords.altitude:.6f}")
    table.add_row("Azimuth", _angle_text(coords.azimuth), f"{coords.azimuth:.6f}")
    return table


def print_horizontal_table(coords: HorizontalCoordinates) -> None:
    """
    Print a target's horizontal coordinates in a formatted table.

    Args:
        coords: Altitude and azimuth in radians
    """
    console.print(horizontal_table(coords))


def print_rates_table(rates: HorizontalRates) -> None:
    """
    Print angular rates in a formatted table.

    Args:
        rates: Altitude and azimuth rates in rad/s
    """
    table = Table(title="Tracking Rates", show_header=True, header_style="bold magenta")
    table.add_column("Axis", style="cyan")
    table.add_column("arcsec/s", style="green")
    table.add_column("rad/s", style="dim")

    table.add_row("Altitude", f"{rates.altitude_arcsec_per_second:+.3f}", f"{rates.altitude_rate:+.6e}")
    table.add_row("Azimuth", f"{rates.azimuth_arcsec_per_second:+.3f}", f"{rates.azimuth_rate:+.6e}")
    console.print(table)


def print_sidereal_table(rows: list[tuple[str, float]]) -> None:
    """
    Print sidereal times in a formatted table.

    Args:
        rows: (label, angle in radians) pairs
    """
    table = Table(title="Sidereal Time", show_header=True, header_style="bold magenta")
    table.add_column("Kind", style="cyan")
    table.add_column("Time", style="green")
    table.add_column("Radians", style="dim")

    for label, radians in rows:
        table.add_row(label, format_hours(radians, precision=4), f"{radians:.6f}")
    console.print(table)
