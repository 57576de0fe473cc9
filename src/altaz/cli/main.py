"""
altaz CLI - Main Application

This is the main entry point for the altaz command-line interface.
"""

import logging

import typer
from dotenv import load_dotenv
from rich.console import Console

from altaz.cli.commands import location, sidereal, target
from altaz.cli.utils.groups import SortedCommandsGroup


# Create main app
app = typer.Typer(
    name="altaz",
    help="Alt-Az pointing and tracking rates for telescope mounts",
    add_completion=True,
    rich_markup_mode="rich",
    cls=SortedCommandsGroup,
)

# Console for rich output
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    altaz CLI

    Compute where an alt-az mount must point to reach an equatorial target.

    [bold green]Examples:[/bold green]

        altaz location set --lat 40.3349 --lon -74.6211
        altaz target position --ra 18h36m56s --dec +38d47m01s
        altaz target rates --ra 18h36m56s --dec +38d47m01s --epsilon 1
        altaz sidereal show --lon -74.6211

    [bold blue]Environment Variables:[/bold blue]

        ALTAZ_LATITUDE   - Default observer latitude (degrees)
        ALTAZ_LONGITUDE  - Default observer longitude (degrees)
        ALTAZ_CONFIG_DIR - Directory holding the saved observer location
    """
    load_dotenv()

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")


@app.command(rich_help_panel="Utilities")
def version() -> None:
    """Show the CLI version."""
    from altaz.cli import __version__

    console.print(f"[bold]altaz[/bold] version [cyan]{__version__}[/cyan]")


# Register command groups
app.add_typer(
    target.app,
    name="target",
    help="Target pointing commands",
    rich_help_panel="Pointing",
)
app.add_typer(
    sidereal.app,
    name="sidereal",
    help="Sidereal time commands",
    rich_help_panel="Time",
)
app.add_typer(
    location.app,
    name="location",
    help="Observer location commands",
    rich_help_panel="Configuration",
)


if __name__ == "__main__":
    app()
