"""Typer group used by every altaz command group."""

from click import Context
from typer.core import TyperGroup


class SortedCommandsGroup(TyperGroup):
    """Lists commands alphabetically, with 'version' always last."""

    def list_commands(self, ctx: Context) -> list[str]:
        return sorted(super().list_commands(ctx), key=lambda name: (name == "version", name))
