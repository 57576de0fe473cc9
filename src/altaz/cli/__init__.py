"""Command line interface for altaz."""

from altaz import __version__


__all__ = ["__version__"]
