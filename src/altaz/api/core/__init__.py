"""Core subpackage for shared types, utilities, constants and exceptions."""

from altaz.api.core.types import (
    EquatorialCoordinates,
    GeographicCoordinates,
    HorizontalCoordinates,
    HorizontalRates,
)
from altaz.api.core.utils import ensure_utc, wrap_radians


__all__ = [
    "EquatorialCoordinates",
    "GeographicCoordinates",
    "HorizontalCoordinates",
    "HorizontalRates",
    "ensure_utc",
    "wrap_radians",
]
