"""
Observer Location Management

Stores the observer's geographic location between command line sessions so
that pointing commands do not need --lat/--lon every time.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

import deal

from altaz.api.core.exceptions import InvalidConfigurationError
from altaz.api.core.types import GeographicCoordinates


logger = logging.getLogger(__name__)


__all__ = [
    "CONFIG_DIR_ENV",
    "DEFAULT_LOCATION",
    "ObserverLocation",
    "clear_observer_location",
    "get_config_path",
    "get_observer_location",
    "load_location",
    "save_location",
    "set_observer_location",
]

CONFIG_DIR_ENV = "ALTAZ_CONFIG_DIR"


@dataclass(frozen=True)
class ObserverLocation:
    """Observer's geographic location."""

    latitude: float  # Degrees north (negative for south)
    longitude: float  # Degrees east (negative for west)
    name: str | None = None  # Optional location name

    def to_geographic(self) -> GeographicCoordinates:
        """Radian coordinates for the computation functions."""
        return GeographicCoordinates.from_degrees(self.latitude, self.longitude)


# Default location (Greenwich Observatory)
DEFAULT_LOCATION = ObserverLocation(
    latitude=51.4769,
    longitude=-0.0005,
    name="Greenwich Observatory (default)",
)

# Current location, loaded lazily from the config file
_current_location: ObserverLocation | None = None


def get_config_path() -> Path:
    """
    Get path to the observer location config file.

    The directory comes from ``$ALTAZ_CONFIG_DIR`` when set, otherwise
    ``~/.config/altaz``. It is created if missing.
    """
    env_dir = os.environ.get(CONFIG_DIR_ENV)
    config_dir = Path(env_dir) if env_dir else Path.home() / ".config" / "altaz"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / "observer_location.json"


@deal.pre(lambda location: -90 <= location.latitude <= 90, message="Latitude must be -90 to +90")  # type: ignore[misc,arg-type]
@deal.pre(lambda location: -180 <= location.longitude <= 180, message="Longitude must be -180 to +180")  # type: ignore[misc,arg-type]
def save_location(location: ObserverLocation) -> None:
    """
    Save observer location to config file.

    Args:
        location: Observer location to save
    """
    config_path = get_config_path()
    logger.info(
        f"Saving observer location: {location.name or 'Unnamed'} ({location.latitude:.4f}, {location.longitude:.4f})"
    )

    data = {
        "latitude": location.latitude,
        "longitude": location.longitude,
        "name": location.name,
    }

    with config_path.open("w") as f:
        json.dump(data, f, indent=2)

    logger.debug(f"Location saved to {config_path}")


def _parse_location(data: object) -> ObserverLocation:
    if not isinstance(data, dict):
        raise InvalidConfigurationError("Location config must be a JSON object")
    if "latitude" not in data or "longitude" not in data:
        raise InvalidConfigurationError("Missing required fields: latitude and/or longitude")

    try:
        latitude = float(data["latitude"])
        longitude = float(data["longitude"])
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(f"Latitude and longitude must be numbers: {e}") from e

    if not -90 <= latitude <= 90:
        raise InvalidConfigurationError(f"Invalid latitude: {latitude} (must be -90 to 90)")
    if not -180 <= longitude <= 180:
        raise InvalidConfigurationError(f"Invalid longitude: {longitude} (must be -180 to 180)")

    name = data.get("name")
    return ObserverLocation(latitude=latitude, longitude=longitude, name=str(name) if name is not None else None)


@deal.post(lambda result: result is not None, message="Location must be returned")
def load_location() -> ObserverLocation:
    """
    Load observer location from config file.

    Returns:
        Saved observer location, or the default if none is saved or the
        file cannot be used
    """
    config_path = get_config_path()

    if not config_path.exists():
        logger.debug(f"No saved location found at {config_path}")
        return DEFAULT_LOCATION

    try:
        with config_path.open("r") as f:
            data = json.load(f)
        location = _parse_location(data)
    except (json.JSONDecodeError, InvalidConfigurationError, OSError) as e:
        logger.warning(f"Failed to load location from {config_path}: {e}. Using default location.")
        return DEFAULT_LOCATION

    logger.info(
        f"Loaded observer location: {location.name or 'Unnamed'} ({location.latitude:.4f}, {location.longitude:.4f})"
    )
    return location


def get_observer_location() -> ObserverLocation:
    """
    Get current observer location.

    Returns the cached location if set, otherwise loads it from config.
    """
    global _current_location

    if _current_location is None:
        _current_location = load_location()

    return _current_location


@deal.pre(lambda location, save=True: -90 <= location.latitude <= 90, message="Latitude must be -90 to +90")  # type: ignore[misc,arg-type]
@deal.pre(lambda location, save=True: -180 <= location.longitude <= 180, message="Longitude must be -180 to +180")  # type: ignore[misc,arg-type]
def set_observer_location(location: ObserverLocation, save: bool = True) -> None:
    """
    Set current observer location.

    Args:
        location: New observer location
        save: Whether to save to config file (default: True)
    """
    global _current_location
    _current_location = location

    if save:
        save_location(location)


def clear_observer_location(delete_saved: bool = False) -> None:
    """
    Clear the cached observer location.

    Args:
        delete_saved: Also remove the saved config file
    """
    global _current_location
    _current_location = None

    if delete_saved:
        config_path = get_config_path()
        if config_path.exists():
            config_path.unlink()
            logger.info(f"Removed saved location {config_path}")
