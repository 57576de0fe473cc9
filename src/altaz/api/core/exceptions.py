"""
Custom exception classes for altaz.

The computation core never raises these: numerical problems propagate as
``nan``/``inf``. They are raised by the parsing helpers, the observer
location configuration and the command line interface.
"""

from __future__ import annotations


__all__ = [
    "AltazError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "InvalidCoordinateError",
    "InvalidTimestampError",
    "LocationError",
    "LocationNotSetError",
]


class AltazError(Exception):
    """
    Base exception for all altaz errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch every library error in one place.
    """

    pass


class InvalidCoordinateError(AltazError):
    """
    Raised when an angle cannot be interpreted.

    This occurs when parsing text such as:
    - Malformed sexagesimal strings ("18h61m", "abc")
    - Hour markers in a degree field ("18h" given as a declination)
    """

    pass


class InvalidTimestampError(AltazError):
    """Raised when a timestamp string is not valid ISO 8601."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(AltazError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when a configuration file exists but its content is invalid."""

    pass


# ============================================================================
# Location/Observer Exceptions
# ============================================================================


class LocationError(AltazError):
    """Base exception for location-related errors."""

    pass


class LocationNotSetError(LocationError):
    """Raised when only one of latitude/longitude is supplied."""

    pass
