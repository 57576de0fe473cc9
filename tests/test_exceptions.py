"""
Unit tests for exceptions.py

Tests the exception hierarchy.
"""

import unittest

from altaz.api.core.exceptions import (
    AltazError,
    ConfigurationError,
    InvalidConfigurationError,
    InvalidCoordinateError,
    InvalidTimestampError,
    LocationError,
    LocationNotSetError,
)


class TestExceptionHierarchy(unittest.TestCase):
    """Test suite for exception inheritance"""

    def test_all_derive_from_base(self):
        """Test that every library error can be caught as AltazError"""
        for exc in (
            ConfigurationError,
            InvalidConfigurationError,
            InvalidCoordinateError,
            InvalidTimestampError,
            LocationError,
            LocationNotSetError,
        ):
            with self.subTest(exc=exc.__name__):
                self.assertTrue(issubclass(exc, AltazError))

    def test_configuration_family(self):
        self.assertTrue(issubclass(InvalidConfigurationError, ConfigurationError))

    def test_location_family(self):
        self.assertTrue(issubclass(LocationNotSetError, LocationError))

    def test_message(self):
        """Test that the message is kept"""
        with self.assertRaises(AltazError) as ctx:
            raise InvalidCoordinateError("bad angle")
        self.assertEqual(str(ctx.exception), "bad angle")


if __name__ == "__main__":
    unittest.main()
