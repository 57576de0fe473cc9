"""
Tests for the altaz command line interface.

Commands are invoked in-process through Typer's CliRunner with the config
directory pointed at a temporary directory.
"""

import json
import math
import tempfile
import unittest

from typer.testing import CliRunner

from altaz import __version__
from altaz.api.core.utils import dms_to_degrees, hms_to_degrees
from altaz.api.location.observer import CONFIG_DIR_ENV, clear_observer_location
from altaz.cli.main import app


VEGA_ARGS = ["--ra", "18h36m56s", "--dec", "+38d47m01s"]
PRINCETON_ARGS = ["--lat", "40:20:05.57", "--lon", "-74:37:16.06"]
KNOWN_TIME_ARGS = ["--time", "2025-08-07T15:18:18Z"]


class CliTestCase(unittest.TestCase):
    """Base class isolating the saved location and environment"""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.runner = CliRunner()
        self.env = {CONFIG_DIR_ENV: self.temp_dir.name, "ALTAZ_LATITUDE": None, "ALTAZ_LONGITUDE": None}
        clear_observer_location()

    def tearDown(self):
        clear_observer_location()
        self.temp_dir.cleanup()

    def invoke(self, *args: str):
        return self.runner.invoke(app, list(args), env=self.env)


class TestTargetCommands(CliTestCase):
    """Test suite for 'altaz target'"""

    def test_position_json(self):
        result = self.invoke("target", "position", *VEGA_ARGS, *PRINCETON_ARGS, *KNOWN_TIME_ARGS, "--json")
        self.assertEqual(result.exit_code, 0, result.output)

        data = json.loads(result.output)
        self.assertAlmostEqual(
            data["horizontal"]["altitude"], math.radians(dms_to_degrees(-10, 6, 42.8)), delta=0.01
        )
        self.assertAlmostEqual(data["horizontal"]["azimuth"], math.radians(dms_to_degrees(9, 23, 31.1)), delta=0.01)
        self.assertEqual(data["time"], "2025-08-07T15:18:18+00:00")

    def test_position_table(self):
        result = self.invoke("target", "position", *VEGA_ARGS, *PRINCETON_ARGS, *KNOWN_TIME_ARGS)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Altitude", result.output)
        self.assertIn("Azimuth", result.output)

    def test_position_uses_env_location(self):
        """Test that ALTAZ_LATITUDE/ALTAZ_LONGITUDE are picked up"""
        self.env.update({"ALTAZ_LATITUDE": "40:20:05.57", "ALTAZ_LONGITUDE": "-74:37:16.06"})
        with_env = self.invoke("target", "position", *VEGA_ARGS, *KNOWN_TIME_ARGS, "--json")
        self.env.update({"ALTAZ_LATITUDE": None, "ALTAZ_LONGITUDE": None})
        with_args = self.invoke("target", "position", *VEGA_ARGS, *PRINCETON_ARGS, *KNOWN_TIME_ARGS, "--json")
        self.assertEqual(json.loads(with_env.output)["horizontal"], json.loads(with_args.output)["horizontal"])

    def test_position_default_location_warns(self):
        result = self.invoke("target", "position", *VEGA_ARGS, *KNOWN_TIME_ARGS)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("No location configured", result.output)

    def test_position_requires_both_lat_and_lon(self):
        result = self.invoke("target", "position", *VEGA_ARGS, "--lat", "40.0")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("--lat and --lon", result.output)

    def test_position_invalid_ra(self):
        result = self.invoke("target", "position", "--ra", "bogus", "--dec", "0", *PRINCETON_ARGS)
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Failed to compute position", result.output)

    def test_position_invalid_time(self):
        result = self.invoke("target", "position", *VEGA_ARGS, *PRINCETON_ARGS, "--time", "soon")
        self.assertEqual(result.exit_code, 1)

    def test_position_watch_rejects_time(self):
        result = self.invoke("target", "position", *VEGA_ARGS, *PRINCETON_ARGS, *KNOWN_TIME_ARGS, "--watch")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("--watch", result.output)

    def test_position_watch_rejects_json(self):
        result = self.invoke("target", "position", *VEGA_ARGS, *PRINCETON_ARGS, "--watch", "--json")
        self.assertEqual(result.exit_code, 1)

    def test_rates_json(self):
        result = self.invoke("target", "rates", *VEGA_ARGS, *PRINCETON_ARGS, *KNOWN_TIME_ARGS, "--json")
        self.assertEqual(result.exit_code, 0, result.output)

        data = json.loads(result.output)
        self.assertEqual(data["epsilon_seconds"], 1.0)
        self.assertAlmostEqual(data["altitude_rate"], 8.73e-6, delta=1e-5)
        self.assertAlmostEqual(data["azimuth_rate"], 5.76e-5, delta=1e-5)

    def test_rates_zero_epsilon_is_null(self):
        result = self.invoke(
            "target", "rates", *VEGA_ARGS, *PRINCETON_ARGS, *KNOWN_TIME_ARGS, "--epsilon", "0", "--json"
        )
        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.stdout)
        self.assertIsNone(data["altitude_rate"])
        self.assertIsNone(data["azimuth_rate"])

    def test_rates_table(self):
        result = self.invoke("target", "rates", *VEGA_ARGS, *PRINCETON_ARGS, *KNOWN_TIME_ARGS)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Tracking Rates", result.output)


class TestSiderealCommands(CliTestCase):
    """Test suite for 'altaz sidereal'"""

    def test_show_json(self):
        result = self.invoke("sidereal", "show", *KNOWN_TIME_ARGS, "--json")
        self.assertEqual(result.exit_code, 0, result.output)

        data = json.loads(result.output)
        self.assertAlmostEqual(data["mean_sidereal"], math.radians(hms_to_degrees(12, 23, 53.8163)), delta=1e-4)
        self.assertAlmostEqual(data["apparent_sidereal"], math.radians(hms_to_degrees(12, 23, 54.0787)), delta=1e-4)
        self.assertNotIn("local_apparent_sidereal", data)

    def test_show_with_longitude(self):
        result = self.invoke("sidereal", "show", *KNOWN_TIME_ARGS, "--lon", "-74:37:16.06", "--json")
        self.assertEqual(result.exit_code, 0, result.output)

        data = json.loads(result.output)
        expected = (data["apparent_sidereal"] + math.radians(dms_to_degrees(-74, 37, 16.06))) % (2 * math.pi)
        self.assertAlmostEqual(data["local_apparent_sidereal"], expected, places=9)

    def test_show_table(self):
        result = self.invoke("sidereal", "show", *KNOWN_TIME_ARGS)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Greenwich apparent", result.output)


class TestLocationCommands(CliTestCase):
    """Test suite for 'altaz location'"""

    def test_set_and_show(self):
        result = self.invoke("location", "set", "--lat", "40.3349", "--lon", "-74.6211", "--name", "Princeton")
        self.assertEqual(result.exit_code, 0, result.output)

        clear_observer_location()
        result = self.invoke("location", "show", "--json")
        data = json.loads(result.output)
        self.assertEqual(data["name"], "Princeton")
        self.assertAlmostEqual(data["latitude"], 40.3349)
        self.assertFalse(data["default"])

    def test_saved_location_used_by_target(self):
        self.invoke("location", "set", "--lat", "40:20:05.57", "--lon", "-74:37:16.06")
        clear_observer_location()

        saved = self.invoke("target", "position", *VEGA_ARGS, *KNOWN_TIME_ARGS, "--json")
        explicit = self.invoke("target", "position", *VEGA_ARGS, *PRINCETON_ARGS, *KNOWN_TIME_ARGS, "--json")
        self.assertEqual(saved.exit_code, 0, saved.output)
        saved_alt = json.loads(saved.output)["horizontal"]["altitude"]
        explicit_alt = json.loads(explicit.output)["horizontal"]["altitude"]
        self.assertAlmostEqual(saved_alt, explicit_alt, places=9)

    def test_set_exits_cleanly(self):
        """Test that saving a location with the default options succeeds"""
        result = self.invoke("location", "set", "--lat", "40", "--lon", "-74")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIsNone(result.exception)
        self.assertIn("Location saved", result.output)

    def test_set_out_of_range(self):
        result = self.invoke("location", "set", "--lat", "95", "--lon", "0")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Latitude must be between", result.output)

    def test_set_unparseable(self):
        result = self.invoke("location", "set", "--lat", "north", "--lon", "0")
        self.assertEqual(result.exit_code, 1)

    def test_show_default(self):
        result = self.invoke("location", "show", "--json")
        self.assertTrue(json.loads(result.output)["default"])

    def test_clear(self):
        self.invoke("location", "set", "--lat", "10", "--lon", "20")
        result = self.invoke("location", "clear")
        self.assertEqual(result.exit_code, 0, result.output)

        result = self.invoke("location", "show", "--json")
        self.assertTrue(json.loads(result.output)["default"])


def test_version() -> None:
    """Test the version command."""
    result = CliRunner().invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


if __name__ == "__main__":
    unittest.main()
