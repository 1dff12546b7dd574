# tests/test_sun.py
import math
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from climate import sun
from climate.temperature import TemperatureModel


class TestSunCycle(unittest.TestCase):
    """Test suite for day fraction and diurnal phase."""

    def test_day_percent(self):
        self.assertAlmostEqual(sun.day_percent(30000, 0.0), 0.5)
        self.assertAlmostEqual(sun.day_percent(90000, 0.0), 0.5)

    def test_start_of_day_is_never_zero(self):
        self.assertAlmostEqual(sun.day_percent(0, 0.0), 1 / 60000)
        self.assertAlmostEqual(sun.day_percent(120000, 0.0), 1 / 60000)

    def test_longitude_shifts_local_time(self):
        """Tests that each 15 degrees of longitude moves local time by an hour."""
        self.assertEqual(sun.local_ticks_offset(90.0), 15000)
        self.assertAlmostEqual(sun.day_percent(0, 90.0), 0.25)
        self.assertAlmostEqual(sun.day_percent(0, -90.0), 0.75)
        self.assertEqual(sun.time_zone_at(7.0), 0)

    def test_diurnal_phase(self):
        self.assertAlmostEqual(sun.diurnal_phase(30000, 0.0), 2 * math.pi * 0.82)


class TestSeasonalShift(unittest.TestCase):
    """Test suite for the hemisphere-signed seasonal shift."""

    def setUp(self):
        self.model = TemperatureModel()

    def test_north_positive_south_negative(self):
        north = sun.seasonal_shift_amplitude(self.model, 0.5, 30.0)
        south = sun.seasonal_shift_amplitude(self.model, 0.5, -30.0)
        self.assertGreater(north, 0.0)
        self.assertAlmostEqual(south, -north)

    def test_equator_counts_as_north(self):
        self.assertEqual(sun.hemisphere_sign(0.0), 1)


if __name__ == '__main__':
    unittest.main()
