# tests/test_temperature.py
import math
import threading
import unittest
import sys
import os

import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from climate.curves import CurveKind
from climate.temperature import TemperatureModel, build_seasonal_curve


class TestDiurnalTemperature(unittest.TestCase):
    """Test suite for the daily temperature curve of a biome."""

    def setUp(self):
        self.model = TemperatureModel()

    def test_default_multiplier_peaks_at_anchor(self):
        """Tests that multiplier 14 gives cos(0)*7 + (7 - 7 + 0) = 7 at phase 0."""
        self.model.set_diurnal_parameters(multiplier=14)
        self.assertAlmostEqual(self.model.calculate_diurnal_temperature(0.0), 7.0)
        self.assertAlmostEqual(self.model.calculate_diurnal_temperature(math.pi), -7.0)

    def test_derived_values(self):
        self.model.set_diurnal_parameters(multiplier=20, offset=3)
        self.assertAlmostEqual(self.model.effective_amplitude, 10.0)
        self.assertAlmostEqual(self.model.effective_offset, 7.0 - 10.0 + 3.0)

    def test_periodic_for_every_curve(self):
        phases = np.linspace(-4.0, 4.0, 33)
        for kind in CurveKind:
            self.model.set_curve_kind(kind)
            np.testing.assert_allclose(
                self.model.calculate_diurnal_temperature(phases),
                self.model.calculate_diurnal_temperature(phases + 2 * np.pi),
                atol=1e-9,
            )

    def test_daily_peak_stays_anchored(self):
        """Tests that the hottest point of the day does not move with the multiplier."""
        phases = np.linspace(0.0, 2 * np.pi, 3601)
        for kind in CurveKind:
            self.model.set_curve_kind(kind)
            for multiplier in (2.0, 14.0, 40.0, 120.0):
                self.model.set_diurnal_parameters(multiplier=multiplier, offset=0.0)
                peak = self.model.calculate_diurnal_temperature(phases).max()
                self.assertAlmostEqual(peak, 7.0, places=6)

    def test_offset_shifts_whole_curve(self):
        self.model.set_diurnal_parameters(multiplier=14, offset=-5)
        self.assertAlmostEqual(self.model.calculate_diurnal_temperature(0.0), 2.0)

    def test_unrecognized_curve_falls_back_to_vanilla(self):
        self.model.set_curve_kind(CurveKind.FLATTEST)
        self.model.set_curve_kind("Wobbly")
        self.assertIs(self.model.curve_kind, CurveKind.VANILLA)


class TestSeasonalTemperature(unittest.TestCase):
    """Test suite for the seasonal shift curve."""

    def setUp(self):
        self.model = TemperatureModel()
        self.model.set_seasonal_amplitude(28)

    def test_control_points(self):
        """Tests shift = 28 / 2 / 28 = 0.5 feeding (0, 1.5), (0.1, 2), (1, 28)."""
        self.assertAlmostEqual(self.model.calculate_seasonal_temperature(0.0), 1.5)
        self.assertAlmostEqual(self.model.calculate_seasonal_temperature(0.1), 2.0)
        self.assertAlmostEqual(self.model.calculate_seasonal_temperature(1.0), 28.0)

    def test_linear_between_points(self):
        self.assertAlmostEqual(self.model.calculate_seasonal_temperature(0.05), 1.75)
        self.assertAlmostEqual(self.model.calculate_seasonal_temperature(0.55), 15.0)

    def test_out_of_range_clamps_to_endpoint(self):
        self.assertAlmostEqual(self.model.calculate_seasonal_temperature(-3.0), 1.5)
        self.assertAlmostEqual(self.model.calculate_seasonal_temperature(4.0), 28.0)

    def test_amplitude_change_rebuilds_curve(self):
        self.model.set_seasonal_amplitude(56)
        self.assertAlmostEqual(self.model.calculate_seasonal_temperature(0.0), 3.0)
        self.assertAlmostEqual(self.model.calculate_seasonal_temperature(1.0), 56.0)

    def test_build_seasonal_curve_points(self):
        curve = build_seasonal_curve(14.0)
        self.assertEqual(curve.points, ((0.0, 0.75), (0.1, 1.0), (1.0, 14.0)))


class TestWeatherTemperatureBounds(unittest.TestCase):
    """Test suite for the weather temperature clamp."""

    def setUp(self):
        self.model = TemperatureModel()

    def test_default_bounds(self):
        self.assertEqual(self.model.bound_weather_temperature(5000), 999)
        self.assertEqual(self.model.bound_weather_temperature(-5000), -999)
        self.assertEqual(self.model.bound_weather_temperature(12.5), 12.5)

    def test_configured_bounds(self):
        self.model.set_weather_temperature_bounds(minimum=-10, maximum=30)
        self.assertEqual(self.model.bound_weather_temperature(-40), -10)
        self.assertEqual(self.model.bound_weather_temperature(45), 30)

    def test_inverted_bounds_yield_maximum(self):
        """Tests that a minimum above the maximum degenerates to the maximum."""
        self.model.set_weather_temperature_bounds(minimum=10, maximum=5)
        for raw in (-100, 0, 7, 100):
            self.assertEqual(self.model.bound_weather_temperature(raw), 5)


class TestConditionOffset(unittest.TestCase):
    """Test suite for condition temperature offsets."""

    def setUp(self):
        self.model = TemperatureModel()

    def test_no_override_returns_fallback(self):
        for elapsed, remaining in ((0, 0), (100, 500000), (60000, 3), (-5, -5)):
            self.assertEqual(
                self.model.condition_temperature_offset("ColdSnap", elapsed, remaining, -17.25),
                -17.25)

    def test_default_valued_override_returns_fallback(self):
        self.model.set_condition_offset("HeatWave", 0.0)
        self.assertFalse(self.model.has_condition_override("HeatWave"))
        self.assertEqual(
            self.model.condition_temperature_offset("HeatWave", 30000, 30000, 12.0), 12.0)

    def test_override_ramps_in_holds_and_ramps_out(self):
        self.model.set_condition_offset("ColdSnap", -20.0)
        offset = self.model.condition_temperature_offset
        self.assertAlmostEqual(offset("ColdSnap", 0, 100000, 99.0), 0.0)
        self.assertAlmostEqual(offset("ColdSnap", 6000, 100000, 99.0), -10.0)
        self.assertAlmostEqual(offset("ColdSnap", 50000, 50000, 99.0), -20.0)
        self.assertAlmostEqual(offset("ColdSnap", 90000, 3000, 99.0), -5.0)
        self.assertAlmostEqual(offset("ColdSnap", 90000, 0, 99.0), 0.0)

    def test_override_only_affects_its_condition(self):
        self.model.set_condition_offset("ColdSnap", -20.0)
        self.assertEqual(self.model.condition_temperature_offset("HeatWave", 50000, 50000, 8.0), 8.0)

    def test_removing_override(self):
        self.model.set_condition_offset("ColdSnap", -20.0)
        self.model.set_condition_offset("ColdSnap", None)
        self.assertEqual(self.model.condition_temperature_offset("ColdSnap", 50000, 50000, -3.0), -3.0)


class TestConfigurationUpdates(unittest.TestCase):
    """Test suite for snapshot replacement on configuration changes."""

    def test_old_snapshot_is_untouched(self):
        model = TemperatureModel()
        before = model.params
        model.set_diurnal_parameters(multiplier=30, offset=2)
        self.assertEqual(before.diurnal_multiplier, 14.0)
        self.assertEqual(model.params.diurnal_multiplier, 30.0)
        self.assertEqual(model.params.diurnal_offset, 2.0)

    def test_partial_diurnal_update_keeps_other_value(self):
        model = TemperatureModel()
        model.set_diurnal_parameters(offset=4)
        model.set_diurnal_parameters(multiplier=10)
        self.assertEqual(model.params.diurnal_offset, 4.0)

    def test_readers_never_see_mixed_state(self):
        """Tests that derived values always match the settings they came from."""
        model = TemperatureModel()
        stop = threading.Event()
        mismatches = []

        def writer():
            i = 0
            while not stop.is_set():
                value = float(i % 50)
                model.set_diurnal_parameters(multiplier=value, offset=value)
                i += 1

        def reader():
            for _ in range(20000):
                params = model.params
                expected = 7.0 - params.diurnal_multiplier / 2 + params.diurnal_offset
                if params.effective_offset != expected:
                    mismatches.append(params)

        writers = [threading.Thread(target=writer) for _ in range(2)]
        for thread in writers:
            thread.start()
        reader()
        stop.set()
        for thread in writers:
            thread.join()

        self.assertEqual(mismatches, [])


if __name__ == '__main__':
    unittest.main()
