# tests/test_curves.py
import math
import unittest
import sys
import os

import numpy as np

# This adds the project's root directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from climate.curves import CurveKind, evaluate_curve


class TestCurveKind(unittest.TestCase):
    """Test suite for curve selection."""

    def test_parse_members_names_and_values(self):
        """Tests that members, names and values all resolve."""
        self.assertIs(CurveKind.parse(CurveKind.FLATTER), CurveKind.FLATTER)
        self.assertIs(CurveKind.parse("flattest"), CurveKind.FLATTEST)
        self.assertIs(CurveKind.parse(" Flatter "), CurveKind.FLATTER)
        self.assertIs(CurveKind.parse(2), CurveKind.FLATTEST)

    def test_parse_unrecognized_defaults_to_vanilla(self):
        """Tests that anything unknown quietly becomes VANILLA."""
        for value in ("Steepest", "", 7, -1, None, 1.5, object()):
            self.assertIs(CurveKind.parse(value), CurveKind.VANILLA)


class TestCurveEvaluation(unittest.TestCase):
    """Test suite for the daily curve family."""

    def test_vanilla_matches_cosine(self):
        for phase in (0.0, 0.7, math.pi / 2, math.pi, 4.0):
            self.assertAlmostEqual(evaluate_curve(CurveKind.VANILLA, phase, 3.0),
                                   math.cos(phase) * 3.0)

    def test_all_curves_share_peak_and_trough(self):
        """Tests that every curve reaches +amplitude at 0 and -amplitude at pi."""
        for kind in CurveKind:
            self.assertAlmostEqual(evaluate_curve(kind, 0.0, 5.0), 5.0)
            self.assertAlmostEqual(evaluate_curve(kind, math.pi, 5.0), -5.0)
            self.assertAlmostEqual(evaluate_curve(kind, math.pi / 2, 5.0), 0.0)

    def test_flatter_curves_hold_near_peak(self):
        """Tests that flatter variants stay higher than vanilla off the peak."""
        phase = 1.0
        vanilla = evaluate_curve(CurveKind.VANILLA, phase, 10.0)
        flatter = evaluate_curve(CurveKind.FLATTER, phase, 10.0)
        flattest = evaluate_curve(CurveKind.FLATTEST, phase, 10.0)
        self.assertLess(vanilla, flatter)
        self.assertLess(flatter, flattest)
        self.assertLessEqual(flattest, 10.0)

    def test_periodic(self):
        for kind in CurveKind:
            for phase in (-3.0, 0.0, 0.4, 2.5, 10.0):
                self.assertAlmostEqual(evaluate_curve(kind, phase, 7.0),
                                       evaluate_curve(kind, phase + 2 * math.pi, 7.0))

    def test_scalar_returns_float_and_array_returns_array(self):
        self.assertIsInstance(evaluate_curve(CurveKind.FLATTEST, 0.3, 1.0), float)
        phases = np.linspace(0.0, 2 * np.pi, 16)
        result = evaluate_curve(CurveKind.FLATTER, phases, 1.0)
        self.assertEqual(result.shape, phases.shape)


if __name__ == '__main__':
    unittest.main()
