# utils.py
"""
utils.py - Common utility functions for the climate core

Provides shared, stateless helpers used across different modules.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

import numpy as np

Point = Tuple[float, float]
Numeric = Union[float, np.ndarray]


def clamp(val: float, low: float, high: float) -> float:
    """Clamp a value between low and high bounds."""
    return max(low, min(high, val))


def clamp01(val: float) -> float:
    """Clamp a value into [0, 1]."""
    return clamp(val, 0.0, 1.0)


def lerp_in_out(time_passed: float, time_left: float, lerp_time: float,
                target: float = 1.0) -> float:
    """Ramp toward target over the first lerp_time and back out over the last.

    The result rises linearly from 0 to target while time_passed < lerp_time,
    holds at target, then falls back to 0 as time_left drops below lerp_time.

    Example: lerp_in_out(6000, 90000, 12000, 10.0) -> 5.0
    """
    ramp_in = clamp01(time_passed / lerp_time)
    ramp_out = clamp01(time_left / lerp_time)
    return target * min(ramp_in, ramp_out)


def settings_key(def_name: str) -> str:
    """Strip everything but letters from a def name.

    Example: "TemperateForest_2" -> "TemperateForest"
    """
    return re.sub("[^A-Za-z]", "", def_name)


# =============================================================================
# Ranges and Curves
# =============================================================================

@dataclass(frozen=True)
class FloatRange:
    """Inclusive [min, max] range."""
    min: float
    max: float

    def includes(self, value: float) -> bool:
        return self.min <= value <= self.max


class SimpleCurve:
    """Piecewise-linear curve through (x, y) points.

    Evaluation clamps to the first/last point outside the covered x range,
    so a curve is total over all inputs. Accepts scalars or numpy arrays.
    """

    def __init__(self, points: Iterable[Point]):
        pts = sorted((float(x), float(y)) for x, y in points)
        if not pts:
            raise ValueError("SimpleCurve needs at least one point")
        self._xs = np.array([p[0] for p in pts], dtype=np.float64)
        self._ys = np.array([p[1] for p in pts], dtype=np.float64)

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(zip(self._xs.tolist(), self._ys.tolist()))

    def evaluate(self, x: Numeric) -> Numeric:
        result = np.interp(x, self._xs, self._ys)
        if np.ndim(result) == 0:
            return float(result)
        return result

    __call__ = evaluate

    def __repr__(self) -> str:
        return f"SimpleCurve({list(self.points)!r})"
