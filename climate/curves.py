# climate/curves.py
"""
Daily temperature curve family.

Each curve maps a diurnal phase (radians) and an amplitude to a temperature
contribution. All three are 2π-periodic, peak at phase 0 and bottom out at π;
the flatter variants hold near the peak and trough for longer while keeping
the sign of cos(phase).
"""
from __future__ import annotations

from enum import IntEnum
from typing import Union

import numpy as np

from utils import Numeric

HALF_PI = np.pi / 2


class CurveKind(IntEnum):
    VANILLA = 0
    FLATTER = 1
    FLATTEST = 2

    @classmethod
    def parse(cls, value: Union["CurveKind", int, str, None]) -> "CurveKind":
        """Resolve a member, name or value; anything unrecognized is VANILLA."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            member = cls.__members__.get(value.strip().upper())
            return member if member is not None else cls.VANILLA
        try:
            return cls(value)
        except (ValueError, TypeError):
            return cls.VANILLA


def _vanilla(phase: Numeric, amplitude: float) -> Numeric:
    return np.cos(phase) * amplitude


def _flatter(phase: Numeric, amplitude: float) -> Numeric:
    return amplitude * np.sin(HALF_PI * np.cos(phase))


def _flattest(phase: Numeric, amplitude: float) -> Numeric:
    cos_phase = np.cos(phase)
    return amplitude * np.sqrt(26.0 / (1.0 + 25.0 * cos_phase ** 2)) * cos_phase


def evaluate_curve(kind: CurveKind, phase: Numeric, amplitude: float) -> Numeric:
    """Evaluate the curve selected by kind at phase (scalar or array)."""
    if kind == CurveKind.FLATTER:
        result = _flatter(phase, amplitude)
    elif kind == CurveKind.FLATTEST:
        result = _flattest(phase, amplitude)
    else:
        result = _vanilla(phase, amplitude)

    if np.ndim(result) == 0:
        return float(result)
    return result
