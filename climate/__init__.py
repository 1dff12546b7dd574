# climate/__init__.py
"""
Climate module: daily curves, per-biome temperature models, conditions and sun cycle.

Provides:
- Daily curve family and selection (from curves.py)
- Per-biome temperature model (from temperature.py)
- Active condition aggregation (from conditions.py)
- Sun cycle and hemisphere helpers (from sun.py)
"""

# Curves
from climate.curves import CurveKind, evaluate_curve

# Temperature model
from climate.temperature import TemperatureModel, TemperatureParams, build_seasonal_curve

# Conditions
from climate.conditions import (
    ActiveCondition,
    ConditionSet,
    aggregate_temperature_offset,
)

# Sun cycle
from climate.sun import day_percent, diurnal_phase, seasonal_shift_amplitude

__all__ = [
    # Curves
    "CurveKind",
    "evaluate_curve",
    # Temperature
    "TemperatureModel",
    "TemperatureParams",
    "build_seasonal_curve",
    # Conditions
    "ActiveCondition",
    "ConditionSet",
    "aggregate_temperature_offset",
    # Sun cycle
    "day_percent",
    "diurnal_phase",
    "seasonal_shift_amplitude",
]
