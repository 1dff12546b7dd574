"""
Configuration constants for the climate domain.
Includes daily curve anchoring, seasonal shift and condition ramp tuning values.
"""
from __future__ import annotations

# =============================================================================
# DAILY CYCLE
# =============================================================================
DAILY_PEAK_ANCHOR = 7.0          # Hottest point of the day sits near this offset
DEFAULT_DIURNAL_MULTIPLIER = 14.0  # Full swing between night and midday
DEFAULT_DIURNAL_OFFSET = 0.0
SUN_CYCLE_PHASE_SHIFT = 0.32     # Fraction of a day the curve peak trails midnight

# =============================================================================
# SEASONAL CYCLE
# =============================================================================
DEFAULT_SEASONAL_AMPLITUDE = 28.0
SEASONAL_SHIFT_DIVISOR = 28.0    # shift = amplitude / 2 / divisor
# (normalized distance from equator, multiple of shift) control points;
# the last point takes the full amplitude instead
SEASONAL_EQUATOR_POINT = (0.0, 3.0)
SEASONAL_TROPIC_POINT = (0.1, 4.0)
SEASONAL_POLE_DISTANCE = 1.0

# =============================================================================
# CONDITIONS
# =============================================================================
CONDITION_LERP_TICKS = 12000     # Ramp in/out window for condition offsets
CONDITION_OFFSET_DEFAULT = 0.0   # Untouched override; defers to the fallback

# =============================================================================
# WEATHER TEMPERATURE BOUNDS
# =============================================================================
DEFAULT_MIN_WEATHER_TEMPERATURE = -999.0
DEFAULT_MAX_WEATHER_TEMPERATURE = 999.0
