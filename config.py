# config.py
"""
Centralized climate configuration.

This file contains high-level, cross-cutting constants.
Domain-specific constants are in:
- climate/config.py (temperature curves, seasons, condition ramps)
"""
from __future__ import annotations

import sys
from typing import Tuple

# =============================================================================
# TIME & CALENDAR
# =============================================================================
TICKS_PER_HOUR = 2500
HOURS_PER_DAY = 24
TICKS_PER_DAY = TICKS_PER_HOUR * HOURS_PER_DAY  # 60000
DEGREES_PER_TIME_ZONE = 15.0  # Longitude span of one local hour

# =============================================================================
# WEATHER DECISIONS
# =============================================================================
EARLY_GAME_DAYS = 8                # Unfavorable weather held back for this many days
RAIN_RATE_THRESHOLD = 0.1          # Rain rate above this counts as precipitation
FIRE_SUPPRESSION_MULTIPLIER = 20.0  # Boost to precipitation while a large fire burns
DEFAULT_WEATHER = "Clear"

# =============================================================================
# SETTING RANGES
# =============================================================================
# Values outside these ranges are clamped at the configuration boundary
# (settings.py); the models themselves never validate.
MULTIPLIER_RANGE: Tuple[float, float] = (-200.0, 200.0)
OFFSET_RANGE: Tuple[float, float] = (-200.0, 200.0)
SEASONAL_AMPLITUDE_RANGE: Tuple[float, float] = (-200.0, 200.0)
CONDITION_OFFSET_RANGE: Tuple[float, float] = (-200.0, 200.0)
COMMONALITY_RANGE: Tuple[float, float] = (0.0, sys.float_info.max)
