# climate/sun.py
"""
Sun cycle and season helpers.

Turns absolute ticks and world coordinates into the inputs the temperature
model expects: a diurnal phase for the daily curve and a signed seasonal shift.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

from climate.config import SUN_CYCLE_PHASE_SHIFT
from config import DEGREES_PER_TIME_ZONE, TICKS_PER_DAY, TICKS_PER_HOUR

if TYPE_CHECKING:
    from climate.temperature import TemperatureModel

TWO_PI = 2 * math.pi


def time_zone_at(longitude: float) -> int:
    """Whole-hour time zone for a longitude in degrees."""
    return int(round(longitude / DEGREES_PER_TIME_ZONE))


def local_ticks_offset(longitude: float) -> int:
    return time_zone_at(longitude) * TICKS_PER_HOUR


def day_percent(abs_tick: int, longitude: float) -> float:
    """Local fraction of the day elapsed, in (0, 1).

    The exact start of the day reports one tick in, never 0.
    """
    ticks = (abs_tick + local_ticks_offset(longitude)) % TICKS_PER_DAY
    if ticks == 0:
        ticks = 1
    return ticks / TICKS_PER_DAY


def diurnal_phase(abs_tick: int, longitude: float) -> float:
    """Phase fed to the daily curve; the peak lands in the early afternoon."""
    return TWO_PI * (day_percent(abs_tick, longitude) + SUN_CYCLE_PHASE_SHIFT)


def hemisphere_sign(latitude: float) -> int:
    return 1 if latitude >= 0.0 else -1


def seasonal_shift_amplitude(model: "TemperatureModel", normalized_distance: float,
                             latitude: float) -> float:
    """Seasonal shift for a tile, negated south of the equator."""
    return hemisphere_sign(latitude) * model.calculate_seasonal_temperature(normalized_distance)
