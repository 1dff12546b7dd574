# host.py
"""
host.py - Entry points for the host simulation

Each hook answers one question the host engine would otherwise answer itself.
A hook returns None when the climate core cannot answer (the biome or weather
was never registered); the host then keeps its own behavior for that call.
Failures stay local to the call that raised them.
"""
from __future__ import annotations

import logging
from typing import Optional

from climate.conditions import ConditionSet
from climate.conditions import aggregate_temperature_offset as _aggregate
from climate.sun import diurnal_phase, seasonal_shift_amplitude
from world.biomes import BiomeRegistry, ClimateLookupError
from world.decider import RegionWeatherState, WeatherSelector
from world.weather import WeatherDef

log = logging.getLogger(__name__)


def offset_from_sun_cycle(registry: BiomeRegistry, biome: str, abs_tick: int,
                          longitude: float) -> Optional[float]:
    """Daily temperature offset for a tile at an absolute tick."""
    try:
        model = registry.temperature_model(biome)
    except ClimateLookupError as e:
        log.error("Error getting climate for biome %s (%s); falling back to host.", biome, e)
        return None
    return model.calculate_diurnal_temperature(diurnal_phase(abs_tick, longitude))


def seasonal_shift_amplitude_at(registry: BiomeRegistry, biome: str,
                                normalized_distance: float, latitude: float) -> Optional[float]:
    """Signed seasonal shift for a tile."""
    try:
        model = registry.temperature_model(biome)
    except ClimateLookupError:
        log.error("Unable to adjust seasonal temperature for biome %s; falling back to host.",
                  biome)
        return None
    return seasonal_shift_amplitude(model, normalized_distance, latitude)


def aggregate_temperature_offset(registry: BiomeRegistry, biome: str,
                                 conditions: Optional[ConditionSet]) -> Optional[float]:
    """Combined offset of every active condition affecting a map."""
    try:
        model = registry.temperature_model(biome)
    except ClimateLookupError:
        log.error("Unable to override condition temperature offsets for biome %s; "
                  "falling back to host.", biome)
        return None
    return _aggregate(model, conditions)


def choose_next_weather(selector: WeatherSelector,
                        state: RegionWeatherState) -> Optional[WeatherDef]:
    """Next weather for a region, or None to let the host decide."""
    try:
        return selector.choose_next_weather(state)
    except ClimateLookupError:
        log.error("Unable to override choosing the next weather for biome %s; "
                  "falling back to host.", state.biome)
        return None
