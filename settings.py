# settings.py
"""
settings.py - Configuration boundary for the climate core

Setting values arrive here from whatever stores them, get clamped into their
allowed ranges and are then pushed into the registry through the model
setters. The models never validate on their own.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from climate.curves import CurveKind
from config import (
    COMMONALITY_RANGE,
    CONDITION_OFFSET_RANGE,
    MULTIPLIER_RANGE,
    OFFSET_RANGE,
    SEASONAL_AMPLITUDE_RANGE,
)
from utils import clamp
from world.biomes import BiomeClimate, BiomeRegistry
from world.weather import WeatherProfile

log = logging.getLogger(__name__)


@dataclass
class WeatherSettings:
    """Per biome x weather tuning; None leaves a value untouched."""
    commonality: Optional[float] = None
    allow_repeating: Optional[bool] = None
    allow_early: Optional[bool] = None


@dataclass
class BiomeSettings:
    """Per-biome tuning; None leaves a value untouched."""
    curve: Union[CurveKind, int, str, None] = None
    multiplier: Optional[float] = None
    offset: Optional[float] = None
    seasonal_amplitude: Optional[float] = None
    min_weather_temperature: Optional[float] = None
    max_weather_temperature: Optional[float] = None
    default_weather: Optional[str] = None
    ignore_rain_limit: Optional[bool] = None
    # condition kind -> peak offset; None removes the override
    condition_offsets: Dict[str, Optional[float]] = field(default_factory=dict)
    weathers: Dict[str, WeatherSettings] = field(default_factory=dict)


def check_number(name: str, value: Optional[float]) -> Optional[float]:
    """Coerce a setting to float, rejecting NaN. None passes through."""
    if value is None:
        return None
    number = float(value)
    if math.isnan(number):
        raise ValueError(f"Setting {name} is not a number")
    return number


def clamp_setting(name: str, value: Optional[float],
                  bounds: Tuple[float, float]) -> Optional[float]:
    """Clamp value into bounds, logging when it had to move."""
    number = check_number(name, value)
    if number is None:
        return None
    clamped = clamp(number, bounds[0], bounds[1])
    if clamped != number:
        log.warning("Setting %s=%s out of range %s; clamped to %s.", name, value, bounds, clamped)
    return clamped


def _resolve_weather(climate: BiomeClimate, weather_name: str,
                     settings: WeatherSettings) -> Tuple[WeatherProfile, Optional[float]]:
    profile = climate.profile(weather_name)
    commonality = clamp_setting(f"weather_{climate.biome.key}_{weather_name}",
                                settings.commonality, COMMONALITY_RANGE)
    return profile, commonality


def _configure_profile(profile: WeatherProfile, commonality: Optional[float],
                       settings: WeatherSettings) -> None:
    profile.configure(
        base_commonality=commonality,
        allow_repeating=settings.allow_repeating,
        allow_early=settings.allow_early,
    )


def apply_weather_settings(registry: BiomeRegistry, biome_name: str, weather_name: str,
                           settings: WeatherSettings) -> None:
    profile, commonality = _resolve_weather(registry.climate(biome_name), weather_name, settings)
    _configure_profile(profile, commonality, settings)


def apply_biome_settings(registry: BiomeRegistry, biome_name: str,
                         settings: BiomeSettings) -> None:
    """Push one biome's settings into its models.

    Every value and name is checked before anything is written, so a batch
    that raises (UnknownBiomeError, UnknownWeatherError, ValueError for NaN)
    leaves the biome exactly as it was.
    """
    climate = registry.climate(biome_name)
    model = climate.temperature
    key = climate.biome.key

    multiplier = clamp_setting(f"temp_multiplier_{key}", settings.multiplier, MULTIPLIER_RANGE)
    offset = clamp_setting(f"temp_offset_{key}", settings.offset, OFFSET_RANGE)
    seasonal_amplitude = clamp_setting(f"seasonal_amplitude_{key}",
                                       settings.seasonal_amplitude, SEASONAL_AMPLITUDE_RANGE)
    min_temperature = check_number(f"weather_temp_min_{key}", settings.min_weather_temperature)
    max_temperature = check_number(f"weather_temp_max_{key}", settings.max_weather_temperature)
    condition_offsets = {
        condition_kind: clamp_setting(f"condition_offset_{key}_{condition_kind}",
                                      maximum, CONDITION_OFFSET_RANGE)
        for condition_kind, maximum in settings.condition_offsets.items()
    }
    if settings.default_weather is not None:
        climate.profile(settings.default_weather)
    weather_updates: List[Tuple[WeatherProfile, Optional[float], WeatherSettings]] = [
        _resolve_weather(climate, weather_name, weather_settings) + (weather_settings,)
        for weather_name, weather_settings in settings.weathers.items()
    ]

    if settings.curve is not None:
        model.set_curve_kind(settings.curve)
    model.set_diurnal_parameters(multiplier=multiplier, offset=offset)
    if seasonal_amplitude is not None:
        model.set_seasonal_amplitude(seasonal_amplitude)
    model.set_weather_temperature_bounds(min_temperature, max_temperature)
    for condition_kind, maximum in condition_offsets.items():
        model.set_condition_offset(condition_kind, maximum)

    if settings.default_weather is not None:
        climate.set_default_weather(settings.default_weather)
    if settings.ignore_rain_limit is not None:
        climate.set_ignore_rain_limit(settings.ignore_rain_limit)

    for profile, commonality, weather_settings in weather_updates:
        _configure_profile(profile, commonality, weather_settings)

    log.debug("Applied settings to biome %s.", biome_name)
