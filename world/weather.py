# weather.py
"""
Weather definitions and per-biome weather profiles.

A WeatherDef describes a weather kind as the host defines it (rain rate,
favorability, temperature range...). A WeatherProfile is one biome's tuning
for one weather kind and decides whether, and how strongly, that weather is
a candidate for the next weather decision.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional

from config import (
    EARLY_GAME_DAYS,
    FIRE_SUPPRESSION_MULTIPLIER,
    RAIN_RATE_THRESHOLD,
    TICKS_PER_DAY,
)
from utils import FloatRange, SimpleCurve

UNBOUNDED_RANGE = FloatRange(float("-inf"), float("inf"))


class Favorability(IntEnum):
    VERY_BAD = 0
    BAD = 1
    NEUTRAL = 2
    GOOD = 3
    VERY_GOOD = 4


@dataclass(frozen=True)
class WeatherDef:
    """A weather kind as defined by the host. Read-only to the climate core."""
    name: str
    repeatable: bool = False
    favorability: Favorability = Favorability.NEUTRAL
    rain_rate: float = 0.0
    temperature_range: FloatRange = UNBOUNDED_RANGE
    rainfall_factor: Optional[SimpleCurve] = None

    @property
    def has_precipitation(self) -> bool:
        return self.rain_rate > RAIN_RATE_THRESHOLD


@dataclass(frozen=True)
class WeatherContext:
    """Everything a profile needs to know about the region for one decision."""
    current_weather: Optional[WeatherDef] = None
    ticks_game: int = 0
    rain_allowed_tick: int = 0       # Precipitation is locked out before this tick
    prevent_rain: bool = False       # An active condition forbids precipitation
    large_fire_danger: bool = False
    weather_temperature: float = 0.0  # Already bounded by the biome
    rainfall: float = 0.0            # Regional rainfall, input to rainfall_factor

    @property
    def days_passed(self) -> int:
        return self.ticks_game // TICKS_PER_DAY

    @property
    def rain_locked_out(self) -> bool:
        return self.ticks_game < self.rain_allowed_tick


@dataclass(frozen=True)
class ProfileSettings:
    base_commonality: float = 0.0
    allow_repeating: bool = False
    allow_early: bool = True


class WeatherProfile:
    """One biome's tuning for one weather kind."""

    def __init__(self, weather: WeatherDef, settings: Optional[ProfileSettings] = None):
        self.weather = weather
        self._settings = settings if settings is not None else self.default_settings(weather)
        self._write_lock = threading.Lock()

    @staticmethod
    def default_settings(weather: WeatherDef, base_commonality: float = 0.0) -> ProfileSettings:
        """Defaults a fresh profile takes from its weather definition."""
        return ProfileSettings(
            base_commonality=base_commonality,
            allow_repeating=weather.repeatable,
            allow_early=weather.favorability >= Favorability.NEUTRAL,
        )

    def __repr__(self) -> str:
        return f"WeatherProfile({self.weather.name!r}, {self._settings!r})"

    @property
    def settings(self) -> ProfileSettings:
        return self._settings

    @property
    def base_commonality(self) -> float:
        return self._settings.base_commonality

    @property
    def allow_repeating(self) -> bool:
        return self._settings.allow_repeating

    @property
    def allow_early(self) -> bool:
        return self._settings.allow_early

    def configure(self, base_commonality: Optional[float] = None,
                  allow_repeating: Optional[bool] = None,
                  allow_early: Optional[bool] = None) -> None:
        """Update any subset of the settings in one step."""
        changes = {}
        if base_commonality is not None:
            changes["base_commonality"] = float(base_commonality)
        if allow_repeating is not None:
            changes["allow_repeating"] = bool(allow_repeating)
        if allow_early is not None:
            changes["allow_early"] = bool(allow_early)
        with self._write_lock:
            self._settings = replace(self._settings, **changes)

    def is_eligible(self, context: WeatherContext) -> bool:
        settings = self._settings
        weather = self.weather

        if (weather == context.current_weather
                and not weather.repeatable and not settings.allow_repeating):
            return False
        if not weather.temperature_range.includes(context.weather_temperature):
            return False
        if (weather.favorability < Favorability.NEUTRAL
                and not settings.allow_early
                and context.days_passed < EARLY_GAME_DAYS):
            return False
        if weather.has_precipitation and (context.rain_locked_out or context.prevent_rain):
            return False
        return True

    def weight(self, context: WeatherContext) -> float:
        """Selection weight for this weather in context; 0 when ineligible."""
        if not self.is_eligible(context):
            return 0.0

        commonality = self._settings.base_commonality
        weather = self.weather

        # Lean hard on rain while a large fire is burning
        if context.large_fire_danger and weather.has_precipitation:
            commonality *= FIRE_SUPPRESSION_MULTIPLIER

        if weather.rainfall_factor is not None:
            commonality *= weather.rainfall_factor.evaluate(context.rainfall)

        return max(0.0, commonality)
