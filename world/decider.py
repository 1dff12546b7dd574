# world/decider.py
"""
Next-weather decisions for a region.

The selector weighs every registered weather through the biome's profiles and
draws one at random in proportion to its weight. When nothing qualifies the
biome's default weather is used instead.
"""
from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from climate.conditions import ConditionSet
from world.biomes import BiomeClimate, BiomeRegistry
from world.weather import WeatherContext, WeatherDef

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegionWeatherState:
    """What the simulation reports about a region when asking for new weather."""
    biome: str
    outdoor_temperature: float
    ticks_game: int
    current_weather: Optional[WeatherDef] = None
    rain_allowed_tick: int = 0
    conditions: Optional[ConditionSet] = None
    large_fire_danger: bool = False
    rainfall: float = 0.0
    tutorial_mode: bool = False


def weighted_choice(candidates: Sequence[Tuple[WeatherDef, float]],
                    rng: random.Random) -> Optional[WeatherDef]:
    """Draw one candidate with probability weight / total.

    Candidates with a weight of 0 or less (or NaN) are never returned.
    Infinite weights outrank every finite one and share the draw evenly.
    Returns None when no candidate has positive weight.
    """
    positive = [(weather, weight) for weather, weight in candidates if weight > 0.0]
    if not positive:
        return None
    infinite = [(weather, 1.0) for weather, weight in positive if math.isinf(weight)]
    if infinite:
        positive = infinite

    total = sum(weight for _, weight in positive)
    if math.isinf(total):
        # Finite weights near float max overflow the sum; draw on the ratios
        largest = max(weight for _, weight in positive)
        positive = [(weather, weight / largest) for weather, weight in positive]
        total = sum(weight for _, weight in positive)

    roll = rng.random() * total
    for weather, weight in positive:
        roll -= weight
        if roll < 0.0:
            return weather
    # Float rounding can leave a sliver past the last bucket
    return positive[-1][0]


class WeatherSelector:
    """Picks the next weather for regions using a shared biome registry."""

    def __init__(self, registry: BiomeRegistry, rng: Optional[random.Random] = None):
        self.registry = registry
        self.rng = rng if rng is not None else random.Random()

    def build_context(self, climate: BiomeClimate, state: RegionWeatherState) -> WeatherContext:
        weather_temperature = climate.temperature.bound_weather_temperature(
            state.outdoor_temperature)
        rain_allowed_tick = 0 if climate.ignore_rain_limit else state.rain_allowed_tick
        prevent_rain = state.conditions.prevents_rain if state.conditions is not None else False

        return WeatherContext(
            current_weather=state.current_weather,
            ticks_game=state.ticks_game,
            rain_allowed_tick=rain_allowed_tick,
            prevent_rain=prevent_rain,
            large_fire_danger=state.large_fire_danger,
            weather_temperature=weather_temperature,
            rainfall=state.rainfall,
        )

    def weights(self, state: RegionWeatherState) -> List[Tuple[WeatherDef, float]]:
        """Weight of every registered weather for the region, in registry order."""
        climate = self.registry.climate(state.biome)
        context = self.build_context(climate, state)
        return [
            (weather, climate.profile(weather.name).weight(context))
            for weather in self.registry.weathers
        ]

    def choose_next_weather(self, state: RegionWeatherState) -> WeatherDef:
        """Select the weather to run next in the region.

        Raises UnknownBiomeError if the region's biome was never registered.
        """
        climate = self.registry.climate(state.biome)

        # Scripted play keeps the weather predictable
        if state.tutorial_mode:
            return climate.default_weather

        choice = weighted_choice(self.weights(state), self.rng)
        if choice is None:
            log.warning(
                "Unable to choose suitable weather for biome %s; its biome specific "
                "settings may not produce a viable range of weathers. Using %s.",
                state.biome, climate.default_weather.name)
            return climate.default_weather
        return choice
