# world/__init__.py
"""
World module: biome registry, weather definitions and weather decisions.

Provides:
- Weather definitions and per-biome profiles (from weather.py)
- Biome registry and lookup errors (from biomes.py)
- Next-weather selection (from decider.py)
- Standard weather and biome definitions (from catalog.py)
"""

# Weather definitions and profiles
from world.weather import (
    Favorability,
    ProfileSettings,
    WeatherContext,
    WeatherDef,
    WeatherProfile,
)

# Biome registry
from world.biomes import (
    BiomeClimate,
    BiomeDef,
    BiomeRegistry,
    ClimateLookupError,
    UnknownBiomeError,
    UnknownWeatherError,
)

# Weather decisions
from world.decider import RegionWeatherState, WeatherSelector, weighted_choice

# Standard content
from world.catalog import STANDARD_BIOMES, STANDARD_WEATHERS

__all__ = [
    # Weather
    "Favorability",
    "ProfileSettings",
    "WeatherContext",
    "WeatherDef",
    "WeatherProfile",
    # Biomes
    "BiomeClimate",
    "BiomeDef",
    "BiomeRegistry",
    "ClimateLookupError",
    "UnknownBiomeError",
    "UnknownWeatherError",
    # Decisions
    "RegionWeatherState",
    "WeatherSelector",
    "weighted_choice",
    # Content
    "STANDARD_BIOMES",
    "STANDARD_WEATHERS",
]
