# world/catalog.py
"""
Standard weather and biome definitions.

Hosts normally supply their own definitions; this catalog mirrors a typical
temperate-to-polar set and is what benchmarks and examples build on.
"""
from __future__ import annotations

from typing import Dict, List

from utils import FloatRange, SimpleCurve
from world.biomes import BiomeDef
from world.weather import Favorability, WeatherDef

# Rainfall (mm/year) -> commonality factor for precipitation-bearing weather
RAIN_RAINFALL_FACTOR = SimpleCurve([(0, 0.0), (1300, 1.0), (4000, 3.0)])

CLEAR = WeatherDef("Clear", repeatable=True, favorability=Favorability.GOOD)
FOG = WeatherDef("Fog", favorability=Favorability.NEUTRAL)
RAIN = WeatherDef("Rain", favorability=Favorability.NEUTRAL, rain_rate=1.0,
                  temperature_range=FloatRange(0.0, 999.0),
                  rainfall_factor=RAIN_RAINFALL_FACTOR)
FOGGY_RAIN = WeatherDef("FoggyRain", favorability=Favorability.NEUTRAL, rain_rate=1.0,
                        temperature_range=FloatRange(0.0, 999.0),
                        rainfall_factor=RAIN_RAINFALL_FACTOR)
DRY_THUNDERSTORM = WeatherDef("DryThunderstorm", favorability=Favorability.BAD,
                              temperature_range=FloatRange(-10.0, 999.0))
RAINY_THUNDERSTORM = WeatherDef("RainyThunderstorm", favorability=Favorability.BAD,
                                rain_rate=1.0, temperature_range=FloatRange(0.0, 999.0),
                                rainfall_factor=RAIN_RAINFALL_FACTOR)
SNOW_GENTLE = WeatherDef("SnowGentle", favorability=Favorability.NEUTRAL,
                         temperature_range=FloatRange(-270.0, 0.0))
SNOW_HARD = WeatherDef("SnowHard", favorability=Favorability.BAD,
                       temperature_range=FloatRange(-270.0, 0.0))

STANDARD_WEATHERS: List[WeatherDef] = [
    CLEAR, FOG, RAIN, FOGGY_RAIN, DRY_THUNDERSTORM, RAINY_THUNDERSTORM, SNOW_GENTLE, SNOW_HARD,
]

# (weather name, commonality) per biome
_COMMONALITIES: Dict[str, Dict[str, float]] = {
    "TemperateForest": {
        "Clear": 18.0, "Fog": 1.0, "Rain": 2.0, "DryThunderstorm": 0.1,
        "RainyThunderstorm": 1.0, "FoggyRain": 1.0, "SnowGentle": 4.0, "SnowHard": 4.0,
    },
    "TropicalRainforest": {
        "Clear": 12.0, "Fog": 1.0, "Rain": 4.0, "RainyThunderstorm": 2.0, "FoggyRain": 2.0,
    },
    "AridShrubland": {
        "Clear": 24.0, "Fog": 0.5, "Rain": 1.0, "DryThunderstorm": 1.0,
        "RainyThunderstorm": 0.5, "SnowGentle": 1.0, "SnowHard": 0.5,
    },
    "Desert": {
        "Clear": 30.0, "Rain": 0.5, "DryThunderstorm": 1.5, "SnowGentle": 0.5,
    },
    "Tundra": {
        "Clear": 14.0, "Fog": 2.0, "Rain": 1.0, "SnowGentle": 6.0, "SnowHard": 4.0,
    },
    "SeaIce": {
        "Clear": 10.0, "Fog": 2.0, "SnowGentle": 6.0, "SnowHard": 6.0,
    },
}

STANDARD_BIOMES: List[BiomeDef] = [
    BiomeDef("TemperateForest", "temperate forest", _COMMONALITIES["TemperateForest"]),
    BiomeDef("TropicalRainforest", "tropical rainforest", _COMMONALITIES["TropicalRainforest"]),
    BiomeDef("AridShrubland", "arid shrubland", _COMMONALITIES["AridShrubland"]),
    BiomeDef("Desert", "desert", _COMMONALITIES["Desert"]),
    BiomeDef("Tundra", "tundra", _COMMONALITIES["Tundra"]),
    BiomeDef("SeaIce", "sea ice", _COMMONALITIES["SeaIce"], can_build_base=False),
]
