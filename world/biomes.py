# world/biomes.py
"""
Biome registry for the climate core.

Maps each biome to its temperature model, its weather profiles and the
per-biome weather settings (default weather, rain limit bypass). The registry
is built once when world content is loaded; its set of biomes and weathers
never changes afterwards, only the models inside it are reconfigured.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from climate.temperature import TemperatureModel
from config import DEFAULT_WEATHER
from utils import settings_key
from world.weather import WeatherDef, WeatherProfile

log = logging.getLogger(__name__)


class ClimateLookupError(ValueError):
    """Raised when a biome or weather kind was never registered."""


class UnknownBiomeError(ClimateLookupError):
    pass


class UnknownWeatherError(ClimateLookupError):
    pass


@dataclass(frozen=True)
class BiomeDef:
    """A biome as defined by the host."""
    name: str
    label: str = ""
    base_weather_commonalities: Mapping[str, float] = field(default_factory=dict)
    implemented: bool = True
    can_build_base: bool = True

    @property
    def key(self) -> str:
        return settings_key(self.name)


class BiomeClimate:
    """Everything the climate core tracks for one biome."""

    def __init__(self, biome: BiomeDef, temperature: TemperatureModel,
                 profiles: Mapping[str, WeatherProfile], default_weather: WeatherDef,
                 ignore_rain_limit: bool = False):
        self.biome = biome
        self.temperature = temperature
        self.profiles = MappingProxyType(dict(profiles))
        self._default_weather = default_weather
        self._ignore_rain_limit = ignore_rain_limit
        self._write_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"BiomeClimate({self.biome.name!r}, default={self._default_weather.name!r})"

    @property
    def default_weather(self) -> WeatherDef:
        return self._default_weather

    @property
    def ignore_rain_limit(self) -> bool:
        return self._ignore_rain_limit

    def profile(self, weather_name: str) -> WeatherProfile:
        try:
            return self.profiles[weather_name]
        except KeyError:
            raise UnknownWeatherError(
                f"Weather {weather_name!r} is not registered for biome {self.biome.name!r}"
            ) from None

    def set_default_weather(self, weather_name: str) -> None:
        weather = self.profile(weather_name).weather
        with self._write_lock:
            self._default_weather = weather

    def set_ignore_rain_limit(self, ignore: bool) -> None:
        with self._write_lock:
            self._ignore_rain_limit = bool(ignore)


class BiomeRegistry:
    """Owns every biome's climate data; the only way to reach the models."""

    def __init__(self, biomes: Mapping[str, BiomeClimate], weathers: Iterable[WeatherDef]):
        self._biomes = MappingProxyType(dict(biomes))
        self._weathers = MappingProxyType({weather.name: weather for weather in weathers})

    @classmethod
    def build(cls, biomes: Iterable[BiomeDef], weathers: Iterable[WeatherDef],
              default_weather: str = DEFAULT_WEATHER) -> "BiomeRegistry":
        """Create models for every playable biome with default settings.

        Biomes that are not implemented or cannot host a base are skipped.
        Every biome gets a profile for every weather; its base commonality
        comes from the biome definition (0 when the biome does not list it).
        """
        weather_list: List[WeatherDef] = list(weathers)
        by_name = {weather.name: weather for weather in weather_list}
        if default_weather not in by_name:
            raise UnknownWeatherError(f"Default weather {default_weather!r} is not registered")

        climates: Dict[str, BiomeClimate] = {}
        for biome in biomes:
            if not (biome.implemented and biome.can_build_base):
                log.debug("Skipping biome %s: not playable.", biome.name)
                continue
            profiles = {
                weather.name: WeatherProfile(
                    weather,
                    WeatherProfile.default_settings(
                        weather, biome.base_weather_commonalities.get(weather.name, 0.0)),
                )
                for weather in weather_list
            }
            climates[biome.name] = BiomeClimate(
                biome, TemperatureModel(), profiles, by_name[default_weather])

        log.debug("Built climate registry: %d biomes, %d weathers.",
                  len(climates), len(weather_list))
        return cls(climates, weather_list)

    def __contains__(self, biome_name: str) -> bool:
        return biome_name in self._biomes

    def __len__(self) -> int:
        return len(self._biomes)

    @property
    def biome_names(self) -> Tuple[str, ...]:
        return tuple(self._biomes)

    @property
    def weathers(self) -> Tuple[WeatherDef, ...]:
        """Every registered weather, in registration order."""
        return tuple(self._weathers.values())

    def weather(self, weather_name: str) -> WeatherDef:
        try:
            return self._weathers[weather_name]
        except KeyError:
            raise UnknownWeatherError(f"Weather {weather_name!r} is not registered") from None

    def climate(self, biome_name: str) -> BiomeClimate:
        try:
            return self._biomes[biome_name]
        except KeyError:
            raise UnknownBiomeError(f"Biome {biome_name!r} is not registered") from None

    def temperature_model(self, biome_name: str) -> TemperatureModel:
        return self.climate(biome_name).temperature

    def weather_profile(self, biome_name: str, weather_name: str) -> WeatherProfile:
        return self.climate(biome_name).profile(weather_name)

    def find_by_key(self, key: str) -> Optional[BiomeClimate]:
        """Look a biome up by its letters-only settings key."""
        for climate in self._biomes.values():
            if climate.biome.key == key:
                return climate
        return None
