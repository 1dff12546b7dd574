# climate/temperature.py
"""
Per-biome temperature model.

Holds the configured daily curve, seasonal amplitude, weather temperature
bounds and condition offset overrides for one biome, and answers the
temperature queries the simulation makes against them.

Configuration changes go through the set_* methods. Every setter rebuilds a
single frozen TemperatureParams snapshot and swaps it in with one assignment,
so concurrent readers see either the old or the new configuration, never a
mix of both.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional

from climate.config import (
    CONDITION_LERP_TICKS,
    CONDITION_OFFSET_DEFAULT,
    DAILY_PEAK_ANCHOR,
    DEFAULT_DIURNAL_MULTIPLIER,
    DEFAULT_DIURNAL_OFFSET,
    DEFAULT_MAX_WEATHER_TEMPERATURE,
    DEFAULT_MIN_WEATHER_TEMPERATURE,
    DEFAULT_SEASONAL_AMPLITUDE,
    SEASONAL_EQUATOR_POINT,
    SEASONAL_POLE_DISTANCE,
    SEASONAL_SHIFT_DIVISOR,
    SEASONAL_TROPIC_POINT,
)
from climate.curves import CurveKind, evaluate_curve
from utils import Numeric, SimpleCurve, lerp_in_out


def build_seasonal_curve(amplitude: float) -> SimpleCurve:
    """Seasonal shift by normalized distance from the equator.

    shift = amplitude / 2 / 28; the curve runs through (0.0, 3*shift),
    (0.1, 4*shift) and (1.0, amplitude).
    """
    shift = amplitude / 2 / SEASONAL_SHIFT_DIVISOR
    return SimpleCurve([
        (SEASONAL_EQUATOR_POINT[0], SEASONAL_EQUATOR_POINT[1] * shift),
        (SEASONAL_TROPIC_POINT[0], SEASONAL_TROPIC_POINT[1] * shift),
        (SEASONAL_POLE_DISTANCE, amplitude),
    ])


@dataclass(frozen=True)
class TemperatureParams:
    """Immutable snapshot of a biome's temperature configuration."""
    curve_kind: CurveKind = CurveKind.VANILLA
    diurnal_multiplier: float = DEFAULT_DIURNAL_MULTIPLIER
    diurnal_offset: float = DEFAULT_DIURNAL_OFFSET
    seasonal_amplitude: float = DEFAULT_SEASONAL_AMPLITUDE
    min_weather_temperature: float = DEFAULT_MIN_WEATHER_TEMPERATURE
    max_weather_temperature: float = DEFAULT_MAX_WEATHER_TEMPERATURE
    condition_offsets: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType({}))

    # Derived, filled in by __post_init__
    effective_amplitude: float = field(init=False)
    effective_offset: float = field(init=False)
    seasonal_curve: SimpleCurve = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        amplitude = self.diurnal_multiplier / 2
        # Keep the daily maximum near the anchor whatever the swing
        object.__setattr__(self, "effective_amplitude", amplitude)
        object.__setattr__(self, "effective_offset",
                           DAILY_PEAK_ANCHOR - amplitude + self.diurnal_offset)
        object.__setattr__(self, "seasonal_curve",
                           build_seasonal_curve(self.seasonal_amplitude))


class TemperatureModel:
    """Temperature curves and offsets for a single biome."""

    def __init__(self, params: Optional[TemperatureParams] = None):
        self._params = params if params is not None else TemperatureParams()
        self._write_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"TemperatureModel({self._params!r})"

    @property
    def params(self) -> TemperatureParams:
        return self._params

    @property
    def curve_kind(self) -> CurveKind:
        return self._params.curve_kind

    @property
    def effective_amplitude(self) -> float:
        return self._params.effective_amplitude

    @property
    def effective_offset(self) -> float:
        return self._params.effective_offset

    # =========================================================================
    # Queries
    # =========================================================================

    def calculate_diurnal_temperature(self, phase: Numeric) -> Numeric:
        """Temperature offset from the sun cycle at a diurnal phase (radians).

        Accepts a scalar or a numpy array of phases.
        """
        params = self._params
        return (evaluate_curve(params.curve_kind, phase, params.effective_amplitude)
                + params.effective_offset)

    def calculate_seasonal_temperature(self, normalized_distance: float) -> float:
        """Seasonal shift amplitude at a normalized distance from the equator.

        Distances outside [0, 1] take the value at the nearest endpoint. The
        caller flips the sign for the southern hemisphere.
        """
        return self._params.seasonal_curve.evaluate(normalized_distance)

    def bound_weather_temperature(self, raw: float) -> float:
        """Force a temperature into the configured weather bounds.

        The minimum is applied first and the maximum second, so a minimum
        above the maximum yields the maximum for every input.
        """
        params = self._params
        return min(max(raw, params.min_weather_temperature),
                   params.max_weather_temperature)

    def has_condition_override(self, condition_kind: str) -> bool:
        value = self._params.condition_offsets.get(condition_kind)
        return value is not None and value != CONDITION_OFFSET_DEFAULT

    def condition_temperature_offset(self, condition_kind: str, ticks_elapsed: int,
                                     ticks_remaining: int, fallback: float) -> float:
        """Temperature offset caused by an active condition.

        Without an override for condition_kind the fallback is returned as is.
        With one, the override ramps in over the first CONDITION_LERP_TICKS of
        the condition and back out over the last CONDITION_LERP_TICKS.
        """
        maximum = self._params.condition_offsets.get(condition_kind)
        if maximum is None or maximum == CONDITION_OFFSET_DEFAULT:
            return fallback
        return lerp_in_out(ticks_elapsed, ticks_remaining, CONDITION_LERP_TICKS, maximum)

    # =========================================================================
    # Configuration
    # =========================================================================

    def _update(self, **changes) -> None:
        with self._write_lock:
            self._params = replace(self._params, **changes)

    def set_curve_kind(self, kind) -> None:
        """Select the daily curve; unknown values fall back to VANILLA."""
        self._update(curve_kind=CurveKind.parse(kind))

    def set_diurnal_parameters(self, multiplier: Optional[float] = None,
                               offset: Optional[float] = None) -> None:
        changes = {}
        if multiplier is not None:
            changes["diurnal_multiplier"] = float(multiplier)
        if offset is not None:
            changes["diurnal_offset"] = float(offset)
        self._update(**changes)

    def set_seasonal_amplitude(self, amplitude: float) -> None:
        self._update(seasonal_amplitude=float(amplitude))

    def set_weather_temperature_bounds(self, minimum: Optional[float] = None,
                                       maximum: Optional[float] = None) -> None:
        changes = {}
        if minimum is not None:
            changes["min_weather_temperature"] = float(minimum)
        if maximum is not None:
            changes["max_weather_temperature"] = float(maximum)
        self._update(**changes)

    def set_condition_offset(self, condition_kind: str, maximum: Optional[float]) -> None:
        """Override the peak offset of a condition; None removes the override."""
        with self._write_lock:
            offsets = dict(self._params.condition_offsets)
            if maximum is None:
                offsets.pop(condition_kind, None)
            else:
                offsets[condition_kind] = float(maximum)
            self._params = replace(self._params,
                                   condition_offsets=MappingProxyType(offsets))
