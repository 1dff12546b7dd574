#!/usr/bin/env python3
"""
Performance benchmarking script for the climate core.

Runs weather decisions and daily temperature curves headless to measure
decision cost and to show how often each weather is picked per biome.
"""
from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import argparse
import random
import time
from collections import Counter
from typing import Dict, List, Sequence

import numpy as np

from climate.curves import CurveKind
from config import TICKS_PER_DAY
from world.biomes import BiomeRegistry
from world.catalog import STANDARD_BIOMES, STANDARD_WEATHERS
from world.decider import RegionWeatherState, WeatherSelector

# Outdoor temperature used for each biome during the run
BIOME_TEMPERATURES: Dict[str, float] = {
    "TemperateForest": 12.0,
    "TropicalRainforest": 27.0,
    "AridShrubland": 22.0,
    "Desert": 30.0,
    "Tundra": -8.0,
}

REPORT_WIDTH = 60


def decision_timing(times: Sequence[float]) -> Dict[str, float]:
    """Summarize per-decision durations (seconds) in microseconds."""
    if len(times) == 0:
        return {"mean": 0.0, "median": 0.0, "p95": 0.0, "max": 0.0}
    micros = np.asarray(times, dtype=float) * 1e6
    return {
        "mean": float(micros.mean()),
        "median": float(np.median(micros)),
        "p95": float(np.percentile(micros, 95)),
        "max": float(micros.max()),
    }


def distribution_rows(counter: Counter) -> List[tuple]:
    """(weather, picks, share) rows, most picked first."""
    total = sum(counter.values())
    return [(weather, count, count / total if total else 0.0)
            for weather, count in counter.most_common()]


def print_distribution(biome: str, counter: Counter) -> None:
    print(f"\n{biome} ({sum(counter.values())} decisions)")
    for weather, count, share in distribution_rows(counter):
        bar = "#" * int(round(share * 30))
        print(f"  {weather:<20}{count:>7}  {share:6.1%}  {bar}")


def run_decision_benchmark(num_decisions: int = 5000, seed: int = 1) -> Dict[str, Counter]:
    """Time weather decisions for every biome and report the picks."""
    registry = BiomeRegistry.build(STANDARD_BIOMES, STANDARD_WEATHERS)
    selector = WeatherSelector(registry, random.Random(seed))
    picks: Dict[str, Counter] = {name: Counter() for name in registry.biome_names}
    times: List[float] = []

    print(f"\nRunning {num_decisions} decisions per biome...")
    for biome in registry.biome_names:
        temperature = BIOME_TEMPERATURES.get(biome, 15.0)
        current = registry.climate(biome).default_weather
        for i in range(num_decisions):
            state = RegionWeatherState(
                biome=biome,
                outdoor_temperature=temperature,
                ticks_game=TICKS_PER_DAY * 10 + i * 2500,
                current_weather=current,
                rainfall=1500.0,
            )
            start = time.perf_counter()
            current = selector.choose_next_weather(state)
            times.append(time.perf_counter() - start)
            picks[biome][current.name] += 1

    timing = decision_timing(times)
    print("\n" + "=" * REPORT_WIDTH)
    print("WEATHER DECISION TIMING")
    print("=" * REPORT_WIDTH)
    print(f"  {len(times)} decisions: mean {timing['mean']:.2f}us, "
          f"median {timing['median']:.2f}us, p95 {timing['p95']:.2f}us, "
          f"max {timing['max']:.2f}us")

    print("\n" + "=" * REPORT_WIDTH)
    print("WEATHER DISTRIBUTION")
    print("=" * REPORT_WIDTH)
    for biome, counter in picks.items():
        print_distribution(biome, counter)

    return picks


def run_curve_benchmark(samples: int = 100_000) -> None:
    """Time vectorized daily curve evaluation for each curve kind."""
    registry = BiomeRegistry.build(STANDARD_BIOMES, STANDARD_WEATHERS)
    model = registry.temperature_model(registry.biome_names[0])
    phases = np.linspace(0.0, 2 * np.pi, samples, endpoint=False)

    print("\n" + "=" * REPORT_WIDTH)
    print("DAILY CURVE EVALUATION")
    print("=" * REPORT_WIDTH)
    for kind in CurveKind:
        model.set_curve_kind(kind)
        start = time.perf_counter()
        temps = model.calculate_diurnal_temperature(phases)
        elapsed = time.perf_counter() - start
        print(f"  {kind.name:<10}{elapsed / samples * 1e9:8.1f}ns per sample, "
              f"range {temps.min():.2f}..{temps.max():.2f}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Benchmark the climate core")
    parser.add_argument("--decisions", type=int, default=5000)
    parser.add_argument("--seed", type=int, default=1)
    parser.add_argument("--curves-only", action="store_true")
    args = parser.parse_args()

    if not args.curves_only:
        run_decision_benchmark(args.decisions, args.seed)
    run_curve_benchmark()
