"""
forecast_net module: weather/presets.py

Named example scenarios. Static reference data; not validated by the core.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from weather.normalizer import WeatherReading


@dataclass(frozen=True)
class PresetScenario:
    name: str
    description: str
    reading: WeatherReading
    expected_outcome: str


PRESETS: Tuple[PresetScenario, ...] = (
    PresetScenario(
        name="Sunny Summer Day",
        description="High temperature, low humidity, moderate wind, high solar radiation",
        reading=WeatherReading(temperature=32, humidity=35, wind_speed=12, solar_radiation=950),
        expected_outcome="High renewable energy generation expected",
    ),
    PresetScenario(
        name="Windy Winter Day",
        description="Low temperature, high humidity, strong wind, low solar radiation",
        reading=WeatherReading(temperature=5, humidity=85, wind_speed=25, solar_radiation=200),
        expected_outcome="Moderate energy generation, primarily from wind",
    ),
    PresetScenario(
        name="Cloudy Spring Day",
        description="Moderate temperature, moderate humidity, light wind, medium solar radiation",
        reading=WeatherReading(temperature=18, humidity=60, wind_speed=8, solar_radiation=500),
        expected_outcome="Balanced but moderate energy generation",
    ),
    PresetScenario(
        name="Calm Night",
        description="Cool temperature, high humidity, no wind, no solar radiation",
        reading=WeatherReading(temperature=12, humidity=90, wind_speed=2, solar_radiation=0),
        expected_outcome="Very low renewable energy generation",
    ),
    PresetScenario(
        name="Perfect Conditions",
        description="Optimal temperature, low humidity, good wind, maximum solar radiation",
        reading=WeatherReading(temperature=25, humidity=40, wind_speed=15, solar_radiation=1000),
        expected_outcome="Maximum renewable energy generation",
    ),
)


def get_preset(name: str) -> PresetScenario:
    key = name.strip().lower()
    for p in PRESETS:
        if p.name.lower() == key:
            return p
    raise KeyError(f"Preset '{name}' not found")
