"""
forecast_net module: weather/normalizer.py

Maps raw weather readings into the network's input domain.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Mapping, Union
import logging

import config
from neural.errors import InputShapeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeatherReading:
    temperature: float      # °C
    humidity: float         # %
    wind_speed: float       # m/s
    solar_radiation: float  # W/m²

    @staticmethod
    def from_mapping(data: Mapping[str, float]) -> "WeatherReading":
        """
        Accepts snake_case or camelCase keys (windSpeed, solarRadiation).
        """
        def pick(*keys: str) -> float:
            for k in keys:
                if k in data:
                    return float(data[k])
            raise InputShapeError(f"weather reading is missing '{keys[0]}'", {"field": keys[0]})

        return WeatherReading(
            temperature=pick("temperature"),
            humidity=pick("humidity"),
            wind_speed=pick("wind_speed", "windSpeed"),
            solar_radiation=pick("solar_radiation", "solarRadiation"),
        )


def normalize(reading: Union[WeatherReading, Mapping[str, float]]) -> List[float]:
    """
    Returns [temperature, humidity, wind, solar] scaled to roughly 0..1.
    No clamping: readings outside the usual ranges give values outside 0..1.
    """
    if not isinstance(reading, WeatherReading):
        reading = WeatherReading.from_mapping(reading)

    out = [
        (reading.temperature + config.TEMPERATURE_OFFSET) / config.TEMPERATURE_SCALE,
        reading.humidity / config.HUMIDITY_SCALE,
        reading.wind_speed / config.WIND_SPEED_SCALE,
        reading.solar_radiation / config.SOLAR_RADIATION_SCALE,
    ]

    for name, v in zip(config.FEATURE_NAMES, out):
        if not 0.0 <= v <= 1.0:
            logger.warning("%s normalizes outside [0, 1]: %.4f", name, v)
    return out
