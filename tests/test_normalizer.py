from __future__ import annotations

import logging

import pytest

from neural.errors import InputShapeError
from weather.normalizer import WeatherReading, normalize


def test_perfect_conditions_normalization() -> None:
    reading = WeatherReading(temperature=25, humidity=40, wind_speed=15, solar_radiation=1000)
    assert normalize(reading) == pytest.approx([0.75, 0.40, 0.50, 1.00])


def test_range_endpoints() -> None:
    assert normalize(WeatherReading(-20, 0, 0, 0)) == pytest.approx([0.0, 0.0, 0.0, 0.0])
    assert normalize(WeatherReading(40, 100, 30, 1000)) == pytest.approx([1.0, 1.0, 1.0, 1.0])


def test_accepts_camel_case_mapping() -> None:
    values = normalize({"temperature": 10, "humidity": 50, "windSpeed": 6, "solarRadiation": 250})
    assert values == pytest.approx([0.5, 0.5, 0.2, 0.25])


def test_missing_reading_is_an_input_error() -> None:
    with pytest.raises(InputShapeError, match="solar_radiation"):
        normalize({"temperature": 10, "humidity": 50, "windSpeed": 6})


def test_out_of_range_is_not_clamped(caplog) -> None:
    reading = WeatherReading(temperature=70, humidity=50, wind_speed=6, solar_radiation=-100)
    with caplog.at_level(logging.WARNING, logger="weather.normalizer"):
        values = normalize(reading)
    assert values[0] == pytest.approx(1.5)
    assert values[3] == pytest.approx(-0.1)
    assert "Solar Radiation normalizes outside [0, 1]" in caplog.text
    assert "Temperature normalizes outside [0, 1]" in caplog.text


def test_in_range_reading_logs_nothing(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="weather.normalizer"):
        normalize(WeatherReading(20, 50, 10, 500))
    assert caplog.records == []
