"""
forecast_net module: weather/prediction.py

One-call pipeline: normalize -> propagate -> attribute.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Mapping, Tuple, Union

from neural.attribution import FeatureImportance, attribute
from neural.engine import PropagationResult, WeightsLike, propagate, resolve_weights
from weather.normalizer import WeatherReading, normalize

# (threshold, label), checked top-down
_LEVELS = (
    (0.8, "Very High"),
    (0.6, "High"),
    (0.4, "Moderate"),
    (0.2, "Low"),
)


def prediction_level(value: float) -> str:
    for threshold, label in _LEVELS:
        if value >= threshold:
            return label
    return "Very Low"


@dataclass(frozen=True)
class Prediction:
    reading: WeatherReading
    inputs: Tuple[float, ...]
    result: PropagationResult
    importances: Tuple[FeatureImportance, ...]

    @property
    def value(self) -> float:
        return self.result.final_output

    @property
    def level(self) -> str:
        return prediction_level(self.value)

    @property
    def top_feature(self) -> FeatureImportance:
        return self.importances[0]


def predict(
    reading: Union[WeatherReading, Mapping[str, float]],
    weights: WeightsLike = None,
) -> Prediction:
    if not isinstance(reading, WeatherReading):
        reading = WeatherReading.from_mapping(reading)
    table = resolve_weights(weights)

    inputs: List[float] = normalize(reading)
    result = propagate(inputs, table)
    importances = attribute(inputs, table)
    return Prediction(
        reading=reading,
        inputs=tuple(inputs),
        result=result,
        importances=tuple(importances),
    )
