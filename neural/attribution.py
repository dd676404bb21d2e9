"""
forecast_net module: neural/attribution.py

Feature attribution for the 4-4-1 network.

For each input i, the raw total is the sum over hidden neurons j of
|input[i] * W_ih[i][j] * W_ho[j]|: the magnitude of every path from the
input to the output, ignoring sign and the sigmoid. Totals are scaled so the
strongest feature reads 100.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence
import logging

import config
from neural.engine import WeightsLike, check_inputs, resolve_weights

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeatureImportance:
    feature: str
    importance: float    # 0..100, max-normalized
    contribution: float  # input * raw total (signed by the input)


def raw_totals(inputs: Sequence[float], weights: WeightsLike = None) -> List[float]:
    table = resolve_weights(weights)
    values = check_inputs(inputs)
    totals: List[float] = []
    for x, row in zip(values, table.input_to_hidden):
        totals.append(sum(abs(x * w * v) for w, v in zip(row, table.hidden_to_output)))
    return totals


def attribute(inputs: Sequence[float], weights: WeightsLike = None) -> List[FeatureImportance]:
    """
    Returns one FeatureImportance per input, sorted by importance (descending).
    Equal importances keep feature order. All-zero totals give all-zero
    importances.
    """
    values = check_inputs(inputs)
    totals = raw_totals(values, weights)
    peak = max(totals)

    features: List[FeatureImportance] = []
    for name, x, total in zip(config.FEATURE_NAMES, values, totals):
        importance = total / peak * 100.0 if peak > 0.0 else 0.0
        features.append(FeatureImportance(feature=name, importance=importance, contribution=x * total))

    if peak == 0.0:
        logger.debug("all attribution totals are zero; importances left at 0")

    # sorted() is stable, reverse=True included
    return sorted(features, key=lambda f: f.importance, reverse=True)
