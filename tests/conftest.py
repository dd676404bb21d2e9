from __future__ import annotations

import logging
from typing import Generator

import pytest

from neural.weights import WeightTable, default_weights

# "Perfect Conditions": 25 °C, 40 %, 15 m/s, 1000 W/m²
PERFECT_INPUTS = [0.75, 0.40, 0.50, 1.00]


@pytest.fixture()
def weights() -> WeightTable:
    return default_weights()


@pytest.fixture()
def perfect_inputs() -> list[float]:
    return list(PERFECT_INPUTS)


@pytest.fixture()
def uniform_weights() -> WeightTable:
    """Every input row identical, so equal inputs tie on importance."""
    row = [0.5, -0.5, 0.25, 1.0]
    return WeightTable(
        input_to_hidden=[row, row, row, row],
        hidden_to_output=[1.0, 1.0, 1.0, 1.0],
        hidden_bias=[0.0, 0.0, 0.0, 0.0],
        output_bias=0.0,
    )


@pytest.fixture()
def restore_root_logging() -> Generator[logging.Logger, None, None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
