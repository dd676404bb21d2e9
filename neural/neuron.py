"""
forecast_net module: neural/neuron.py

Neuron primitives for the fixed 4-4-1 forecast network.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class NeuronLayer(Enum):
    INPUT = "input"
    HIDDEN = "hidden"
    OUTPUT = "output"


def neuron_id(layer: NeuronLayer, index: int) -> str:
    return f"{layer.value}-{index}"


@dataclass
class Neuron:
    layer: NeuronLayer
    index: int
    value: float = 0.0
    weighted_sum: float | None = None  # pre-activation: weighted inputs + bias
    bias: float | None = None
    activated: bool = False

    @property
    def id(self) -> str:
        return neuron_id(self.layer, self.index)
