"""
forecast_net module: neural/synapse.py

Weighted directed connection between neurons.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import List

from neural.neuron import NeuronLayer, neuron_id
from neural.weights import WeightTable


@dataclass(frozen=True)
class Connection:
    src: str
    dst: str
    weight: float
    activated: bool = False

    @property
    def id(self) -> str:
        return f"{self.src}->{self.dst}"

    def activate(self) -> "Connection":
        return replace(self, activated=True)


def build_connections(weights: WeightTable) -> List[Connection]:
    """
    All connections of the 4-4-1 topology:
      - input->hidden, input-major (input-0->hidden-0, input-0->hidden-1, ...)
      - hidden->output in hidden order
    """
    conns: List[Connection] = []
    for i, row in enumerate(weights.input_to_hidden):
        for j, w in enumerate(row):
            conns.append(
                Connection(
                    src=neuron_id(NeuronLayer.INPUT, i),
                    dst=neuron_id(NeuronLayer.HIDDEN, j),
                    weight=w,
                )
            )

    out_id = neuron_id(NeuronLayer.OUTPUT, 0)
    for j, w in enumerate(weights.hidden_to_output):
        conns.append(Connection(src=neuron_id(NeuronLayer.HIDDEN, j), dst=out_id, weight=w))
    return conns
