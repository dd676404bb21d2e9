"""
forecast_net module: neural/engine.py

Forward propagation through the fixed 4-4-1 network with a full trace:
- step 1: input neurons take the normalized readings
- step 2: hidden neurons compute sigmoid(weighted sum + bias)
- step 3: output neuron computes the final prediction

Every call builds fresh neurons/connections; nothing is shared between runs.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, List, Mapping, Sequence, Tuple, Union
import logging
import math

from neural.activation import sigmoid
from neural.errors import ConfigurationError, InputShapeError
from neural.neuron import Neuron, NeuronLayer
from neural.synapse import Connection, build_connections
from neural.weights import N_HIDDEN, N_INPUTS, WeightTable, default_weights

logger = logging.getLogger(__name__)

WeightsLike = Union[WeightTable, Mapping, None]


@dataclass(frozen=True)
class CalculationRecord:
    neuron_id: str
    inputs: Tuple[Tuple[str, float, float], ...]  # (source id, source value, weight)
    weighted_sum: float
    bias: float
    output: float
    formula: str


@dataclass(frozen=True)
class PropagationStep:
    step: int
    description: str
    active_neurons: Tuple[str, ...]
    active_connections: Tuple[str, ...]
    calculations: Tuple[CalculationRecord, ...]


@dataclass(frozen=True)
class PropagationResult:
    steps: Tuple[PropagationStep, ...]
    final_output: float
    neurons: Tuple[Neuron, ...]
    connections: Tuple[Connection, ...]

    def neuron(self, nid: str) -> Neuron:
        for n in self.neurons:
            if n.id == nid:
                return n
        raise KeyError(f"Neuron '{nid}' not found")

    def connections_through(self, step: int) -> List[Connection]:
        """
        Connections as they look after steps 1..step have run
        (activated flag set for every connection those steps exercised).
        """
        used = set()
        for s in self.steps:
            if s.step <= step:
                used.update(s.active_connections)
        return [replace(c, activated=c.id in used) for c in self.connections]


def resolve_weights(weights: WeightsLike) -> WeightTable:
    if weights is None:
        return default_weights()
    if isinstance(weights, WeightTable):
        return weights
    if isinstance(weights, Mapping):
        return WeightTable.from_mapping(weights)
    raise ConfigurationError(f"unsupported weight table type: {type(weights).__name__}")


def check_inputs(inputs: Sequence[float]) -> Tuple[float, ...]:
    if isinstance(inputs, (str, bytes)) or not isinstance(inputs, Sequence):
        raise InputShapeError(f"inputs must be a sequence of {N_INPUTS} numbers")
    if len(inputs) != N_INPUTS:
        raise InputShapeError(
            f"expected {N_INPUTS} inputs, got {len(inputs)}",
            {"expected": N_INPUTS, "actual": len(inputs)},
        )
    try:
        return tuple(float(v) for v in inputs)
    except (TypeError, ValueError) as exc:
        raise InputShapeError("inputs must be numeric") from exc


def _calculate(
    target: Neuron,
    sources: Sequence[Neuron],
    weights: Sequence[float],
    bias: float,
) -> CalculationRecord:
    terms = tuple((src.id, src.value, w) for src, w in zip(sources, weights))
    total = math.fsum(value * w for _, value, w in terms)
    output = sigmoid(total + bias)

    target.weighted_sum = total + bias
    target.bias = bias
    target.value = output
    target.activated = True

    return CalculationRecord(
        neuron_id=target.id,
        inputs=terms,
        weighted_sum=total,
        bias=bias,
        output=output,
        formula=f"σ({total:.3f} + {bias:.3f}) = {output:.3f}",
    )


def propagate(inputs: Sequence[float], weights: WeightsLike = None) -> PropagationResult:
    """
    Run one forward pass and return the three-step trace, the final
    prediction, and the neuron states. Raises InputShapeError /
    ConfigurationError before any neuron is touched.
    """
    table = resolve_weights(weights)
    values = check_inputs(inputs)

    input_layer = [Neuron(NeuronLayer.INPUT, i) for i in range(N_INPUTS)]
    hidden_layer = [Neuron(NeuronLayer.HIDDEN, j) for j in range(N_HIDDEN)]
    output_neuron = Neuron(NeuronLayer.OUTPUT, 0)
    connections = build_connections(table)

    by_dst: Dict[str, List[str]] = {}
    for c in connections:
        by_dst.setdefault(c.dst, []).append(c.id)

    steps: List[PropagationStep] = []

    # ---- step 1: inputs ----
    for n, v in zip(input_layer, values):
        n.value = v
        n.activated = True
    steps.append(
        PropagationStep(
            step=1,
            description="Input values are set and normalized",
            active_neurons=tuple(n.id for n in input_layer),
            active_connections=(),
            calculations=(),
        )
    )
    logger.debug("input layer set: %s", values)

    # ---- step 2: hidden layer ----
    hidden_calcs = []
    for j, h in enumerate(hidden_layer):
        column = [row[j] for row in table.input_to_hidden]
        hidden_calcs.append(_calculate(h, input_layer, column, table.hidden_bias[j]))
    steps.append(
        PropagationStep(
            step=2,
            description="Hidden layer neurons calculate weighted sums and apply activation function",
            active_neurons=tuple(h.id for h in hidden_layer),
            active_connections=tuple(cid for h in hidden_layer for cid in by_dst[h.id]),
            calculations=tuple(hidden_calcs),
        )
    )
    logger.debug("hidden layer: %s", [c.formula for c in hidden_calcs])

    # ---- step 3: output ----
    out_calc = _calculate(output_neuron, hidden_layer, table.hidden_to_output, table.output_bias)
    steps.append(
        PropagationStep(
            step=3,
            description="Output neuron calculates final prediction",
            active_neurons=(output_neuron.id,),
            active_connections=tuple(by_dst[output_neuron.id]),
            calculations=(out_calc,),
        )
    )
    logger.debug("output: %s", out_calc.formula)

    return PropagationResult(
        steps=tuple(steps),
        final_output=out_calc.output,
        neurons=tuple(input_layer + hidden_layer + [output_neuron]),
        connections=tuple(c.activate() for c in connections),
    )
