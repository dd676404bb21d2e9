"""
forecast_net module: neural/weights.py

Immutable weight table for the 4-4-1 network.

Shape:
  - input_to_hidden: 4 rows (inputs) x 4 columns (hidden neurons)
  - hidden_to_output: 4
  - hidden_bias: 4
  - output_bias: scalar
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Tuple

import config
from neural.errors import ConfigurationError

N_INPUTS = 4
N_HIDDEN = 4

_KEY_ALIASES = {
    "input_to_hidden": ("input_to_hidden", "inputToHidden"),
    "hidden_to_output": ("hidden_to_output", "hiddenToOutput"),
    "hidden_bias": ("hidden_bias", "hiddenBias"),
    "output_bias": ("output_bias", "outputBias"),
}


def _vector(name: str, values: Any, size: int) -> Tuple[float, ...]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise ConfigurationError(f"{name} must be a sequence of {size} numbers", {"field": name})
    if len(values) != size:
        raise ConfigurationError(
            f"{name} must have exactly {size} entries, got {len(values)}",
            {"field": name, "expected": size, "actual": len(values)},
        )
    try:
        return tuple(float(v) for v in values)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} contains a non-numeric entry", {"field": name}) from exc


@dataclass(frozen=True)
class WeightTable:
    input_to_hidden: Tuple[Tuple[float, ...], ...]
    hidden_to_output: Tuple[float, ...]
    hidden_bias: Tuple[float, ...]
    output_bias: float

    def __post_init__(self) -> None:
        # rows are validated one by one so the error names the offending row
        if isinstance(self.input_to_hidden, (str, bytes)) or not isinstance(self.input_to_hidden, Sequence):
            raise ConfigurationError("input_to_hidden must be a 4x4 matrix", {"field": "input_to_hidden"})
        if len(self.input_to_hidden) != N_INPUTS:
            raise ConfigurationError(
                f"input_to_hidden must have exactly {N_INPUTS} rows, got {len(self.input_to_hidden)}",
                {"field": "input_to_hidden", "expected": N_INPUTS, "actual": len(self.input_to_hidden)},
            )
        rows = tuple(
            _vector(f"input_to_hidden[{i}]", row, N_HIDDEN) for i, row in enumerate(self.input_to_hidden)
        )

        if isinstance(self.output_bias, bool) or not isinstance(self.output_bias, (int, float)):
            raise ConfigurationError("output_bias must be a single number", {"field": "output_bias"})

        object.__setattr__(self, "input_to_hidden", rows)
        object.__setattr__(self, "hidden_to_output", _vector("hidden_to_output", self.hidden_to_output, N_HIDDEN))
        object.__setattr__(self, "hidden_bias", _vector("hidden_bias", self.hidden_bias, N_HIDDEN))
        object.__setattr__(self, "output_bias", float(self.output_bias))

    @staticmethod
    def from_mapping(data: Mapping[str, Any]) -> "WeightTable":
        """
        Build a table from a plain mapping. Accepts snake_case or camelCase keys
        (inputToHidden, hiddenToOutput, hiddenBias, outputBias).
        """
        kwargs = {}
        for field_name, aliases in _KEY_ALIASES.items():
            for key in aliases:
                if key in data:
                    kwargs[field_name] = data[key]
                    break
            else:
                raise ConfigurationError(f"weight table is missing '{field_name}'", {"field": field_name})
        return WeightTable(**kwargs)


def default_weights() -> WeightTable:
    """The built-in fixed weights."""
    return WeightTable(
        input_to_hidden=config.INPUT_TO_HIDDEN,
        hidden_to_output=config.HIDDEN_TO_OUTPUT,
        hidden_bias=config.HIDDEN_BIAS,
        output_bias=config.OUTPUT_BIAS,
    )
