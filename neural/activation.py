"""
forecast_net module: neural/activation.py

Scalar activation functions.
"""

from __future__ import annotations
import math


def sigmoid(x: float) -> float:
    # saturates toward 0/1 instead of overflowing math.exp
    x = max(-500.0, min(500.0, x))
    return 1.0 / (1.0 + math.exp(-x))


def relu(x: float) -> float:
    return max(0.0, x)
