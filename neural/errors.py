"""
forecast_net module: neural/errors.py

Exception types raised by the network core.
"""

from __future__ import annotations
from typing import Optional


class NetworkError(Exception):
    """Base exception for network core errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(NetworkError):
    """Raised when a weight table is malformed (wrong dimensions, missing keys)."""


class InputShapeError(NetworkError, ValueError):
    """Raised when an input vector or weather reading has the wrong shape."""
