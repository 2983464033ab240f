"""Exceptions raised while computing efficiency intervals."""

from __future__ import annotations


class EfficiencyIntervalError(Exception):
    """Base class for failures of a single interval computation."""


class InvalidObservationError(EfficiencyIntervalError, ValueError):
    """Raised when counts or the confidence level are out of range."""


class InfeasibleIntervalError(EfficiencyIntervalError, RuntimeError):
    """Raised when no endpoint captures the requested posterior mass."""


__all__ = [
    "EfficiencyIntervalError",
    "InvalidObservationError",
    "InfeasibleIntervalError",
]
