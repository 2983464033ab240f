"""Beta posterior utilities used by the interval solvers.

This module provides small helpers for working with the Beta posterior of a
binomial proportion under a uniform prior in a consistent way across the
root search, the minimizer objective and the tests.
"""

from __future__ import annotations

from typing import Tuple

from scipy.special import betainc, betaincc


def posterior_parameters(k: int, n: int) -> Tuple[float, float]:
    """Return ``(alpha, beta)`` of the posterior after ``k`` of ``n`` successes.

    A uniform Beta(1, 1) prior updated with ``k`` successes and ``n - k``
    failures yields Beta(k + 1, n - k + 1).
    """

    return float(k + 1), float(n - k + 1)


def beta_mass(x0: float, x1: float, k: int, n: int) -> float:
    """Return the posterior probability mass between ``x0`` and ``x1``.

    Parameters
    ----------
    x0:
        Lower edge of the integration range. Values below zero are clamped.
    x1:
        Upper edge of the integration range. Values above one are clamped.
    k:
        Number of observed successes.
    n:
        Number of observed trials.

    Returns
    -------
    float
        Mass of Beta(k + 1, n - k + 1) over ``[x0, x1]``, or ``0.0`` when the
        clamped range is empty.
    """

    lower = min(max(float(x0), 0.0), 1.0)
    upper = min(max(float(x1), 0.0), 1.0)
    if upper <= lower:
        return 0.0

    alpha, beta = posterior_parameters(k, n)
    if upper >= 1.0:
        # Upper tail directly, so masses close to one keep full precision.
        mass = float(betaincc(alpha, beta, lower))
    elif lower <= 0.0:
        mass = float(betainc(alpha, beta, upper))
    else:
        mass = float(betainc(alpha, beta, upper) - betainc(alpha, beta, lower))
    return min(max(mass, 0.0), 1.0)


__all__ = ["posterior_parameters", "beta_mass"]
