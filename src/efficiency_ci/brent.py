"""Bounded one-dimensional minimisation with Brent's method.

Golden-section search combined with inverse parabolic interpolation, as
described in Numerical Recipes (2nd edition, section 10.2). The branch
conditions follow that routine exactly so results are reproducible.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

LOGGER = logging.getLogger(__name__)

MAX_ITERATIONS = 100
GOLDEN_SECTION = 0.3819660
ZEPS = 1.0e-10


@dataclass(frozen=True)
class MinimizeResult:
    """Best point found by :func:`brent_minimize`.

    Parameters
    ----------
    x:
        Abscissa of the best point.
    fun:
        Objective value at ``x``.
    iterations:
        Number of bracket updates performed, that is objective evaluations
        after the one at ``start``.
    converged:
        ``False`` when the iteration budget ran out before the bracket
        shrank below the requested tolerance.
    """

    x: float
    fun: float
    iterations: int
    converged: bool


def _sign(magnitude: float, reference: float) -> float:
    """Return ``|magnitude|`` carrying the sign of ``reference``."""

    return abs(magnitude) if reference >= 0.0 else -abs(magnitude)


def brent_minimize(
    objective: Callable[[float], float],
    lower: float,
    start: float,
    upper: float,
    *,
    tol: float = 1.0e-9,
    max_iter: int = MAX_ITERATIONS,
) -> MinimizeResult:
    """Return a local minimum of ``objective`` inside ``[lower, upper]``.

    Parameters
    ----------
    objective:
        Function of one variable to minimise.
    lower, upper:
        Bracket edges; their order does not matter.
    start:
        Initial point strictly inside the bracket.
    tol:
        Fractional tolerance on the abscissa.
    max_iter:
        Iteration budget. Exhausting it logs a warning and returns the best
        point with ``converged=False``.

    Returns
    -------
    MinimizeResult
        Best point, objective value and convergence status.
    """

    a = min(lower, upper)
    b = max(lower, upper)
    x = w = v = start
    fx = fw = fv = objective(x)
    d = 0.0
    e = 0.0

    for iteration in range(1, max_iter + 1):
        xm = 0.5 * (a + b)
        tol1 = tol * abs(x) + ZEPS
        tol2 = 2.0 * tol1
        if abs(x - xm) <= tol2 - 0.5 * (b - a):
            return MinimizeResult(x=x, fun=fx, iterations=iteration - 1, converged=True)

        if abs(e) > tol1:
            # Trial parabolic fit through x, w and v.
            r = (x - w) * (fx - fv)
            q = (x - v) * (fx - fw)
            p = (x - v) * q - (x - w) * r
            q = 2.0 * (q - r)
            if q > 0.0:
                p = -p
            q = abs(q)
            etemp = e
            e = d
            if abs(p) >= abs(0.5 * q * etemp) or p <= q * (a - x) or p >= q * (b - x):
                e = a - x if x >= xm else b - x
                d = GOLDEN_SECTION * e
            else:
                d = p / q
                u = x + d
                if u - a < tol2 or b - u < tol2:
                    d = _sign(tol1, xm - x)
        else:
            e = a - x if x >= xm else b - x
            d = GOLDEN_SECTION * e

        u = x + d if abs(d) >= tol1 else x + _sign(tol1, d)
        fu = objective(u)

        if fu <= fx:
            if u >= x:
                a = x
            else:
                b = x
            v, w, x = w, x, u
            fv, fw, fx = fw, fx, fu
        else:
            if u < x:
                a = u
            else:
                b = u
            if fu <= fw or w == x:
                v, w = w, u
                fv, fw = fw, fu
            elif fu <= fv or v == x or v == w:
                v = u
                fv = fu

    LOGGER.warning(
        "Brent minimisation did not converge after %d iterations (x=%.12g)",
        max_iter,
        x,
    )
    return MinimizeResult(x=x, fun=fx, iterations=max_iter, converged=False)


__all__ = ["MAX_ITERATIONS", "MinimizeResult", "brent_minimize"]
