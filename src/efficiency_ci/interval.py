"""Shortest Bayesian confidence intervals for a binomial efficiency.

The posterior for a success proportion after ``k`` successes in ``n`` trials
under a uniform prior is Beta(k + 1, n - k + 1). :func:`efficiency_interval`
returns the mode ``k / n`` together with the shortest interval containing a
requested share of that posterior.

Two cases are solved directly: for ``k == 0`` the density decreases away from
zero, so the interval starts at zero; for ``k == n`` it increases towards one,
so the interval ends at one. Otherwise the lower edge is chosen by Brent
minimisation of the interval length, where the length for a given lower
edge comes from a bisection search for the matching upper edge.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Dict

from efficiency_ci.brent import MAX_ITERATIONS, brent_minimize
from efficiency_ci.errors import InfeasibleIntervalError, InvalidObservationError
from efficiency_ci.root_search import EndpointSearch, search_lower, search_upper

LOGGER = logging.getLogger(__name__)

# One-sigma Gaussian coverage.
DEFAULT_CONFIDENCE = 0.682689
MINIMIZER_TOLERANCE = 1.0e-9
# Longer than any interval inside [0, 1]; never leaves this module.
INFEASIBLE_LENGTH = 2.0


@dataclass(frozen=True)
class EfficiencyInterval:
    """Point estimate and shortest interval for one observation.

    Parameters
    ----------
    mode:
        Most probable efficiency, ``k / n`` (``0.5`` when ``n == 0``).
    low:
        Lower edge of the interval.
    high:
        Upper edge of the interval.
    converged:
        ``False`` when the minimiser ran out of iterations; the interval is
        then the best estimate found rather than a converged answer.
    iterations:
        Minimiser iterations used (zero for the directly solved cases).
    """

    mode: float
    low: float
    high: float
    converged: bool = True
    iterations: int = 0

    @property
    def length(self) -> float:
        """Return ``high - low``."""

        return self.high - self.low

    @property
    def error_low(self) -> float:
        """Return the distance from the lower edge up to the mode."""

        return self.mode - self.low

    @property
    def error_high(self) -> float:
        """Return the distance from the mode up to the upper edge."""

        return self.high - self.mode

    def as_dict(self) -> Dict[str, object]:
        """Return the interval and its asymmetric errors as a plain dict."""

        return {
            "mode": self.mode,
            "low": self.low,
            "high": self.high,
            "error_low": self.error_low,
            "error_high": self.error_high,
            "converged": self.converged,
        }


@dataclass(frozen=True)
class IntervalContext:
    """Observation and confidence level fixed during one minimisation."""

    k: int
    n: int
    confidence: float

    def length(self, low: float) -> float:
        """Return the length of the interval of the target mass starting at ``low``.

        When no such interval fits below one the internal sentinel
        :data:`INFEASIBLE_LENGTH` is returned so the minimiser never prefers
        that starting point.
        """

        search = search_upper(low, self.k, self.n, self.confidence)
        if not search.feasible:
            return INFEASIBLE_LENGTH
        return search.endpoint - low


def validate_observation(k: int, n: int, confidence: float) -> None:
    """Raise :class:`InvalidObservationError` for out-of-range input.

    Counts must be non-negative integers with ``k <= n`` and the confidence
    level must be a finite number strictly between zero and one.
    """

    for name, value in (("k", k), ("n", n)):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise InvalidObservationError(
                f"{name} must be an integer count, got {value!r}"
            )
        if value < 0:
            raise InvalidObservationError(
                f"{name} must be non-negative, got {value!r}"
            )
    if k > n:
        raise InvalidObservationError(f"successes k={k} cannot exceed trials n={n}")
    if isinstance(confidence, bool) or not isinstance(confidence, Real):
        raise InvalidObservationError(
            f"confidence must be a number, got {confidence!r}"
        )
    if not math.isfinite(confidence) or not 0.0 < confidence < 1.0:
        raise InvalidObservationError(
            f"confidence must be in (0, 1), got {confidence!r}"
        )


def _require_endpoint(search: EndpointSearch, description: str) -> float:
    if not search.feasible:
        raise InfeasibleIntervalError(
            f"no {description} contains the requested mass "
            f"(largest reachable mass {search.mass:.6g})"
        )
    return search.endpoint


def efficiency_interval(
    k: int,
    n: int,
    confidence: float = DEFAULT_CONFIDENCE,
    *,
    tol: float = MINIMIZER_TOLERANCE,
    max_iter: int = MAX_ITERATIONS,
) -> EfficiencyInterval:
    """Return the mode and shortest interval for ``k`` successes in ``n`` trials.

    Parameters
    ----------
    k:
        Number of successes.
    n:
        Number of trials.
    confidence:
        Posterior mass the interval must contain, in ``(0, 1)``.
    tol:
        Fractional tolerance of the lower edge search.
    max_iter:
        Iteration budget of the lower edge search.

    Returns
    -------
    EfficiencyInterval
        ``(0.5, 0, 1)`` when ``n == 0``; otherwise the mode ``k / n`` and the
        shortest interval with posterior mass ``confidence``.

    Raises
    ------
    InvalidObservationError
        If the counts or confidence level are out of range.
    InfeasibleIntervalError
        If no interval with the requested mass could be located.
    """

    validate_observation(k, n, confidence)
    k = int(k)
    n = int(n)
    confidence = float(confidence)

    if n == 0:
        return EfficiencyInterval(mode=0.5, low=0.0, high=1.0)

    mode = k / n

    if k == 0:
        search = search_upper(0.0, k, n, confidence)
        high = _require_endpoint(search, "interval starting at zero")
        LOGGER.debug(
            "k=0, n=%d: upper edge %.12g after %d bisections",
            n,
            high,
            search.iterations,
        )
        return EfficiencyInterval(mode=mode, low=0.0, high=high)

    if k == n:
        search = search_lower(1.0, k, n, confidence)
        low = _require_endpoint(search, "interval ending at one")
        LOGGER.debug(
            "k=n=%d: lower edge %.12g after %d bisections",
            n,
            low,
            search.iterations,
        )
        return EfficiencyInterval(mode=mode, low=low, high=1.0)

    context = IntervalContext(k=k, n=n, confidence=confidence)
    result = brent_minimize(context.length, 0.0, 0.5, 1.0, tol=tol, max_iter=max_iter)
    low = result.x
    high = _require_endpoint(
        search_upper(low, k, n, confidence),
        f"interval starting at {low:.6g}",
    )
    # For tiny confidence levels the length is flat below float resolution
    # and the minimum can land beside the mode; anchor the interval on it.
    if low > mode:
        low = mode
        high = _require_endpoint(
            search_upper(mode, k, n, confidence),
            "interval starting at the mode",
        )
    elif high < mode:
        high = mode
        low = _require_endpoint(
            search_lower(mode, k, n, confidence),
            "interval ending at the mode",
        )
    LOGGER.debug(
        "k=%d, n=%d: interval [%.12g, %.12g] after %d iterations",
        k,
        n,
        low,
        high,
        result.iterations,
    )
    return EfficiencyInterval(
        mode=mode,
        low=low,
        high=high,
        converged=result.converged,
        iterations=result.iterations,
    )


__all__ = [
    "DEFAULT_CONFIDENCE",
    "MINIMIZER_TOLERANCE",
    "EfficiencyInterval",
    "IntervalContext",
    "validate_observation",
    "efficiency_interval",
]
