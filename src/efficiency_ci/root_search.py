"""Bracket-and-bisect searches for interval endpoints.

Given one fixed edge of an interval, these helpers locate the other edge so
that the posterior mass between them equals a target confidence level. Each
search returns an :class:`EndpointSearch` outcome which is either feasible
(with an endpoint) or infeasible (no endpoint inside ``[0, 1]`` can reach
the requested mass).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from efficiency_ci.beta_utils import beta_mass

MAX_BISECTIONS = 50
MASS_TOLERANCE = 1.0e-15


@dataclass(frozen=True)
class EndpointSearch:
    """Outcome of a single endpoint search.

    Parameters
    ----------
    endpoint:
        Located interval edge, or ``None`` when no solution exists.
    mass:
        Last posterior mass evaluated by the search. For an infeasible
        search this is the largest mass reachable from the fixed edge.
    iterations:
        Number of bisection steps performed.
    """

    endpoint: Optional[float]
    mass: float
    iterations: int = 0

    @property
    def feasible(self) -> bool:
        """Return ``True`` when the search located an endpoint."""

        return self.endpoint is not None


def search_upper(low: float, k: int, n: int, confidence: float) -> EndpointSearch:
    """Return the upper edge of the interval starting at ``low``.

    Parameters
    ----------
    low:
        Fixed lower edge of the interval.
    k:
        Number of observed successes.
    n:
        Number of observed trials.
    confidence:
        Posterior mass the interval ``[low, high]`` must contain.

    Returns
    -------
    EndpointSearch
        Feasible outcome holding ``high`` or an infeasible outcome when
        the mass over ``[low, 1]`` is already below ``confidence``.
    """

    total = beta_mass(low, 1.0, k, n)
    if total == confidence:
        return EndpointSearch(endpoint=1.0, mass=total)
    if total < confidence:
        return EndpointSearch(endpoint=None, mass=total)

    too_low = low
    too_high = 1.0
    test = too_low
    mass = total
    iterations = 0
    for iterations in range(1, MAX_BISECTIONS + 1):
        test = 0.5 * (too_low + too_high)
        mass = beta_mass(low, test, k, n)
        if mass > confidence:
            too_high = test
        else:
            too_low = test
        if abs(mass - confidence) <= MASS_TOLERANCE:
            break
    return EndpointSearch(endpoint=test, mass=mass, iterations=iterations)


def search_lower(high: float, k: int, n: int, confidence: float) -> EndpointSearch:
    """Return the lower edge of the interval ending at ``high``.

    Mirror image of :func:`search_upper`: the mass over ``[0, high]`` decides
    feasibility and the bracket starts as ``[0, high]``.
    """

    total = beta_mass(0.0, high, k, n)
    if total == confidence:
        return EndpointSearch(endpoint=0.0, mass=total)
    if total < confidence:
        return EndpointSearch(endpoint=None, mass=total)

    too_low = 0.0
    too_high = high
    test = too_high
    mass = total
    iterations = 0
    for iterations in range(1, MAX_BISECTIONS + 1):
        test = 0.5 * (too_low + too_high)
        mass = beta_mass(test, high, k, n)
        if mass > confidence:
            too_low = test
        else:
            too_high = test
        if abs(mass - confidence) <= MASS_TOLERANCE:
            break
    return EndpointSearch(endpoint=test, mass=mass, iterations=iterations)


__all__ = [
    "MAX_BISECTIONS",
    "MASS_TOLERANCE",
    "EndpointSearch",
    "search_upper",
    "search_lower",
]
