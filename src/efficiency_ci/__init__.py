"""
Shortest Bayesian confidence intervals for binomial efficiencies.
"""

from __future__ import annotations

from .batch import INTERVAL_FIELDNAMES, bayes_divide
from .beta_utils import beta_mass, posterior_parameters
from .brent import MinimizeResult, brent_minimize
from .errors import (
    EfficiencyIntervalError,
    InfeasibleIntervalError,
    InvalidObservationError,
)
from .interval import (
    DEFAULT_CONFIDENCE,
    EfficiencyInterval,
    IntervalContext,
    efficiency_interval,
    validate_observation,
)
from .root_search import EndpointSearch, search_lower, search_upper

__all__ = [
    "DEFAULT_CONFIDENCE",
    "INTERVAL_FIELDNAMES",
    "EfficiencyInterval",
    "EfficiencyIntervalError",
    "EndpointSearch",
    "InfeasibleIntervalError",
    "IntervalContext",
    "InvalidObservationError",
    "MinimizeResult",
    "bayes_divide",
    "beta_mass",
    "brent_minimize",
    "efficiency_interval",
    "posterior_parameters",
    "search_lower",
    "search_upper",
    "validate_observation",
]
