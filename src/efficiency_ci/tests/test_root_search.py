"""
Tests for the bracket-and-bisect endpoint searches.
"""

from __future__ import annotations

import pytest

from efficiency_ci.beta_utils import beta_mass
from efficiency_ci.root_search import (
    MAX_BISECTIONS,
    EndpointSearch,
    search_lower,
    search_upper,
)


def test_search_upper_from_zero_matches_closed_form() -> None:
    """For k=0 the upper edge solves 1 - (1 - x)^(n + 1) = c."""

    search = search_upper(0.0, 0, 10, 0.68)

    assert search.feasible
    assert search.endpoint == pytest.approx(1.0 - 0.32 ** (1.0 / 11.0), abs=1e-12)
    assert search.mass == pytest.approx(0.68, abs=1e-14)
    assert 0 < search.iterations <= MAX_BISECTIONS


def test_search_lower_from_one_matches_closed_form() -> None:
    """For k=n the lower edge solves 1 - x^(n + 1) = c."""

    search = search_lower(1.0, 3, 3, 0.999999)

    assert search.feasible
    assert search.endpoint == pytest.approx(1.0e-6**0.25, abs=1e-9)
    assert search.endpoint > 0.0


def test_search_upper_interior_start_captures_target_mass() -> None:
    """The located upper edge should enclose the requested mass."""

    search = search_upper(0.1, 4, 12, 0.5)

    assert search.feasible
    assert 0.1 < search.endpoint < 1.0
    assert beta_mass(0.1, search.endpoint, 4, 12) == pytest.approx(0.5, abs=1e-13)


def test_search_lower_interior_end_captures_target_mass() -> None:
    """The located lower edge should enclose the requested mass."""

    search = search_lower(0.8, 7, 12, 0.5)

    assert search.feasible
    assert 0.0 < search.endpoint < 0.8
    assert beta_mass(search.endpoint, 0.8, 7, 12) == pytest.approx(0.5, abs=1e-13)


def test_search_upper_reports_infeasible_start() -> None:
    """Too little mass above the start should give an infeasible outcome."""

    search = search_upper(0.99, 1, 10, 0.68)

    assert not search.feasible
    assert search.endpoint is None
    assert search.mass < 0.68
    assert search.iterations == 0


def test_search_lower_reports_infeasible_end() -> None:
    """Too little mass below the end should give an infeasible outcome."""

    search = search_lower(0.01, 3, 3, 0.5)

    assert search == EndpointSearch(endpoint=None, mass=search.mass)
    assert not search.feasible


def test_exact_total_mass_short_circuits() -> None:
    """When the whole remaining range has exactly the target mass, no bisection runs."""

    upper_total = beta_mass(0.2, 1.0, 2, 6)
    upper = search_upper(0.2, 2, 6, upper_total)
    assert upper.endpoint == 1.0
    assert upper.iterations == 0

    lower_total = beta_mass(0.0, 0.7, 2, 6)
    lower = search_lower(0.7, 2, 6, lower_total)
    assert lower.endpoint == 0.0
    assert lower.iterations == 0
