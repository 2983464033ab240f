"""Per-bin efficiencies with asymmetric errors.

This module divides a sequence of passed counts by a sequence of total counts,
one shortest interval per bin, and collects the results in a
:class:`pandas.DataFrame`. Bins that cannot be solved are reported in the
``error`` column instead of aborting the whole table.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Dict, List, Sequence

import numpy as np
import pandas as pd
from tqdm import tqdm

from efficiency_ci.errors import EfficiencyIntervalError
from efficiency_ci.interval import DEFAULT_CONFIDENCE, efficiency_interval

LOGGER = logging.getLogger(__name__)

INTERVAL_FIELDNAMES = [
    "successes",
    "trials",
    "mode",
    "low",
    "high",
    "error_low",
    "error_high",
    "converged",
    "error",
]


def interval_row(successes: int, trials: int, confidence: float) -> Dict[str, object]:
    """Return one table row for ``successes`` out of ``trials``.

    Failures of the interval computation are caught and recorded in the
    ``error`` field with NaN estimates so callers can keep processing the
    remaining bins.
    """

    row: Dict[str, object] = {"successes": successes, "trials": trials}
    try:
        interval = efficiency_interval(successes, trials, confidence)
    except EfficiencyIntervalError as err:
        row.update(
            {
                "mode": math.nan,
                "low": math.nan,
                "high": math.nan,
                "error_low": math.nan,
                "error_high": math.nan,
                "converged": False,
                "error": str(err),
            }
        )
        return row
    row.update(interval.as_dict())
    row["error"] = ""
    return row


def _as_counts(values: Sequence[int], name: str) -> List[int]:
    array = np.asarray(values)
    if array.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {array.shape}")
    if array.size and not np.issubdtype(array.dtype, np.integer):
        raise ValueError(f"{name} must contain integer counts, got {array.dtype}")
    return [int(value) for value in array]


def bayes_divide(
    successes: Sequence[int],
    trials: Sequence[int],
    confidence: float = DEFAULT_CONFIDENCE,
    *,
    jobs: int = 1,
    progress: bool = False,
) -> pd.DataFrame:
    """Return per-bin efficiencies and shortest intervals.

    Parameters
    ----------
    successes:
        Passed counts per bin.
    trials:
        Total counts per bin, aligned with ``successes``.
    confidence:
        Posterior mass each interval must contain.
    jobs:
        Number of worker processes. Values above one distribute bins over a
        process pool; each bin is computed independently.
    progress:
        When ``True``, report progress with :class:`tqdm.tqdm`.

    Returns
    -------
    pandas.DataFrame
        One row per bin, in input order, with columns
        :data:`INTERVAL_FIELDNAMES`.

    Raises
    ------
    ValueError
        If the inputs differ in length or are not integer counts.
    """

    passed = _as_counts(successes, "successes")
    totals = _as_counts(trials, "trials")
    if len(passed) != len(totals):
        raise ValueError(
            f"successes and trials differ in length ({len(passed)} != {len(totals)})"
        )

    tasks = list(zip(passed, totals))
    rows: List[Dict[str, object]] = [{} for _ in tasks]

    if jobs and jobs > 1 and len(tasks) > 1:
        with ProcessPoolExecutor(max_workers=jobs) as pool:
            future_to_index = {
                pool.submit(interval_row, k, n, confidence): index
                for index, (k, n) in enumerate(tasks)
            }
            completed = as_completed(future_to_index)
            if progress:
                completed = tqdm(completed, total=len(tasks), desc="Bins", unit="bin")
            for future in completed:
                rows[future_to_index[future]] = future.result()
    else:
        iterator = enumerate(tasks)
        if progress:
            iterator = tqdm(iterator, total=len(tasks), desc="Bins", unit="bin")
        for index, (k, n) in iterator:
            rows[index] = interval_row(k, n, confidence)

    for row in rows:
        if row["error"]:
            LOGGER.warning(
                "Skipping bin with %s/%s: %s",
                row["successes"],
                row["trials"],
                row["error"],
            )
        elif not row["converged"]:
            LOGGER.warning(
                "Interval for %s/%s did not converge; using best estimate",
                row["successes"],
                row["trials"],
            )

    return pd.DataFrame(rows, columns=INTERVAL_FIELDNAMES)


__all__ = ["INTERVAL_FIELDNAMES", "interval_row", "bayes_divide"]
