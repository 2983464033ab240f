"""Shared I/O helpers for count tables and interval outputs.

Count tables are plain CSV files with one row per bin. Reading goes through
pandas so that column selection and dtype checks are handled in one place;
writing keeps a fixed header order for downstream tools.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Mapping, Sequence, Tuple

import numpy as np
import pandas as pd


def read_count_table(
    path: Path,
    *,
    successes_column: str = "successes",
    trials_column: str = "trials",
) -> Tuple[np.ndarray, np.ndarray]:
    """Return passed and total counts loaded from a CSV table.

    Parameters
    ----------
    path:
        CSV file containing at least the two count columns.
    successes_column:
        Name of the column holding passed counts.
    trials_column:
        Name of the column holding total counts.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        Integer arrays ``(successes, trials)`` in file order.

    Raises
    ------
    ValueError
        If a column is missing or holds non-integer values.
    """

    frame = pd.read_csv(path.expanduser())
    missing = [
        name for name in (successes_column, trials_column) if name not in frame.columns
    ]
    if missing:
        raise ValueError(f"{path} is missing column(s): {', '.join(missing)}")

    arrays = []
    for name in (successes_column, trials_column):
        values = pd.to_numeric(frame[name], errors="coerce").to_numpy(dtype=float)
        if np.isnan(values).any() or not np.all(np.equal(np.floor(values), values)):
            raise ValueError(f"column {name!r} in {path} must hold integer counts")
        arrays.append(values.astype(np.int64))
    return arrays[0], arrays[1]


def write_rows_with_fieldnames(
    output_path: Path,
    fieldnames: Sequence[str],
    rows: Sequence[Mapping[str, object]],
) -> Path:
    """Write ``rows`` to ``output_path`` using the given ``fieldnames``.

    Parameters
    ----------
    output_path:
        Destination path for the CSV file. Parent directories are created.
    fieldnames:
        Ordered list of column names to include in the output.
    rows:
        Sequence of mapping objects providing row data; missing keys are
        written as empty cells.

    Returns
    -------
    Path
        Resolved path of the written file.
    """

    resolved = output_path.expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)

    with resolved.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            trimmed = {name: row.get(name, "") for name in fieldnames}
            writer.writerow(trimmed)
    return resolved


__all__ = ["read_count_table", "write_rows_with_fieldnames"]
