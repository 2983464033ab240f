"""CLI helper utilities for shared argparse patterns.

This module centralizes the command-line argument definitions used by the
interval tools so that flag names, defaults and help texts stay consistent
between commands.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional


def _confidence_level(text: str) -> float:
    """Parse a confidence level and reject values outside ``(0, 1)``."""

    try:
        value = float(text)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"invalid confidence level {text!r}") from err
    if not 0.0 < value < 1.0:
        raise argparse.ArgumentTypeError(
            f"confidence level must be in (0, 1), got {value}"
        )
    return value


def add_confidence_argument(
    parser: argparse.ArgumentParser,
    *,
    default_confidence: float,
) -> None:
    """Add a shared ``--confidence/-c`` argument.

    Parameters
    ----------
    parser:
        Target argument parser.
    default_confidence:
        Default posterior mass advertised in the help text.
    """

    parser.add_argument(
        "--confidence",
        "-c",
        type=_confidence_level,
        default=default_confidence,
        help=(
            "Posterior probability mass the interval must contain "
            f"(default: {default_confidence})."
        ),
    )


def add_count_arguments(parser: argparse.ArgumentParser) -> None:
    """Add shared ``--successes/-k`` and ``--trials/-n`` count arguments."""

    parser.add_argument(
        "--successes",
        "-k",
        type=int,
        default=None,
        help="Number of successes (passed events).",
    )
    parser.add_argument(
        "--trials",
        "-n",
        type=int,
        default=None,
        help="Number of trials (total events).",
    )


def add_count_table_arguments(parser: argparse.ArgumentParser) -> None:
    """Add shared ``--input`` CSV and column-name arguments.

    Parameters
    ----------
    parser:
        Target argument parser.
    """

    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        default=None,
        help="CSV table with one row of counts per bin.",
    )
    parser.add_argument(
        "--successes-column",
        default="successes",
        help="Column holding passed counts (default: successes).",
    )
    parser.add_argument(
        "--trials-column",
        default="trials",
        help="Column holding total counts (default: trials).",
    )


def add_output_path_argument(
    parser: argparse.ArgumentParser,
    *,
    default_path: Optional[Path | str],
    help_text: str,
) -> None:
    """Add a shared ``--output/-o`` path argument.

    Parameters
    ----------
    parser:
        Target argument parser.
    default_path:
        Default file path for the output, or ``None`` for standard output.
    help_text:
        Help string describing the output target.
    """

    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path(default_path) if default_path is not None else None,
        help=help_text,
    )


def add_jobs_argument(parser: argparse.ArgumentParser) -> None:
    """Add a shared ``--jobs/-j`` worker-count argument."""

    parser.add_argument(
        "--jobs",
        "-j",
        type=int,
        default=1,
        help="Number of worker processes used for tables (default: 1).",
    )


def add_no_progress_argument(parser: argparse.ArgumentParser) -> None:
    """Add a shared ``--no-progress`` flag disabling progress bars."""

    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar when processing tables.",
    )


def add_log_level_argument(parser: argparse.ArgumentParser) -> None:
    """Add a shared ``--log-level`` argument for logging verbosity.

    Parameters
    ----------
    parser:
        Target argument parser.
    """

    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity.",
    )


__all__ = [
    "add_confidence_argument",
    "add_count_arguments",
    "add_count_table_arguments",
    "add_output_path_argument",
    "add_jobs_argument",
    "add_no_progress_argument",
    "add_log_level_argument",
]
