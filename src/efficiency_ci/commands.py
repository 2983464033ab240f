"""Command-line entry point for shortest efficiency intervals.

Two modes are supported:

* A single observation given with ``-k``/``-n``; the mode, interval and
  asymmetric errors are printed on one line.
* A CSV table given with ``--input``; one interval per row is computed via
  :func:`efficiency_ci.batch.bayes_divide` and written to ``--output`` or
  printed to standard output.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from efficiency_ci.batch import INTERVAL_FIELDNAMES, bayes_divide
from efficiency_ci.errors import EfficiencyIntervalError
from efficiency_ci.interval import DEFAULT_CONFIDENCE, efficiency_interval
from utils.cli import (
    add_confidence_argument,
    add_count_arguments,
    add_count_table_arguments,
    add_jobs_argument,
    add_log_level_argument,
    add_no_progress_argument,
    add_output_path_argument,
)
from utils.io import read_count_table, write_rows_with_fieldnames

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the CLI argument parser for the interval command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser instance.
    """

    parser = argparse.ArgumentParser(
        description=(
            "Compute the shortest Bayesian confidence interval for a binomial "
            "efficiency, either for one observation or for a table of bins."
        )
    )
    add_count_arguments(parser)
    add_count_table_arguments(parser)
    add_confidence_argument(parser, default_confidence=DEFAULT_CONFIDENCE)
    add_output_path_argument(
        parser,
        default_path=None,
        help_text="Output CSV path for table mode (default: print to stdout).",
    )
    add_jobs_argument(parser)
    add_no_progress_argument(parser)
    add_log_level_argument(parser)
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse and validate command-line arguments.

    Exactly one of ``--input`` or the ``-k``/``-n`` pair must be given.
    """

    parser = build_parser()
    args = parser.parse_args(argv)

    single = args.successes is not None or args.trials is not None
    if args.input is not None and single:
        parser.error("use either --input or -k/-n, not both")
    if args.input is None:
        if args.successes is None or args.trials is None:
            parser.error("either --input or both -k and -n are required")
    if args.jobs <= 0:
        parser.error("--jobs must be a positive integer")
    return args


def _run_single(args: argparse.Namespace) -> int:
    try:
        interval = efficiency_interval(args.successes, args.trials, args.confidence)
    except EfficiencyIntervalError as err:
        LOGGER.error("%s", err)
        return 2
    if not interval.converged:
        LOGGER.warning("Minimisation did not converge; reporting best estimate")
    print(
        f"mode={interval.mode:.6f} low={interval.low:.6f} high={interval.high:.6f} "
        f"(-{interval.error_low:.6f} +{interval.error_high:.6f})"
    )
    return 0


def _run_table(args: argparse.Namespace) -> int:
    """Process a count table; exit 2 when it is unreadable or no bin solves."""

    try:
        successes, trials = read_count_table(
            args.input,
            successes_column=args.successes_column,
            trials_column=args.trials_column,
        )
    except (OSError, ValueError) as err:
        LOGGER.error("Failed to read count table %s: %s", args.input, err)
        return 2

    table = bayes_divide(
        successes,
        trials,
        args.confidence,
        jobs=args.jobs,
        progress=not args.no_progress,
    )
    if args.output is None:
        print(table.to_string(index=False))
    else:
        written = write_rows_with_fieldnames(
            args.output,
            INTERVAL_FIELDNAMES,
            table.to_dict(orient="records"),
        )
        LOGGER.info("Wrote %d intervals to %s", len(table), written)
    if len(table) and table["error"].astype(bool).all():
        LOGGER.error("No bin in %s could be solved", args.input)
        return 2
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for the interval command.

    Parameters
    ----------
    argv:
        Optional custom argument list.

    Returns
    -------
    int
        Zero on success, non-zero on error.
    """

    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    if args.input is not None:
        return _run_table(args)
    return _run_single(args)


if __name__ == "__main__":
    raise SystemExit(main())
