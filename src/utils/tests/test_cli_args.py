"""
Tests for shared argparse helpers.
"""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from utils.cli import (
    add_confidence_argument,
    add_count_table_arguments,
    add_jobs_argument,
    add_log_level_argument,
    add_output_path_argument,
)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    add_confidence_argument(parser, default_confidence=0.9)
    add_count_table_arguments(parser)
    add_output_path_argument(parser, default_path=None, help_text="Output path.")
    add_jobs_argument(parser)
    add_log_level_argument(parser)
    return parser


def test_defaults() -> None:
    """Shared arguments should expose their documented defaults."""

    args = _parser().parse_args([])

    assert args.confidence == 0.9
    assert args.input is None
    assert args.successes_column == "successes"
    assert args.trials_column == "trials"
    assert args.output is None
    assert args.jobs == 1
    assert args.log_level == "INFO"


def test_paths_and_confidence_are_parsed() -> None:
    """Paths should be converted to Path and confidence to float."""

    args = _parser().parse_args(["-i", "in.csv", "-o", "out.csv", "-c", "0.5"])

    assert args.input == Path("in.csv")
    assert args.output == Path("out.csv")
    assert args.confidence == 0.5


@pytest.mark.parametrize("value", ["0", "1", "1.2", "-0.1", "high"])
def test_confidence_outside_unit_interval_is_rejected(value: str) -> None:
    """Confidence levels must lie strictly between zero and one."""

    with pytest.raises(SystemExit):
        _parser().parse_args(["--confidence", value])
