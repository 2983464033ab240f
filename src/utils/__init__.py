"""Utility helper package for shared command-line and I/O helpers.

Submodules
----------
cli
    Shared argparse configuration helpers for the interval commands.
io
    Shared CSV helpers for reading count tables and writing interval tables.
"""

from __future__ import annotations

__all__ = [
    "cli",
    "io",
]
