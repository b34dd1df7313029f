"""Canonical formatting."""

from toonpy.format.result import FormatRunResult
from toonpy.format.runner import run_format

__all__ = [
    "FormatRunResult",
    "run_format",
]
