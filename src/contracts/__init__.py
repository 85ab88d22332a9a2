"""
Canonical coverage contracts.

These models are the schema boundary between callers and the coverage stage.
Stage code should consume/produce these contract objects (not ad-hoc dicts).
"""

from .coverage import Axis, AxisCoverage, CoverageError, CoverageResult, Interval, Source

__all__ = [
    "Axis",
    "Interval",
    "Source",
    "CoverageError",
    "AxisCoverage",
    "CoverageResult",
]
