"""
Deterministic range coverage.

- sort -> merge overlapping/adjacent intervals -> walk merged blocks
- one check per axis (distance, light); a source set passes only if both pass
- configurable adjacency step (discrete unit by default)

Pure computation: no I/O, no environment reads, no shared state.
"""

from .config import CoverageConfig
from .evaluator import covers_both_axes, evaluate_axis, evaluate_sources
from .intervals import find_gaps, is_fully_covered, merge_intervals, sort_intervals

__all__ = [
    "CoverageConfig",
    "covers_both_axes",
    "evaluate_axis",
    "evaluate_sources",
    "find_gaps",
    "is_fully_covered",
    "merge_intervals",
    "sort_intervals",
]
