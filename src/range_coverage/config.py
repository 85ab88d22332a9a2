from __future__ import annotations

import math
import numbers
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CoverageConfig:
    """
    Deterministic coverage parameters.

    `adjacency_step` is the "touching" distance used by both the merge pass and
    the coverage walk:
    - 1 (default): discrete unit domain, [a, n] and [n+1, b] leave no gap.
    - 0: continuous closed intervals, only overlap or a shared endpoint merges.
    """

    adjacency_step: int | float = 1

    def validate(self) -> None:
        step = self.adjacency_step
        if isinstance(step, bool) or not isinstance(step, numbers.Real):
            raise ValueError("adjacency_step must be a number")
        if not math.isfinite(float(step)):
            raise ValueError("adjacency_step must be finite")
        if step < 0:
            raise ValueError("adjacency_step must be >= 0")

    def __post_init__(self) -> None:
        self.validate()
