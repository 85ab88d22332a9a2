from __future__ import annotations

from typing import Iterable

from contracts.coverage import Interval

from .config import CoverageConfig


def _resolve_config(config: CoverageConfig | None) -> CoverageConfig:
    return CoverageConfig() if config is None else config


def sort_intervals(intervals: Iterable[Interval]) -> list[Interval]:
    # Deterministic sweep order: min asc (tie max asc). Always a new list.
    return sorted(intervals, key=lambda i: (i.min, i.max))


def merge_intervals(intervals: Iterable[Interval], *, step: int | float = 1) -> list[Interval]:
    """
    Coalesce overlapping or adjacent intervals into maximal blocks.

    Two intervals touch when `next.min <= current.max + step`. The result is
    disjoint and ascending by min; merging it again returns it unchanged.
    """

    ordered = sort_intervals(intervals)
    if not ordered:
        return []

    merged: list[Interval] = []
    cur_min, cur_max = ordered[0].min, ordered[0].max

    for nxt in ordered[1:]:
        if nxt.min <= cur_max + step:
            cur_max = max(cur_max, nxt.max)
        else:
            merged.append(Interval(cur_min, cur_max))
            cur_min, cur_max = nxt.min, nxt.max

    merged.append(Interval(cur_min, cur_max))
    return merged


def _covered_by_blocks(target: Interval, blocks: list[Interval], step: int | float) -> bool:
    # `blocks` must be merge_intervals output: disjoint, ascending.
    coverage_start = target.min
    for block in blocks:
        if block.min > coverage_start:
            # Blocks are disjoint and sorted: nothing later can close this gap.
            return False
        if block.max >= target.max:
            return True
        # Blocks wholly below the target must not pull the cursor backwards.
        coverage_start = max(coverage_start, block.max + step)

    return False


def is_fully_covered(
    target: Interval,
    candidates: Iterable[Interval],
    config: CoverageConfig | None = None,
) -> bool:
    """
    True iff the union of `candidates` contains every value of `target`.

    An empty candidate collection covers nothing. Input order is irrelevant and
    the caller's collection is never mutated.
    """

    cfg = _resolve_config(config)
    step = cfg.adjacency_step
    return _covered_by_blocks(target, merge_intervals(candidates, step=step), step)


def _gap(lo: int | float, hi: int | float, target: Interval) -> Interval:
    # Clip to target; non-integer endpoints under a discrete step can cross.
    hi = min(hi, target.max)
    return Interval(min(lo, hi), hi)


def _gaps_in_blocks(target: Interval, blocks: list[Interval], step: int | float) -> list[Interval]:
    gaps: list[Interval] = []
    coverage_start = target.min

    for block in blocks:
        if block.max < coverage_start:
            continue
        if block.min > target.max:
            break
        if block.min > coverage_start:
            gaps.append(_gap(coverage_start, block.min - step, target))
        if block.max >= target.max:
            return gaps
        coverage_start = block.max + step

    gaps.append(_gap(coverage_start, target.max, target))
    return gaps


def find_gaps(
    target: Interval,
    candidates: Iterable[Interval],
    config: CoverageConfig | None = None,
) -> list[Interval]:
    """
    Maximal uncovered sub-ranges of `target`, ascending.

    With the discrete step a gap between blocks ending at a and starting at b
    is [a+1, b-1]. With step 0 the gap is reported by its closure [a, b].
    Gaps are clipped to the target, so a block ending at a non-integer value
    under the discrete step leaves a degenerate trailing gap [target.max,
    target.max]. Returns [] exactly when `is_fully_covered` is True.
    """

    cfg = _resolve_config(config)
    step = cfg.adjacency_step
    return _gaps_in_blocks(target, merge_intervals(candidates, step=step), step)
