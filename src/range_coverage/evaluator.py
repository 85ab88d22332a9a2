from __future__ import annotations

import logging
from typing import Any, Iterable

from contracts.coverage import Axis, AxisCoverage, CoverageError, CoverageResult, Interval, Source

from .config import CoverageConfig
from .intervals import _covered_by_blocks, _gaps_in_blocks, is_fully_covered, merge_intervals

log = logging.getLogger(__name__)

_COVERAGE_STAGE = "range_coverage"
_COVERAGE_ALGORITHM = "sort_merge_walk"
_COVERAGE_VERSION = "sort_merge_walk_v1"


def _params_dict(cfg: CoverageConfig) -> dict[str, Any]:
    return {"adjacency_step": cfg.adjacency_step}


def _project(sources: list[Source], axis: Axis) -> list[Interval]:
    return [s.interval(axis) for s in sources]


def covers_both_axes(
    target_distance: Interval,
    target_light: Interval,
    sources: Iterable[Source],
    config: CoverageConfig | None = None,
) -> bool:
    """
    True only if the sources jointly cover both the distance and the light target.

    Each axis is checked independently: the source that covers part of the
    distance target need not be the one covering the same part of light.
    """

    cfg = CoverageConfig() if config is None else config
    sources = list(sources)

    distance_ok = is_fully_covered(target_distance, _project(sources, Axis.DISTANCE), cfg)
    light_ok = is_fully_covered(target_light, _project(sources, Axis.LIGHT), cfg)

    log.debug(
        "coverage sources=%d distance=%s light=%s",
        len(sources),
        distance_ok,
        light_ok,
    )
    return distance_ok and light_ok


def evaluate_axis(
    axis: Axis,
    target: Interval,
    intervals: list[Interval],
    config: CoverageConfig,
) -> AxisCoverage:
    merged = merge_intervals(intervals, step=config.adjacency_step)
    covered = _covered_by_blocks(target, merged, config.adjacency_step)
    gaps = [] if covered else _gaps_in_blocks(target, merged, config.adjacency_step)
    log.debug(
        "axis=%s intervals_in=%d merged=%d covered=%s",
        axis.value,
        len(intervals),
        len(merged),
        covered,
    )
    return AxisCoverage(
        axis=axis,
        target=target,
        covered=covered,
        intervals_in=len(intervals),
        merged=merged,
        gaps=gaps,
    )


def evaluate_sources(
    target_distance: Interval,
    target_light: Interval,
    sources: Iterable[Source],
    config: CoverageConfig | None = None,
) -> CoverageResult:
    """
    Report form of `covers_both_axes`: same verdict, plus merged blocks, gaps
    and deterministic meta for each axis.
    """

    cfg = CoverageConfig() if config is None else config
    sources = list(sources)

    axes = [
        evaluate_axis(Axis.DISTANCE, target_distance, _project(sources, Axis.DISTANCE), cfg),
        evaluate_axis(Axis.LIGHT, target_light, _project(sources, Axis.LIGHT), cfg),
    ]

    errors: list[CoverageError] = []
    if not sources:
        errors.append(
            CoverageError(
                code="COVERAGE_NO_SOURCES",
                message="No sources supplied; an empty collection covers nothing.",
            )
        )
    else:
        for a in axes:
            if a.covered:
                continue
            errors.append(
                CoverageError(
                    code="COVERAGE_GAP",
                    message=f"Target {a.axis.value} range is not fully covered.",
                    detail={
                        "axis": a.axis.value,
                        "target": a.target.to_dict(),
                        "gaps": [g.to_dict() for g in a.gaps],
                    },
                )
            )

    meta: dict[str, Any] = {
        "stage": _COVERAGE_STAGE,
        "algorithm": _COVERAGE_ALGORITHM,
        "version": _COVERAGE_VERSION,
        "params": _params_dict(cfg),
        "counts": {
            "sources": len(sources),
            **{f"{a.axis.value}_merged_blocks": len(a.merged) for a in axes},
            **{f"{a.axis.value}_gaps": len(a.gaps) for a in axes},
        },
    }

    ok = all(a.covered for a in axes)
    log.debug("coverage ok=%s errors=%d", ok, len(errors))

    return CoverageResult(ok=ok, axes=axes, errors=errors, meta=meta)
