from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Axis(str, Enum):
    DISTANCE = "distance"
    LIGHT = "light"


def _check_endpoint(name: str, value: Any) -> None:
    # bool is an int subclass; an endpoint of True/False is always a caller bug.
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Interval.{name} must be a real number, got {type(value).__name__}")
    if math.isnan(float(value)):
        raise ValueError(f"Interval.{name} must not be NaN")


@dataclass(frozen=True, slots=True)
class Interval:
    """
    Closed numeric range [min, max].

    Malformed ranges (min > max) are rejected at construction, so every
    Interval that reaches the merge pass is well-formed.
    """

    min: int | float
    max: int | float

    def __post_init__(self) -> None:
        _check_endpoint("min", self.min)
        _check_endpoint("max", self.max)
        if self.min > self.max:
            raise ValueError(f"Interval min must be <= max, got [{self.min}, {self.max}]")

    def to_dict(self) -> dict[str, Any]:
        return {"min": self.min, "max": self.max}

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Interval":
        return Interval(min=d["min"], max=d["max"])


@dataclass(frozen=True, slots=True)
class Source:
    """
    One coverage source (e.g. a hardware camera) contributing exactly one
    interval per axis.
    """

    distance: Interval
    light: Interval
    source_id: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.distance, Interval) or not isinstance(self.light, Interval):
            raise TypeError("Source.distance and Source.light must be Interval")

    def interval(self, axis: Axis) -> Interval:
        if axis is Axis.DISTANCE:
            return self.distance
        if axis is Axis.LIGHT:
            return self.light
        raise ValueError(f"Unsupported axis: {axis!r}")

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "distance": self.distance.to_dict(),
            "light": self.light.to_dict(),
        }
        if self.source_id is not None:
            out["source_id"] = self.source_id
        return out

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Source":
        return Source(
            distance=Interval.from_dict(d["distance"]),
            light=Interval.from_dict(d["light"]),
            source_id=(None if d.get("source_id") is None else str(d["source_id"])),
        )


@dataclass(frozen=True, slots=True)
class CoverageError:
    code: str
    message: str
    detail: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "detail": None if self.detail is None else dict(self.detail),
        }


@dataclass(frozen=True, slots=True)
class AxisCoverage:
    axis: Axis
    target: Interval
    covered: bool
    intervals_in: int
    merged: list[Interval]  # disjoint, ascending by min
    gaps: list[Interval]  # uncovered sub-ranges of target, ascending; empty iff covered

    def to_dict(self) -> dict[str, Any]:
        return {
            "axis": self.axis.value,
            "target": self.target.to_dict(),
            "covered": self.covered,
            "intervals_in": self.intervals_in,
            "merged": [b.to_dict() for b in self.merged],
            "gaps": [g.to_dict() for g in self.gaps],
        }


@dataclass(frozen=True, slots=True)
class CoverageResult:
    """
    Auditable outcome of a dual-axis coverage check.

    `ok` is True only when every axis is covered. Uncovered axes are reported
    as CoverageError entries, never raised.
    """

    ok: bool
    axes: list[AxisCoverage]
    errors: list[CoverageError]
    meta: dict[str, Any]  # stage/version, config params, counts

    def axis(self, axis: Axis) -> AxisCoverage:
        for a in self.axes:
            if a.axis is axis:
                return a
        raise KeyError(axis.value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "axes": [a.to_dict() for a in self.axes],
            "errors": [e.to_dict() for e in self.errors],
            "meta": dict(self.meta),
        }
