"""Point helpers shared by the curve and surface evaluators.

Points are plain tuples of two or three floats.  Evaluators never
mutate their inputs; every helper here returns a fresh tuple.
"""

from __future__ import annotations

from math import sqrt
from typing import List, Sequence, Tuple

Point = Tuple[float, ...]
Vec3 = Tuple[float, float, float]


def dimension(points: Sequence[Sequence[float]]) -> int:
    """Return the coordinate count of a point sequence (0 when empty)."""

    if not points:
        return 0
    return len(points[0])


def lerp(a: Sequence[float], b: Sequence[float], t: float) -> Point:
    """Linear interpolation ``(1 - t) * a + t * b``."""

    s = 1.0 - t
    return tuple(s * x + t * y for x, y in zip(a, b))


def zero(dim: int) -> List[float]:
    """Return a mutable accumulator of ``dim`` zeros."""

    return [0.0] * dim


def accumulate(acc: List[float], p: Sequence[float], w: float) -> None:
    """In-place ``acc += w * p``."""

    for k in range(len(acc)):
        acc[k] += w * p[k]


def scaled(acc: Sequence[float], s: float) -> Point:
    return tuple(c * s for c in acc)


def dist_xy(a: Sequence[float], b: Sequence[float]) -> float:
    """Distance between two points projected onto the XY plane."""

    return sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2)


def to_vec3(point_like: Sequence[float]) -> Vec3:
    """Return XYZ components, lifting 2D points onto ``z = 0``."""

    if len(point_like) < 2:
        raise ValueError("value must have at least two components")
    z = float(point_like[2]) if len(point_like) > 2 else 0.0
    return float(point_like[0]), float(point_like[1]), z


def sample_parameter(i: int, count: int) -> float:
    """Return the uniform parameter ``i / count``; ``0.0`` when ``count`` is 0."""

    if count <= 0:
        return 0.0
    return i / count


__all__ = [
    "Point",
    "Vec3",
    "dimension",
    "lerp",
    "zero",
    "accumulate",
    "scaled",
    "dist_xy",
    "to_vec3",
    "sample_parameter",
]
