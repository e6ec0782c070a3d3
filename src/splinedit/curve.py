"""Curve evaluation: Bezier, B-spline and NURBS polylines.

Every evaluator samples a curve over the parameter range ``[0, 1]`` and
returns a new list of point tuples.  Degenerate input never raises; it
degrades as follows:

* no control points gives an empty polyline;
* a degree that is too large for the point count is clamped down, and
  floored at 1;
* a B-spline/NURBS with a single control point returns that point;
* a rational sample whose weighted denominator vanishes falls back to
  the unweighted blend.

The B-spline and NURBS evaluators sample the half-open range
``[0, 1)`` and then append the last control point, so a polyline of
``num_samples`` requested samples has ``num_samples + 1`` points.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence

from loguru import logger

from splinedit.basis import BASIS_EPSILON, basis_row
from splinedit.geom import Point, accumulate, dimension, lerp, sample_parameter, scaled, zero
from splinedit.knots import clamp_degree, clamped_knot_vector


class CurveType(Enum):
    """Curve forms offered by the editor's type selector."""

    BEZIER = "bezier"
    BSPLINE = "bspline"
    NURBS = "nurbs"


def _copy_points(points: Sequence[Sequence[float]]) -> List[Point]:
    return [tuple(float(c) for c in p) for p in points]


def evaluate_bezier_curve(points: Sequence[Sequence[float]], num_samples: int = 100) -> List[Point]:
    """Sample a Bezier curve with de Casteljau's algorithm.

    Returns ``num_samples + 1`` points at ``t = i / num_samples``.  One
    control point yields that point alone; none yields ``[]``.
    """

    ctrl = _copy_points(points)
    if not ctrl:
        return []
    if len(ctrl) == 1:
        return [ctrl[0]]

    num_samples = max(0, int(num_samples))
    m = len(ctrl)
    curve: List[Point] = []
    for i in range(num_samples + 1):
        t = sample_parameter(i, num_samples)
        work = list(ctrl)
        for level in range(1, m):
            for j in range(m - level):
                work[j] = lerp(work[j], work[j + 1], t)
        curve.append(work[0])
    return curve


def _spline_degree(requested: int, count: int) -> int:
    degree = clamp_degree(requested, count)
    if degree != requested:
        logger.debug("degree {} clamped to {} for {} control points", requested, degree, count)
    return degree


def evaluate_bspline_curve(points: Sequence[Sequence[float]], degree: int = 3,
                           num_samples: int = 100) -> List[Point]:
    """Sample a clamped uniform B-spline curve."""

    ctrl = _copy_points(points)
    n = len(ctrl)
    if n == 0:
        return []
    if n < 2:
        return ctrl

    degree = _spline_degree(degree, n)
    knots = clamped_knot_vector(n, degree)
    dim = dimension(ctrl)
    num_samples = max(0, int(num_samples))

    curve: List[Point] = []
    for s in range(num_samples):
        u = sample_parameter(s, num_samples)
        basis = basis_row(n, degree, u, knots)
        acc = zero(dim)
        for i in range(n):
            accumulate(acc, ctrl[i], basis[i])
        curve.append(tuple(acc))

    curve.append(ctrl[-1])
    return curve


def evaluate_nurbs_curve(points: Sequence[Sequence[float]], weights: Sequence[float],
                         degree: int = 3, num_samples: int = 100) -> List[Point]:
    """Sample a clamped uniform NURBS curve.

    ``weights`` must hold one weight per control point; callers keep the
    two sequences synchronized (see :meth:`CurveEditor.sync_weights`).
    """

    if len(points) != len(weights):
        raise ValueError(
            f"NURBS curve needs one weight per control point "
            f"({len(points)} points, {len(weights)} weights)"
        )
    ctrl = _copy_points(points)
    w = [float(x) for x in weights]
    n = len(ctrl)
    if n == 0:
        return []
    if n < 2:
        return ctrl

    degree = _spline_degree(degree, n)
    knots = clamped_knot_vector(n, degree)
    dim = dimension(ctrl)
    num_samples = max(0, int(num_samples))

    curve: List[Point] = []
    for s in range(num_samples):
        u = sample_parameter(s, num_samples)
        basis = basis_row(n, degree, u, knots)
        numerator = zero(dim)
        denominator = 0.0
        for i in range(n):
            wb = w[i] * basis[i]
            accumulate(numerator, ctrl[i], wb)
            denominator += wb
        if abs(denominator) > BASIS_EPSILON:
            curve.append(scaled(numerator, 1.0 / denominator))
        else:
            logger.debug("rational denominator {} at u={}, using unweighted blend", denominator, u)
            acc = zero(dim)
            for i in range(n):
                accumulate(acc, ctrl[i], basis[i])
            curve.append(tuple(acc))

    curve.append(ctrl[-1])
    return curve


def evaluate_curve(curve_type: CurveType, points: Sequence[Sequence[float]],
                   weights: Optional[Sequence[float]] = None, degree: int = 3,
                   num_samples: int = 100) -> List[Point]:
    """Dispatch to the evaluator for ``curve_type``.

    ``weights`` is only read for NURBS; ``None`` there means all ones.
    """

    curve_type = CurveType(curve_type)
    if curve_type is CurveType.BEZIER:
        return evaluate_bezier_curve(points, num_samples)
    if curve_type is CurveType.BSPLINE:
        return evaluate_bspline_curve(points, degree, num_samples)
    if weights is None:
        weights = [1.0] * len(points)
    return evaluate_nurbs_curve(points, weights, degree, num_samples)


__all__ = [
    "CurveType",
    "evaluate_bezier_curve",
    "evaluate_bspline_curve",
    "evaluate_nurbs_curve",
    "evaluate_curve",
]
