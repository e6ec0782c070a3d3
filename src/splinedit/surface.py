"""Tensor-product surface evaluation.

The control grid's rows run along ``u`` and its columns along ``v``.
Each evaluator samples ``u`` over ``0..u_samples`` and ``v`` over
``0..v_samples`` inclusive and returns the points flattened row-major
(outer loop ``u``, inner loop ``v``), ready to be indexed by
:func:`splinedit.mesh.generate_surface_indices`.

Empty grids give ``[]``.  Degrees clamp per axis exactly as for curves.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from loguru import logger

from splinedit.basis import BASIS_EPSILON, basis_row, bernstein_row
from splinedit.curve import CurveType
from splinedit.geom import Point, accumulate, sample_parameter, scaled, zero
from splinedit.grid import Grid, as_grid
from splinedit.knots import clamp_degree, clamped_knot_vector

# surfaces come in the same three forms as curves
SurfaceType = CurveType


def _parameters(count: int) -> List[float]:
    count = max(0, int(count))
    return [sample_parameter(i, count) for i in range(count + 1)]


def _blend(grid: Grid, bu: Sequence[float], bv: Sequence[float], dim: int) -> List[float]:
    acc = zero(dim)
    for k in range(grid.rows):
        if bu[k] == 0.0:
            continue
        for l in range(grid.cols):
            accumulate(acc, grid[k, l], bu[k] * bv[l])
    return acc


def evaluate_bezier_surface(grid: Any, u_samples: int, v_samples: int) -> List[Point]:
    """Sample a Bezier surface from its Bernstein tensor product."""

    grid = as_grid(grid)
    if grid.is_empty():
        return []

    n = grid.rows - 1
    m = grid.cols - 1
    dim = len(grid.values[0])
    rows_v = [bernstein_row(m, v) for v in _parameters(v_samples)]

    surface: List[Point] = []
    for u in _parameters(u_samples):
        bu = bernstein_row(n, u)
        for bv in rows_v:
            surface.append(tuple(_blend(grid, bu, bv, dim)))
    return surface


def _axis_basis(count: int, degree: int, samples: int, axis: str) -> List[List[float]]:
    clamped = clamp_degree(degree, count)
    if clamped != degree:
        logger.debug("{} degree {} clamped to {} for {} control points", axis, degree, clamped, count)
    knots = clamped_knot_vector(count, clamped)
    return [basis_row(count, clamped, t, knots) for t in _parameters(samples)]


def evaluate_bspline_surface(grid: Any, degree_u: int, degree_v: int,
                             u_samples: int, v_samples: int) -> List[Point]:
    """Sample a clamped uniform B-spline surface."""

    grid = as_grid(grid)
    if grid.is_empty():
        return []

    dim = len(grid.values[0])
    rows_u = _axis_basis(grid.rows, degree_u, u_samples, "u")
    rows_v = _axis_basis(grid.cols, degree_v, v_samples, "v")

    surface: List[Point] = []
    for bu in rows_u:
        for bv in rows_v:
            surface.append(tuple(_blend(grid, bu, bv, dim)))
    return surface


def evaluate_nurbs_surface(grid: Any, weights: Any, degree_u: int, degree_v: int,
                           u_samples: int, v_samples: int) -> List[Point]:
    """Sample a clamped uniform NURBS surface.

    ``weights`` must have the same shape as ``grid``; a mismatch returns
    an empty list instead of evaluating.
    """

    grid = as_grid(grid)
    if grid.is_empty():
        return []
    try:
        weights = as_grid(weights)
    except ValueError as err:
        logger.debug("ragged weight grid for control grid {}: {}", grid.shape, err)
        return []
    if weights.shape != grid.shape:
        logger.debug("weight grid {} does not match control grid {}", weights.shape, grid.shape)
        return []

    dim = len(grid.values[0])
    rows_u = _axis_basis(grid.rows, degree_u, u_samples, "u")
    rows_v = _axis_basis(grid.cols, degree_v, v_samples, "v")

    surface: List[Point] = []
    for bu in rows_u:
        for bv in rows_v:
            numerator = zero(dim)
            denominator = 0.0
            for k in range(grid.rows):
                if bu[k] == 0.0:
                    continue
                for l in range(grid.cols):
                    wb = weights[k, l] * bu[k] * bv[l]
                    accumulate(numerator, grid[k, l], wb)
                    denominator += wb
            if abs(denominator) > BASIS_EPSILON:
                surface.append(scaled(numerator, 1.0 / denominator))
            else:
                logger.debug("rational denominator {} on surface, using unweighted blend", denominator)
                surface.append(tuple(_blend(grid, bu, bv, dim)))
    return surface


__all__ = [
    "SurfaceType",
    "evaluate_bezier_surface",
    "evaluate_bspline_surface",
    "evaluate_nurbs_surface",
]
