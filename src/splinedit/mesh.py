"""Triangulation and line layouts for sampled surfaces and control nets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Sequence, Tuple

from splinedit.geom import Point
from splinedit.grid import as_grid
from splinedit.surface import (
    SurfaceType,
    evaluate_bezier_surface,
    evaluate_bspline_surface,
    evaluate_nurbs_surface,
)


def generate_surface_indices(u_samples: int, v_samples: int) -> List[int]:
    """Return triangle indices for a row-major ``(u+1) x (v+1)`` sample grid.

    Each cell ``(i, j)`` becomes the triangles
    ``(top_left, bottom_left, top_right)`` and
    ``(top_right, bottom_left, bottom_right)``.  The winding is relied on
    by downstream backface culling and lighting; keep it.
    """

    u_samples = max(0, int(u_samples))
    v_samples = max(0, int(v_samples))
    stride = v_samples + 1

    indices: List[int] = []
    for i in range(u_samples):
        for j in range(v_samples):
            top_left = i * stride + j
            top_right = top_left + 1
            bottom_left = (i + 1) * stride + j
            bottom_right = bottom_left + 1

            indices.extend((top_left, bottom_left, top_right))
            indices.extend((top_right, bottom_left, bottom_right))
    return indices


@dataclass(frozen=True)
class SurfaceMesh:
    """Sampled surface positions plus the triangle list that covers them."""

    positions: Tuple[Point, ...]
    indices: Tuple[int, ...]
    u_samples: int
    v_samples: int

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def is_empty(self) -> bool:
        return not self.positions

    def triangles(self) -> Iterator[Tuple[Point, Point, Point]]:
        """Yield each triangle as a tuple of three positions."""

        for k in range(0, len(self.indices), 3):
            a, b, c = self.indices[k:k + 3]
            yield self.positions[a], self.positions[b], self.positions[c]


def tessellate_surface(surface_type: SurfaceType, grid: Any, weights: Optional[Any] = None,
                       degree_u: int = 3, degree_v: int = 3,
                       u_samples: int = 30, v_samples: int = 30) -> SurfaceMesh:
    """Evaluate a surface and triangulate the resulting sample grid.

    ``weights`` is only consulted for NURBS; ``None`` means unit weights.
    An evaluation that produces no points (empty grid, mismatched
    weights) gives a mesh with no positions and no indices.
    """

    surface_type = SurfaceType(surface_type)
    grid = as_grid(grid)
    u_samples = max(0, int(u_samples))
    v_samples = max(0, int(v_samples))

    if surface_type is SurfaceType.BEZIER:
        positions = evaluate_bezier_surface(grid, u_samples, v_samples)
    elif surface_type is SurfaceType.BSPLINE:
        positions = evaluate_bspline_surface(grid, degree_u, degree_v, u_samples, v_samples)
    else:
        if weights is None:
            weights = [[1.0] * grid.cols for _ in range(grid.rows)]
        positions = evaluate_nurbs_surface(grid, weights, degree_u, degree_v, u_samples, v_samples)

    if not positions:
        return SurfaceMesh((), (), u_samples, v_samples)
    indices = generate_surface_indices(u_samples, v_samples)
    return SurfaceMesh(tuple(positions), tuple(indices), u_samples, v_samples)


def surface_wireframe(positions: Sequence[Point], u_samples: int,
                      v_samples: int) -> List[Point]:
    """Return ``GL_LINES`` endpoint pairs tracing every sampled iso-line.

    Segments along each ``u`` row come first, then along each ``v``
    column.
    """

    stride = v_samples + 1
    if len(positions) != (u_samples + 1) * stride:
        return []

    lines: List[Point] = []
    for i in range(u_samples + 1):
        for j in range(v_samples):
            lines.append(positions[i * stride + j])
            lines.append(positions[i * stride + j + 1])
    for j in range(v_samples + 1):
        for i in range(u_samples):
            lines.append(positions[i * stride + j])
            lines.append(positions[(i + 1) * stride + j])
    return lines


def control_polygon(points: Sequence[Sequence[float]]) -> List[Point]:
    """The control polyline drawn under a curve (a line strip)."""

    return [tuple(float(c) for c in p) for p in points]


def control_net_lines(grid: Any) -> List[Point]:
    """``GL_LINES`` endpoint pairs for a surface control net."""

    grid = as_grid(grid)
    lines: List[Point] = []
    for r in range(grid.rows):
        for c in range(grid.cols - 1):
            lines.extend((grid[r, c], grid[r, c + 1]))
    for c in range(grid.cols):
        for r in range(grid.rows - 1):
            lines.extend((grid[r, c], grid[r + 1, c]))
    return lines


__all__ = [
    "SurfaceMesh",
    "generate_surface_indices",
    "tessellate_surface",
    "surface_wireframe",
    "control_polygon",
    "control_net_lines",
]
