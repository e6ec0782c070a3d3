"""Clamped knot vectors for B-spline and NURBS evaluation."""

from __future__ import annotations

from typing import List


def clamped_knot_vector(count: int, degree: int) -> List[float]:
    """Return a clamped, piecewise-uniform knot vector.

    The vector has ``count + degree + 1`` entries: ``degree + 1`` zeros,
    evenly spaced interior knots, then ``degree + 1`` ones.  When there
    are too few control points for both end runs the trailing ones take
    precedence.  Degenerate input returns ``[0.0, 1.0]``.

    >>> clamped_knot_vector(5, 3)
    [0.0, 0.0, 0.0, 0.0, 0.5, 1.0, 1.0, 1.0, 1.0]
    """

    if count <= 0 or degree < 1:
        return [0.0, 1.0]

    total = count + degree + 1
    knots = [0.0] * (total - (degree + 1)) + [1.0] * (degree + 1)

    interior = total - 2 * (degree + 1)
    for i in range(interior):
        knots[degree + 1 + i] = (i + 1) / (interior + 1)
    return knots


def clamp_degree(requested: int, count: int) -> int:
    """Clamp ``requested`` to ``count - 1`` and floor the result at 1."""

    degree = min(int(requested), count - 1)
    return max(degree, 1)


__all__ = ["clamped_knot_vector", "clamp_degree"]
