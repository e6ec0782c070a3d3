"""Blending functions: Bernstein polynomials and the Cox-de Boor recursion."""

from __future__ import annotations

from typing import List, Sequence

BASIS_EPSILON = 1e-6


def binomial(n: int, k: int) -> int:
    """Binomial coefficient ``C(n, k)``, computed without factorials."""

    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def bernstein(n: int, i: int, t: float) -> float:
    """Bernstein polynomial ``B(n, i, t)`` for ``t`` in ``[0, 1]``."""

    c = binomial(n, i)
    if c == 0:
        return 0.0
    return c * (t ** i) * ((1.0 - t) ** (n - i))


def cox_de_boor(i: int, k: int, u: float, knots: Sequence[float]) -> float:
    """Evaluate the B-spline basis function ``N(i, k)`` at ``u``.

    The zero-degree case uses half-open spans ``[knots[i], knots[i+1])``.
    At the final knot value the last non-empty span also reports 1 so
    that the basis still sums to one at the closed right end.  Terms
    whose knot difference is below ``BASIS_EPSILON`` are dropped, which
    handles the repeated knots of a clamped vector.

    Plain recursion, no memoization: cost grows as ``2**k``.
    """

    if k == 0:
        lo, hi = knots[i], knots[i + 1]
        if lo <= u < hi:
            return 1.0
        if u == knots[-1] and hi == knots[-1] and lo < hi:
            return 1.0
        return 0.0

    left = 0.0
    denom = knots[i + k] - knots[i]
    if abs(denom) > BASIS_EPSILON:
        left = (u - knots[i]) / denom * cox_de_boor(i, k - 1, u, knots)

    right = 0.0
    denom = knots[i + k + 1] - knots[i + 1]
    if abs(denom) > BASIS_EPSILON:
        right = (knots[i + k + 1] - u) / denom * cox_de_boor(i + 1, k - 1, u, knots)

    return left + right


def basis_row(count: int, degree: int, u: float, knots: Sequence[float]) -> List[float]:
    """Return ``[N(i, degree, u) for i in range(count)]``."""

    return [cox_de_boor(i, degree, u, knots) for i in range(count)]


def bernstein_row(n: int, t: float) -> List[float]:
    """Return all ``n + 1`` Bernstein polynomials of degree ``n`` at ``t``."""

    return [bernstein(n, i, t) for i in range(n + 1)]


__all__ = [
    "BASIS_EPSILON",
    "binomial",
    "bernstein",
    "cox_de_boor",
    "basis_row",
    "bernstein_row",
]
