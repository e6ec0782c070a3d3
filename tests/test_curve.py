import pytest
from loguru import logger

from splinedit.curve import (
    CurveType,
    evaluate_bezier_curve,
    evaluate_bspline_curve,
    evaluate_curve,
    evaluate_nurbs_curve,
)


def _close(a, b, tol=1e-6):
    assert len(a) == len(b)
    for x, y in zip(a, b):
        assert x == pytest.approx(y, abs=tol)


def _close_polyline(pa, pb, tol=1e-6):
    assert len(pa) == len(pb)
    for a, b in zip(pa, pb):
        _close(a, b, tol)


ARCH = [(0, 0), (1, 2), (2, 2), (3, 0)]


class TestBezier:

    @pytest.mark.parametrize("count", [2, 3, 4, 6])
    def test_sample_count(self, count):
        pts = [(float(i), float(i * i)) for i in range(count)]
        assert len(evaluate_bezier_curve(pts, 10)) == 11

    @pytest.mark.parametrize("samples", [0, 1, 5, 100])
    def test_single_point(self, samples):
        assert evaluate_bezier_curve([(1.5, -2.0)], samples) == [(1.5, -2.0)]

    def test_empty(self):
        assert evaluate_bezier_curve([], 10) == []

    def test_linear_midpoint_is_mean(self):
        curve = evaluate_bezier_curve([(0, 0), (2, 4)], 2)
        assert curve[1] == (1.0, 2.0)

    def test_cubic_arch(self):
        curve = evaluate_bezier_curve(ARCH, 4)
        assert len(curve) == 5
        assert curve[0] == (0.0, 0.0)
        assert curve[-1] == (3.0, 0.0)
        _close(curve[1], (0.75, 1.125))
        _close(curve[2], (1.5, 1.5))
        _close(curve[3], (2.25, 1.125))
        ys = [p[1] for p in curve]
        for i in range(1, len(ys) - 1):
            assert ys[i - 1] - 2 * ys[i] + ys[i + 1] < 0.0

    def test_keeps_dimension(self):
        curve = evaluate_bezier_curve([(0, 0, 0), (1, 1, 1)], 4)
        assert all(len(p) == 3 for p in curve)
        _close(curve[2], (0.5, 0.5, 0.5))

    def test_zero_samples_gives_start_point(self):
        assert evaluate_bezier_curve(ARCH, 0) == [(0.0, 0.0)]

    def test_does_not_mutate_input(self):
        pts = [[0.0, 0.0], [1.0, 2.0], [2.0, 0.0]]
        evaluate_bezier_curve(pts, 8)
        assert pts == [[0.0, 0.0], [1.0, 2.0], [2.0, 0.0]]


class TestBSpline:

    def test_sample_count_and_endpoints(self):
        pts = [(0, 0), (1, 2), (2, -1), (3, 3), (4, 0)]
        curve = evaluate_bspline_curve(pts, 3, 20)
        assert len(curve) == 21
        _close(curve[0], (0.0, 0.0))
        assert curve[-1] == (4.0, 0.0)

    def test_empty_and_single_point(self):
        assert evaluate_bspline_curve([], 3, 10) == []
        assert evaluate_bspline_curve([(2, 3)], 3, 10) == [(2.0, 3.0)]

    def test_two_points_is_a_line(self):
        curve = evaluate_bspline_curve([(0, 0), (4, 2)], 3, 4)
        _close_polyline(curve, [(0, 0), (1, 0.5), (2, 1), (3, 1.5), (4, 2)])

    def test_degree_clamped_to_point_count(self):
        pts = [(0, 0), (1, 1), (2, 0)]
        _close_polyline(evaluate_bspline_curve(pts, 7, 12), evaluate_bspline_curve(pts, 2, 12))

    def test_degree_below_one_is_floored(self):
        pts = [(0, 0), (1, 1), (2, 0)]
        _close_polyline(evaluate_bspline_curve(pts, 0, 12), evaluate_bspline_curve(pts, 1, 12))

    def test_matches_bezier_without_interior_knots(self):
        # clamped, no interior knots: the B-spline is the Bezier curve
        curve = evaluate_bspline_curve(ARCH, 3, 8)
        bezier = evaluate_bezier_curve(ARCH, 8)
        _close_polyline(curve, bezier)

    def test_zero_samples_gives_last_point(self):
        assert evaluate_bspline_curve(ARCH, 3, 0) == [(3.0, 0.0)]

    def test_degree_clamp_is_logged(self):
        messages = []
        logger.enable("splinedit")
        handler = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            evaluate_bspline_curve([(0, 0), (1, 1), (2, 0)], 5, 4)
        finally:
            logger.remove(handler)
            logger.disable("splinedit")
        assert any("clamped" in m for m in messages)


class TestNURBS:

    def test_unit_weights_match_bspline(self):
        pts = [(0, 0), (1, 2), (2, -1), (3, 3), (4, 0), (5, 1)]
        weights = [1.0] * len(pts)
        _close_polyline(evaluate_nurbs_curve(pts, weights, 3, 50),
                        evaluate_bspline_curve(pts, 3, 50))

    def test_uniform_weights_cancel(self):
        pts = [(0, 0), (1, 1), (2, 2), (3, 3)]
        _close_polyline(evaluate_nurbs_curve(pts, [5.0] * 4, 3, 16),
                        evaluate_bspline_curve(pts, 3, 16))

    def test_heavier_weight_pulls_curve(self):
        pts = [(0, 0), (1, 1), (2, 0)]
        plain = evaluate_nurbs_curve(pts, [1.0, 1.0, 1.0], 2, 2)
        heavy = evaluate_nurbs_curve(pts, [1.0, 5.0, 1.0], 2, 2)
        assert plain[1][1] == pytest.approx(0.5)
        assert heavy[1][1] == pytest.approx(2.5 / 3.0)

    def test_vanishing_denominator_falls_back_to_unweighted(self):
        pts = [(0, 0), (1, 2), (2, 2), (3, 0), (4, 1)]
        curve = evaluate_nurbs_curve(pts, [0.0] * 5, 3, 10)
        _close_polyline(curve, evaluate_bspline_curve(pts, 3, 10))

    def test_weight_count_must_match(self):
        with pytest.raises(ValueError):
            evaluate_nurbs_curve([(0, 0), (1, 1)], [1.0], 3, 10)

    def test_empty_and_single_point(self):
        assert evaluate_nurbs_curve([], [], 3, 10) == []
        assert evaluate_nurbs_curve([(1, 1)], [2.0], 3, 10) == [(1.0, 1.0)]

    def test_appends_last_control_point(self):
        pts = [(0, 0, 0), (1, 2, 1), (2, 2, 2), (3, 0, 3)]
        curve = evaluate_nurbs_curve(pts, [1.0, 3.0, 0.5, 1.0], 3, 30)
        assert len(curve) == 31
        assert curve[-1] == (3.0, 0.0, 3.0)


def test_evaluate_curve_dispatch():
    assert evaluate_curve(CurveType.BEZIER, ARCH, num_samples=6) == evaluate_bezier_curve(ARCH, 6)
    assert evaluate_curve("bspline", ARCH, degree=2, num_samples=6) == \
        evaluate_bspline_curve(ARCH, 2, 6)
    _close_polyline(evaluate_curve(CurveType.NURBS, ARCH, num_samples=6),
                    evaluate_bspline_curve(ARCH, 3, 6))


def test_evaluate_curve_rejects_unknown_type():
    with pytest.raises(ValueError):
        evaluate_curve("hermite", ARCH)
