"""Unit tests for the generic curve algebra.

Tests cover:
- De Casteljau evaluation on points, vectors and scalars
- Derivative curves
- Subdivision invariants
- Arc length bounds and adaptive arc length
"""

from fractions import Fraction

import pytest

from algeo.core import arclen, derive, evaluate, hull_arclen_bounds, subdivide
from algeo.domain import BezierCurve, Point2, Vector2
from algeo.exceptions import EmptyCurveError, ScalarCastError


def bernstein_cubic(points: list[Point2], t: Fraction) -> Point2:
    """Evaluate a cubic with the explicit Bernstein formula."""
    s = 1 - t
    weights = [s**3, 3 * t * s**2, 3 * t**2 * s, t**3]
    x = sum(w * p.x for w, p in zip(weights, points))
    y = sum(w * p.y for w, p in zip(weights, points))
    return Point2(x, y)


@pytest.fixture
def cubic() -> list[Point2]:
    return [
        Point2(Fraction(0), Fraction(0)),
        Point2(Fraction(5), Fraction(11)),
        Point2(Fraction(7), Fraction(2)),
        Point2(Fraction(16), Fraction(0)),
    ]


class TestEvaluate:
    """Tests for evaluate()."""

    def test_linear_midpoint(self):
        assert evaluate([Point2(1.0, 0.0), Point2(5.0, 1.0)], 0.5) == Point2(3.0, 0.5)

    def test_endpoints(self, cubic):
        """B(0) is the first control point and B(1) the last."""
        assert evaluate(cubic, 0) == cubic[0]
        assert evaluate(cubic, 1) == cubic[-1]

    def test_matches_bernstein(self, cubic):
        for t in [Fraction(1, 4), Fraction(1, 3), Fraction(1, 2), Fraction(7, 8)]:
            assert evaluate(cubic, t) == bernstein_cubic(cubic, t)

    def test_single_point(self):
        assert evaluate([Point2(2.0, 3.0)], 0.7) == Point2(2.0, 3.0)

    def test_scalars(self):
        """Scalar control values form a 1D curve."""
        assert evaluate([0.0, 1.0, 0.0], 0.5) == pytest.approx(0.5)

    def test_vectors(self):
        assert evaluate([Vector2(0.0, 0.0), Vector2(2.0, 4.0)], 0.25) == Vector2(0.5, 1.0)

    def test_extrapolation(self):
        """Parameters outside [0, 1] extrapolate."""
        assert evaluate([Point2(0.0, 0.0), Point2(1.0, 1.0)], 2.0) == Point2(2.0, 2.0)

    def test_accepts_curve(self, cubic):
        assert evaluate(BezierCurve(cubic), Fraction(1, 2)) == evaluate(cubic, Fraction(1, 2))

    def test_input_not_modified(self, cubic):
        curve = BezierCurve(cubic)
        evaluate(curve, Fraction(1, 3))
        assert curve.to_list() == cubic

    def test_empty(self):
        with pytest.raises(EmptyCurveError):
            evaluate([], 0.5)


class TestDerive:
    """Tests for derive()."""

    def test_quadratic_derivative(self):
        """Derivative of a quadratic matches 2(1-t)(p1-p0) + 2t(p2-p1)."""
        points = [Point2(0.0, 0.0), Point2(0.0, 1.0), Point2(1.0, 1.0)]
        derivative = derive(points)

        for t in [0.0, 0.3, 0.5, 0.9, 1.0]:
            expected = (points[1] - points[0]) * (2 * (1 - t)) + (points[2] - points[1]) * (2 * t)
            actual = evaluate(derivative, t)
            assert actual.x == pytest.approx(expected.x)
            assert actual.y == pytest.approx(expected.y)

    def test_point_derivative_is_vectors(self, cubic):
        derivative = derive(cubic)
        assert derivative.count() == 3
        assert all(isinstance(v, Vector2) for v in derivative)
        assert derivative.get(0) == Vector2(15, 33)

    def test_single_point_derivative_empty(self):
        assert derive([Point2(1.0, 1.0)]).count() == 0

    def test_scalar_type(self):
        derivative = derive([Fraction(0), Fraction(1, 2)], scalar=Fraction)
        assert derivative.to_list() == [Fraction(1, 2)]

    def test_scalar_cast_failure(self):
        """A degree the scalar type cannot represent is rejected."""

        class Tiny(int):
            def __new__(cls, value):
                if value > 1:
                    raise OverflowError("too large")
                return super().__new__(cls, value)

        with pytest.raises(ScalarCastError):
            derive([0.0, 1.0, 2.0], scalar=Tiny)

    def test_inexact_cast(self):
        with pytest.raises(ScalarCastError):
            derive([0.0, 1.0, 2.0], scalar=lambda n: n + 0.5)

    def test_empty(self):
        with pytest.raises(EmptyCurveError):
            derive([])


class TestSubdivide:
    """Tests for subdivide()."""

    def test_halves_share_split_point(self, cubic):
        t = Fraction(1, 3)
        left, right = subdivide(cubic, t)
        assert left.last() == evaluate(cubic, t)
        assert right.first() == evaluate(cubic, t)
        assert left.first() == cubic[0]
        assert right.last() == cubic[-1]

    def test_halves_reparametrize_curve(self, cubic):
        """left(u) = B(u t) and right(u) = B(t + u (1 - t))."""
        t = Fraction(2, 5)
        left, right = subdivide(cubic, t)
        for u in [Fraction(0), Fraction(1, 4), Fraction(1, 2), Fraction(5, 6), Fraction(1)]:
            assert evaluate(left, u) == evaluate(cubic, u * t)
            assert evaluate(right, u) == evaluate(cubic, t + u * (1 - t))

    def test_same_degree(self, cubic):
        left, right = subdivide(cubic, Fraction(1, 2))
        assert left.count() == 4
        assert right.count() == 4

    def test_linear_midpoint(self):
        left, right = subdivide([Point2(0.0, 0.0), Point2(2.0, 2.0)], 0.5)
        assert left.to_list() == [Point2(0.0, 0.0), Point2(1.0, 1.0)]
        assert right.to_list() == [Point2(1.0, 1.0), Point2(2.0, 2.0)]

    def test_single_point(self):
        left, right = subdivide([Point2(1.0, 2.0)], 0.5)
        assert left.to_list() == [Point2(1.0, 2.0)]
        assert right.to_list() == [Point2(1.0, 2.0)]

    def test_input_not_modified(self, cubic):
        curve = BezierCurve(cubic)
        left, _ = subdivide(curve, Fraction(1, 2))
        left.set(0, Point2(99, 99))
        assert curve.to_list() == cubic

    def test_empty(self):
        with pytest.raises(EmptyCurveError):
            subdivide([], 0.5)


class TestArcLength:
    """Tests for hull_arclen_bounds() and arclen()."""

    def test_straight_line_bounds_equal(self):
        lower, upper = hull_arclen_bounds([Point2(0.0, 0.0), Point2(1.0, 1.0), Point2(3.0, 3.0)])
        assert lower == pytest.approx(upper)
        assert lower == pytest.approx(18**0.5)

    def test_bounds_ordered(self, cubic):
        lower, upper = hull_arclen_bounds(cubic)
        assert lower == pytest.approx(16.0)
        assert lower <= upper

    def test_scalar_bounds(self):
        lower, upper = hull_arclen_bounds([0.0, 2.0, 1.0])
        assert lower == 1.0
        assert upper == 3.0

    def test_single_point(self):
        assert hull_arclen_bounds([Point2(1.0, 1.0)]) == (0.0, 0)

    def test_arclen_within_bounds(self, cubic):
        float_cubic = [Point2(float(p.x), float(p.y)) for p in cubic]
        lower, upper = hull_arclen_bounds(float_cubic)
        length = arclen(float_cubic, tolerance=1e-6)
        assert lower <= length <= upper

    def test_arclen_quarter_circle(self):
        """A cubic approximating a unit quarter circle has length close to pi/2."""
        k = 0.5522847498
        points = [Point2(1.0, 0.0), Point2(1.0, k), Point2(k, 1.0), Point2(0.0, 1.0)]
        assert arclen(points, tolerance=1e-6) == pytest.approx(1.5708, abs=1e-3)

    def test_arclen_empty(self):
        with pytest.raises(EmptyCurveError):
            arclen([])

    def test_bounds_empty(self):
        with pytest.raises(EmptyCurveError):
            hull_arclen_bounds([])
