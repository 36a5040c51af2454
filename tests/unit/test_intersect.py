"""Unit tests for root finding and cubic intersection.

Tests cover:
- Real root extraction and its error cases
- The intersection polynomial
- Root filtering against the [0, 1] parameter range
- Intersection of the reference curve pair
"""

from fractions import Fraction

import pytest

from algeo.config import IntersectionConfig
from algeo.core import evaluate, find_real_roots, intersect_cubic, intersection_polynomial
from algeo.domain import Point2, poly_eval
from algeo.exceptions import CurveSizeError, DegeneratePolynomialError, RootFindingError

CURVE_A = [Point2(0.0, 0.0), Point2(5.0, 11.0), Point2(7.0, 2.0), Point2(16.0, 0.0)]
CURVE_B = [Point2(1.0, 6.0), Point2(2.0, 0.0), Point2(14.0, 10.0), Point2(11.0, 1.0)]

EXPECTED_POINTS = [(2.43, 4.11), (7.12, 4.54), (11.26, 1.88)]


def sorted_points(hits) -> list[Point2]:
    return sorted((point for _, point in hits), key=lambda p: (p.x, p.y))


class TestFindRealRoots:
    """Tests for find_real_roots()."""

    def test_cubic_with_three_roots(self):
        """(t - 1)(t - 2)(t - 3) has roots 1, 2, 3."""
        roots = find_real_roots([-6, 11, -6, 1])
        assert roots == pytest.approx([1.0, 2.0, 3.0])

    def test_linear(self):
        assert find_real_roots([2.0, -1.0]) == pytest.approx([2.0])

    def test_no_real_roots(self):
        assert find_real_roots([1, 0, 1]) == []

    def test_mixed_roots(self):
        """(t^2 + 1)(t - 4) keeps only the real root."""
        assert find_real_roots([-4, 1, -4, 1]) == pytest.approx([4.0])

    def test_trailing_zeros_trimmed(self):
        assert find_real_roots([-1, 1, 0, 0]) == pytest.approx([1.0])

    def test_constant(self):
        """A nonzero constant has no roots."""
        assert find_real_roots([5.0]) == []

    def test_zero_polynomial(self):
        with pytest.raises(DegeneratePolynomialError):
            find_real_roots([0.0, 0.0, 0.0])

    def test_empty(self):
        with pytest.raises(DegeneratePolynomialError):
            find_real_roots([])

    def test_not_finite(self):
        with pytest.raises(RootFindingError):
            find_real_roots([1.0, float("nan"), 1.0])
        with pytest.raises(RootFindingError):
            find_real_roots([1.0, float("inf")])

    def test_accepts_fractions(self):
        assert find_real_roots([Fraction(-1, 2), 1]) == pytest.approx([0.5])

    def test_sorted(self):
        roots = find_real_roots([6, -5, -2, 1])
        assert roots == sorted(roots)
        assert roots == pytest.approx([-2.0, 1.0, 3.0])


class TestIntersectionPolynomial:
    """Tests for intersection_polynomial()."""

    def test_degree(self):
        assert len(intersection_polynomial(CURVE_A, CURVE_B)) == 10

    def test_vanishes_at_intersections(self):
        """g(t) is zero at the parameters of the intersections."""
        polynomial = intersection_polynomial(CURVE_A, CURVE_B)
        scale = max(abs(c) for c in polynomial)
        for t, _ in intersect_cubic(CURVE_A, CURVE_B):
            assert abs(poly_eval(polynomial, t)) <= 1e-6 * scale

    def test_exact_scalars(self):
        exact_a = [Point2(Fraction(p.x), Fraction(p.y)) for p in CURVE_A]
        exact_b = [Point2(Fraction(p.x), Fraction(p.y)) for p in CURVE_B]
        polynomial = intersection_polynomial(exact_a, exact_b)
        assert all(isinstance(c, Fraction) for c in polynomial)


class TestIntersectCubic:
    """Tests for intersect_cubic()."""

    def test_reference_pair(self):
        """The reference pair crosses three times."""
        points = sorted_points(intersect_cubic(CURVE_A, CURVE_B))
        assert len(points) == 3
        for point, (x, y) in zip(points, EXPECTED_POINTS):
            assert point.x == pytest.approx(x, abs=0.02)
            assert point.y == pytest.approx(y, abs=0.02)

    def test_parameters_in_range(self):
        for t, point in intersect_cubic(CURVE_A, CURVE_B):
            assert 0.0 <= t <= 1.0
            expected = evaluate(CURVE_A, t)
            assert point.x == pytest.approx(expected.x)
            assert point.y == pytest.approx(expected.y)

    def test_symmetric(self):
        """Swapping the curves finds the same points."""
        forward = sorted_points(intersect_cubic(CURVE_A, CURVE_B))
        backward = sorted_points(intersect_cubic(CURVE_B, CURVE_A))
        assert len(forward) == len(backward)
        for p, q in zip(forward, backward):
            assert p.x == pytest.approx(q.x, abs=1e-5)
            assert p.y == pytest.approx(q.y, abs=1e-5)

    def test_exact_input(self):
        exact_a = [Point2(Fraction(p.x), Fraction(p.y)) for p in CURVE_A]
        exact_b = [Point2(Fraction(p.x), Fraction(p.y)) for p in CURVE_B]
        exact = sorted_points(intersect_cubic(exact_a, exact_b))
        inexact = sorted_points(intersect_cubic(CURVE_A, CURVE_B))
        assert len(exact) == len(inexact)
        for p, q in zip(exact, inexact):
            assert float(p.x) == pytest.approx(q.x, abs=1e-6)

    def test_custom_root_finder_filtered(self):
        """Roots outside [0, 1] are discarded."""
        received = []

        def root_finder(coefficients):
            received.append(list(coefficients))
            return [-0.5, 0.2, 0.9, 1.5]

        hits = list(intersect_cubic(CURVE_A, CURVE_B, root_finder=root_finder))
        assert [t for t, _ in hits] == [0.2, 0.9]
        assert len(received) == 1
        assert len(received[0]) == 10
        assert all(isinstance(c, float) for c in received[0])

    def test_parameter_tolerance_clamps(self):
        def root_finder(_coefficients):
            return [-1e-5, 1.0 + 1e-5]

        assert list(intersect_cubic(CURVE_A, CURVE_B, root_finder=root_finder)) == []

        config = IntersectionConfig(parameter_tolerance=1e-4)
        hits = list(intersect_cubic(CURVE_A, CURVE_B, config=config, root_finder=root_finder))
        assert [t for t, _ in hits] == [0.0, 1.0]
        assert hits[0][1] == CURVE_A[0]
        assert hits[1][1] == CURVE_A[-1]

    def test_root_finding_is_eager(self):
        """Root finding runs before the result is consumed."""
        calls = []

        def root_finder(_coefficients):
            calls.append(1)
            return [0.5]

        result = intersect_cubic(CURVE_A, CURVE_B, root_finder=root_finder)
        assert calls == [1]
        assert next(iter(result))[0] == 0.5

    def test_identical_curves_degenerate(self):
        """Coincident curves make the intersection polynomial vanish."""
        curve = [Point2(0, 0), Point2(5, 11), Point2(7, 2), Point2(16, 0)]
        with pytest.raises(DegeneratePolynomialError):
            intersect_cubic(curve, list(curve))

    def test_wrong_size(self):
        with pytest.raises(CurveSizeError):
            intersect_cubic(CURVE_A[:3], CURVE_B)
        with pytest.raises(CurveSizeError):
            intersect_cubic(CURVE_A, CURVE_B + [Point2(0.0, 0.0)])
