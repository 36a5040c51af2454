"""Intersection of two planar cubic Bezier curves.

Implements the implicitization method from chapter 17 of "Computer Aided
Geometric Design" by Thomas W. Sederberg and "Implicitization, Inversion, and
Intersection of Planar Rational Cubic Curves" (Sederberg, Anderson and
Goldman, 1985):

1. Implicitize curve b into f(x, y)
2. Take the parametric form (x(t), y(t)) of curve a
3. Substitute to get g(t) = f(x(t), y(t)), degree <= 9
4. Find the real roots of g and keep those in [0, 1]
5. Evaluate curve a at each root

Known limitations:
- Coincident or overlapping curves make g identically zero; the default
  root finder raises DegeneratePolynomialError.
- Tangential intersections give close double roots of g, which are
  ill-conditioned and may be lost or duplicated.
- g is converted to float64 before root finding regardless of the scalar
  type of the control points.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

from algeo.config import IntersectionConfig
from algeo.core.bezier import evaluate
from algeo.core.implicit import implicit_cubic
from algeo.core.parametric import cubic_control_points, parametric_cubic
from algeo.core.roots import find_real_roots
from algeo.domain import BezierCurve, Point2

logger = logging.getLogger(__name__)

RootFinder = Callable[[Sequence[Any]], Iterable[float]]


def intersection_polynomial(
    a: BezierCurve[Point2] | Sequence[Point2],
    b: BezierCurve[Point2] | Sequence[Point2],
) -> list[Any]:
    """Return g(t), the implicit equation of b along curve a.

    Args:
        a: Control points of the first cubic
        b: Control points of the second cubic

    Returns:
        Ascending coefficients of g, in the scalar type of the control points
    """
    b_implicit = implicit_cubic(b)
    a_x, a_y = parametric_cubic(a)
    return b_implicit.subst(a_x.coefficients(), a_y.coefficients())


def _accept_root(t: float, tolerance: float) -> float | None:
    if 0.0 <= t <= 1.0:
        return t
    if -tolerance <= t < 0.0:
        return 0.0
    if 1.0 < t <= 1.0 + tolerance:
        return 1.0
    return None


def intersect_cubic(
    a: BezierCurve[Point2] | Sequence[Point2],
    b: BezierCurve[Point2] | Sequence[Point2],
    config: IntersectionConfig | None = None,
    root_finder: RootFinder | None = None,
) -> Iterator[tuple[float, Point2]]:
    """Find the intersections of two 2D cubic Bezier curves.

    The polynomial algebra and root finding run immediately; intersection
    points are evaluated lazily as the result is consumed. Results are in no
    particular order; sort them if a canonical order is needed.

    Args:
        a: Control points of the first cubic; returned t values refer to it
        b: Control points of the second cubic
        config: Root filtering settings (defaults if None)
        root_finder: Replacement for find_real_roots; receives ascending
            float coefficients and returns real roots

    Returns:
        Iterator of (t, point) pairs with t in [0, 1]

    Raises:
        CurveSizeError: If either curve does not have four control points
        DegeneratePolynomialError: If the curves coincide (default root finder)

    Example:
        a = [Point2(0, 0), Point2(5, 11), Point2(7, 2), Point2(16, 0)]
        b = [Point2(1, 6), Point2(2, 0), Point2(14, 10), Point2(11, 1)]
        for t, point in intersect_cubic(a, b):
            print(t, point)
    """
    if config is None:
        config = IntersectionConfig()

    curve_a = cubic_control_points(a)
    cubic_control_points(b)

    polynomial = [float(c) for c in intersection_polynomial(curve_a, b)]

    if root_finder is None:
        roots = find_real_roots(polynomial, imag_tolerance=config.imag_tolerance)
    else:
        roots = list(root_finder(polynomial))

    accepted = []
    for root in roots:
        t = _accept_root(float(root), config.parameter_tolerance)
        if t is not None:
            accepted.append(t)

    logger.debug(
        "Intersection polynomial degree %d: %d real roots, %d in [0, 1]",
        len(polynomial) - 1, len(roots), len(accepted)
    )

    return ((t, evaluate(curve_a, t)) for t in accepted)
