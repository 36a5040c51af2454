"""Generic Bezier curve algebra.

This module provides the curve operations built on De Casteljau's algorithm:
- Evaluation at a parameter
- Derivative (hodograph) curve
- Subdivision into two curves
- Cheap arc length bounds from the control polygon
- Adaptive arc length by subdivision

Every function works on any control point type closed under subtraction,
addition of the difference and scaling by the parameter (Point2, Vector2 or
plain scalars), and accepts either a BezierCurve or a sequence of points.
All functions are pure.
"""

from collections.abc import Callable, Sequence
from typing import Any

from algeo.domain import BezierCurve, as_curve
from algeo.exceptions import EmptyCurveError, ScalarCastError

Curve = BezierCurve[Any] | Sequence[Any]


def _lerp_step(points: BezierCurve[Any], t: Any) -> BezierCurve[Any]:
    """Build the next, one element shorter, row of De Casteljau's triangle."""
    new_points = points.reduced()
    for i in range(new_points.count()):
        p = points.get(i) + (points.get(i + 1) - points.get(i)) * t
        new_points.set(i, p)
    return new_points


def evaluate(points: Curve, t: Any) -> Any:
    """Evaluate a Bezier curve at t using De Casteljau's algorithm.

    t is not restricted to [0, 1]; values outside extrapolate the curve.

    Args:
        points: Control points of the curve
        t: Curve parameter

    Returns:
        The point on the curve at t

    Raises:
        EmptyCurveError: If the curve has no control points

    Examples:
        >>> evaluate([Point2(1.0, 0.0), Point2(5.0, 1.0)], 0.5)
        Point2(x=3.0, y=0.5)
    """
    curve = as_curve(points)
    if curve.count() == 0:
        raise EmptyCurveError("evaluate")
    if curve.count() == 1:
        return curve.get(0)
    return evaluate(_lerp_step(curve, t), t)


def _cast_scalar(value: int, scalar: Callable[[int], Any] | None) -> Any:
    if scalar is None:
        return value
    try:
        cast = scalar(value)
    except (OverflowError, ValueError, TypeError) as e:
        raise ScalarCastError(value, scalar) from e
    if cast != value:
        raise ScalarCastError(value, scalar)
    return cast


def derive(points: Curve, scalar: Callable[[int], Any] | None = None) -> BezierCurve[Any]:
    """Return the derivative of a Bezier curve.

    Element i of the result is (p[i+1] - p[i]) * (count - 1). For a curve of
    Point2 the result holds Vector2 elements.

    Args:
        points: Control points of the curve
        scalar: Constructor of the scalar type to cast the degree into.
            None uses the exact integer.

    Returns:
        Curve one element shorter than the input

    Raises:
        EmptyCurveError: If the curve has no control points
        ScalarCastError: If the degree cannot be represented in the scalar type
    """
    curve = as_curve(points)
    if curve.count() == 0:
        raise EmptyCurveError("derive")

    n = _cast_scalar(curve.count() - 1, scalar)
    derivative = curve.reduced()
    for i in range(derivative.count()):
        derivative.set(i, (curve.get(i + 1) - curve.get(i)) * n)
    return derivative


def subdivide(points: Curve, t: Any) -> tuple[BezierCurve[Any], BezierCurve[Any]]:
    """Split a Bezier curve at t into two curves of the same degree.

    The control points of the two halves are the first and last points of
    each row of De Casteljau's triangle.

    Args:
        points: Control points of the curve
        t: Split parameter

    Returns:
        Tuple of (left, right). left covers [0, t], right covers [t, 1].

    Raises:
        EmptyCurveError: If the curve has no control points
    """
    curve = as_curve(points)
    if curve.count() == 0:
        raise EmptyCurveError("subdivide")

    left = curve.clone()
    right = curve.clone()
    n = curve.count()

    row = curve
    while True:
        index = n - row.count()
        left.set(index, row.get(0))
        right.set(n - index - 1, row.get(row.count() - 1))
        if row.count() <= 1:
            break
        row = _lerp_step(row, t)

    return left, right


def _distance(a: Any, b: Any) -> Any:
    if hasattr(a, "distance"):
        return a.distance(b)
    return abs(b - a)


def hull_arclen_bounds(points: Curve) -> tuple[Any, Any]:
    """Return cheap lower and upper bounds for the arc length of a curve.

    The lower bound is the distance from the first to the last control point,
    the upper bound is the length of the control polygon.

    Args:
        points: Control points of the curve

    Returns:
        Tuple of (lower, upper)

    Raises:
        EmptyCurveError: If the curve has no control points
    """
    curve = as_curve(points)
    if curve.count() == 0:
        raise EmptyCurveError("measure")

    lower = _distance(curve.get(0), curve.get(curve.count() - 1))
    upper: Any = 0
    for i in range(curve.count() - 1):
        upper += _distance(curve.get(i), curve.get(i + 1))
    return lower, upper


def arclen(points: Curve, tolerance: float = 1e-6, max_depth: int = 16) -> Any:
    """Approximate the arc length of a curve by adaptive subdivision.

    Splits at t=0.5 until the hull bounds of every piece are within its share
    of the tolerance, then sums the midpoints of the bounds. The result always
    lies within hull_arclen_bounds() of the whole curve.

    Args:
        points: Control points of the curve
        tolerance: Maximum total gap between the bounds
        max_depth: Maximum recursion depth

    Returns:
        Approximate arc length

    Raises:
        EmptyCurveError: If the curve has no control points
    """
    curve = as_curve(points)
    if curve.count() == 0:
        raise EmptyCurveError("measure")
    return _arclen(curve, tolerance, max_depth)


def _arclen(curve: BezierCurve[Any], tolerance: float, depth: int) -> Any:
    lower, upper = hull_arclen_bounds(curve)
    if upper - lower <= tolerance or depth <= 0:
        return (lower + upper) / 2

    left, right = subdivide(curve, 0.5)
    half = tolerance / 2
    return _arclen(left, half, depth - 1) + _arclen(right, half, depth - 1)
