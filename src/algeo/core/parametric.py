"""Power-basis form of planar cubic Bezier curves."""

from collections.abc import Sequence

from algeo.domain import BezierCurve, Point2, Poly3, as_curve
from algeo.exceptions import CurveSizeError


def cubic_control_points(
    points: BezierCurve[Point2] | Sequence[Point2],
) -> tuple[Point2, Point2, Point2, Point2]:
    """Unpack exactly four control points.

    Raises:
        CurveSizeError: If the curve does not have four control points
    """
    curve = as_curve(points)
    if curve.count() != 4:
        raise CurveSizeError(curve.count(), "4 (cubic)")
    return curve.get(0), curve.get(1), curve.get(2), curve.get(3)


def parametric_cubic(points: BezierCurve[Point2] | Sequence[Point2]) -> tuple[Poly3, Poly3]:
    """Return the parametric form (x(t), y(t)) of a 2D cubic Bezier curve.

    Expands the Bernstein basis into the power basis:

        (1-t)^3 A + 3t(1-t)^2 B + 3t^2(1-t) C + t^3 D
        = (-A + 3B - 3C + D) t^3 + (3A - 6B + 3C) t^2 + (-3A + 3B) t + A

    Args:
        points: The four control points [A, B, C, D]

    Returns:
        Tuple of (x polynomial, y polynomial)

    Raises:
        CurveSizeError: If the curve does not have four control points
    """
    a, b, c, d = cubic_control_points(points)

    poly_x = Poly3(
        k=a.x,
        x=-3 * a.x + 3 * b.x,
        xx=3 * a.x - 6 * b.x + 3 * c.x,
        xxx=-a.x + 3 * b.x - 3 * c.x + d.x,
    )
    poly_y = Poly3(
        k=a.y,
        x=-3 * a.y + 3 * b.y,
        xx=3 * a.y - 6 * b.y + 3 * c.y,
        xxx=-a.y + 3 * b.y - 3 * c.y + d.y,
    )
    return poly_x, poly_y
