"""Implicitization of planar cubic Bezier curves.

Implements the method from chapter 17 of "Computer Aided Geometric Design"
by Thomas W. Sederberg: the implicit equation of a cubic is the determinant
of a symmetric 3x3 matrix of weighted line equations through pairs of
control points.
"""

import logging
from collections.abc import Sequence
from math import comb

from algeo.core.parametric import cubic_control_points
from algeo.domain import BezierCurve, Point2, Poly1x2d, Poly3x2d

logger = logging.getLogger(__name__)


def line_determinant(pi: Point2, pj: Point2) -> Poly1x2d:
    """Return the determinant of the matrix below as a polynomial in (x, y).

        | x   y   1 |
        | xi  yi  1 |
        | xj  yj  1 |

    Its zero set is the line through pi and pj.
    """
    return Poly1x2d(
        k=pi.x * pj.y - pj.x * pi.y,
        x=pi.y - pj.y,
        y=pj.x - pi.x,
    )


def weighted_line(points: Sequence[Point2], i: int, j: int) -> Poly1x2d:
    """Line through control points i and j scaled by their binomial weights."""
    n = len(points) - 1
    return line_determinant(points[i], points[j]) * (comb(n, i) * comb(n, j))


def expand_det3(matrix: Sequence[Sequence[Poly1x2d]]) -> Poly3x2d:
    """Expand the determinant of a row major 3x3 matrix of linear polynomials."""
    a = matrix[0][0] * (matrix[1][1] * matrix[2][2] - matrix[2][1] * matrix[1][2])
    b = matrix[0][1] * (matrix[1][0] * matrix[2][2] - matrix[2][0] * matrix[1][2])
    c = matrix[0][2] * (matrix[1][0] * matrix[2][1] - matrix[2][0] * matrix[1][1])
    return a - b + c


def implicit_cubic(points: BezierCurve[Point2] | Sequence[Point2]) -> Poly3x2d:
    """Return an implicit equation f(x, y) for a 2D cubic Bezier curve.

    Every point on the curve satisfies f(x, y) = 0.

    Args:
        points: The four control points

    Returns:
        Bivariate cubic polynomial

    Raises:
        CurveSizeError: If the curve does not have four control points
    """
    p = cubic_control_points(points)

    l32 = weighted_line(p, 3, 2)
    l31 = weighted_line(p, 3, 1)
    l30 = weighted_line(p, 3, 0)
    l21 = weighted_line(p, 2, 1)
    l20 = weighted_line(p, 2, 0)
    l10 = weighted_line(p, 1, 0)

    implicit = expand_det3(
        [
            [l32, l31, l30],
            [l31, l30 + l21, l20],
            [l30, l20, l10],
        ]
    )
    logger.debug("Implicitized cubic %s -> %s", p, implicit)
    return implicit
