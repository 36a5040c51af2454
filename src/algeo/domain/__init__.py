"""Domain models for algeo.

This module contains the leaf data types the algorithms operate on. All
models are designed to be:

- Generic over the scalar type (float, Fraction, numpy scalars)
- Serializable for inter-process communication (batch processing)
- Independent of the algorithms in algeo.core

Key classes:
- Point2 / Vector2: affine point and displacement vector
- BezierCurve: fixed-length control point container
- Poly3, Poly1x2d, Poly2x2d, Poly3x2d: fixed-basis polynomials
- CurvePair / Intersection: batch intersection records
"""

from algeo.domain.curve import MAX_CONTROL_POINTS, BezierCurve, as_curve
from algeo.domain.pair import CurvePair, Intersection
from algeo.domain.polynomial import (
    BivariatePolynomial,
    Poly1x2d,
    Poly2x2d,
    Poly3,
    Poly3x2d,
    poly_eval,
)
from algeo.domain.vector import Point2, Vector2

__all__: list[str] = [
    "MAX_CONTROL_POINTS",
    # Geometry
    "Point2",
    "Vector2",
    "BezierCurve",
    "as_curve",
    # Polynomials
    "BivariatePolynomial",
    "Poly1x2d",
    "Poly2x2d",
    "Poly3",
    "Poly3x2d",
    "poly_eval",
    # Records
    "CurvePair",
    "Intersection",
]
