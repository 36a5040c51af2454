"""Core curve algorithms for algeo.

This module contains the algorithms for:

- Curve algebra (evaluation, derivative, subdivision, arc length)
- Parametric and implicit forms of planar cubics
- Real root finding
- Cubic curve intersection and batch processing

All functions are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects)
- Generic over the scalar type of the control points

Key functions:
- evaluate: De Casteljau evaluation
- derive: Derivative curve
- subdivide: Split a curve at a parameter
- hull_arclen_bounds: Control polygon arc length bounds
- arclen: Adaptive arc length
- parametric_cubic: Power-basis polynomials of a cubic
- implicit_cubic: Implicit equation of a cubic
- find_real_roots: Companion-matrix root finder
- intersect_cubic: Intersections of two cubics

Key classes:
- IntersectionProcessor: Batch intersection over worker processes
"""

from algeo.core.bezier import arclen, derive, evaluate, hull_arclen_bounds, subdivide
from algeo.core.implicit import expand_det3, implicit_cubic, line_determinant
from algeo.core.intersect import intersect_cubic, intersection_polynomial
from algeo.core.parametric import parametric_cubic
from algeo.core.processor import IntersectionProcessor, intersect_pair
from algeo.core.roots import find_real_roots

__all__ = [
    # Processor classes
    "IntersectionProcessor",
    # Curve algebra
    "arclen",
    "derive",
    "evaluate",
    # Implicitization
    "expand_det3",
    "find_real_roots",
    "hull_arclen_bounds",
    "implicit_cubic",
    "intersect_cubic",
    "intersect_pair",
    "intersection_polynomial",
    "line_determinant",
    "parametric_cubic",
    "subdivide",
]
