"""algeo - Bezier curve algebra and cubic curve intersection.

algeo evaluates, differentiates, subdivides and measures Bezier curves of up
to six control points, and intersects planar cubic curves exactly via
implicitization.

Example:
    >>> from algeo import Point2, evaluate
    >>> evaluate([Point2(0.0, 0.0), Point2(0.0, 1.0), Point2(1.0, 1.0)], 0.5)
    Point2(x=0.25, y=0.75)
"""

__version__ = "0.1.0"

from algeo.core import (  # noqa: E402
    arclen,
    derive,
    evaluate,
    find_real_roots,
    hull_arclen_bounds,
    implicit_cubic,
    intersect_cubic,
    parametric_cubic,
    subdivide,
)
from algeo.domain import BezierCurve, Point2, Vector2  # noqa: E402

__all__ = [
    "BezierCurve",
    "Point2",
    "Vector2",
    "__version__",
    "arclen",
    "derive",
    "evaluate",
    "find_real_roots",
    "hull_arclen_bounds",
    "implicit_cubic",
    "intersect_cubic",
    "parametric_cubic",
    "subdivide",
]
