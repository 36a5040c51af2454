"""Real roots of univariate polynomials.

Roots are found as eigenvalues of the companion matrix
(numpy.polynomial.polynomial.polyroots). Coefficients are always converted
to float64, whatever scalar type produced them.
"""

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.polynomial.polynomial import polyroots

from algeo.exceptions import DegeneratePolynomialError, RootFindingError

logger = logging.getLogger(__name__)


def find_real_roots(coefficients: Sequence[Any], imag_tolerance: float = 1e-10) -> list[float]:
    """Find the real roots of a polynomial.

    Args:
        coefficients: Coefficients in ascending degree order (index = degree)
        imag_tolerance: Largest imaginary part accepted for a real root

    Returns:
        Real roots in ascending order (with multiplicity)

    Raises:
        DegeneratePolynomialError: If every coefficient is zero
        RootFindingError: If a coefficient is not finite or eigenvalues fail

    Examples:
        >>> find_real_roots([2.0, -1.0])
        [2.0]
    """
    coeffs = np.asarray([float(c) for c in coefficients], dtype=np.float64)
    if not np.all(np.isfinite(coeffs)):
        raise RootFindingError("coefficients must be finite")

    coeffs = np.trim_zeros(coeffs, "b")
    if coeffs.size == 0:
        raise DegeneratePolynomialError()
    if coeffs.size == 1:
        return []

    try:
        roots = polyroots(coeffs)
    except np.linalg.LinAlgError as e:
        raise RootFindingError(str(e)) from e

    real = sorted(float(r.real) for r in roots if abs(r.imag) <= imag_tolerance)
    logger.debug(
        "Polynomial of degree %d has %d real roots (of %d)",
        coeffs.size - 1, len(real), len(roots)
    )
    return real
