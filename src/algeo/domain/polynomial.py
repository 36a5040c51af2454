"""Dense fixed-basis polynomials.

This module defines the small polynomial algebra used by implicitization
and intersection:
- Poly3: univariate polynomial of degree <= 3
- Poly1x2d, Poly2x2d, Poly3x2d: polynomials in (x, y) of total degree <= 1, 2, 3

Field order is coefficient order. The degree of a bivariate polynomial is part
of its type: multiplying a degree-1 by a degree-2 polynomial always yields a
Poly3x2d, and products with no representable degree are rejected.
Coefficients may be any scalar type (float, Fraction, numpy scalars).
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from algeo.exceptions import PolynomialDegreeError


def poly_eval(coefficients: Sequence[Any], t: Any) -> Any:
    """Evaluate an ascending coefficient list at t using Horner's scheme.

    Args:
        coefficients: Coefficients, index = degree
        t: Evaluation point

    Returns:
        Polynomial value (0 for an empty list)

    Examples:
        >>> poly_eval([1, 2, 3], 2)
        17
    """
    result: Any = 0
    for c in reversed(coefficients):
        result = result * t + c
    return result


def _convolve(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Multiply two ascending coefficient lists."""
    out: list[Any] = [0] * (len(a) + len(b) - 1)
    for i, ca in enumerate(a):
        for j, cb in enumerate(b):
            out[i + j] = out[i + j] + ca * cb
    return out


def _power(coefficients: Sequence[Any], n: int) -> list[Any]:
    """Raise an ascending coefficient list to a non-negative integer power."""
    out: list[Any] = [1]
    for _ in range(n):
        out = _convolve(out, coefficients)
    return out


@dataclass(frozen=True, slots=True)
class Poly3:
    """Univariate polynomial k + x*t + xx*t^2 + xxx*t^3."""

    k: Any = 0
    x: Any = 0
    xx: Any = 0
    xxx: Any = 0

    def coefficients(self) -> tuple[Any, Any, Any, Any]:
        """Return coefficients in ascending degree order."""
        return (self.k, self.x, self.xx, self.xxx)

    def eval(self, t: Any) -> Any:
        return ((self.xxx * t + self.xx) * t + self.x) * t + self.k

    @classmethod
    def from_coefficients(cls, coefficients: Sequence[Any]) -> "Poly3":
        """Build a cubic from up to four ascending coefficients.

        Raises:
            PolynomialDegreeError: If more than four coefficients are given
        """
        if len(coefficients) > 4:
            raise PolynomialDegreeError(
                f"Cannot represent {len(coefficients)} coefficients as a cubic"
            )
        return cls(*coefficients)

    def __add__(self, other: object) -> "Poly3":
        if isinstance(other, Poly3):
            return Poly3(*(a + b for a, b in zip(self.coefficients(), other.coefficients())))
        return NotImplemented

    def __sub__(self, other: object) -> "Poly3":
        if isinstance(other, Poly3):
            return Poly3(*(a - b for a, b in zip(self.coefficients(), other.coefficients())))
        return NotImplemented

    def __mul__(self, scalar: Any) -> "Poly3":
        if isinstance(scalar, (Poly3, BivariatePolynomial)):
            return NotImplemented
        return Poly3(*(c * scalar for c in self.coefficients()))

    def __rmul__(self, scalar: Any) -> "Poly3":
        return self.__mul__(scalar)


class BivariatePolynomial:
    """Shared algebra for polynomials in two variables.

    Subclasses are frozen dataclasses that declare their fields in MONOMIALS
    order. MONOMIALS maps each field to its (x power, y power).
    """

    __slots__ = ()

    DEGREE: ClassVar[int]
    MONOMIALS: ClassVar[tuple[tuple[str, int, int], ...]]

    def coefficients(self) -> tuple[Any, ...]:
        """Return coefficients in declaration order."""
        return tuple(getattr(self, name) for name, _, _ in self.MONOMIALS)

    def terms(self) -> list[tuple[int, int, Any]]:
        """Return (x power, y power, coefficient) for every monomial."""
        return [(i, j, getattr(self, name)) for name, i, j in self.MONOMIALS]

    def eval(self, x: Any, y: Any) -> Any:
        """Evaluate the polynomial at (x, y) as a sum of monomials."""
        total: Any = 0
        for i, j, c in self.terms():
            total = total + c * x**i * y**j
        return total

    def _check_same_degree(self, other: "BivariatePolynomial", op: str) -> None:
        if type(other).DEGREE != self.DEGREE:
            raise PolynomialDegreeError(
                f"Cannot {op} polynomials of degree {self.DEGREE} and {type(other).DEGREE}"
            )

    def __add__(self, other: object) -> Any:
        if not isinstance(other, BivariatePolynomial):
            return NotImplemented
        self._check_same_degree(other, "add")
        return type(self)(*(a + b for a, b in zip(self.coefficients(), other.coefficients())))

    def __sub__(self, other: object) -> Any:
        if not isinstance(other, BivariatePolynomial):
            return NotImplemented
        self._check_same_degree(other, "subtract")
        return type(self)(*(a - b for a, b in zip(self.coefficients(), other.coefficients())))

    def __neg__(self) -> Any:
        return type(self)(*(-c for c in self.coefficients()))

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Poly3):
            return NotImplemented
        if not isinstance(other, BivariatePolynomial):
            return type(self)(*(c * other for c in self.coefficients()))

        degree = self.DEGREE + type(other).DEGREE
        result_type = _BIVARIATE_BY_DEGREE.get(degree)
        if result_type is None:
            raise PolynomialDegreeError(
                f"No polynomial type for product of degree {self.DEGREE} and {type(other).DEGREE}"
            )

        slots = {(i, j): name for name, i, j in result_type.MONOMIALS}
        acc: dict[str, Any] = {name: 0 for name, _, _ in result_type.MONOMIALS}
        for ia, ja, ca in self.terms():
            for ib, jb, cb in other.terms():
                name = slots[(ia + ib, ja + jb)]
                acc[name] = acc[name] + ca * cb
        return result_type(**acc)

    def __rmul__(self, scalar: Any) -> Any:
        return self.__mul__(scalar)

    def subst(self, x: Sequence[Any], y: Sequence[Any]) -> list[Any]:
        """Substitute univariate polynomials for x and y.

        Every monomial x^i * y^j is expanded by convolving the coefficient
        lists and accumulated into a growing output list indexed by degree.

        Args:
            x: Ascending coefficients of the polynomial replacing x
            y: Ascending coefficients of the polynomial replacing y

        Returns:
            Ascending coefficients of the resulting univariate polynomial
        """
        out: list[Any] = [self.coefficients()[0]]
        for i, j, c in self.terms():
            if i == 0 and j == 0:
                continue
            expanded = _convolve(_power(x, i), _power(y, j))
            if len(out) < len(expanded):
                out.extend([0] * (len(expanded) - len(out)))
            for deg, value in enumerate(expanded):
                out[deg] = out[deg] + c * value
        return out


@dataclass(frozen=True, slots=True)
class Poly1x2d(BivariatePolynomial):
    """First degree polynomial in two variables: k + x*X + y*Y."""

    DEGREE: ClassVar[int] = 1
    MONOMIALS: ClassVar[tuple[tuple[str, int, int], ...]] = (
        ("k", 0, 0),
        ("x", 1, 0),
        ("y", 0, 1),
    )

    k: Any = 0
    x: Any = 0
    y: Any = 0


@dataclass(frozen=True, slots=True)
class Poly2x2d(BivariatePolynomial):
    """Second degree polynomial in two variables."""

    DEGREE: ClassVar[int] = 2
    MONOMIALS: ClassVar[tuple[tuple[str, int, int], ...]] = (
        ("k", 0, 0),
        ("x", 1, 0),
        ("y", 0, 1),
        ("xx", 2, 0),
        ("xy", 1, 1),
        ("yy", 0, 2),
    )

    k: Any = 0
    x: Any = 0
    y: Any = 0
    xx: Any = 0
    xy: Any = 0
    yy: Any = 0


@dataclass(frozen=True, slots=True)
class Poly3x2d(BivariatePolynomial):
    """Third degree polynomial in two variables (10 coefficients)."""

    DEGREE: ClassVar[int] = 3
    MONOMIALS: ClassVar[tuple[tuple[str, int, int], ...]] = (
        ("k", 0, 0),
        ("x", 1, 0),
        ("y", 0, 1),
        ("xx", 2, 0),
        ("xy", 1, 1),
        ("yy", 0, 2),
        ("xxx", 3, 0),
        ("xxy", 2, 1),
        ("xyy", 1, 2),
        ("yyy", 0, 3),
    )

    k: Any = 0
    x: Any = 0
    y: Any = 0
    xx: Any = 0
    xy: Any = 0
    yy: Any = 0
    xxx: Any = 0
    xxy: Any = 0
    xyy: Any = 0
    yyy: Any = 0


_BIVARIATE_BY_DEGREE: dict[int, type[BivariatePolynomial]] = {
    1: Poly1x2d,
    2: Poly2x2d,
    3: Poly3x2d,
}
