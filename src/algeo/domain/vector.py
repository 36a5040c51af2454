"""Affine point and displacement vector types.

Points and vectors are kept as distinct types so that control point
arithmetic stays honest about what it produces:

- Point2 - Point2 -> Vector2
- Point2 + Vector2 -> Point2
- Vector2 * scalar -> Vector2

Adding two points or scaling a point is undefined and raises TypeError.
Coordinates may be any scalar type supporting field arithmetic
(float, int, fractions.Fraction, numpy scalars).
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Vector2:
    """A displacement in 2D space.

    Attributes:
        x: X component
        y: Y component
    """

    x: Any
    y: Any

    def __add__(self, other: object) -> "Vector2":
        if isinstance(other, Vector2):
            return Vector2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> "Vector2":
        if isinstance(other, Vector2):
            return Vector2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, scalar: Any) -> "Vector2":
        if isinstance(scalar, (Vector2, Point2)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: Any) -> "Vector2":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Any) -> "Vector2":
        if isinstance(scalar, (Vector2, Point2)):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def dot(self, other: "Vector2") -> Any:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def magnitude2(self) -> Any:
        """Squared length, exact for exact scalars."""
        return self.dot(self)

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def distance(self, other: "Vector2") -> float:
        """Euclidean distance between the tips of two vectors."""
        return (other - self).magnitude()

    def to_tuple(self) -> tuple[Any, Any]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Point2:
    """A position in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: Any
    y: Any

    def __add__(self, other: object) -> "Point2":
        if isinstance(other, Vector2):
            return Point2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> "Point2 | Vector2":
        if isinstance(other, Point2):
            return Vector2(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2):
            return Point2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def distance2(self, other: "Point2") -> Any:
        """Squared distance to another point, exact for exact scalars."""
        return (other - self).magnitude2()

    def distance(self, other: "Point2") -> float:
        """Euclidean distance to another point."""
        return (other - self).magnitude()

    def to_tuple(self) -> tuple[Any, Any]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with float x and y fields
        """
        return {"x": float(self.x), "y": float(self.y)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point2":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point2 instance
        """
        return cls(x=data["x"], y=data["y"])
