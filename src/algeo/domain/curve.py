"""Fixed-length control point container for Bezier curves.

A BezierCurve holds the control points (or vectors, or plain scalars) of a
single curve. Its length is fixed at construction; algorithms only ever
overwrite elements in place or derive a new, shorter curve via reduced().
One generic implementation of De Casteljau's algorithm works on every
supported length through this interface.
"""

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

from algeo.domain.vector import Point2
from algeo.exceptions import CurveIndexError, CurveSizeError, EmptyCurveError

T = TypeVar("T")

# Curves of degree 1 through 5, plus the single point base case
MAX_CONTROL_POINTS = 6


class BezierCurve(Generic[T]):
    """An ordered, fixed-length list of curve elements.

    Cloning and reducing always copy, so a curve never shares storage with
    the curves derived from it.

    Example:
        curve = BezierCurve([Point2(0, 0), Point2(0, 1), Point2(1, 1)])
        curve.count()      # 3
        curve.reduced()    # BezierCurve([Point2(0, 0), Point2(0, 1)])
    """

    __slots__ = ("_items",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Iterable[T]) -> None:
        """Create a curve from its elements.

        Args:
            items: Control points in curve order

        Raises:
            CurveSizeError: If more than MAX_CONTROL_POINTS elements are given
        """
        items = list(items)
        if len(items) > MAX_CONTROL_POINTS:
            raise CurveSizeError(len(items), f"at most {MAX_CONTROL_POINTS}")
        self._items: list[T] = items

    def count(self) -> int:
        """Return the number of elements."""
        return len(self._items)

    def get(self, i: int) -> T:
        """Get the element at index i.

        Raises:
            CurveIndexError: If i is not in 0 <= i < count()
        """
        if not 0 <= i < len(self._items):
            raise CurveIndexError(i, len(self._items))
        return self._items[i]

    def set(self, i: int, v: T) -> None:
        """Overwrite the element at index i.

        Raises:
            CurveIndexError: If i is not in 0 <= i < count()
        """
        if not 0 <= i < len(self._items):
            raise CurveIndexError(i, len(self._items))
        self._items[i] = v

    def clone(self) -> "BezierCurve[T]":
        """Return an independent copy of this curve."""
        return BezierCurve(self._items)

    def reduced(self) -> "BezierCurve[Any]":
        """Return a new curve one element shorter.

        The contents are placeholders; callers overwrite every element.

        Raises:
            EmptyCurveError: If the curve has no elements
        """
        if not self._items:
            raise EmptyCurveError("reduce")
        return BezierCurve(self._items[:-1])

    def first(self) -> T:
        return self.get(0)

    def last(self) -> T:
        return self.get(len(self._items) - 1)

    def to_list(self) -> list[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __getitem__(self, i: int) -> T:
        return self.get(i)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BezierCurve):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"BezierCurve({self._items!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialize a curve of Point2 elements for IPC.

        Returns:
            Dictionary with a list of [x, y] pairs
        """
        return {"points": [[float(p.x), float(p.y)] for p in self._items]}  # type: ignore[attr-defined]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BezierCurve[Point2]":
        """Deserialize a curve of Point2 elements.

        Args:
            data: Dictionary with a list of [x, y] pairs

        Returns:
            BezierCurve instance
        """
        return cls(Point2(x, y) for x, y in data["points"])  # type: ignore[return-value]


def as_curve(points: "BezierCurve[T] | Sequence[T]") -> BezierCurve[T]:
    """Wrap a sequence of control points in a BezierCurve.

    Curves are returned unchanged.
    """
    if isinstance(points, BezierCurve):
        return points
    return BezierCurve(points)
