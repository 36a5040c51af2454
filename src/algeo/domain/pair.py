"""Curve pair and intersection records used by batch processing."""

from dataclasses import dataclass, field
from typing import Any

from algeo.domain.curve import BezierCurve
from algeo.domain.vector import Point2


@dataclass(frozen=True, slots=True)
class Intersection:
    """A single intersection between two curves.

    Attributes:
        t: Parameter on the first curve, in [0, 1]
        point: Intersection location
    """

    t: float
    point: Point2

    def to_dict(self) -> dict[str, Any]:
        return {"t": float(self.t), **self.point.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Intersection":
        return cls(t=data["t"], point=Point2.from_dict(data))


@dataclass
class CurvePair:
    """Two planar cubic curves to intersect.

    Attributes:
        name: Identifier used in logs and results
        a: Control points of the first curve (the one t refers to)
        b: Control points of the second curve
    """

    name: str
    a: list[Point2]
    b: list[Point2]
    intersections: list[Intersection] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with name and [x, y] lists for both curves
        """
        return {
            "name": self.name,
            "a": BezierCurve(self.a).to_dict()["points"],
            "b": BezierCurve(self.b).to_dict()["points"],
            "intersections": [i.to_dict() for i in self.intersections],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CurvePair":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a curve pair

        Returns:
            CurvePair instance
        """
        return cls(
            name=data["name"],
            a=BezierCurve.from_dict({"points": data["a"]}).to_list(),
            b=BezierCurve.from_dict({"points": data["b"]}).to_list(),
            intersections=[Intersection.from_dict(i) for i in data.get("intersections", [])],
        )
