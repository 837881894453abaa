"""Positions on the glued surface.

The presentation layer classifies every pointer location as one of:
- Interior: strictly inside the fundamental polygon
- OnSide: on one of the 4g physical sides, at a parameter along it
- Outside: outside the polygon, never accepted by a loop

OnSide positions are physical: they remember which of the two sides glued
together was touched. Their canonical counterpart, OnEdge, only keeps the
logical edge, so both occurrences of a glued point compare equal once
canonicalised (see surfaceloops.core.positions).
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Union

from surfaceloops.exceptions import InvalidEdgeParameterError
from surfaceloops.geometry import Point, RationalLike, as_rational

# Keeps edge positions away from the polygon corners, where the sides meet.
PARAMETER_MIN = Fraction(1, 100)
PARAMETER_MAX = Fraction(99, 100)


def _checked_parameter(value: RationalLike) -> Fraction:
    parameter = as_rational(value)
    if not PARAMETER_MIN <= parameter <= PARAMETER_MAX:
        raise InvalidEdgeParameterError(parameter, PARAMETER_MIN, PARAMETER_MAX)
    return parameter


def clamp_parameter(value: RationalLike) -> Fraction:
    """Clamp a projection factor on a side into the allowed parameter range."""
    return min(PARAMETER_MAX, max(PARAMETER_MIN, as_rational(value)))


@dataclass(frozen=True, slots=True)
class Interior:
    """A point strictly inside the fundamental polygon.

    Attributes:
        point: Location in polygon coordinates
    """

    point: Point

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "in", "x": str(self.point.x), "y": str(self.point.y)}


@dataclass(frozen=True, slots=True)
class OnSide:
    """A point on one physical side of the polygon.

    Attributes:
        side: Physical side index in [0, 4g)
        parameter: Position along the side, in [PARAMETER_MIN, PARAMETER_MAX]
    """

    side: int
    parameter: Fraction

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameter", _checked_parameter(self.parameter))

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "side", "side": self.side, "parameter": str(self.parameter)}


@dataclass(frozen=True, slots=True)
class OnEdge:
    """A point on a logical edge, independent of the physical side touched.

    Attributes:
        edge: Logical edge index in [0, 2g)
        parameter: Position along the edge, in [PARAMETER_MIN, PARAMETER_MAX]
    """

    edge: int
    parameter: Fraction

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameter", _checked_parameter(self.parameter))

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "edge", "edge": self.edge, "parameter": str(self.parameter)}


@dataclass(frozen=True, slots=True)
class Outside:
    """A location outside of the polygon."""

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "out"}


# Positions a loop is built from
ManifoldPosition = Union[Interior, OnSide]
# Canonical surface positions, used for equality
CanonicalPosition = Union[Interior, OnEdge]
# Everything the presentation layer may classify a pointer location as
CanvasPosition = Union[Interior, OnSide, Outside]


def position_from_dict(data: dict[str, Any]) -> Interior | OnSide | OnEdge | Outside:
    """Deserialize a position produced by one of the to_dict() methods.

    Args:
        data: Dictionary with a "kind" field

    Returns:
        Position instance

    Raises:
        ValueError: If the kind is unknown
    """
    kind = data["kind"]
    if kind == "in":
        return Interior(Point(data["x"], data["y"]))
    if kind == "side":
        return OnSide(side=data["side"], parameter=data["parameter"])
    if kind == "edge":
        return OnEdge(edge=data["edge"], parameter=data["parameter"])
    if kind == "out":
        return Outside()
    raise ValueError(f"Unknown position kind: {kind!r}")
