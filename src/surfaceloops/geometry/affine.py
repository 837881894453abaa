"""Affine geometry over Q^2.

Points, vectors and oriented segments whose coordinates are exact rationals
(``fractions.Fraction``). Every predicate in this module is decided exactly:
there is no epsilon and no rounding anywhere.

Coordinates may be given as ``int``, ``Fraction`` or a rational string such as
``"3/4"``. Floats are refused since they would smuggle rounding errors in.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import TYPE_CHECKING, Union

from surfaceloops.exceptions import DegenerateSegmentError

if TYPE_CHECKING:
    from surfaceloops.geometry.projective import ProjectiveLine

RationalLike = Union[int, Fraction, str]

ZERO = Fraction(0)
ONE = Fraction(1)


def as_rational(value: RationalLike) -> Fraction:
    """Convert a value to an exact rational.

    Args:
        value: Integer, Fraction or rational string ("-3/4", "2")

    Returns:
        Fraction in canonical reduced form

    Raises:
        TypeError: If value is a float or of an unsupported type
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, float):
        raise TypeError(f"Floating point value {value!r} is not an exact rational")
    if isinstance(value, (int, str)):
        return Fraction(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to an exact rational")


@dataclass(frozen=True, slots=True)
class Point:
    """A point in Q^2 seen as an affine space.

    Immutable and hashable. Equality is component-wise exact equality.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: Fraction
    y: Fraction

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", as_rational(self.x))
        object.__setattr__(self, "y", as_rational(self.y))

    def __sub__(self, other: Point) -> Vector:
        return Vector.from_points(other, self)

    def translate(self, v: Vector) -> Point:
        """Return the point p + v."""
        return Point(self.x + v.x, self.y + v.y)

    def to_tuple(self) -> tuple[Fraction, Fraction]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class Vector:
    """A vector in Q^2.

    Warning: the zero vector is colinear to every vector, see colinear_to().
    """

    x: Fraction
    y: Fraction

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", as_rational(self.x))
        object.__setattr__(self, "y", as_rational(self.y))

    @classmethod
    def from_points(cls, p0: Point, p1: Point) -> Vector:
        """Construct the vector p1 - p0."""
        return cls(p1.x - p0.x, p1.y - p0.y)

    def __add__(self, v: Vector) -> Vector:
        return Vector(self.x + v.x, self.y + v.y)

    def __sub__(self, v: Vector) -> Vector:
        return Vector(self.x - v.x, self.y - v.y)

    def __mul__(self, factor: RationalLike) -> Vector:
        factor = as_rational(factor)
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def dot(self, v: Vector) -> Fraction:
        """Canonical dot product."""
        return self.x * v.x + self.y * v.y

    def determinant(self, v: Vector) -> Fraction:
        """Compute the determinant

            | self.x  v.x |
            | self.y  v.y |
        """
        return self.x * v.y - self.y * v.x

    det = determinant

    def colinear_to(self, v: Vector) -> bool:
        """Return True if the vector is colinear to v.

        The zero vector is colinear to every vector, itself included.
        """
        return self.det(v) == ZERO

    def is_zero(self) -> bool:
        return self.x == ZERO and self.y == ZERO


@dataclass(frozen=True)
class NoIntersection:
    """Result of an intersection query without a usable answer."""


@dataclass(frozen=True, slots=True)
class Segment:
    """An oriented segment in Q^2.

    Attributes:
        p0: Start point
        p1: End point, distinct from p0

    Raises:
        DegenerateSegmentError: If p0 == p1
    """

    p0: Point
    p1: Point

    def __post_init__(self) -> None:
        if self.p0 == self.p1:
            raise DegenerateSegmentError(self.p0)

    def vec(self) -> Vector:
        """The vector v such that p1 = p0 + v."""
        return Vector.from_points(self.p0, self.p1)

    def reversed(self) -> Segment:
        return Segment(self.p1, self.p0)

    def point_at(self, t: RationalLike) -> Point:
        """Affine combination p0 + t * (p1 - p0)."""
        return self.p0.translate(self.vec() * t)

    def aligned_with_point(self, p: Point) -> bool:
        """Check if the point lies on the supporting line of the segment."""
        return self.vec().colinear_to(Vector.from_points(self.p0, p))

    def aligned_with_segment(self, s: Segment) -> bool:
        """Check if both segments share the same supporting line."""
        return self.aligned_with_point(s.p0) and self.aligned_with_point(s.p1)

    def contains(self, p: Point) -> bool:
        """Check if the point lies in the closed segment.

        The vectors from each endpoint toward p point in opposite directions
        (or one of them is null) exactly when p is between the endpoints.
        """
        return (
            self.aligned_with_point(p)
            and Vector.from_points(self.p0, p).dot(Vector.from_points(self.p1, p)) <= ZERO
        )

    def to_line(self) -> ProjectiveLine:
        """Lift the segment to its supporting projective line."""
        from surfaceloops.geometry.projective import ProjectiveLine

        return ProjectiveLine.from_segment(self)

    def intersection(self, s: Segment) -> NoIntersection | Point | Segment:
        """Intersect the supporting lines of two segments.

        Both segments are lifted to projective lines. Parallel lines meet at
        infinity and give NoIntersection; otherwise the meeting point of the
        lines is returned, wherever it falls. Use crossing() for a point
        lying on both segments.

        Coincident supporting lines also give NoIntersection: bounding the
        common part is left to overlap().
        """
        from surfaceloops.geometry.projective import ProjectiveLine, ProjectivePoint

        inter = self.to_line().intersection(s.to_line())
        if isinstance(inter, ProjectiveLine):
            return NoIntersection()
        if isinstance(inter, ProjectivePoint):
            if inter.is_at_infinity():
                return NoIntersection()
            return inter.to_point()
        raise TypeError(f"Unexpected intersection result {inter!r}")

    def crossing(self, s: Segment) -> NoIntersection | Point:
        """The intersection point of two segments, if it lies on both."""
        p = self.intersection(s)
        if isinstance(p, Point) and self.contains(p) and s.contains(p):
            return p
        return NoIntersection()

    def _parameter_of(self, p: Point) -> Fraction:
        v = self.vec()
        return Vector.from_points(self.p0, p).dot(v) / v.dot(v)

    def overlap(self, s: Segment) -> NoIntersection | Point | Segment:
        """Clip two aligned segments to their common closed span.

        The result follows the orientation of self. Segments that are not on
        the same line give NoIntersection, even when they cross.
        """
        if not self.aligned_with_segment(s):
            return NoIntersection()

        t0 = self._parameter_of(s.p0)
        t1 = self._parameter_of(s.p1)
        low = max(ZERO, min(t0, t1))
        high = min(ONE, max(t0, t1))

        if low > high:
            return NoIntersection()
        if low == high:
            return self.point_at(low)
        return Segment(self.point_at(low), self.point_at(high))

    def __str__(self) -> str:
        return f"[{self.p0} -> {self.p1}]"
