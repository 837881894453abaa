"""Projective geometry over PQ^2 in homogeneous coordinates.

Used to give line and segment intersection a total answer: two distinct
lines always meet in exactly one projective point, which is at infinity when
the affine lines are parallel.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from surfaceloops.exceptions import DegenerateProjectiveElementError, PointAtInfinityError
from surfaceloops.geometry.affine import ONE, ZERO, Point, Segment, Vector, as_rational


@dataclass(frozen=True, slots=True)
class Support3:
    """A vector of Q^3 used for projective calculus."""

    x: Fraction
    y: Fraction
    z: Fraction

    @classmethod
    def from_projective_point(cls, pp: ProjectivePoint) -> Support3:
        """Create a support from a projective point.

        Coordinates are shifted to (w, x, y) so that a line support
        (c0, c1, c2) is incident to the point when the dot product is null.
        """
        return cls(pp.w, pp.x, pp.y)

    def to_projective_point(self) -> ProjectivePoint:
        """Inverse of from_projective_point()."""
        return ProjectivePoint(self.y, self.z, self.x)

    def cross(self, s: Support3) -> Support3:
        """Cross product of two supports."""
        return Support3(
            Vector(self.y, self.z).det(Vector(s.y, s.z)),
            Vector(self.z, self.x).det(Vector(s.z, s.x)),
            Vector(self.x, self.y).det(Vector(s.x, s.y)),
        )

    def dot(self, s: Support3) -> Fraction:
        return self.x * s.x + self.y * s.y + self.z * s.z

    def is_zero(self) -> bool:
        """Null supports cannot be used to construct projective elements."""
        return self.x == ZERO and self.y == ZERO and self.z == ZERO


@dataclass(frozen=True, slots=True)
class ProjectivePoint:
    """A point of PQ^2 in homogeneous coordinates (x : y : w)."""

    x: Fraction
    y: Fraction
    w: Fraction

    def __post_init__(self) -> None:
        for name in ("x", "y", "w"):
            object.__setattr__(self, name, as_rational(getattr(self, name)))
        if self.x == ZERO and self.y == ZERO and self.w == ZERO:
            raise DegenerateProjectiveElementError("point")

    @classmethod
    def from_point(cls, p: Point) -> ProjectivePoint:
        return cls(p.x, p.y, ONE)

    @classmethod
    def from_support(cls, s: Support3) -> ProjectivePoint:
        return s.to_projective_point()

    def is_at_infinity(self) -> bool:
        return self.w == ZERO

    def to_point(self) -> Point:
        """Project back to the affine plane.

        Raises:
            PointAtInfinityError: If w == 0
        """
        if self.is_at_infinity():
            raise PointAtInfinityError(self)
        return Point(self.x / self.w, self.y / self.w)


@dataclass(frozen=True, slots=True)
class ProjectiveLine:
    """A line of PQ^2 with equation c0 + c1.x + c2.y = 0."""

    c0: Fraction
    c1: Fraction
    c2: Fraction

    def __post_init__(self) -> None:
        for name in ("c0", "c1", "c2"):
            object.__setattr__(self, name, as_rational(getattr(self, name)))
        if self.c0 == ZERO and self.c1 == ZERO and self.c2 == ZERO:
            raise DegenerateProjectiveElementError("line")

    @classmethod
    def from_support(cls, s: Support3) -> ProjectiveLine:
        return cls(s.x, s.y, s.z)

    @classmethod
    def from_points(cls, pp0: ProjectivePoint, pp1: ProjectivePoint) -> ProjectiveLine:
        """The line through two distinct projective points."""
        s0 = Support3.from_projective_point(pp0)
        s1 = Support3.from_projective_point(pp1)
        return cls.from_support(s0.cross(s1))

    @classmethod
    def from_segment(cls, s: Segment) -> ProjectiveLine:
        return cls.from_points(ProjectivePoint.from_point(s.p0), ProjectivePoint.from_point(s.p1))

    def support(self) -> Support3:
        """The underlying support in Q^3 of the line."""
        return Support3(self.c0, self.c1, self.c2)

    def contains(self, pp: ProjectivePoint) -> bool:
        """Incidence test of a projective point and the line."""
        return self.support().dot(Support3.from_projective_point(pp)) == ZERO

    def intersection(self, line: ProjectiveLine) -> ProjectiveLine | ProjectivePoint:
        """Intersect two projective lines.

        Returns:
            self when both lines are the same (every point is shared),
            the unique common point otherwise
        """
        inter = self.support().cross(line.support())
        if inter.is_zero():
            return self
        return ProjectivePoint.from_support(inter)
