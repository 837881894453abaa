"""Exact plane geometry for surfaceloops.

Affine primitives over Q^2 and projective primitives over PQ^2, all built on
``fractions.Fraction`` so that equality, alignment and ordering are decided
exactly.

Key classes:
- Point, Vector, Segment: affine primitives
- NoIntersection: empty result of an intersection query
- Support3, ProjectivePoint, ProjectiveLine: homogeneous coordinates
"""

from surfaceloops.geometry.affine import (
    NoIntersection,
    Point,
    RationalLike,
    Segment,
    Vector,
    as_rational,
)
from surfaceloops.geometry.projective import ProjectiveLine, ProjectivePoint, Support3

__all__ = [
    "NoIntersection",
    "Point",
    "ProjectiveLine",
    "ProjectivePoint",
    "RationalLike",
    "Segment",
    "Support3",
    "Vector",
    "as_rational",
]
