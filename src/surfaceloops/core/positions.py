"""Canonicalisation and gluing of surface positions.

A point on one side of the polygon and the point at the same parameter on its
paired side are the same point of the surface. PositionResolver makes that
identification explicit: positions are compared through their canonical form,
where the physical side is replaced by its logical edge.
"""

from surfaceloops.core.polygon import FundamentalPolygon
from surfaceloops.domain import CanonicalPosition, Interior, OnEdge, OnSide


class PositionResolver:
    """Resolves positions against the tables of a fundamental polygon."""

    def __init__(self, polygon: FundamentalPolygon) -> None:
        self.polygon = polygon

    def to_canonical(self, position: Interior | OnSide | OnEdge) -> CanonicalPosition:
        """Reduce a position to its surface-intrinsic form.

        Interior and OnEdge positions are returned unchanged. An OnSide
        position forgets which of the two glued sides was touched.
        """
        match position:
            case Interior() | OnEdge():
                return position
            case OnSide(side=side, parameter=parameter):
                return OnEdge(self.polygon.logical_edge_of(side), parameter)
        raise TypeError(f"Not a manifold position: {position!r}")

    def equals(self, a: Interior | OnSide | OnEdge, b: Interior | OnSide | OnEdge) -> bool:
        """Structural equality on the canonical forms."""
        return self.to_canonical(a) == self.to_canonical(b)

    def paired_position(self, position: OnSide) -> OnSide:
        """The same surface point seen from the paired side.

        The parameter is kept as is: sides are glued point for point at equal
        parameters, following the order in which the polygon is built.
        """
        return OnSide(self.polygon.paired_side(position.side), position.parameter)

    def same_edge(self, a: Interior | OnSide | OnEdge, b: Interior | OnSide | OnEdge) -> bool:
        """True if both positions lie on the same logical edge."""
        ca = self.to_canonical(a)
        cb = self.to_canonical(b)
        return isinstance(ca, OnEdge) and isinstance(cb, OnEdge) and ca.edge == cb.edge
