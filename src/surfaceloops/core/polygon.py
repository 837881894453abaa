"""Fundamental polygon of a genus-g orientable surface.

The polygon has 4g physical sides grouped into 2g logical edges. Each logical
edge appears twice on the boundary and its two occurrences are glued
together. Only the index tables live here; placing the vertices on screen is
the presentation layer's business.
"""

from dataclasses import dataclass

from surfaceloops.exceptions import InvalidGenusError, InvalidSideError


@dataclass(frozen=True, slots=True)
class PolygonSide:
    """One physical side of the polygon.

    Attributes:
        index: Side index in [0, 4g)
        edge: Logical edge the side is an occurrence of
        partner: Index of the other occurrence of the same edge
    """

    index: int
    edge: int
    partner: int


class FundamentalPolygon:
    """Side and edge tables of the fundamental polygon for a genus.

    Built once and read-only afterwards.

    Example:
        >>> polygon = FundamentalPolygon(1)
        >>> polygon.side_count, polygon.edge_count
        (4, 2)
        >>> polygon.paired_side(2)
        3
    """

    def __init__(self, genus: int) -> None:
        if isinstance(genus, bool) or not isinstance(genus, int) or genus < 1:
            raise InvalidGenusError(genus)

        self._genus = genus

        # For each logical edge, both of its sides are created in turn and the
        # matcher records, for the side just created, the other one.
        matcher: list[int] = []
        for i in range(2 * genus):
            matcher.append(2 * i + 1)
            matcher.append(2 * i)

        self._sides = tuple(
            PolygonSide(index=k, edge=k // 2, partner=partner)
            for k, partner in enumerate(matcher)
        )

    @property
    def genus(self) -> int:
        return self._genus

    @property
    def side_count(self) -> int:
        """Number of physical sides (4g)."""
        return len(self._sides)

    @property
    def edge_count(self) -> int:
        """Number of logical edges (2g)."""
        return 2 * self._genus

    @property
    def sides(self) -> tuple[PolygonSide, ...]:
        return self._sides

    @property
    def edges(self) -> range:
        return range(self.edge_count)

    def side(self, side_index: int) -> PolygonSide:
        """Look up a physical side.

        Raises:
            InvalidSideError: If the index is not a side of this polygon
        """
        if not 0 <= side_index < self.side_count:
            raise InvalidSideError("side", side_index, self.side_count)
        return self._sides[side_index]

    def paired_side(self, side_index: int) -> int:
        """The other physical side glued to the given one."""
        return self.side(side_index).partner

    def logical_edge_of(self, side_index: int) -> int:
        return self.side(side_index).edge

    def sides_of_edge(self, edge: int) -> tuple[int, int]:
        """Both physical occurrences of a logical edge."""
        if not 0 <= edge < self.edge_count:
            raise InvalidSideError("edge", edge, self.edge_count)
        return (2 * edge, 2 * edge + 1)

    def __repr__(self) -> str:
        return f"FundamentalPolygon(genus={self._genus})"
