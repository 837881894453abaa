"""State machine accumulating user positions into a closed loop.

A loop starts strictly inside the polygon. Each accepted position appends a
segment from the current position to it. When the position is on a side, the
path goes through the gluing and carries on from the paired side, so the
current position becomes the paired position.

    EMPTY --start()--> BUILDING --close()--> CLOSED
                          |
                          +------abandon()--> ABANDONED

Rejected positions raise a LoopInputError subclass and leave the builder
untouched, so the caller can report a warning and let the user retry.
"""

from collections.abc import Callable
from enum import Enum, auto

from surfaceloops.core.polygon import FundamentalPolygon
from surfaceloops.core.positions import PositionResolver
from surfaceloops.domain import Interior, Loop, LoopSegment, ManifoldPosition, OnSide
from surfaceloops.exceptions import (
    ConsecutiveSameEdgeError,
    DuplicateStartError,
    InvalidStartError,
    LoopStateError,
    UnsupportedPositionError,
)

PositionEquality = Callable[[ManifoldPosition, ManifoldPosition], bool]
PositionPairing = Callable[[OnSide], ManifoldPosition]


class LoopState(Enum):
    """Lifecycle of a loop builder."""

    EMPTY = auto()
    BUILDING = auto()
    CLOSED = auto()
    ABANDONED = auto()


class LoopBuilder:
    """Builds one loop from a sequence of manifold positions.

    A builder is owned by a single caller for its whole lifetime and is not
    thread safe.

    Args:
        equals: Gluing-aware equality of positions
        paired_position: Maps a side position to the same point on the paired side
        same_edge: True when two positions lie on the same logical edge
    """

    def __init__(
        self,
        equals: PositionEquality,
        paired_position: PositionPairing,
        same_edge: PositionEquality,
    ) -> None:
        self._equals = equals
        self._paired_position = paired_position
        self._same_edge = same_edge

        self._state = LoopState.EMPTY
        self._start: Interior | None = None
        self._current: ManifoldPosition | None = None
        self._segments: list[LoopSegment] = []

    @classmethod
    def for_polygon(cls, polygon: FundamentalPolygon) -> "LoopBuilder":
        """Create a builder following the gluing of the given polygon."""
        resolver = PositionResolver(polygon)
        return cls(
            equals=resolver.equals,
            paired_position=resolver.paired_position,
            same_edge=resolver.same_edge,
        )

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def start_point(self) -> Interior | None:
        return self._start

    @property
    def current(self) -> ManifoldPosition | None:
        """Position the next segment will leave from."""
        return self._current

    @property
    def segments(self) -> tuple[LoopSegment, ...]:
        return tuple(self._segments)

    @property
    def segment_count(self) -> int:
        return len(self._segments)

    def _require(self, state: LoopState, operation: str) -> None:
        if self._state is not state:
            raise LoopStateError(operation, self._state.name.lower())

    def start(self, position: ManifoldPosition) -> None:
        """Start the loop at an interior position.

        Raises:
            InvalidStartError: If the position is not an interior position
            LoopStateError: If the loop was already started
        """
        self._require(LoopState.EMPTY, "start")
        if not isinstance(position, Interior):
            raise InvalidStartError(position)

        self._start = position
        self._current = position
        self._state = LoopState.BUILDING

    def add_point(self, position: ManifoldPosition) -> LoopSegment:
        """Extend the loop to a new position.

        Args:
            position: Interior or side position reached by the user

        Returns:
            The segment appended to the loop

        Raises:
            UnsupportedPositionError: If the position is neither interior nor
                on a physical side
            DuplicateStartError: If the position equals the start position
            ConsecutiveSameEdgeError: If the position and the current one are
                on the same logical edge
            LoopStateError: If the loop is not being built
        """
        self._require(LoopState.BUILDING, "add a point")
        if not isinstance(position, (Interior, OnSide)):
            raise UnsupportedPositionError(position)

        # Compared against the start, not the current position: re-adding the
        # last point is accepted.
        if self._equals(self._start, position):
            raise DuplicateStartError(position)

        if (
            isinstance(position, OnSide)
            and isinstance(self._current, OnSide)
            and self._same_edge(position, self._current)
        ):
            raise ConsecutiveSameEdgeError(position)

        match position:
            case OnSide():
                following = self._paired_position(position)
            case Interior():
                following = position
            case _:
                raise TypeError(f"Unexpected position {position!r}")

        segment = LoopSegment(self._current, position)
        self._segments.append(segment)
        self._current = following
        return segment

    def close(self) -> Loop | None:
        """Close the loop back to its start.

        If the current position already is the start, at least two segments
        are required. Otherwise at least one is, and a final segment back to
        the start is appended.

        Returns:
            The committed loop, or None if the loop is too short. A builder
            that could not be closed stays in the BUILDING state.

        Raises:
            LoopStateError: If the loop is not being built
        """
        self._require(LoopState.BUILDING, "close")

        if self._equals(self._start, self._current):
            if len(self._segments) < 2:
                return None
            segments = tuple(self._segments)
        else:
            if len(self._segments) < 1:
                return None
            segments = (*self._segments, LoopSegment(self._current, self._start))

        self._segments = list(segments)
        self._state = LoopState.CLOSED
        return Loop(segments)

    def abandon(self) -> None:
        """Discard the loop, whatever its state."""
        self._state = LoopState.ABANDONED

    def __repr__(self) -> str:
        return f"LoopBuilder(state={self._state.name}, segments={len(self._segments)})"
