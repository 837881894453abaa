"""Loop types produced by the loop builder.

A loop is the ordered, closed sequence of segments traced by the user on the
surface. Segments keep physical positions so a renderer knows on which side
of the polygon each crossing is drawn.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from surfaceloops.domain.position import ManifoldPosition, OnSide, position_from_dict


@dataclass(frozen=True, slots=True)
class LoopSegment:
    """One committed step of a traced loop.

    Attributes:
        start: Position the step leaves from
        end: Position the step arrives at
    """

    start: ManifoldPosition
    end: ManifoldPosition

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LoopSegment":
        return cls(
            start=position_from_dict(data["start"]),  # type: ignore[arg-type]
            end=position_from_dict(data["end"]),  # type: ignore[arg-type]
        )


@dataclass(frozen=True)
class Loop:
    """A closed loop, frozen once committed.

    Attributes:
        segments: Non-empty tuple of segments in drawing order
    """

    segments: tuple[LoopSegment, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))
        if not self.segments:
            raise ValueError("A loop needs at least one segment")

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[LoopSegment]:
        return iter(self.segments)

    @property
    def start(self) -> ManifoldPosition:
        """Position the loop starts (and ends) at."""
        return self.segments[0].start

    def edge_crossings(self) -> list[int]:
        """Physical sides crossed by the loop, in order."""
        return [s.end.side for s in self.segments if isinstance(s.end, OnSide)]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for in-process consumers.

        Returns:
            Dictionary representation of the loop
        """
        return {"segments": [s.to_dict() for s in self.segments]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Loop":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a loop

        Returns:
            Loop instance
        """
        return cls(segments=tuple(LoopSegment.from_dict(s) for s in data["segments"]))
