"""Drawing session orchestration.

A session is everything the drawing application keeps between two pointer
events, minus the rendering: the fundamental polygon for the chosen genus,
the loop being traced, and the loops already committed.

The presentation layer classifies each pointer release into a canvas
position and tells the session whether the pointer is back on the head of
the current loop. User mistakes never raise out of submit(): they come back
as rejected outcomes and are logged as warnings.
"""

from dataclasses import dataclass
from enum import Enum

import structlog
from pydantic import ValidationError

from surfaceloops.config import PolygonConfig, SurfaceLoopsSettings, get_default_settings
from surfaceloops.core.loop_builder import LoopBuilder, LoopState
from surfaceloops.core.polygon import FundamentalPolygon
from surfaceloops.core.positions import PositionResolver
from surfaceloops.domain import CanvasPosition, Interior, Loop, OnSide, Outside
from surfaceloops.exceptions import (
    InvalidGenusError,
    InvalidStartError,
    LoopInputError,
    LoopNotClosableError,
    OutsidePolygonError,
    UnknownSideError,
)
from surfaceloops.io.converter import format_position
from surfaceloops.utils import SessionLogger, SessionStats


class SubmitAction(str, Enum):
    """What a submitted position did to the session."""

    STARTED = "started"
    ADDED = "added"
    CLOSED = "closed"
    REJECTED = "rejected"


@dataclass(frozen=True)
class SubmitOutcome:
    """Result of submitting a position to a session.

    Attributes:
        action: What happened
        loop: The committed loop when action is CLOSED
        error: The rejection when action is REJECTED
    """

    action: SubmitAction
    loop: Loop | None = None
    error: LoopInputError | None = None

    @property
    def accepted(self) -> bool:
        return self.action is not SubmitAction.REJECTED

    @property
    def warning(self) -> str | None:
        """User-facing warning message for a rejection."""
        return str(self.error) if self.error is not None else None


class DrawingSession:
    """Routes classified positions to loop builders and stores committed loops.

    Args:
        settings: Application settings (defaults if None)
        logger: structlog logger (the "surfaceloops" logger if None)
    """

    def __init__(
        self,
        settings: SurfaceLoopsSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.settings = settings or get_default_settings()
        self._log = SessionLogger(logger or structlog.get_logger("surfaceloops"))
        self._loops: list[Loop] = []
        self._builder: LoopBuilder | None = None
        self._build_polygon(self.settings.polygon.genus)

    def _build_polygon(self, genus: int) -> None:
        self._polygon = FundamentalPolygon(genus)
        self._resolver = PositionResolver(self._polygon)
        self._log.log_polygon_rebuilt(genus, self._polygon.side_count)

    @property
    def polygon(self) -> FundamentalPolygon:
        return self._polygon

    @property
    def resolver(self) -> PositionResolver:
        return self._resolver

    @property
    def genus(self) -> int:
        return self._polygon.genus

    @property
    def loops(self) -> tuple[Loop, ...]:
        """Committed loops, oldest first."""
        return tuple(self._loops)

    @property
    def current_loop(self) -> LoopBuilder | None:
        return self._builder

    @property
    def stats(self) -> SessionStats:
        return self._log.stats

    def _reject(self, position: CanvasPosition | None, error: LoopInputError) -> SubmitOutcome:
        label = format_position(position) if position is not None else None
        self._log.log_rejection(label, error)
        return SubmitOutcome(SubmitAction.REJECTED, error=error)

    def submit(self, position: CanvasPosition, looped: bool = False) -> SubmitOutcome:
        """Handle a position released by the user.

        Args:
            position: Classified canvas position
            looped: True when the pointer is on the head of the current loop,
                which asks for the loop to be closed

        Returns:
            Outcome of the submission, rejected outcomes carry a warning
        """
        if isinstance(position, Outside):
            return self._reject(position, OutsidePolygonError(position))

        if isinstance(position, OnSide) and not 0 <= position.side < self._polygon.side_count:
            return self._reject(position, UnknownSideError(position))

        if self._builder is None:
            return self._start_loop(position)

        if looped:
            return self._close_loop(position)

        try:
            self._builder.add_point(position)
        except LoopInputError as e:
            return self._reject(position, e)

        self._log.log_point_added(format_position(position), self._builder.segment_count)
        return SubmitOutcome(SubmitAction.ADDED)

    def _start_loop(self, position: CanvasPosition) -> SubmitOutcome:
        if not isinstance(position, Interior):
            return self._reject(position, InvalidStartError(position))

        builder = LoopBuilder.for_polygon(self._polygon)
        builder.start(position)
        self._builder = builder
        self._log.log_loop_started(format_position(position))
        return SubmitOutcome(SubmitAction.STARTED)

    def _close_loop(self, position: CanvasPosition) -> SubmitOutcome:
        loop = self._builder.close()
        if loop is None:
            return self._reject(position, LoopNotClosableError(position))

        self._loops.append(loop)
        self._builder = None
        self._log.log_loop_committed(len(loop), len(self._loops))
        return SubmitOutcome(SubmitAction.CLOSED, loop=loop)

    def close(self) -> SubmitOutcome:
        """Close the current loop as if the user went back to its head."""
        if self._builder is None:
            return self._reject(None, LoopNotClosableError())
        return self.submit(self._builder.start_point, looped=True)

    def cancel(self) -> None:
        """Abandon the loop in progress, if any."""
        if self._builder is not None and self._builder.state is LoopState.BUILDING:
            self._log.log_loop_abandoned(self._builder.segment_count)
            self._builder.abandon()
        self._builder = None

    def clear(self) -> None:
        """Abandon the loop in progress and drop every committed loop."""
        self.cancel()
        self._loops.clear()

    def set_genus(self, genus: int) -> None:
        """Rebuild the polygon for another genus.

        Loops refer to side indices of the old polygon, so the loop in progress
        is abandoned and committed loops are dropped.

        Raises:
            InvalidGenusError: If the genus is not accepted by PolygonConfig
        """
        try:
            polygon_config = PolygonConfig(genus=genus)
        except ValidationError as e:
            raise InvalidGenusError(genus) from e

        self.clear()
        self.settings = self.settings.model_copy(update={"polygon": polygon_config})
        self._build_polygon(polygon_config.genus)
