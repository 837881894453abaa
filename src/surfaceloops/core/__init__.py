"""Core loop-tracing model for surfaceloops.

This module contains:

- The fundamental polygon (side and edge tables, side pairing)
- Canonicalisation and gluing of surface positions
- The loop-building state machine
- The drawing session that ties them together

Key classes:
- FundamentalPolygon: Side/edge tables for a genus
- PositionResolver: Gluing-aware equality and paired positions
- LoopBuilder: Accumulates positions into a closed loop
- DrawingSession: Routes user positions and stores committed loops
"""

from surfaceloops.core.loop_builder import LoopBuilder, LoopState
from surfaceloops.core.polygon import FundamentalPolygon, PolygonSide
from surfaceloops.core.positions import PositionResolver
from surfaceloops.core.session import DrawingSession, SubmitAction, SubmitOutcome

__all__ = [
    "DrawingSession",
    "FundamentalPolygon",
    "LoopBuilder",
    "LoopState",
    "PolygonSide",
    "PositionResolver",
    "SubmitAction",
    "SubmitOutcome",
]
