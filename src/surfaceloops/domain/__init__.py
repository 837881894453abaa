"""Domain models for surfaceloops.

This module contains the value types exchanged between the loop-building core
and a presentation layer. All models are designed to be:

- Immutable (frozen dataclasses), so committed loops can be shared freely
- Exact (coordinates and parameters are Fractions)
- Independent of any rendering or input device

Key classes:
- Interior, OnSide, OnEdge, Outside: positions on (or off) the surface
- LoopSegment: One step of a traced loop
- Loop: A committed closed loop
"""

from surfaceloops.domain.loop import Loop, LoopSegment
from surfaceloops.domain.position import (
    PARAMETER_MAX,
    PARAMETER_MIN,
    CanonicalPosition,
    CanvasPosition,
    Interior,
    ManifoldPosition,
    OnEdge,
    OnSide,
    Outside,
    clamp_parameter,
    position_from_dict,
)

__all__: list[str] = [
    # Constants
    "PARAMETER_MAX",
    "PARAMETER_MIN",
    # Positions
    "CanonicalPosition",
    "CanvasPosition",
    "Interior",
    "ManifoldPosition",
    "OnEdge",
    "OnSide",
    "Outside",
    "clamp_parameter",
    "position_from_dict",
    # Loops
    "Loop",
    "LoopSegment",
]
