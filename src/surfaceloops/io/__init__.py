"""Text input/output for surfaceloops.

This module provides conversion between the compact text notation used by the
CLI and the domain positions and loops.

Key functions:
- parse_position: Parse "in:x,y", "side:k@t", "edge:e@t" or "out"
- parse_segment: Parse "x0,y0:x1,y1"
- format_position, format_segment, format_loop: Inverse text forms
"""

from surfaceloops.io.converter import (
    format_loop,
    format_point,
    format_position,
    format_segment,
    parse_point,
    parse_position,
    parse_rational,
    parse_segment,
)

__all__ = [
    "format_loop",
    "format_point",
    "format_position",
    "format_segment",
    "parse_point",
    "parse_position",
    "parse_rational",
    "parse_segment",
]
