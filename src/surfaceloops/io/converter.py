"""Text conversion for surfaceloops domain objects.

This module converts between a compact text notation and domain positions,
so that traces can be scripted on the command line or in tests:

    in:1/2,-1/3     interior point (x, y)
    side:4@3/10     physical side 4 at parameter 3/10
    edge:2@3/10     logical edge 2 at parameter 3/10
    out             outside of the polygon

All numbers are exact rationals.
"""

from fractions import Fraction

from surfaceloops.domain import Interior, Loop, LoopSegment, OnEdge, OnSide, Outside
from surfaceloops.exceptions import InvalidEdgeParameterError, PositionFormatError
from surfaceloops.geometry import Point, Segment


def parse_rational(text: str) -> Fraction:
    """Parse an exact rational such as "3", "-3/4" or "0.25".

    Raises:
        PositionFormatError: If the text is not a rational number
    """
    try:
        return Fraction(text.strip())
    except (ValueError, ZeroDivisionError) as e:
        raise PositionFormatError(text, f"not a rational number ({e})") from e


def parse_point(text: str) -> Point:
    """Parse a point written "x,y"."""
    parts = text.split(",")
    if len(parts) != 2:
        raise PositionFormatError(text, "expected two coordinates separated by ','")
    return Point(parse_rational(parts[0]), parse_rational(parts[1]))


def parse_segment(text: str) -> Segment:
    """Parse a segment written "x0,y0:x1,y1"."""
    parts = text.split(":")
    if len(parts) != 2:
        raise PositionFormatError(text, "expected two points separated by ':'")
    return Segment(parse_point(parts[0]), parse_point(parts[1]))


def _parse_indexed(text: str, body: str) -> tuple[int, Fraction]:
    index_text, sep, parameter_text = body.partition("@")
    if not sep:
        raise PositionFormatError(text, "expected INDEX@PARAMETER")
    try:
        index = int(index_text)
    except ValueError as e:
        raise PositionFormatError(text, f"'{index_text}' is not an index") from e
    return index, parse_rational(parameter_text)


def parse_position(text: str) -> Interior | OnSide | OnEdge | Outside:
    """Parse a position token.

    Args:
        text: Token such as "in:1/2,1/2", "side:0@1/2", "edge:1@1/3" or "out"

    Returns:
        Parsed position

    Raises:
        PositionFormatError: If the token is malformed or its parameter is
            outside of the allowed range
    """
    token = text.strip().lower()
    if token == "out":
        return Outside()

    kind, sep, body = token.partition(":")
    if not sep:
        raise PositionFormatError(text, "expected KIND:VALUE")

    try:
        if kind == "in":
            return Interior(parse_point(body))
        if kind == "side":
            side, parameter = _parse_indexed(text, body)
            return OnSide(side, parameter)
        if kind == "edge":
            edge, parameter = _parse_indexed(text, body)
            return OnEdge(edge, parameter)
    except InvalidEdgeParameterError as e:
        raise PositionFormatError(text, str(e)) from e
    except PositionFormatError as e:
        if e.text == text:
            raise
        raise PositionFormatError(text, e.reason) from e

    raise PositionFormatError(text, f"unknown position kind '{kind}'")


def format_point(point: Point) -> str:
    return f"{point.x},{point.y}"


def format_position(position: Interior | OnSide | OnEdge | Outside) -> str:
    """Format a position in the notation accepted by parse_position()."""
    match position:
        case Interior(point=point):
            return f"in:{format_point(point)}"
        case OnSide(side=side, parameter=parameter):
            return f"side:{side}@{parameter}"
        case OnEdge(edge=edge, parameter=parameter):
            return f"edge:{edge}@{parameter}"
        case Outside():
            return "out"
    raise TypeError(f"Not a position: {position!r}")


def format_segment(segment: LoopSegment) -> str:
    return f"{format_position(segment.start)} -> {format_position(segment.end)}"


def format_loop(loop: Loop) -> list[str]:
    """Format every segment of a loop, one string per segment."""
    return [format_segment(s) for s in loop]
