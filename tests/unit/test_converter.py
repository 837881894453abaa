"""Unit tests for the text converter."""

from fractions import Fraction

import pytest

from surfaceloops.domain import Interior, Loop, LoopSegment, OnEdge, OnSide, Outside
from surfaceloops.exceptions import DegenerateSegmentError, PositionFormatError
from surfaceloops.geometry import Point, Segment
from surfaceloops.io import (
    format_loop,
    format_position,
    parse_point,
    parse_position,
    parse_rational,
    parse_segment,
)


class TestParsing:
    """Tests for parsing text into domain objects."""

    def test_parse_rational(self) -> None:
        """Test integers, fractions and decimals."""
        assert parse_rational("3") == 3
        assert parse_rational(" -6/8 ") == Fraction(-3, 4)
        assert parse_rational("0.25") == Fraction(1, 4)

    @pytest.mark.parametrize("text", ["", "abc", "1/0", "1//2"])
    def test_parse_rational_errors(self, text: str) -> None:
        """Test that malformed numbers are reported."""
        with pytest.raises(PositionFormatError):
            parse_rational(text)

    def test_parse_point(self) -> None:
        """Test an "x,y" pair."""
        assert parse_point("1/2,-3") == Point("1/2", -3)
        with pytest.raises(PositionFormatError):
            parse_point("1,2,3")

    def test_parse_segment(self) -> None:
        """Test an "x0,y0:x1,y1" pair of points."""
        assert parse_segment("0,0:1/2,1") == Segment(Point(0, 0), Point("1/2", 1))
        with pytest.raises(DegenerateSegmentError):
            parse_segment("1,1:1,1")

    def test_parse_positions(self) -> None:
        """Test every kind of position token."""
        assert parse_position("in:1/2,1/3") == Interior(Point("1/2", "1/3"))
        assert parse_position("side:3@1/4") == OnSide(3, "1/4")
        assert parse_position("EDGE:1@1/2") == OnEdge(1, "1/2")
        assert parse_position(" out ") == Outside()

    @pytest.mark.parametrize(
        "token",
        ["inside", "in:1", "side:0", "side:x@1/2", "side:0@1", "corner:0@1/2", "edge:1@abc"],
    )
    def test_parse_position_errors(self, token: str) -> None:
        """Test that malformed tokens are reported with their text."""
        with pytest.raises(PositionFormatError) as exc_info:
            parse_position(token)
        assert exc_info.value.text == token


class TestFormatting:
    """Tests for formatting domain objects as text."""

    def test_format_positions(self) -> None:
        """Test the text form of each kind of position."""
        assert format_position(Interior(Point("1/2", -1))) == "in:1/2,-1"
        assert format_position(OnSide(2, "3/10")) == "side:2@3/10"
        assert format_position(OnEdge(0, "1/2")) == "edge:0@1/2"
        assert format_position(Outside()) == "out"

    def test_formatted_position_parses_back(self) -> None:
        """Test that the text form is accepted by the parser."""
        p = OnSide(5, "7/9")
        assert parse_position(format_position(p)) == p

    def test_format_loop(self) -> None:
        """Test one line per segment."""
        start = Interior(Point(0, 0))
        loop = Loop((LoopSegment(start, OnSide(0, "1/2")), LoopSegment(OnSide(1, "1/2"), start)))
        assert format_loop(loop) == [
            "in:0,0 -> side:0@1/2",
            "side:1@1/2 -> in:0,0",
        ]
