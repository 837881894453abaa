"""Unit tests for surface positions and gluing."""

from fractions import Fraction

import pytest

from surfaceloops.core import FundamentalPolygon, PositionResolver
from surfaceloops.domain import (
    PARAMETER_MAX,
    PARAMETER_MIN,
    Interior,
    OnEdge,
    OnSide,
    clamp_parameter,
)
from surfaceloops.exceptions import InvalidEdgeParameterError
from surfaceloops.geometry import Point


class TestEdgeParameter:
    """Tests for the edge parameter range."""

    @pytest.mark.parametrize("parameter", [0, 1, "1/200", "199/200", -1])
    def test_out_of_range_parameter(self, parameter: object) -> None:
        """Test that positions near the polygon corners are refused."""
        with pytest.raises(InvalidEdgeParameterError):
            OnSide(0, parameter)  # type: ignore[arg-type]
        with pytest.raises(InvalidEdgeParameterError):
            OnEdge(0, parameter)  # type: ignore[arg-type]

    def test_bounds_are_included(self) -> None:
        """Test that the range bounds themselves are accepted."""
        assert OnSide(0, "1/100").parameter == PARAMETER_MIN
        assert OnSide(0, "99/100").parameter == PARAMETER_MAX

    def test_clamp_parameter(self) -> None:
        """Test clamping of projection factors."""
        assert clamp_parameter(-3) == PARAMETER_MIN
        assert clamp_parameter("5/4") == PARAMETER_MAX
        assert clamp_parameter("1/2") == Fraction(1, 2)


class TestPositionResolver:
    """Tests for PositionResolver class."""

    @pytest.fixture
    def resolver(self) -> PositionResolver:
        """Create a resolver for the torus."""
        return PositionResolver(FundamentalPolygon(1))

    def test_interior_is_canonical(self, resolver: PositionResolver) -> None:
        """Test that interior positions pass through unchanged."""
        p = Interior(Point("1/2", "1/3"))
        assert resolver.to_canonical(p) is p

    def test_side_reduces_to_logical_edge(self, resolver: PositionResolver) -> None:
        """Test that the physical side is forgotten."""
        assert resolver.to_canonical(OnSide(3, "1/2")) == OnEdge(1, "1/2")
        assert resolver.to_canonical(OnSide(2, "1/2")) == OnEdge(1, "1/2")

    def test_paired_position_keeps_parameter(self, resolver: PositionResolver) -> None:
        """Test same-parameter mapping onto the paired side."""
        assert resolver.paired_position(OnSide(0, "1/3")) == OnSide(1, "1/3")
        assert resolver.paired_position(OnSide(3, "1/10")) == OnSide(2, "1/10")

    @pytest.mark.parametrize("genus", [1, 2, 3])
    def test_position_equals_its_paired_position(self, genus: int) -> None:
        """Test that both occurrences of a glued point compare equal."""
        resolver = PositionResolver(FundamentalPolygon(genus))
        for k in range(4 * genus):
            for parameter in ("1/100", "1/3", "99/100"):
                p = OnSide(k, parameter)
                paired = resolver.paired_position(p)
                assert paired != p
                assert resolver.equals(p, paired)

    def test_interior_equality_by_value(self, resolver: PositionResolver) -> None:
        """Test that interior positions compare by their point."""
        assert resolver.equals(Interior(Point("1/2", 1)), Interior(Point("2/4", "3/3")))
        assert not resolver.equals(Interior(Point("1/2", 1)), Interior(Point("1/2", 2)))

    def test_distinct_positions(self, resolver: PositionResolver) -> None:
        """Test positions that are not the same surface point."""
        assert not resolver.equals(OnSide(0, "1/3"), OnSide(0, "2/3"))
        assert not resolver.equals(OnSide(0, "1/3"), OnSide(2, "1/3"))
        assert not resolver.equals(OnSide(0, "1/2"), Interior(Point(0, 0)))

    def test_same_edge(self, resolver: PositionResolver) -> None:
        """Test the logical edge comparison."""
        assert resolver.same_edge(OnSide(0, "1/3"), OnSide(1, "2/3"))
        assert not resolver.same_edge(OnSide(1, "1/3"), OnSide(2, "1/3"))
        assert not resolver.same_edge(OnSide(0, "1/3"), Interior(Point(0, 0)))
