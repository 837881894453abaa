"""Unit tests for exact affine geometry."""

from fractions import Fraction

import pytest

from surfaceloops.exceptions import DegenerateSegmentError
from surfaceloops.geometry import NoIntersection, Point, Segment, Vector, as_rational


class TestRational:
    """Tests for rational coercion."""

    def test_accepts_int_fraction_and_string(self) -> None:
        """Test that exact inputs are converted to Fractions."""
        assert as_rational(3) == Fraction(3)
        assert as_rational(Fraction(1, 3)) == Fraction(1, 3)
        assert as_rational("-6/8") == Fraction(-3, 4)

    def test_rejects_float(self) -> None:
        """Test that floats are refused."""
        with pytest.raises(TypeError):
            as_rational(0.5)  # type: ignore[arg-type]


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation with canonical coordinates."""
        p = Point(1, "2/4")
        assert p.x == Fraction(1)
        assert p.y == Fraction(1, 2)

    def test_point_equality_is_exact(self) -> None:
        """Test component-wise exact equality."""
        assert Point("1/3", 2) == Point(Fraction(2, 6), "4/2")
        assert Point("1/3", 2) != Point("333/1000", 2)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1, 2)
        with pytest.raises(AttributeError):
            p.x = Fraction(3)  # type: ignore

    def test_point_difference_is_vector(self) -> None:
        """Test that p1 - p0 is the vector from p0 to p1."""
        assert Point(3, 5) - Point(1, 1) == Vector(2, 4)


class TestVector:
    """Tests for Vector class."""

    def test_from_same_points_is_zero(self) -> None:
        """Test that a vector between equal points is null."""
        p = Point("7/3", "-2/5")
        assert Vector.from_points(p, p).is_zero()

    def test_zero_vector_colinear_to_everything(self) -> None:
        """Test that the zero vector is colinear to every vector."""
        zero = Vector(0, 0)
        for v in (Vector(1, 0), Vector("-3/7", 5), zero):
            assert zero.colinear_to(v)
            assert v.colinear_to(zero)

    def test_arithmetic(self) -> None:
        """Test addition, subtraction and scaling."""
        u = Vector(1, 2)
        v = Vector("1/2", -1)
        assert u + v == Vector("3/2", 1)
        assert u - v == Vector("1/2", 3)
        assert u * "1/3" == Vector("1/3", "2/3")
        assert 2 * v == Vector(1, -2)

    def test_dot_and_determinant(self) -> None:
        """Test dot product and 2x2 determinant."""
        u = Vector(1, 2)
        v = Vector(3, 4)
        assert u.dot(v) == 11
        assert u.det(v) == -2
        assert u.determinant(v) == -v.det(u)

    def test_colinear(self) -> None:
        """Test colinearity of proportional vectors."""
        assert Vector(2, 3).colinear_to(Vector("-2/3", -1))
        assert not Vector(2, 3).colinear_to(Vector(3, 2))


class TestSegment:
    """Tests for Segment class."""

    @pytest.fixture
    def segment(self) -> Segment:
        """Create a slanted segment."""
        return Segment(Point(1, 2), Point(4, -1))

    def test_degenerate_segment_fails(self) -> None:
        """Test that a segment cannot be empty."""
        with pytest.raises(DegenerateSegmentError):
            Segment(Point("1/2", 1), Point("2/4", 1))

    def test_endpoints_round_trip(self) -> None:
        """Test that endpoints are kept as given."""
        p0, p1 = Point(0, 1), Point("5/3", 2)
        s = Segment(p0, p1)
        assert s.p0 == p0
        assert s.p1 == p1
        assert s.vec() == Vector("5/3", 1)

    @pytest.mark.parametrize("t", ["0", "1/3", "1/2", "99/100", "1"])
    def test_contains_affine_combinations_inside(self, segment: Segment, t: str) -> None:
        """Test that points p0 + t(p1 - p0) with t in [0, 1] are contained."""
        assert segment.contains(segment.point_at(t))

    @pytest.mark.parametrize("t", ["-1/2", "-1/1000", "1001/1000", "2"])
    def test_does_not_contain_affine_combinations_outside(
        self, segment: Segment, t: str
    ) -> None:
        """Test that aligned points beyond the endpoints are not contained."""
        p = segment.point_at(t)
        assert segment.aligned_with_point(p)
        assert not segment.contains(p)

    def test_point_off_line(self, segment: Segment) -> None:
        """Test that a point off the supporting line is neither aligned nor contained."""
        p = Point(2, 2)
        assert not segment.aligned_with_point(p)
        assert not segment.contains(p)

    def test_aligned_with_segment(self, segment: Segment) -> None:
        """Test alignment of two segments on the same line."""
        other = Segment(segment.point_at(2), segment.point_at(3))
        assert segment.aligned_with_segment(other)
        assert not segment.aligned_with_segment(Segment(Point(0, 0), Point(1, 1)))


class TestSegmentIntersection:
    """Tests for exact segment intersection."""

    def test_crossing_segments(self) -> None:
        """Test two diagonals of a square."""
        s0 = Segment(Point(0, 0), Point(2, 2))
        s1 = Segment(Point(0, 2), Point(2, 0))
        assert s0.intersection(s1) == Point(1, 1)

    def test_crossing_at_rational_point(self) -> None:
        """Test an intersection with non-integer coordinates."""
        s0 = Segment(Point(0, 0), Point(1, 3))
        s1 = Segment(Point(0, 1), Point(1, 0))
        assert s0.intersection(s1) == Point("1/4", "3/4")

    def test_touching_at_endpoint(self) -> None:
        """Test segments sharing an endpoint."""
        s0 = Segment(Point(0, 0), Point(1, 1))
        s1 = Segment(Point(1, 1), Point(2, 0))
        assert s0.intersection(s1) == Point(1, 1)

    def test_parallel_segments(self) -> None:
        """Test that parallel segments meet at infinity only."""
        s0 = Segment(Point(0, 0), Point(1, 0))
        s1 = Segment(Point(0, 1), Point(1, 1))
        assert s0.intersection(s1) == NoIntersection()

    def test_lines_cross_outside_segments(self) -> None:
        """Test that the supporting lines meet even beyond the segments."""
        s0 = Segment(Point(0, 0), Point(1, 1))
        s1 = Segment(Point(3, 0), Point(2, 1))
        assert s0.intersection(s1) == Point("3/2", "3/2")

    def test_coincident_segments_give_no_intersection(self) -> None:
        """Test the conservative answer for overlapping aligned segments."""
        s0 = Segment(Point(0, 0), Point(2, 0))
        s1 = Segment(Point(1, 0), Point(3, 0))
        assert isinstance(s0.intersection(s1), NoIntersection)


class TestSegmentCrossing:
    """Tests for intersection points bounded by both segments."""

    def test_crossing_inside_both(self) -> None:
        """Test two diagonals of a square."""
        s0 = Segment(Point(0, 0), Point(2, 2))
        s1 = Segment(Point(0, 2), Point(2, 0))
        assert s0.crossing(s1) == Point(1, 1)

    def test_crossing_at_shared_endpoint(self) -> None:
        """Test that endpoints count as part of the segments."""
        s0 = Segment(Point(0, 0), Point(1, 1))
        s1 = Segment(Point(1, 1), Point(2, 0))
        assert s0.crossing(s1) == Point(1, 1)

    def test_lines_cross_outside_segments(self) -> None:
        """Test that a meeting point beyond the segments is discarded."""
        s0 = Segment(Point(0, 0), Point(1, 1))
        s1 = Segment(Point(3, 0), Point(2, 1))
        assert s0.crossing(s1) == NoIntersection()

    def test_outside_one_segment_only(self) -> None:
        """Test a meeting point on the first segment but past the second."""
        s0 = Segment(Point(0, 0), Point(4, 4))
        s1 = Segment(Point(0, 2), Point("1/2", "3/2"))
        assert s0.intersection(s1) == Point(1, 1)
        assert s0.crossing(s1) == NoIntersection()

    def test_parallel_and_coincident(self) -> None:
        """Test that crossing keeps the conservative answers."""
        s0 = Segment(Point(0, 0), Point(2, 0))
        assert s0.crossing(Segment(Point(0, 1), Point(2, 1))) == NoIntersection()
        assert s0.crossing(Segment(Point(1, 0), Point(3, 0))) == NoIntersection()


class TestSegmentOverlap:
    """Tests for clipping aligned segments."""

    def test_partial_overlap(self) -> None:
        """Test two segments sharing part of their span."""
        s0 = Segment(Point(0, 0), Point(2, 0))
        s1 = Segment(Point(1, 0), Point(3, 0))
        assert s0.overlap(s1) == Segment(Point(1, 0), Point(2, 0))

    def test_overlap_follows_own_orientation(self) -> None:
        """Test that the result is oriented like the receiver."""
        s0 = Segment(Point(0, 0), Point(2, 0))
        s1 = Segment(Point(3, 0), Point(1, 0))
        assert s0.overlap(s1) == Segment(Point(1, 0), Point(2, 0))
        assert s0.reversed().overlap(s1) == Segment(Point(2, 0), Point(1, 0))

    def test_contained_segment(self) -> None:
        """Test a segment inside another one."""
        s0 = Segment(Point(0, 0), Point(4, 4))
        s1 = Segment(Point(1, 1), Point("5/2", "5/2"))
        assert s0.overlap(s1) == s1

    def test_touching_segments(self) -> None:
        """Test aligned segments sharing one endpoint."""
        s0 = Segment(Point(0, 0), Point(1, 0))
        s1 = Segment(Point(1, 0), Point(2, 0))
        assert s0.overlap(s1) == Point(1, 0)

    def test_disjoint_aligned_segments(self) -> None:
        """Test aligned segments with a gap between them."""
        s0 = Segment(Point(0, 0), Point(1, 0))
        s1 = Segment(Point(2, 0), Point(3, 0))
        assert s0.overlap(s1) == NoIntersection()

    def test_crossing_segments_do_not_overlap(self) -> None:
        """Test that overlap ignores non-aligned segments."""
        s0 = Segment(Point(0, 0), Point(2, 2))
        s1 = Segment(Point(0, 2), Point(2, 0))
        assert s0.overlap(s1) == NoIntersection()
