"""Unit tests for per-edge offset computation."""

import math

import pytest

from borderline.config import BorderConfig, BorderMode
from borderline.core.offset import EdgeOffsetCalculator
from borderline.domain import Point

SQUARE_CCW = [Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)]
SQUARE_CW = [Point(0, 0), Point(0, 100), Point(100, 100), Point(100, 0)]


def _calculator(width: float = 10.0, mode: BorderMode = BorderMode.INSIDE) -> EdgeOffsetCalculator:
    return EdgeOffsetCalculator(BorderConfig(width=width, mode=mode))


def _approx_point(p: Point, x: float, y: float) -> bool:
    return p.x == pytest.approx(x, abs=1e-9) and p.y == pytest.approx(y, abs=1e-9)


class TestSide:
    """The ribbon side follows both mode and winding."""

    @pytest.mark.parametrize(
        ("points", "mode", "expected"),
        [
            (SQUARE_CCW, BorderMode.INSIDE, 1.0),
            (SQUARE_CCW, BorderMode.OUTSIDE, -1.0),
            (SQUARE_CW, BorderMode.INSIDE, -1.0),
            (SQUARE_CW, BorderMode.OUTSIDE, 1.0),
        ],
    )
    def test_side(self, points, mode, expected):
        """+1 means the ribbon lies left of travel."""
        assert _calculator(mode=mode).side(points) == expected


class TestCompute:
    """Tests for EdgeOffsetCalculator.compute."""

    def test_one_offset_per_edge(self):
        """Every edge gets an offset, indexed like the contour."""
        edges = _calculator().compute(SQUARE_CCW)
        assert [e.index for e in edges] == [0, 1, 2, 3]
        assert edges[3].outer_a == Point(0, 100)
        assert edges[3].outer_b == Point(0, 0)

    def test_inside_ccw_first_edge(self):
        """The bottom edge of a CCW square insets upward."""
        edge = _calculator().compute(SQUARE_CCW)[0]
        assert edge.angle == 0.0
        assert edge.half_length == 50.0
        assert _approx_point(edge.inner_center, 50, 10)
        assert _approx_point(edge.dummy_inner_a, 0, 10)
        assert _approx_point(edge.dummy_inner_b, 100, 10)
        assert edge.normal_angle == pytest.approx(math.pi / 2)

    def test_outside_ccw_first_edge(self):
        """Outside mode flips the normal."""
        edge = _calculator(mode=BorderMode.OUTSIDE).compute(SQUARE_CCW)[0]
        assert _approx_point(edge.inner_center, 50, -10)

    def test_inside_cw_first_edge(self):
        """Clockwise loops still inset toward the interior."""
        edge = _calculator().compute(SQUARE_CW)[0]
        assert edge.angle == pytest.approx(math.pi / 2)
        assert _approx_point(edge.inner_center, 10, 50)

    def test_distances_equal_width(self):
        """Every inset point sits one width away from its outer point."""
        for edge in _calculator(width=7).compute(SQUARE_CCW):
            assert edge.distance_aa == pytest.approx(7.0)
            assert edge.distance_bb == pytest.approx(7.0)
            assert edge.distance_center_center == pytest.approx(7.0)

    def test_degenerate_edge_borrows_angle(self):
        """Zero-length edges take the previous edge's direction."""
        points = [Point(0, 0), Point(100, 0), Point(100, 0), Point(100, 100), Point(0, 100)]
        edges = _calculator().compute(points)
        assert edges[1].degenerate
        assert edges[1].angle == edges[0].angle
        assert edges[1].half_length == 0.0
        assert not edges[2].degenerate

    def test_fewer_than_three_points(self):
        """Test too-short loops have no offsets."""
        assert _calculator().compute([Point(0, 0), Point(10, 0)]) == []

    def test_all_points_coincide(self):
        """Loops without any direction have no offsets."""
        assert _calculator().compute([Point(5, 5)] * 3) == []
