"""Tests for domain models to verify they work correctly."""

import math

import pytest

from borderline.domain import (
    BorderPanel,
    CircleShape,
    ComputedGeometry,
    Contour,
    CornerInfo,
    CornerState,
    EdgeOffset,
    EdgeTrim,
    PanelKind,
    Point,
    PolygonShape,
    Triangle,
    WindingDirection,
    bounding_box,
    shape_from_dict,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_distance(self) -> None:
        """Test Euclidean distance between points."""
        assert Point(0, 0).distance_to(Point(3, 4)) == 5.0

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, -200.0)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Equal points collapse in a set."""
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


class TestContour:
    """Tests for Contour class."""

    def test_contour_creation(self) -> None:
        """Test basic contour creation."""
        points = [Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)]
        contour = Contour(points=points)
        assert len(contour) == 4

    def test_signed_area_counterclockwise(self) -> None:
        """Test signed area for counter-clockwise square."""
        contour = Contour.from_tuples([(0, 0), (100, 0), (100, 100), (0, 100)])
        assert contour.signed_area() == pytest.approx(10000.0)
        assert contour.winding() == WindingDirection.COUNTER_CLOCKWISE

    def test_signed_area_clockwise(self) -> None:
        """Test signed area for clockwise square."""
        contour = Contour.from_tuples([(0, 0), (0, 100), (100, 100), (100, 0)])
        assert contour.signed_area() == pytest.approx(-10000.0)
        assert contour.winding() == WindingDirection.CLOCKWISE

    def test_signed_area_too_few_points(self) -> None:
        """Fewer than 3 points have no area."""
        assert Contour.from_tuples([(0, 0), (10, 0)]).signed_area() == 0.0

    def test_bounding_box(self) -> None:
        """Test bounding box calculation."""
        contour = Contour.from_tuples([(-5, 0), (20, 3), (10, 40)])
        assert contour.bounding_box() == (-5.0, 0.0, 20.0, 40.0)

    def test_bounding_box_empty(self) -> None:
        """Empty contours report a zero box."""
        assert Contour().bounding_box() == (0.0, 0.0, 0.0, 0.0)

    def test_bounding_box_helper(self) -> None:
        """The module helper backs every bounding box."""
        assert bounding_box([Point(1, 5), Point(-2, 3)]) == (-2, 3, 1, 5)
        assert bounding_box([]) == (0.0, 0.0, 0.0, 0.0)

    def test_contains_point(self) -> None:
        """Test point containment by ray casting."""
        contour = Contour.from_tuples([(0, 0), (100, 0), (100, 100), (0, 100)])
        assert contour.contains_point(50, 50)
        assert not contour.contains_point(150, 50)

    def test_insert_near_grows_small_contour(self) -> None:
        """With fewer than 3 points new points are appended."""
        contour = Contour.from_tuples([(0, 0), (10, 0)])
        index = contour.insert_near(Point(5, 5))
        assert index == 2
        assert contour.points[-1] == Point(5, 5)

    def test_insert_near_nearest_vertex(self) -> None:
        """New points go in front of the closest existing vertex."""
        contour = Contour.from_tuples([(0, 0), (100, 0), (100, 100), (0, 100)])
        index = contour.insert_near(Point(95, 90))
        assert index == 2
        assert contour.points[2] == Point(95, 90)
        assert contour.points[3] == Point(100, 100)
        assert len(contour) == 5

    def test_remove_at(self) -> None:
        """Test vertex removal."""
        contour = Contour.from_tuples([(0, 0), (100, 0), (100, 100)])
        removed = contour.remove_at(1)
        assert removed == Point(100, 0)
        assert contour.to_tuples() == [(0.0, 0.0), (100.0, 100.0)]

    def test_contour_serialization(self) -> None:
        """Test contour serialization and deserialization."""
        contour = Contour.from_tuples([(0, 0), (100, 0), (50, 80)])
        data = contour.to_dict()
        assert data == {"points": [[0.0, 0.0], [100.0, 0.0], [50.0, 80.0]]}
        assert Contour.from_dict(data).points == contour.points


def _horizontal_edge() -> EdgeOffset:
    return EdgeOffset(
        index=0,
        outer_a=Point(0, 0),
        outer_b=Point(100, 0),
        angle=0.0,
        half_length=50.0,
        normal=(0.0, 1.0),
        outer_center=Point(50, 0),
        inner_center=Point(50, 10),
        dummy_inner_a=Point(0, 10),
        dummy_inner_b=Point(100, 10),
    )


class TestEdgeOffset:
    """Tests for EdgeOffset and EdgeTrim."""

    def test_derived_properties(self) -> None:
        """Test length, normal angle and diagnostic distances."""
        edge = _horizontal_edge()
        assert edge.length == 100.0
        assert edge.normal_angle == pytest.approx(math.pi / 2)
        assert edge.distance_aa == pytest.approx(10.0)
        assert edge.distance_bb == pytest.approx(10.0)
        assert edge.distance_center_center == pytest.approx(10.0)

    def test_trim_from_offset(self) -> None:
        """A fresh trim is the raw offset rectangle."""
        trim = EdgeTrim.from_offset(_horizontal_edge())
        assert trim.quad() == (Point(0, 0), Point(100, 0), Point(100, 10), Point(0, 10))

    def test_trim_is_mutable(self) -> None:
        """Corner resolution rewrites panel ends in place."""
        trim = EdgeTrim.from_offset(_horizontal_edge())
        trim.inner_b = Point(90, 10)
        assert trim.quad()[2] == Point(90, 10)


class TestCornerInfo:
    """Tests for CornerInfo."""

    def test_span_and_state(self) -> None:
        """Test span and wrapped flag."""
        corner = CornerInfo(
            index=1,
            outer=Point(100, 0),
            inner=Point(90, 10),
            turn=math.pi / 2,
            state=CornerState.CONVEX_MITER,
            center=Point(90, 10),
            radius=10.0,
            angle_b=3 * math.pi / 2,
            angle_a=2 * math.pi,
        )
        assert corner.span == pytest.approx(math.pi / 2)
        assert not corner.wrapped
        assert corner.miter_length == pytest.approx(math.hypot(10, 10))
        assert not corner.beveled

        corner.state = CornerState.REFLEX_WRAP
        assert corner.wrapped


class TestBorderPanel:
    """Tests for BorderPanel."""

    def test_quad_has_no_arc_points(self) -> None:
        """Quads expose no arc samples."""
        panel = BorderPanel(
            kind=PanelKind.QUAD,
            index=0,
            points=(Point(0, 0), Point(100, 0), Point(90, 10), Point(10, 10)),
        )
        assert panel.arc_points == ()
        assert panel.radius == 0.0

    def test_arc_fan_pivot_first(self) -> None:
        """Arc fans list the pivot before the arc."""
        panel = BorderPanel(
            kind=PanelKind.ARC_FAN,
            index=2,
            points=(Point(10, 10), Point(0, 10), Point(10, 0)),
            radius=10.0,
        )
        assert panel.pivot == Point(10, 10)
        assert panel.arc_points == (Point(0, 10), Point(10, 0))

    def test_serialization(self) -> None:
        """Test panel serialization and deserialization."""
        panel = BorderPanel(
            kind=PanelKind.ARC_FAN,
            index=2,
            points=(Point(10, 10), Point(0, 10), Point(10, 0)),
            radius=10.0,
        )
        data = panel.to_dict()
        assert data["kind"] == "arc_fan"
        assert BorderPanel.from_dict(data) == panel


class TestShapes:
    """Tests for triangles and physics shapes."""

    def test_triangle_area(self) -> None:
        """Test signed and absolute triangle area."""
        ccw = Triangle(Point(0, 0), Point(10, 0), Point(0, 10))
        cw = Triangle(Point(0, 0), Point(0, 10), Point(10, 0))
        assert ccw.signed_area() == pytest.approx(50.0)
        assert cw.signed_area() == pytest.approx(-50.0)
        assert cw.area() == pytest.approx(50.0)

    def test_triangle_key_ignores_order(self) -> None:
        """Rotated triangles share an identity key."""
        a, b, c = Point(0, 0), Point(10, 0), Point(0, 10)
        assert Triangle(a, b, c).key() == Triangle(b, c, a).key()

    def test_shape_dict_tags(self) -> None:
        """Shapes serialize with a type tag and rebuild from it."""
        polygon = PolygonShape(vertices=(Point(0, 0), Point(10, 0), Point(0, 10)))
        circle = CircleShape(center=Point(5, 5), radius=2.0)
        assert polygon.to_dict()["type"] == "polygon"
        assert circle.to_dict() == {"type": "circle", "center": [5, 5], "radius": 2.0}
        assert shape_from_dict(polygon.to_dict()) == polygon
        assert shape_from_dict(circle.to_dict()) == circle

    def test_shape_from_dict_unknown_type(self) -> None:
        """Unknown shape tags are rejected."""
        with pytest.raises(ValueError, match="Unknown shape type"):
            shape_from_dict({"type": "capsule"})


class TestComputedGeometry:
    """Tests for ComputedGeometry."""

    def test_empty_state(self) -> None:
        """A fresh result is the empty state."""
        geometry = ComputedGeometry()
        assert geometry.is_empty()
        assert geometry.bounds is None
        assert geometry.render_batches() == []

    def test_render_batches_order(self) -> None:
        """Triangles come first, then panels, then arcs."""
        triangle = Triangle(Point(0, 0), Point(10, 0), Point(0, 10))
        quad = BorderPanel(
            kind=PanelKind.QUAD,
            index=0,
            points=(Point(0, 0), Point(10, 0), Point(9, 1), Point(1, 1)),
        )
        fan = BorderPanel(
            kind=PanelKind.ARC_FAN,
            index=0,
            points=(Point(1, 1), Point(0, 1), Point(1, 0)),
            radius=1.0,
        )
        geometry = ComputedGeometry(
            points=(Point(0, 0), Point(10, 0), Point(0, 10)),
            triangles=[triangle],
            panels=[quad, fan],
        )
        kinds = [batch.kind for batch in geometry.render_batches()]
        assert kinds == ["triangle", "panel", "arc"]
        assert geometry.bounds == (0.0, 0.0, 10.0, 10.0)

    def test_to_dict(self) -> None:
        """Test product serialization."""
        geometry = ComputedGeometry(
            points=(Point(0, 0), Point(10, 0), Point(0, 10)),
            triangles=[Triangle(Point(0, 0), Point(10, 0), Point(0, 10))],
            revision=3,
        )
        data = geometry.to_dict()
        assert data["revision"] == 3
        assert data["triangles"] == [{"points": [[0, 0], [10, 0], [0, 10]]}]
        assert data["panels"] == []
        assert data["shapes"] == []

    def test_from_dict_restores_products(self) -> None:
        """Written products can be loaded back."""
        geometry = ComputedGeometry(
            points=(Point(0, 0), Point(10, 0), Point(0, 10)),
            triangles=[Triangle(Point(0, 0), Point(10, 0), Point(0, 10))],
            panels=[
                BorderPanel(
                    kind=PanelKind.ARC_FAN,
                    index=0,
                    points=(Point(1, 1), Point(0, 1), Point(1, 0)),
                    radius=1.0,
                )
            ],
            shapes=[CircleShape(center=Point(1, 1), radius=1.0)],
            revision=7,
        )
        restored = ComputedGeometry.from_dict(geometry.to_dict())
        assert restored.points == geometry.points
        assert restored.triangles == geometry.triangles
        assert restored.panels == geometry.panels
        assert restored.shapes == geometry.shapes
        assert restored.revision == 7
        assert restored.corners == []

    def test_bounds_match_helper(self) -> None:
        """Bounds cover the contour and every panel point."""
        points = (Point(0, 0), Point(10, 0), Point(0, 10))
        elbow = BorderPanel(
            kind=PanelKind.ELBOW,
            index=1,
            points=(Point(10, 0), Point(10, -3), Point(12, 1)),
        )
        geometry = ComputedGeometry(points=points, panels=[elbow])
        assert geometry.bounds == bounding_box([*points, *elbow.points])
        assert geometry.bounds == (0.0, -3.0, 12.0, 10.0)

    def test_zero_width_result_is_not_empty(self) -> None:
        """Triangles alone make a result non-empty."""
        geometry = ComputedGeometry(
            points=(Point(0, 0), Point(10, 0), Point(0, 10)),
            triangles=[Triangle(Point(0, 0), Point(10, 0), Point(0, 10))],
        )
        assert not geometry.is_empty()
        assert ComputedGeometry(points=(Point(0, 0), Point(5, 0), Point(10, 0))).is_empty()

    def test_elbow_renders_as_panel(self) -> None:
        """Elbows are drawn as plain panels and serialize with their own kind."""
        elbow = BorderPanel(
            kind=PanelKind.ELBOW,
            index=0,
            points=(Point(0, 0), Point(0, 2), Point(2, 0)),
        )
        geometry = ComputedGeometry(points=(Point(0, 0), Point(10, 0), Point(0, 10)), panels=[elbow])
        assert [batch.kind for batch in geometry.render_batches()] == ["panel"]
        assert elbow.arc_points == ()
        assert BorderPanel.from_dict(elbow.to_dict()).kind is PanelKind.ELBOW
