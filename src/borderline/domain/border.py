"""Border ribbon types.

This module defines the intermediate and final records of the border pass:
per-edge offsets, per-edge panel bounds, per-vertex corners and the panels
handed to the physics and render collaborators.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from borderline.domain.contour import Point


@dataclass(frozen=True, slots=True)
class EdgeOffset:
    """Offset data for one contour edge.

    Edge ``i`` starts at ``outer_a`` (contour point ``i``) and ends at
    ``outer_b`` (contour point ``i + 1``, wrapping). The inset line runs parallel
    to the edge at the border width, on the side given by ``normal``.

    Attributes:
        index: Edge index in the contour
        outer_a: Edge start point
        outer_b: Edge end point
        angle: Direction angle of the edge in radians (atan2 of end - start)
        half_length: Half the edge length
        normal: Unit vector from the edge toward the ribbon's inner side
        outer_center: Midpoint of the edge
        inner_center: Midpoint of the inset line
        dummy_inner_a: Inset line point level with ``outer_a``
        dummy_inner_b: Inset line point level with ``outer_b``
        degenerate: True when the edge has zero length and borrowed a neighbour's angle
    """

    index: int
    outer_a: Point
    outer_b: Point
    angle: float
    half_length: float
    normal: tuple[float, float]
    outer_center: Point
    inner_center: Point
    dummy_inner_a: Point
    dummy_inner_b: Point
    degenerate: bool = False

    @property
    def length(self) -> float:
        return self.half_length * 2.0

    @property
    def normal_angle(self) -> float:
        """Angle of ``normal`` in radians."""
        return math.atan2(self.normal[1], self.normal[0])

    # Diagnostics only
    @property
    def distance_aa(self) -> float:
        return self.outer_a.distance_to(self.dummy_inner_a)

    @property
    def distance_bb(self) -> float:
        return self.outer_b.distance_to(self.dummy_inner_b)

    @property
    def distance_center_center(self) -> float:
        return self.outer_center.distance_to(self.inner_center)


@dataclass(slots=True)
class EdgeTrim:
    """Final corners of an edge's straight panel.

    Starts out as the raw offset rectangle and is rewritten by the corner
    resolver, once from each end of the edge.
    """

    outer_a: Point
    inner_a: Point
    outer_b: Point
    inner_b: Point

    @classmethod
    def from_offset(cls, edge: EdgeOffset) -> "EdgeTrim":
        return cls(
            outer_a=edge.outer_a,
            inner_a=edge.dummy_inner_a,
            outer_b=edge.outer_b,
            inner_b=edge.dummy_inner_b,
        )

    def quad(self) -> tuple[Point, Point, Point, Point]:
        """Panel corners as a closed ring: outer edge forward, inner edge back."""
        return (self.outer_a, self.outer_b, self.inner_b, self.inner_a)


class CornerState(Enum):
    """Resolution state of a contour vertex.

    CONVEX_MITER: the ribbon lies on the inside of the turn; inset lines meet
        close to the vertex and the arc (if any) pivots on that meeting point.
    REFLEX_WRAP: the ribbon lies on the outside of the turn (a turn of more than
        a half circle once angles are made increasing); panels stop at the vertex
        and the arc pivots on the vertex itself.
    """

    CONVEX_MITER = "convex_miter"
    REFLEX_WRAP = "reflex_wrap"


@dataclass(slots=True)
class CornerInfo:
    """Resolved data for contour vertex ``index``.

    The vertex joins edge ``index - 1`` (previous) and edge ``index`` (current).

    Attributes:
        index: Vertex index in the contour
        outer: The contour vertex
        inner: Intersection of the two adjacent inset lines
        turn: Signed turn from previous to current edge, in (-pi, pi]
        state: Miter or wrap resolution
        center: Arc pivot (inner point for miters, the vertex for wraps)
        radius: Arc radius (the border width)
        angle_b: Arc boundary angle on the previous edge's side
        angle_a: Arc boundary angle on the current edge's side
        parallel: True when the inset lines had no usable intersection
        beveled: True when the miter was too long; panels then stop square at the vertex
    """

    index: int
    outer: Point
    inner: Point
    turn: float
    state: CornerState
    center: Point
    radius: float
    angle_b: float
    angle_a: float
    parallel: bool = False
    beveled: bool = False

    @property
    def wrapped(self) -> bool:
        return self.state is CornerState.REFLEX_WRAP

    @property
    def span(self) -> float:
        """Angular span of the corner arc in radians."""
        return abs(self.angle_a - self.angle_b)

    @property
    def miter_length(self) -> float:
        return self.outer.distance_to(self.inner)


class PanelKind(Enum):
    """Kind of border panel."""

    QUAD = "quad"
    ARC_FAN = "arc_fan"
    ELBOW = "elbow"


@dataclass(frozen=True, slots=True)
class BorderPanel:
    """One renderable/collidable piece of the border ribbon.

    Quads list their four corners as a ring. Elbows are triangles (vertex,
    previous panel end, next panel end) capping a beveled corner. Arc fans list
    the pivot first, followed by the sampled arc points, so they can be drawn as
    a triangle fan.

    Attributes:
        kind: Quad, elbow or arc fan
        index: Edge index (quads) or vertex index (elbows and arc fans)
        points: Panel points
        radius: Arc radius (0 for quads and elbows)
    """

    kind: PanelKind
    index: int
    points: tuple[Point, ...]
    radius: float = 0.0

    @property
    def pivot(self) -> Point:
        return self.points[0]

    @property
    def arc_points(self) -> tuple[Point, ...]:
        """Sampled arc points (empty for quads)."""
        if self.kind is PanelKind.ARC_FAN:
            return self.points[1:]
        return ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the panel
        """
        return {
            "kind": self.kind.value,
            "index": self.index,
            "points": [[p.x, p.y] for p in self.points],
            "radius": self.radius,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BorderPanel":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a panel

        Returns:
            BorderPanel instance
        """
        return cls(
            kind=PanelKind(data["kind"]),
            index=data["index"],
            points=tuple(Point(x, y) for x, y in data["points"]),
            radius=data.get("radius", 0.0),
        )
