"""Output types handed to the physics and render collaborators."""

from dataclasses import dataclass, field
from typing import Any, Literal

from borderline.domain.border import BorderPanel, CornerInfo, EdgeOffset
from borderline.domain.contour import Point, bounding_box


@dataclass(frozen=True, slots=True)
class Triangle:
    """Three contour points forming one ear of the triangulation."""

    a: Point
    b: Point
    c: Point

    @property
    def points(self) -> tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)

    def signed_area(self) -> float:
        """Signed area, positive when a -> b -> c is counter-clockwise."""
        return (
            (self.b.x - self.a.x) * (self.c.y - self.a.y)
            - (self.c.x - self.a.x) * (self.b.y - self.a.y)
        ) / 2.0

    def area(self) -> float:
        return abs(self.signed_area())

    def key(self) -> frozenset[tuple[float, float]]:
        """Order-independent identity of the triangle."""
        return frozenset(p.to_tuple() for p in self.points)

    def to_dict(self) -> dict[str, Any]:
        return {"points": [[p.x, p.y] for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Triangle":
        a, b, c = (Point(x, y) for x, y in data["points"])
        return cls(a, b, c)


@dataclass(frozen=True, slots=True)
class PolygonShape:
    """Convex polygon piece (3 or 4 points) for the physics collaborator."""

    vertices: tuple[Point, ...]
    kind: Literal["polygon"] = "polygon"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "vertices": [[p.x, p.y] for p in self.vertices]}


@dataclass(frozen=True, slots=True)
class CircleShape:
    """Circle piece for the physics collaborator."""

    center: Point
    radius: float
    kind: Literal["circle"] = "circle"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "center": [self.center.x, self.center.y], "radius": self.radius}


Shape = PolygonShape | CircleShape


def shape_from_dict(data: dict[str, Any]) -> Shape:
    """Rebuild a physics shape from its tagged dictionary form."""
    if data["type"] == "polygon":
        return PolygonShape(vertices=tuple(Point(x, y) for x, y in data["vertices"]))
    if data["type"] == "circle":
        x, y = data["center"]
        return CircleShape(center=Point(x, y), radius=data["radius"])
    raise ValueError(f"Unknown shape type: {data['type']!r}")


@dataclass(frozen=True, slots=True)
class RenderBatch:
    """A point list for the render collaborator.

    ``kind`` is "triangle", "panel" or "arc". Arc batches start with the fan pivot.
    """

    kind: str
    points: tuple[Point, ...]


@dataclass
class ComputedGeometry:
    """Everything one recompute derives from a contour.

    Attributes:
        points: The normalized contour the products were derived from
        triangles: Ear-clipped interior
        edges: Per-edge offset data
        corners: Per-vertex corner data
        panels: Border ribbon panels (quads, then arc fans)
        shapes: Physics shape list for the configured shape mode
        revision: Recompute counter value that produced this result
    """

    points: tuple[Point, ...] = ()
    triangles: list[Triangle] = field(default_factory=list)
    edges: list[EdgeOffset] = field(default_factory=list)
    corners: list[CornerInfo] = field(default_factory=list)
    panels: list[BorderPanel] = field(default_factory=list)
    shapes: list[Shape] = field(default_factory=list)
    revision: int = 0

    def is_empty(self) -> bool:
        """True when there are neither triangles nor border panels.

        Loops with fewer than 3 distinct points or no area are empty. A zero
        border width with a valid loop still has triangles and is not empty.
        """
        return not self.triangles and not self.panels

    @property
    def bounds(self) -> tuple[float, float, float, float] | None:
        """Bounding box of the contour and ribbon together, None when empty."""
        pts = list(self.points)
        for panel in self.panels:
            pts.extend(panel.points)
        if not pts:
            return None
        return bounding_box(pts)

    def render_batches(self) -> list[RenderBatch]:
        """Point lists for the render collaborator, in fan-compatible order."""
        batches = [RenderBatch("triangle", t.points) for t in self.triangles]
        for panel in self.panels:
            kind = "arc" if panel.arc_points else "panel"
            batches.append(RenderBatch(kind, panel.points))
        return batches

    def to_dict(self) -> dict[str, Any]:
        """Serialize the products (not the intermediate records)."""
        return {
            "revision": self.revision,
            "points": [[p.x, p.y] for p in self.points],
            "triangles": [t.to_dict() for t in self.triangles],
            "panels": [p.to_dict() for p in self.panels],
            "shapes": [s.to_dict() for s in self.shapes],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ComputedGeometry":
        """Rebuild the products written by to_dict().

        Edge and corner records are intermediate data and are not restored.
        """
        return cls(
            points=tuple(Point(x, y) for x, y in data.get("points", [])),
            triangles=[Triangle.from_dict(t) for t in data.get("triangles", [])],
            panels=[BorderPanel.from_dict(p) for p in data.get("panels", [])],
            shapes=[shape_from_dict(s) for s in data.get("shapes", [])],
            revision=data.get("revision", 0),
        )
