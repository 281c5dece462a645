"""Border ribbon assembly and physics shape selection.

Stitches resolved panel ends and corners into the ribbon's panel list:
one quad per edge, one elbow per beveled corner, and one arc fan per other
non-flat corner when rounding is on.
Also picks which product feeds the physics collaborator.

Key classes:
- BorderAssembler: Builds BorderPanel lists

Key functions:
- arc_segment_count: Wedges used for a corner arc
- build_physics_shapes: Shape list for the configured ShapeMode
"""

import math
from collections.abc import Sequence

from borderline.config import BorderConfig, GeometryConfig, ShapeMode
from borderline.core.geometry import polar
from borderline.domain import (
    BorderPanel,
    CircleShape,
    CornerInfo,
    EdgeOffset,
    EdgeTrim,
    PanelKind,
    PolygonShape,
    Shape,
    Triangle,
)


def arc_segment_count(segments_per_circle: int, span: float) -> int:
    """Number of wedges for an arc covering ``span`` radians.

    Proportional to the fraction of a full circle, never fewer than one.

    Examples:
        >>> arc_segment_count(8, math.pi / 2)
        2
        >>> arc_segment_count(8, 0.01)
        1
    """
    return max(1, round(segments_per_circle * span / math.tau))


class BorderAssembler:
    """Builds the border ribbon's panels.

    Example:
        assembler = BorderAssembler(settings.border, settings.geometry)
        panels = assembler.assemble(edges, corners, trims)
    """

    def __init__(self, border: BorderConfig, geometry: GeometryConfig | None = None) -> None:
        """Initialize the assembler.

        Args:
            border: Border width and rounding
            geometry: Numeric tolerances (defaults if None)
        """
        self.border = border
        self.geometry = geometry or GeometryConfig()

    def assemble(
        self,
        edges: Sequence[EdgeOffset],
        corners: Sequence[CornerInfo],
        trims: Sequence[EdgeTrim],
    ) -> list[BorderPanel]:
        """Emit the straight panels followed by the corner elbows and arc fans.

        Args:
            edges: Per-edge offsets (zero-length edges get no panel)
            corners: Resolved corners
            trims: Final panel ends, indexed like ``edges``

        Returns:
            Panels in edge order, then elbows and arc fans in vertex order
        """
        panels = [
            BorderPanel(kind=PanelKind.QUAD, index=edge.index, points=trim.quad())
            for edge, trim in zip(edges, trims, strict=True)
            if not edge.degenerate
        ]

        for corner in corners:
            if corner.beveled:
                panels.append(self.corner_elbow(corner, trims))
            elif self.border.rounded:
                fan = self.corner_fan(corner)
                if fan is not None:
                    panels.append(fan)

        return panels

    def corner_elbow(self, corner: CornerInfo, trims: Sequence[EdgeTrim]) -> BorderPanel:
        """Triangle closing the gap between two panels that stop square at a vertex."""
        prev_end = trims[corner.index - 1].inner_b
        cur_start = trims[corner.index].inner_a
        return BorderPanel(
            kind=PanelKind.ELBOW,
            index=corner.index,
            points=(corner.outer, prev_end, cur_start),
        )

    def corner_fan(self, corner: CornerInfo) -> BorderPanel | None:
        """Arc fan for a corner, pivot first; None for flat corners."""
        span = corner.span
        if span < self.geometry.arc_span_epsilon:
            return None

        segments = arc_segment_count(self.border.corner_segments, span)
        step = (corner.angle_a - corner.angle_b) / segments
        arc = [
            polar(corner.center, corner.angle_b + step * k, corner.radius)
            for k in range(segments + 1)
        ]
        return BorderPanel(
            kind=PanelKind.ARC_FAN,
            index=corner.index,
            points=(corner.center, *arc),
            radius=corner.radius,
        )


def build_physics_shapes(
    mode: ShapeMode,
    triangles: Sequence[Triangle],
    panels: Sequence[BorderPanel],
) -> list[Shape]:
    """Shape list for the physics collaborator.

    Triangulated mode hands over every triangle. Border mode hands over the
    straight panels and elbows as polygons and one circle per rounded corner.

    Args:
        mode: Which product feeds the physics collaborator
        triangles: Interior triangulation
        panels: Border ribbon panels

    Returns:
        Complete replacement shape list
    """
    if mode is ShapeMode.TRIANGULATED:
        return [PolygonShape(vertices=t.points) for t in triangles]

    shapes: list[Shape] = []
    for panel in panels:
        if panel.kind is PanelKind.ARC_FAN:
            shapes.append(CircleShape(center=panel.pivot, radius=panel.radius))
        else:
            shapes.append(PolygonShape(vertices=panel.points))
    return shapes
