"""Corner resolution for the border ribbon.

Every contour vertex joins two edges whose inset lines must meet. The resolver
intersects those lines, decides whether the ribbon sits on the inside of the
turn (a plain miter) or on its outside (a wrap-around corner), and rewrites the
ends of the two adjacent straight panels accordingly. Miters that would reach
the middle of an adjacent edge are beveled: both panels stop square at
the vertex and the assembler fills the gap with an elbow.

The work is split in two passes over indexed arrays:
1. A forward pass computes raw miter data for every vertex.
2. A correction pass visits vertices in contour order. It finalizes vertex ``i``
   and writes the end of edge ``i - 1``, which was already written once. Vertex 0
   is deferred until after the loop, since its previous edge is the last one.

Key classes:
- CornerResolver: Produces CornerInfo and EdgeTrim arrays
"""

import math
from collections.abc import Sequence

import structlog

from borderline.config import BorderConfig, GeometryConfig
from borderline.core.geometry import line_intersection, offset_point, polar
from borderline.domain import CornerInfo, CornerState, EdgeOffset, EdgeTrim, Point

logger = structlog.get_logger(__name__)


def increasing_sweep(prev_angle: float, angle: float) -> float:
    """Counter-clockwise sweep from ``prev_angle`` to ``angle``, in [0, 2*pi).

    Both angles are lifted by whole turns until ``angle >= prev_angle``.
    """
    while prev_angle < 0:
        prev_angle += math.tau
    while angle < 0 or angle < prev_angle:
        angle += math.tau
    return math.fmod(angle - prev_angle, math.tau)


def signed_turn(prev_angle: float, angle: float) -> float:
    """Turn from one direction to the next, in (-pi, pi]; positive is a left turn."""
    sweep = increasing_sweep(prev_angle, angle)
    return sweep if sweep <= math.pi else sweep - math.tau


class CornerResolver:
    """Resolves every vertex of the loop into a CornerInfo.

    Example:
        resolver = CornerResolver(settings.border, settings.geometry)
        corners, trims = resolver.resolve(edges, side)
    """

    def __init__(self, border: BorderConfig, geometry: GeometryConfig | None = None) -> None:
        """Initialize the resolver.

        Args:
            border: Border width, mode and rounding
            geometry: Numeric tolerances (defaults if None)
        """
        self.border = border
        self.geometry = geometry or GeometryConfig()

    def resolve(
        self, edges: Sequence[EdgeOffset], side: float
    ) -> tuple[list[CornerInfo], list[EdgeTrim]]:
        """Resolve all corners and the panel ends they imply.

        Args:
            edges: Offsets for every edge, in contour order
            side: +1 if the ribbon lies left of travel, -1 if right

        Returns:
            Tuple of (corners, trims), both indexed like the contour
        """
        n = len(edges)
        if n < 3:
            return [], []

        corners = [self._raw_corner(edges[i - 1], edges[i]) for i in range(n)]
        trims = [EdgeTrim.from_offset(edge) for edge in edges]

        for i in range(1, n):
            self._finalize(corners[i], edges[i - 1], edges[i], trims[i - 1], trims[i], side)

        # Vertex 0 closes the loop: its previous edge is the last one
        self._finalize(corners[0], edges[n - 1], edges[0], trims[n - 1], trims[0], side)

        return corners, trims

    def _inset_line(self, edge: EdgeOffset) -> tuple[Point, Point]:
        if edge.degenerate:
            return edge.dummy_inner_a, polar(edge.dummy_inner_a, edge.angle, 1.0)
        return edge.dummy_inner_a, edge.dummy_inner_b

    def _raw_corner(self, prev: EdgeOffset, cur: EdgeOffset) -> CornerInfo:
        """Miter data for the vertex where ``prev`` ends and ``cur`` starts."""
        inner = line_intersection(
            *self._inset_line(prev),
            *self._inset_line(cur),
            infinite=True,
            epsilon=self.geometry.parallel_epsilon,
        )
        parallel = inner is None
        if inner is None:
            # Collinear edges share this inset endpoint
            inner = prev.dummy_inner_b
            logger.debug("Parallel inset lines, using shared endpoint", vertex=cur.index)

        turn = signed_turn(prev.angle, cur.angle)
        angle_b = prev.normal_angle + math.pi

        return CornerInfo(
            index=cur.index,
            outer=cur.outer_a,
            inner=inner,
            turn=turn,
            state=CornerState.CONVEX_MITER,
            center=inner,
            radius=self.border.width,
            angle_b=angle_b,
            angle_a=angle_b + turn,
            parallel=parallel,
        )

    def _overruns(self, corner: CornerInfo, prev: EdgeOffset, cur: EdgeOffset) -> bool:
        """True when the miter point reaches the middle of an adjacent edge.

        Past that point the two ends of the edge's panel would cross, so the
        join has to be beveled.
        """
        if corner.parallel:
            return False
        dx = corner.inner.x - corner.outer.x
        dy = corner.inner.y - corner.outer.y
        for edge in (prev, cur):
            if edge.degenerate:
                continue
            along = dx * math.cos(edge.angle) + dy * math.sin(edge.angle)
            if abs(along) >= edge.half_length:
                return True
        return False

    def _finalize(
        self,
        corner: CornerInfo,
        prev: EdgeOffset,
        cur: EdgeOffset,
        prev_trim: EdgeTrim,
        cur_trim: EdgeTrim,
        side: float,
    ) -> None:
        """Settle the corner's state and write both adjacent panel ends."""
        width = self.border.width

        if corner.turn * side < 0 and abs(corner.turn) >= self.geometry.arc_span_epsilon:
            # Ribbon on the outside of the turn: pivot on the vertex itself
            corner.state = CornerState.REFLEX_WRAP
            corner.center = corner.outer
            corner.angle_b -= math.pi
            corner.angle_a -= math.pi
            logger.debug(
                "Wrap-corrected corner",
                vertex=corner.index,
                turn_deg=round(math.degrees(corner.turn), 3),
            )

        if not (self.border.rounded and corner.wrapped) and self._overruns(corner, prev, cur):
            corner.beveled = True
            logger.debug(
                "Beveled corner",
                vertex=corner.index,
                miter_length=round(corner.miter_length, 3),
            )

        if corner.beveled or (self.border.rounded and corner.wrapped):
            cur_trim.outer_a = corner.outer
            cur_trim.inner_a = offset_point(corner.outer, cur.normal, width)
            prev_trim.outer_b = corner.outer
            prev_trim.inner_b = offset_point(corner.outer, prev.normal, width)
        elif not self.border.rounded:
            cur_trim.outer_a, cur_trim.inner_a = corner.outer, corner.inner
            prev_trim.outer_b, prev_trim.inner_b = corner.outer, corner.inner
        else:
            cur_trim.outer_a = offset_point(corner.inner, cur.normal, -width)
            cur_trim.inner_a = corner.inner
            prev_trim.outer_b = offset_point(corner.inner, prev.normal, -width)
            prev_trim.inner_b = corner.inner
