"""Per-edge offset computation for the border ribbon.

For every contour edge this computes the inset (or outset) line at the border
width: its center and the two "dummy" endpoints level with the edge's own
endpoints. Adjacent inset lines are later intersected by the corner resolver.

Key classes:
- EdgeOffsetCalculator: Computes EdgeOffset records for a normalized loop
"""

import math
from collections.abc import Sequence

import structlog

from borderline.config import BorderConfig, GeometryConfig
from borderline.core.geometry import direction_angle, offset_point, signed_area
from borderline.domain import EdgeOffset, Point

logger = structlog.get_logger(__name__)


class EdgeOffsetCalculator:
    """Computes the offset line of every edge of a loop.

    The ribbon side follows the loop's winding, so ``BorderMode.INSIDE`` always
    grows toward the interior: to the left of each edge for counter-clockwise
    loops and to the right for clockwise ones.
    """

    def __init__(self, border: BorderConfig, geometry: GeometryConfig | None = None) -> None:
        """Initialize the calculator.

        Args:
            border: Border width and mode
            geometry: Numeric tolerances (defaults if None)
        """
        self.border = border
        self.geometry = geometry or GeometryConfig()

    def side(self, points: Sequence[Point]) -> float:
        """+1 if the ribbon lies left of travel, -1 if right."""
        orientation = -1.0 if signed_area(points) < 0 else 1.0
        return -self.border.mode.sign * orientation

    def compute(self, points: Sequence[Point]) -> list[EdgeOffset]:
        """Compute offsets for every edge of the loop.

        Zero-length edges borrow the direction of the closest preceding edge
        that has one, so they pass straight through the corner resolver.

        Args:
            points: Normalized contour points in edge order

        Returns:
            One EdgeOffset per edge; empty for fewer than 3 points or a loop
            whose points all coincide
        """
        n = len(points)
        if n < 3:
            return []

        angles = self._edge_angles(points)
        if all(angle is None for angle in angles):
            logger.debug("All contour points coincide, no offsets", points=n)
            return []

        side = self.side(points)
        width = self.border.width
        offsets: list[EdgeOffset] = []

        for i in range(n):
            start = points[i]
            end = points[(i + 1) % n]
            degenerate = angles[i] is None
            angle = self._borrowed_angle(angles, i) if degenerate else angles[i]
            if degenerate:
                logger.debug("Zero-length edge passes through", edge=i, angle=angle)

            direction = (math.cos(angle), math.sin(angle))
            normal = (-direction[1] * side, direction[0] * side)
            half_length = 0.0 if degenerate else start.distance_to(end) / 2.0

            outer_center = Point((start.x + end.x) / 2.0, (start.y + end.y) / 2.0)
            inner_center = offset_point(outer_center, normal, width)

            offsets.append(
                EdgeOffset(
                    index=i,
                    outer_a=start,
                    outer_b=end,
                    angle=angle,
                    half_length=half_length,
                    normal=normal,
                    outer_center=outer_center,
                    inner_center=inner_center,
                    dummy_inner_a=offset_point(inner_center, direction, -half_length),
                    dummy_inner_b=offset_point(inner_center, direction, half_length),
                    degenerate=degenerate,
                )
            )

        return offsets

    def _edge_angles(self, points: Sequence[Point]) -> list[float | None]:
        n = len(points)
        angles: list[float | None] = []
        for i in range(n):
            start = points[i]
            end = points[(i + 1) % n]
            if start.distance_to(end) < self.geometry.degenerate_length:
                angles.append(None)
            else:
                angles.append(direction_angle(start, end))
        return angles

    @staticmethod
    def _borrowed_angle(angles: list[float | None], index: int) -> float:
        n = len(angles)
        for step in range(1, n):
            angle = angles[(index - step) % n]
            if angle is not None:
                return angle
        raise ValueError("No edge with a direction to borrow from")
