"""Ear-clipping triangulation of a simple contour.

The triangulator repeatedly removes an "ear": a convex vertex whose triangle
(previous, vertex, next) contains no other remaining vertex. An n-vertex simple
polygon yields exactly n - 2 triangles built only from its own points.

Key classes:
- EarClipTriangulator: Stateless triangulator
"""

from collections.abc import Sequence

import structlog

from borderline.core.geometry import (
    cross,
    drop_repeated_points,
    normalize_points,
    point_in_triangle,
    signed_area,
)
from borderline.domain import Contour, Point, Triangle
from borderline.exceptions import TriangulationError

logger = structlog.get_logger(__name__)


class EarClipTriangulator:
    """Triangulates simple polygons by ear clipping.

    The loop is first rotated to a canonical starting vertex (the smallest point
    by x, then y), and ears are taken in index order from there. Identical loops
    therefore triangulate identically no matter which vertex they start at.

    Self-intersecting input is not detected; it yields a best-effort result
    rather than an error.

    Example:
        triangulator = EarClipTriangulator()
        triangles = triangulator.triangulate(contour.points)
    """

    def triangulate(self, points: Sequence[Point]) -> list[Triangle]:
        """Triangulate a closed loop of points.

        Points are snapped to the integer grid (a no-op for already normalized
        input) and consecutive duplicates are dropped before clipping.

        Args:
            points: Contour points in edge order, either winding

        Returns:
            Triangles covering the polygon; empty for fewer than 3 distinct
            points or a loop with no area

        Raises:
            InvalidCoordinateError: If any coordinate is NaN or infinite
        """
        ring = drop_repeated_points(normalize_points(points))
        if len(ring) < 3:
            return []

        area = signed_area(ring)
        if area == 0:
            logger.debug("Contour has no area, nothing to triangulate", points=len(ring))
            return []

        start = self._canonical_start(ring)
        ring = ring[start:] + ring[:start]
        orientation = 1.0 if area > 0 else -1.0

        remaining = list(range(len(ring)))
        triangles: list[Triangle] = []

        while len(remaining) > 3:
            ear = self._find_ear(ring, remaining, orientation)
            if ear is None:
                ear = self._fallback_ear(ring, remaining, orientation)
                logger.debug(
                    "No clean ear found, clipping fallback vertex",
                    vertex=remaining[ear],
                    remaining=len(remaining),
                )

            prev_idx, cur_idx, next_idx = self._neighbours(remaining, ear)
            triangles.append(Triangle(ring[prev_idx], ring[cur_idx], ring[next_idx]))
            del remaining[ear]

        if len(remaining) != 3:
            raise TriangulationError(f"Expected 3 vertices to remain, found {len(remaining)}")
        triangles.append(Triangle(*(ring[i] for i in remaining)))

        return triangles

    @staticmethod
    def _canonical_start(ring: list[Point]) -> int:
        """Index of the lowest point; ties broken by the rotation that follows it."""
        lowest = min(p.to_tuple() for p in ring)
        candidates = [i for i, p in enumerate(ring) if p.to_tuple() == lowest]
        if len(candidates) == 1:
            return candidates[0]
        return min(
            candidates,
            key=lambda i: [p.to_tuple() for p in ring[i:] + ring[:i]],
        )

    @staticmethod
    def _neighbours(remaining: list[int], pos: int) -> tuple[int, int, int]:
        m = len(remaining)
        return remaining[(pos - 1) % m], remaining[pos], remaining[(pos + 1) % m]

    def _find_ear(
        self, ring: list[Point], remaining: list[int], orientation: float
    ) -> int | None:
        """Position in ``remaining`` of the first clean ear, or None."""
        for pos in range(len(remaining)):
            if self._is_ear(ring, remaining, pos, orientation):
                return pos
        return None

    def _is_ear(
        self, ring: list[Point], remaining: list[int], pos: int, orientation: float
    ) -> bool:
        prev_idx, cur_idx, next_idx = self._neighbours(remaining, pos)
        a, b, c = ring[prev_idx], ring[cur_idx], ring[next_idx]

        # Reflex or flat vertices are never ears
        if cross(a, b, c) * orientation <= 0:
            return False

        for idx in remaining:
            if idx in (prev_idx, cur_idx, next_idx):
                continue
            p = ring[idx]
            # A loop touching itself can repeat a corner point
            if p in (a, b, c):
                continue
            if point_in_triangle(p, a, b, c):
                return False

        return True

    def _fallback_ear(
        self, ring: list[Point], remaining: list[int], orientation: float
    ) -> int:
        """Pick a vertex to clip when no clean ear exists.

        Only reachable for non-simple or collinear leftovers. Prefers the first
        non-reflex vertex, then simply the first vertex.
        """
        for pos in range(len(remaining)):
            prev_idx, cur_idx, next_idx = self._neighbours(remaining, pos)
            if cross(ring[prev_idx], ring[cur_idx], ring[next_idx]) * orientation >= 0:
                return pos
        return 0


def triangulate(contour: Contour) -> list[Triangle]:
    """Triangulate a contour with the default triangulator."""
    return EarClipTriangulator().triangulate(contour.points)
