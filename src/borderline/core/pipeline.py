"""Full geometry pass from a contour snapshot to its derived products.

Key functions:
- compute_geometry: Pure, stateless run of normalization, triangulation,
  edge offsets, corner resolution and border assembly
"""

from collections.abc import Sequence

import structlog

from borderline.config import BorderlineSettings
from borderline.core.assembler import BorderAssembler, build_physics_shapes
from borderline.core.corners import CornerResolver
from borderline.core.geometry import drop_repeated_points, normalize_points, signed_area
from borderline.core.offset import EdgeOffsetCalculator
from borderline.core.triangulator import EarClipTriangulator
from borderline.domain import ComputedGeometry, Point

logger = structlog.get_logger(__name__)


def compute_geometry(
    points: Sequence[Point],
    settings: BorderlineSettings | None = None,
    revision: int = 0,
) -> ComputedGeometry:
    """Derive triangles, border panels and physics shapes from a contour.

    Points are snapped to the integer grid and consecutive duplicates are
    dropped first; both products are built from that same reduced loop. Loops
    with fewer than 3 distinct points or no area give the empty result, as
    does a zero border width for the border products.

    Args:
        points: Contour points in edge order
        settings: Border, shape and tolerance settings (defaults if None)
        revision: Revision number stamped on the result

    Returns:
        ComputedGeometry for the contour

    Raises:
        InvalidCoordinateError: If any coordinate is NaN or infinite
    """
    settings = settings or BorderlineSettings()
    ring = drop_repeated_points(normalize_points(points))

    if len(ring) < 3 or signed_area(ring) == 0:
        logger.debug("Contour has no derivable shapes", points=len(ring))
        return ComputedGeometry(points=tuple(ring), revision=revision)

    triangles = EarClipTriangulator().triangulate(ring)

    edges = []
    corners = []
    panels = []
    if settings.border.width > 0:
        calculator = EdgeOffsetCalculator(settings.border, settings.geometry)
        edges = calculator.compute(ring)
        resolver = CornerResolver(settings.border, settings.geometry)
        corners, trims = resolver.resolve(edges, calculator.side(ring))
        panels = BorderAssembler(settings.border, settings.geometry).assemble(
            edges, corners, trims
        )

    shapes = build_physics_shapes(settings.shape.mode, triangles, panels)

    return ComputedGeometry(
        points=tuple(ring),
        triangles=triangles,
        edges=edges,
        corners=corners,
        panels=panels,
        shapes=shapes,
        revision=revision,
    )
