"""Core processing algorithms for borderline.

This module contains the core algorithms for:

- Geometry primitives (normalization, areas, intersections, angles)
- Ear-clipping triangulation of the contour interior
- Edge offsets, corner resolution and border ribbon assembly
- The snapshot-gated shape cache

All passes except the cache are:
- Stateless
- Pure (no side effects)

Key functions:
- compute_geometry: Run the full pass on a contour snapshot
- triangulate: Triangulate a contour
- line_intersection: Intersect two lines or segments
- normalize_points: Snap points to the integer grid

Key classes:
- EarClipTriangulator: Interior triangulation
- EdgeOffsetCalculator: Per-edge inset lines
- CornerResolver: Per-vertex miter/wrap resolution
- BorderAssembler: Ribbon panels and arc fans
- ShapeCache: Change tracking and collaborator push
"""

from borderline.core.assembler import BorderAssembler, arc_segment_count, build_physics_shapes
from borderline.core.cache import PhysicsSink, RenderSink, ShapeCache
from borderline.core.corners import CornerResolver
from borderline.core.geometry import (
    drop_repeated_points,
    line_intersection,
    normalize_points,
    point_in_polygon,
    round_point,
    signed_area,
)
from borderline.core.offset import EdgeOffsetCalculator
from borderline.core.pipeline import compute_geometry
from borderline.core.triangulator import EarClipTriangulator, triangulate

__all__ = [
    # Pipeline classes
    "BorderAssembler",
    "CornerResolver",
    "EarClipTriangulator",
    "EdgeOffsetCalculator",
    # Cache
    "PhysicsSink",
    "RenderSink",
    "ShapeCache",
    # Functions
    "arc_segment_count",
    "build_physics_shapes",
    "compute_geometry",
    "drop_repeated_points",
    "line_intersection",
    "normalize_points",
    "point_in_polygon",
    "round_point",
    "signed_area",
    "triangulate",
]
