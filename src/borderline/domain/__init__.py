"""Domain models for borderline.

This module contains the data the engine reads and produces. All models are
plain dataclasses:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries for the I/O layer
- Independent of any physics or rendering API

Key classes:
- Point, Contour: The input outline
- EdgeOffset, EdgeTrim, CornerInfo: Intermediate border records
- BorderPanel, Triangle: Renderable/collidable pieces
- PolygonShape, CircleShape: Physics collaborator shapes
- ComputedGeometry: Result of one recompute
"""

from borderline.domain.border import (
    BorderPanel,
    CornerInfo,
    CornerState,
    EdgeOffset,
    EdgeTrim,
    PanelKind,
)
from borderline.domain.contour import Contour, Point, WindingDirection, bounding_box
from borderline.domain.shapes import (
    CircleShape,
    ComputedGeometry,
    PolygonShape,
    RenderBatch,
    Shape,
    Triangle,
    shape_from_dict,
)

__all__: list[str] = [
    # Enums
    "CornerState",
    "PanelKind",
    "WindingDirection",
    # Input
    "Contour",
    "Point",
    # Border records
    "BorderPanel",
    "CornerInfo",
    "EdgeOffset",
    "EdgeTrim",
    # Products
    "CircleShape",
    "ComputedGeometry",
    "PolygonShape",
    "RenderBatch",
    "Shape",
    "Triangle",
    "shape_from_dict",
    # Helpers
    "bounding_box",
]
