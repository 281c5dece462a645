"""Contour file I/O layer for borderline.

This module handles reading contour files and writing computed geometry,
keeping JSON details out of the domain models.

Key classes:
- ContourReader: Load a contour from JSON
- GeometryWriter: Save computed geometry as JSON
"""

from borderline.io.reader import ContourReader
from borderline.io.writer import GeometryWriter

__all__ = [
    "ContourReader",
    "GeometryWriter",
]
