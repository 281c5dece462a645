"""Borderline - Derived collision and render geometry for editable 2D bodies.

Borderline takes a closed polygonal contour, triangulates its interior and
builds a fixed-width border ribbon along it (with optional rounded corners),
then hands the resulting shape lists to physics and render collaborators.
A change-tracking cache recomputes only when the contour actually changed.

Example:
    $ borderline body.json --width 8 --corner-segments 16

This will write body.geometry.json with the triangles, border panels and
physics shapes derived from the contour in body.json.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
