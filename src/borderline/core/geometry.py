"""Geometric primitives for the offset and triangulation passes.

This module provides core mathematical utilities for:
- Coordinate normalization (integer grid rounding, NaN/Infinity rejection)
- Signed area calculation (shoelace formula)
- Point-in-polygon and point-in-triangle testing
- Line and segment intersection
- Angle, direction and perpendicular vector helpers

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence

from borderline.domain import Point
from borderline.exceptions import InvalidCoordinateError


def round_point(point: Point) -> Point:
    """Snap a point to the nearest integer grid position.

    Halves round to the nearest even integer (Python's ``round``), which keeps
    the operation idempotent.

    Examples:
        >>> round_point(Point(1.4, -2.6))
        Point(x=1.0, y=-3.0)
    """
    return Point(float(round(point.x)), float(round(point.y)))


def normalize_points(points: Sequence[Point]) -> list[Point]:
    """Validate and round a contour's points to the integer grid.

    Args:
        points: Contour points in edge order

    Returns:
        New list of rounded points, same length and order

    Raises:
        InvalidCoordinateError: If any coordinate is NaN or infinite
    """
    normalized: list[Point] = []
    for i, p in enumerate(points):
        if not (math.isfinite(p.x) and math.isfinite(p.y)):
            raise InvalidCoordinateError(i, p.x, p.y)
        normalized.append(round_point(p))
    return normalized


def drop_repeated_points(points: Sequence[Point]) -> list[Point]:
    """Remove consecutive duplicates, including a last point equal to the first.

    Zero-length edges carry no direction, so both passes work on the
    reduced loop.
    """
    result: list[Point] = []
    for p in points:
        if not result or p != result[-1]:
            result.append(p)
    while len(result) > 1 and result[-1] == result[0]:
        result.pop()
    return result


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(1.0, 0.0)
        >>> p3 = Point(1.0, 1.0)
        >>> p4 = Point(0.0, 1.0)
        >>> signed_area([p1, p2, p3, p4])  # CCW square
        1.0
        >>> signed_area([p1, p4, p3, p2])  # CW square
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def cross(o: Point, a: Point, b: Point) -> float:
    """Z component of (a - o) x (b - o).

    Positive when o -> a -> b turns counter-clockwise.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def point_in_triangle(p: Point, a: Point, b: Point, c: Point) -> bool:
    """Check whether ``p`` lies inside or on the boundary of triangle abc.

    Works for either winding of the triangle.
    """
    d1 = cross(a, b, p)
    d2 = cross(b, c, p)
    d3 = cross(c, a, p)
    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0
    return not (has_neg and has_pos)


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts intersections
    with polygon edges. Odd number of intersections = inside, even = outside.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> point_in_polygon(Point(1.0, 1.0), square)
        True
        >>> point_in_polygon(Point(3.0, 3.0), square)
        False
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        # Check if ray from point intersects edge (j, i)
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def line_intersection(
    p1: Point,
    p2: Point,
    p3: Point,
    p4: Point,
    infinite: bool = False,
    epsilon: float = 1e-10,
) -> Point | None:
    """Find intersection point of line p1-p2 with line p3-p4.

    Uses parametric line equations. With ``infinite`` the inputs are treated as
    unbounded lines, which is what lets two inset lines meet at a sharp corner
    even when their finite segments stop short of each other.

    Args:
        p1: First point of line 1
        p2: Second point of line 1
        p3: First point of line 2
        p4: Second point of line 2
        infinite: Intersect unbounded lines instead of segments
        epsilon: Denominator magnitude below which lines count as parallel

    Returns:
        Intersection point, or None if the lines are parallel (or, for
        segments, if the crossing lies outside either segment)

    Examples:
        >>> line_intersection(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        Point(x=1.0, y=1.0)
        >>> line_intersection(Point(0, 0), Point(1, 0), Point(3, -1), Point(3, 1)) is None
        True
        >>> line_intersection(Point(0, 0), Point(1, 0), Point(3, -1), Point(3, 1), infinite=True)
        Point(x=3.0, y=0.0)
    """
    x1, y1 = p1.x, p1.y
    x2, y2 = p2.x, p2.y
    x3, y3 = p3.x, p3.y
    x4, y4 = p4.x, p4.y

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)

    # Lines are parallel or coincident
    if abs(denom) < epsilon:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom

    if not infinite:
        u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom
        if not (0 <= t <= 1 and 0 <= u <= 1):
            return None

    return Point(x1 + t * (x2 - x1), y1 + t * (y2 - y1))


def direction_angle(start: Point, end: Point) -> float:
    """Angle of the vector start -> end in radians, in (-pi, pi]."""
    return math.atan2(end.y - start.y, end.x - start.x)


def normalize_angle(angle: float) -> float:
    """Wrap an angle into (-pi, pi]."""
    wrapped = math.fmod(angle, math.tau)
    if wrapped <= -math.pi:
        wrapped += math.tau
    elif wrapped > math.pi:
        wrapped -= math.tau
    return wrapped


def polar(origin: Point, angle: float, distance: float) -> Point:
    """Point at ``distance`` from ``origin`` in direction ``angle``."""
    return Point(origin.x + distance * math.cos(angle), origin.y + distance * math.sin(angle))


def offset_point(origin: Point, direction: tuple[float, float], distance: float) -> Point:
    """Translate ``origin`` by ``distance`` along a unit ``direction``."""
    return Point(origin.x + direction[0] * distance, origin.y + direction[1] * distance)


def perpendicular_direction(p1: Point, p2: Point) -> tuple[float, float]:
    """Calculate the unit perpendicular vector to a line from p1 to p2.

    The perpendicular is rotated 90 degrees counter-clockwise from the
    direction vector (p2 - p1).

    Args:
        p1: Start point of line
        p2: End point of line

    Returns:
        Tuple (px, py) representing the unit perpendicular vector

    Raises:
        ValueError: If p1 and p2 are the same point (zero-length line)

    Examples:
        >>> perpendicular_direction(Point(0.0, 0.0), Point(1.0, 0.0))
        (-0.0, 1.0)
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y

    length = math.hypot(dx, dy)

    if length < 1e-10:
        raise ValueError("Cannot calculate perpendicular of zero-length line")

    dx /= length
    dy /= length

    # Rotate 90 degrees counter-clockwise: (x, y) -> (-y, x)
    return -dy, dx
