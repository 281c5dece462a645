"""Core geometric types for contour representation.

This module defines the fundamental types the engine reads:
- Point: An immutable 2D coordinate
- Contour: An ordered, closed loop of points outlining a body
- WindingDirection: Enum for contour winding direction
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class WindingDirection(Enum):
    """Contour winding direction.

    With the y axis pointing up, counter-clockwise loops have positive
    signed area and keep their interior on the left of every edge.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in contour units
        y: Y coordinate in contour units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


def bounding_box(points: Sequence[Point]) -> tuple[float, float, float, float]:
    """Axis-aligned bounding box (min_x, min_y, max_x, max_y); zeros when empty."""
    if not points:
        return (0.0, 0.0, 0.0, 0.0)
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))


@dataclass
class Contour:
    """An ordered, closed loop of points.

    Edge ``i`` runs from ``points[i]`` to ``points[(i + 1) % n]``. The contour is
    owned by the hosting body and edited by outside code; the engine only reads it.
    Fewer than 3 points is a valid contour with no derivable shapes.

    Attributes:
        points: List of points forming the loop
    """

    points: list[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    @classmethod
    def from_tuples(cls, coords: list[tuple[float, float]]) -> "Contour":
        """Build a contour from (x, y) pairs."""
        return cls(points=[Point(float(x), float(y)) for x, y in coords])

    def to_tuples(self) -> list[tuple[float, float]]:
        """Return the loop as (x, y) pairs."""
        return [p.to_tuple() for p in self.points]

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        The sign of the area indicates winding direction:
        - Positive area: counter-clockwise winding
        - Negative area: clockwise winding

        Returns:
            Signed area of the contour
        """
        n = len(self.points)
        if n < 3:
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        return area / 2.0

    def winding(self) -> WindingDirection:
        """Winding direction of the loop (degenerate loops count as CCW)."""
        if self.signed_area() < 0:
            return WindingDirection.CLOCKWISE
        return WindingDirection.COUNTER_CLOCKWISE

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the contour.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        return bounding_box(self.points)

    def contains_point(self, x: float, y: float) -> bool:
        """Check if point is inside contour using ray casting algorithm.

        Args:
            x: X coordinate of point to test
            y: Y coordinate of point to test

        Returns:
            True if point is inside contour, False otherwise
        """
        n = len(self.points)
        if n < 3:
            return False

        inside = False
        j = n - 1

        for i in range(n):
            xi, yi = self.points[i].x, self.points[i].y
            xj, yj = self.points[j].x, self.points[j].y

            if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
                inside = not inside

            j = i

        return inside

    def insert_near(self, point: Point) -> int:
        """Insert a point in front of the nearest existing vertex.

        Contours with fewer than 3 points simply grow at the end. This is the
        rule an interactive editor uses when the user adds a vertex.

        Args:
            point: The point to insert

        Returns:
            Index the point was inserted at
        """
        n = len(self.points)
        if n < 3:
            self.points.append(point)
            return n

        nearest = min(range(n), key=lambda i: self.points[i].distance_to(point))
        self.points.insert(nearest, point)
        return nearest

    def remove_at(self, index: int) -> Point:
        """Remove and return the vertex at ``index``."""
        return self.points.pop(index)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the points as [x, y] pairs
        """
        return {"points": [[p.x, p.y] for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contour":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with a "points" list of [x, y] pairs

        Returns:
            Contour instance
        """
        return cls.from_tuples([(x, y) for x, y in data["points"]])
