"""Exception hierarchy for Borderline."""


class BorderlineError(Exception):
    """Base exception for all Borderline errors."""

    pass


class GeometryError(BorderlineError):
    """Errors in geometric calculations."""

    pass


class InvalidCoordinateError(GeometryError):
    """A contour point carries a NaN or infinite coordinate."""

    def __init__(self, index: int, x: float, y: float) -> None:
        self.index = index
        self.x = x
        self.y = y
        super().__init__(f"Contour point {index} has a non-finite coordinate: ({x}, {y})")


class TriangulationError(GeometryError):
    """Ear clipping lost track of the remaining vertex loop."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class RecomputeError(BorderlineError):
    """Errors related to the shape cache recompute cycle."""

    pass


class ReentrantRecomputeError(RecomputeError):
    """Recompute was triggered while another recompute was still running."""

    def __init__(self) -> None:
        super().__init__("Recompute invoked while a recompute is already in progress")


class ContourFileError(BorderlineError):
    """Errors related to contour or geometry files."""

    pass


class ContourLoadError(ContourFileError):
    """Error loading a contour file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load contour '{path}': {reason}")


class GeometrySaveError(ContourFileError):
    """Error saving computed geometry."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save geometry '{path}': {reason}")
