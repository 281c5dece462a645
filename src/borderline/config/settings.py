"""Configuration settings for Borderline."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class BorderMode(str, Enum):
    """Side of the contour the border ribbon grows into."""

    INSIDE = "inside"
    OUTSIDE = "outside"

    @property
    def sign(self) -> int:
        """Offset multiplier: -1 grows toward the interior, +1 away from it."""
        return -1 if self is BorderMode.INSIDE else 1


class ShapeMode(str, Enum):
    """Which derived product feeds the physics collaborator."""

    TRIANGULATED = "triangulated"
    BORDER = "border"


class GeometryConfig(BaseModel):
    """Tolerances used by the offset and triangulation passes.

    Contours are normalized to the integer grid before any pass runs, so these
    values are in grid units.
    """

    parallel_epsilon: float = Field(
        default=1e-9,
        gt=0.0,
        le=1e-3,
        description="Determinant below which two inset lines count as parallel",
    )
    degenerate_length: float = Field(
        default=1e-9,
        gt=0.0,
        le=0.5,
        description="Edges shorter than this are treated as zero-length",
    )
    arc_span_epsilon: float = Field(
        default=1e-6,
        gt=0.0,
        le=0.01,
        description="Corner spans (radians) below this are flat and get no arc",
    )


class BorderConfig(BaseModel):
    """Configuration for the border ribbon."""

    width: float = Field(
        default=2.0,
        ge=0.0,
        description="Ribbon width in contour units",
    )
    mode: BorderMode = Field(
        default=BorderMode.INSIDE,
        description="Grow the ribbon inside or outside the contour",
    )
    corner_segments: int = Field(
        default=0,
        ge=0,
        le=720,
        description="Arc segments per full circle at corners (0 = sharp miters)",
    )

    @property
    def rounded(self) -> bool:
        """Whether corners are rounded with arc fans."""
        return self.corner_segments > 0


class ShapeConfig(BaseModel):
    """Configuration for the physics shape list."""

    mode: ShapeMode = Field(
        default=ShapeMode.TRIANGULATED,
        description="Feed triangles or border pieces to the physics collaborator",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BorderlineSettings(BaseModel):
    """Main application settings."""

    border: BorderConfig = Field(default_factory=BorderConfig)
    shape: ShapeConfig = Field(default_factory=ShapeConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BorderlineSettings:
    """Get default application settings."""
    return BorderlineSettings()
