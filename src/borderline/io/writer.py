"""Geometry writer for saving computed products.

This module provides the GeometryWriter class for writing a
ComputedGeometry to JSON.
"""

import json
from pathlib import Path

from borderline.domain import ComputedGeometry
from borderline.exceptions import GeometrySaveError


class GeometryWriter:
    """Writes computed geometry as JSON.

    Example:
        writer = GeometryWriter(Path("body.geometry.json"))
        writer.write(geometry)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the writer.

        Args:
            path: Destination file
        """
        self._path = path

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Default output path next to the input file.

        Examples:
            >>> GeometryWriter.get_output_path(Path("shapes/body.json"))
            PosixPath('shapes/body.geometry.json')
        """
        return input_path.with_name(f"{input_path.stem}.geometry.json")

    def write(self, geometry: ComputedGeometry) -> Path:
        """Serialize ``geometry`` to the destination file.

        Returns:
            The path written

        Raises:
            GeometrySaveError: If the file cannot be written
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(geometry.to_dict(), indent=2), encoding="utf-8")
        except OSError as e:
            raise GeometrySaveError(str(self._path), str(e)) from e
        return self._path
