"""Contour reader for loading JSON contour files.

This module provides the ContourReader class for loading contour files
into domain models.
"""

import json
from pathlib import Path
from typing import Any

from borderline.domain import Contour
from borderline.exceptions import ContourLoadError


class ContourReader:
    """Loads a contour from a JSON file.

    Accepted layouts are ``{"points": [[x, y], ...]}`` or a bare list of
    ``[x, y]`` pairs.

    Example:
        reader = ContourReader(Path("body.json"))
        contour = reader.read()
    """

    def __init__(self, path: Path) -> None:
        """Initialize the contour reader.

        Args:
            path: Path to the JSON contour file
        """
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> Contour:
        """Load and validate the contour file.

        Returns:
            Contour with the file's points in order

        Raises:
            ContourLoadError: If the file is missing, unreadable or malformed
        """
        if not self._path.exists():
            raise ContourLoadError(str(self._path), "file not found")

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise ContourLoadError(str(self._path), str(e)) from e
        except json.JSONDecodeError as e:
            raise ContourLoadError(str(self._path), f"invalid JSON: {e.msg}") from e

        return Contour.from_tuples(self._parse_points(data))

    def _parse_points(self, data: Any) -> list[tuple[float, float]]:
        raw = data.get("points") if isinstance(data, dict) else data
        if not isinstance(raw, list):
            raise ContourLoadError(str(self._path), "expected a list of [x, y] points")

        coords: list[tuple[float, float]] = []
        for i, item in enumerate(raw):
            if not (isinstance(item, list | tuple) and len(item) == 2):
                raise ContourLoadError(str(self._path), f"point {i} is not an [x, y] pair")
            x, y = item
            if isinstance(x, bool) or isinstance(y, bool) or not (
                isinstance(x, int | float) and isinstance(y, int | float)
            ):
                raise ContourLoadError(str(self._path), f"point {i} has non-numeric coordinates")
            coords.append((float(x), float(y)))
        return coords
