"""Change-tracking cache around the geometry pass.

The cache keeps the last contour snapshot it computed from and only reruns the
full pass when the point count or a coordinate differs, or when the caller
forces it (for example after changing the border width or mode). Each recompute
replaces the physics and render collaborators' data wholesale.

Key classes:
- ShapeCache: Snapshot-gated recompute entry point
- PhysicsSink, RenderSink: Collaborator protocols
"""

import time
from typing import Protocol

import structlog

from borderline.config import BorderlineSettings
from borderline.core.pipeline import compute_geometry
from borderline.domain import ComputedGeometry, Contour, RenderBatch, Shape
from borderline.exceptions import BorderlineError, ReentrantRecomputeError
from borderline.utils import RecomputeLogger, RecomputeStats


class PhysicsSink(Protocol):
    """Physics collaborator: receives the complete shape list."""

    def replace_shapes(self, shapes: list[Shape]) -> None: ...


class RenderSink(Protocol):
    """Render collaborator: receives the complete point-list set."""

    def replace_batches(self, batches: list[RenderBatch]) -> None: ...


class ShapeCache:
    """Owns the derived geometry of one body.

    Not thread-safe and not reentrant: a body's cache is driven from one logical
    thread, and a recompute triggered from inside another (for example by a
    collaborator callback) raises ReentrantRecomputeError.

    Example:
        cache = ShapeCache(settings, physics=body)
        geometry = cache.recompute(contour)
        settings.border.width = 12
        geometry = cache.recompute(contour, force=True)
    """

    def __init__(
        self,
        settings: BorderlineSettings | None = None,
        physics: PhysicsSink | None = None,
        render: RenderSink | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize an empty (invalid) cache.

        Args:
            settings: Border, shape and tolerance settings (defaults if None)
            physics: Optional physics collaborator
            render: Optional render collaborator
            logger: Logger for recompute events
        """
        self.settings = settings or BorderlineSettings()
        self.physics = physics
        self.render = render
        self.compute_count = 0
        self._snapshot: tuple[tuple[float, float], ...] | None = None
        self._result = ComputedGeometry()
        self._fresh = False
        self._working = False
        self._recompute_logger = RecomputeLogger(logger or structlog.get_logger("borderline"))

    @property
    def is_valid(self) -> bool:
        """False until the first successful recompute (and after invalidate())."""
        return self._snapshot is not None

    @property
    def result(self) -> ComputedGeometry:
        """Last computed geometry (empty before the first recompute)."""
        return self._result

    @property
    def stats(self) -> RecomputeStats:
        return self._recompute_logger.stats

    @staticmethod
    def snapshot_of(contour: Contour) -> tuple[tuple[float, float], ...]:
        return tuple(p.to_tuple() for p in contour.points)

    def has_changed(self, contour: Contour) -> bool:
        """True if the contour differs from the last computed snapshot."""
        if self._snapshot is None:
            return True
        if len(self._snapshot) != len(contour.points):
            return True
        return any(
            (p.x, p.y) != last
            for p, last in zip(contour.points, self._snapshot, strict=True)
        )

    def invalidate(self) -> None:
        """Drop the snapshot so the next recompute runs in full."""
        self._snapshot = None

    def recompute(self, contour: Contour, force: bool = False) -> ComputedGeometry:
        """Bring the derived geometry up to date with ``contour``.

        Args:
            contour: The body's contour (read, never modified)
            force: Recompute even if the contour is unchanged

        Returns:
            The cached result if nothing changed, otherwise the new result

        Raises:
            ReentrantRecomputeError: If called while a recompute is running
            InvalidCoordinateError: If the contour holds NaN or infinite values
        """
        if self._working:
            raise ReentrantRecomputeError()

        self._working = True
        try:
            if not force and not self.has_changed(contour):
                self._recompute_logger.log_cache_hit(len(contour.points))
                return self._result

            start_time = time.perf_counter()
            try:
                result = compute_geometry(
                    contour.points, self.settings, revision=self.compute_count + 1
                )
            except BorderlineError as e:
                self._recompute_logger.log_failure(e)
                raise

            self.compute_count += 1
            self._snapshot = self.snapshot_of(contour)
            self._result = result
            self._fresh = True

            if self.physics is not None:
                self.physics.replace_shapes(list(result.shapes))
            if self.render is not None:
                self.render.replace_batches(result.render_batches())

            self._recompute_logger.log_recompute(
                point_count=len(result.points),
                triangles=len(result.triangles),
                panels=len(result.panels),
                shapes=len(result.shapes),
                duration_ms=(time.perf_counter() - start_time) * 1000,
                forced=force,
            )
            return result
        finally:
            self._working = False

    def pull(self) -> ComputedGeometry | None:
        """Hand a fresh result to a downstream consumer once.

        Returns:
            The result produced by the latest recompute, or None if it was
            already pulled
        """
        if not self._fresh:
            return None
        self._fresh = False
        return self._result
