"""Logging utilities for Borderline."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class RecomputeStats:
    """Statistics from a shape cache's lifetime."""

    recompute_count: int = 0
    cache_hits: int = 0
    failure_count: int = 0
    empty_count: int = 0
    total_duration_ms: float = 0.0
    last_duration_ms: float | None = None

    @property
    def avg_duration_ms(self) -> float:
        """Average recompute duration."""
        if self.recompute_count:
            return self.total_duration_ms / self.recompute_count
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("borderline")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RecomputeLogger:
    """Logger for tracking recompute activity and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RecomputeStats()

    def log_cache_hit(self, point_count: int) -> None:
        """Log a recompute request answered from the snapshot."""
        self._logger.debug("Recompute skipped", points=point_count)
        self._stats.cache_hits += 1

    def log_recompute(
        self,
        point_count: int,
        triangles: int,
        panels: int,
        shapes: int,
        duration_ms: float,
        forced: bool,
    ) -> None:
        """Log a completed recompute."""
        self._logger.debug(
            "Geometry recomputed",
            points=point_count,
            triangles=triangles,
            panels=panels,
            shapes=shapes,
            forced=forced,
            duration_ms=round(duration_ms, 3),
        )
        self._stats.recompute_count += 1
        self._stats.total_duration_ms += duration_ms
        self._stats.last_duration_ms = duration_ms
        if triangles == 0 and panels == 0:
            self._stats.empty_count += 1

    def log_failure(self, error: Exception) -> None:
        """Log a recompute that raised."""
        self._logger.error(
            "Recompute failed",
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.failure_count += 1

    @property
    def stats(self) -> RecomputeStats:
        """Get current recompute statistics."""
        return self._stats
