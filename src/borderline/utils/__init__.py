"""Utility functions for borderline.

This module provides logging setup and the recompute statistics helpers.
"""

from borderline.utils.logging import (
    RecomputeLogger,
    RecomputeStats,
    configure_logging,
)

__all__ = [
    "RecomputeLogger",
    "RecomputeStats",
    "configure_logging",
]
