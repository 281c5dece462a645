"""Configuration management for borderline.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- BorderConfig: Border ribbon width, side and corner rounding
- ShapeConfig: Which product feeds the physics collaborator
- GeometryConfig: Numeric tolerances
- LoggingConfig: Logging settings
- BorderlineSettings: Main application settings
"""

from borderline.config.settings import (
    BorderConfig,
    BorderlineSettings,
    BorderMode,
    GeometryConfig,
    LoggingConfig,
    ShapeConfig,
    ShapeMode,
    get_default_settings,
)

__all__ = [
    "BorderConfig",
    "BorderMode",
    "BorderlineSettings",
    "GeometryConfig",
    "LoggingConfig",
    "ShapeConfig",
    "ShapeMode",
    "get_default_settings",
]
