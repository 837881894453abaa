"""Configuration management for surfaceloops.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- PolygonConfig: Fundamental polygon settings
- LoggingConfig: Logging settings
- SurfaceLoopsSettings: Main application settings
"""

from surfaceloops.config.settings import (
    LoggingConfig,
    PolygonConfig,
    SurfaceLoopsSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "PolygonConfig",
    "SurfaceLoopsSettings",
    "get_default_settings",
]
