"""Utility functions for surfaceloops.

This module provides utility functions including:

- Logging setup and configuration
- Session event and statistics tracking
"""

from surfaceloops.utils.logging import (
    SessionLogger,
    SessionStats,
    configure_logging,
)

__all__ = [
    "SessionLogger",
    "SessionStats",
    "configure_logging",
]
