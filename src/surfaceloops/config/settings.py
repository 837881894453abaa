"""Configuration settings for SurfaceLoops."""

from pathlib import Path

from pydantic import BaseModel, Field


class PolygonConfig(BaseModel):
    """Configuration for the fundamental polygon."""

    genus: int = Field(
        default=2,
        ge=1,
        le=64,
        description="Genus of the orientable surface (4g sides, 2g logical edges)",
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


class SurfaceLoopsSettings(BaseModel):
    """Main application settings."""

    polygon: PolygonConfig = Field(default_factory=PolygonConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SurfaceLoopsSettings:
    """Get default application settings."""
    return SurfaceLoopsSettings()
