"""Logging utilities for SurfaceLoops."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class SessionStats:
    """Statistics from a drawing session."""

    loops_started: int = 0
    points_added: int = 0
    loops_committed: int = 0
    loops_abandoned: int = 0
    rejected_count: int = 0
    warnings: list[tuple[str | None, str]] = field(default_factory=list)


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
        quiet: If True, suppress console output

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

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
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

    logger = structlog.get_logger("surfaceloops")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class SessionLogger:
    """Logger for tracking drawing session events and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = SessionStats()

    def log_loop_started(self, start: str) -> None:
        """Log a new loop."""
        self._logger.debug("Loop started", start=start)
        self._stats.loops_started += 1

    def log_point_added(self, position: str, segment_count: int) -> None:
        """Log an accepted position."""
        self._logger.debug("Point added", position=position, segments=segment_count)
        self._stats.points_added += 1

    def log_rejection(self, position: str | None, error: Exception) -> None:
        """Log a rejected position as a user-facing warning."""
        self._logger.warning(
            "Position rejected",
            position=position,
            reason=str(error),
            error_type=type(error).__name__,
        )
        self._stats.rejected_count += 1
        self._stats.warnings.append((position, str(error)))

    def log_loop_committed(self, segment_count: int, total_loops: int) -> None:
        """Log a committed loop."""
        self._logger.info("Loop committed", segments=segment_count, loops=total_loops)
        self._stats.loops_committed += 1

    def log_loop_abandoned(self, segment_count: int) -> None:
        """Log an abandoned loop."""
        self._logger.info("Loop abandoned", segments=segment_count)
        self._stats.loops_abandoned += 1

    def log_polygon_rebuilt(self, genus: int, side_count: int) -> None:
        """Log a polygon (re)construction."""
        self._logger.info("Polygon built", genus=genus, sides=side_count)

    @property
    def stats(self) -> SessionStats:
        """Get current session statistics."""
        return self._stats
