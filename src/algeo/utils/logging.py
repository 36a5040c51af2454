"""Logging utilities for algeo."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed on the root logger by the last configure_logging call
_installed_handlers: list[logging.Handler] = []


@dataclass
class ProcessingStats:
    """Statistics from a batch intersection run."""

    processed_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    intersections_found: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    pair_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None
    was_cancelled: bool = False
    cancelled_count: int = 0

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_pair_time_ms(self) -> float | None:
        if not self.pair_timings_ms:
            return None
        return sum(self.pair_timings_ms) / len(self.pair_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and optionally a file.

    Handlers from a previous call are removed and closed, so repeated calls
    replace the configuration instead of duplicating output.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

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

    logger = structlog.get_logger("algeo")
    logger.info("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


class ProcessingLogger:
    """Logger for tracking batch progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_pair_start(self, pair_name: str) -> None:
        """Log start of curve pair processing."""
        self._logger.debug("Processing pair", pair=pair_name)

    def log_pair_complete(
        self,
        pair_name: str,
        intersections: int,
        duration_ms: float,
    ) -> None:
        """Log successful curve pair processing."""
        self._logger.info(
            "Pair processed",
            pair=pair_name,
            intersections=intersections,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.intersections_found += intersections

    def log_pair_skipped(self, pair_name: str, reason: str) -> None:
        """Log skipped curve pair."""
        self._logger.debug("Pair skipped", pair=pair_name, reason=reason)
        self._stats.skipped_count += 1

    def log_pair_error(
        self,
        pair_name: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log curve pair processing error."""
        self._logger.error(
            "Pair processing failed",
            pair=pair_name,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((pair_name, str(error)))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
