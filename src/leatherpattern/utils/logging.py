"""Logging utilities for Leatherpattern."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class EngineStats:
    """Counters collected while computing pattern geometry."""

    outlines_built: int = 0
    merges: int = 0
    missing_references: int = 0
    collapsed_paths: int = 0
    stitches_placed: int = 0
    cache_hits: int = 0
    cache_misses: int = 0

    @property
    def cache_hit_rate(self) -> float:
        """Share of cache lookups served without recomputation."""
        lookups = self.cache_hits + self.cache_misses
        if lookups == 0:
            return 0.0
        return self.cache_hits / lookups


class _StderrHandler(logging.StreamHandler):
    """Stream handler writing to whatever ``sys.stderr`` is at emit time."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr


def _package_logger() -> logging.Logger:
    """The ``leatherpattern`` stdlib logger, stripped of earlier handlers."""
    package_logger = logging.getLogger("leatherpattern")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    return package_logger


def configure_logging(
    log_file: Path,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to a file, plus stderr unless quiet.

    Handlers are attached to the ``leatherpattern`` logger and replace any
    installed by an earlier call.

    Args:
        log_file: Path of the log file (created or appended to)
        console_level: Logging level for stderr output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    package_logger = _package_logger()
    package_logger.setLevel(logging.DEBUG)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(file_handler)

    if not quiet:
        console_handler = _StderrHandler(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        package_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger("leatherpattern")
    logger.debug("File logging enabled", log_file=str(log_file), level=file_level)
    return logger


class EngineLogger:
    """Logger for engine events that also keeps EngineStats."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("leatherpattern.engine")
        self._stats = EngineStats()

    def log_outline_built(self, points: int, asymmetric: bool) -> None:
        """Log a recomputed base outline."""
        self._logger.debug("Outline built", points=points, asymmetric=asymmetric)
        self._stats.outlines_built += 1

    def log_merge(self, extensions: int, points: int) -> None:
        """Log a recomputed merged outline."""
        self._logger.debug("Extensions merged", extensions=extensions, points=points)
        self._stats.merges += 1

    def log_missing_reference(self, kind: str, index: int, available: int) -> None:
        """Log a stitch line or shape pointing at a range that no longer exists."""
        self._logger.warning(
            "Missing reference",
            kind=kind,
            index=index,
            available=available,
        )
        self._stats.missing_references += 1

    def log_collapsed(self, what: str, margin: float) -> None:
        """Log an offset path that collapsed or became too short to use."""
        self._logger.debug("Offset path unusable", path=what, margin=margin)
        self._stats.collapsed_paths += 1

    def log_stitches(self, label: str, count: int) -> None:
        """Log a stitch line's hole count."""
        self._logger.debug("Stitches placed", line=label, count=count)
        self._stats.stitches_placed += count

    def record_cache(self, hits: int, misses: int) -> None:
        """Copy the cache counters into the stats."""
        self._stats.cache_hits = hits
        self._stats.cache_misses = misses

    @property
    def stats(self) -> EngineStats:
        """Get current engine statistics."""
        return self._stats


def configure_console_logging(level: str = "WARNING") -> None:
    """Configure structlog for stderr output only, filtered at ``level``."""
    package_logger = _package_logger()
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    console_handler = _StderrHandler()
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
