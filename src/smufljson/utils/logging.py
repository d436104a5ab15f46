"""Logging utilities for smufljson."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class AssemblyStats:
    """Statistics from an assembly or measurement run."""

    main_count: int = 0
    alternate_count: int = 0
    assembled_count: int = 0
    measured_count: int = 0
    dropped: list[tuple[str, str]] = field(default_factory=list)
    skipped_alternates: list[str] = field(default_factory=list)
    collisions: list[str] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def dropped_count(self) -> int:
        """Number of glyphs removed from the working set."""
        return len(self.dropped)

    @property
    def warning_count(self) -> int:
        """Number of warnings emitted during the run."""
        return len(self.dropped) + len(self.skipped_alternates) + len(self.collisions)

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
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

    logger = structlog.get_logger("smufljson")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class AssemblyLogger:
    """Logger for glyph-level warnings and run statistics.

    Every per-glyph degradation (dropped glyph, skipped white list entry,
    name collision) goes through this class so it is both logged and
    counted in :class:`AssemblyStats`.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("smufljson")
        self._stats = AssemblyStats()

    def log_stage(self, stage: str, **details: object) -> None:
        """Log the start of a pipeline stage."""
        self._logger.info("Stage started", stage=stage, **details)

    def log_document_loaded(self, kind: str, path: str) -> None:
        """Log a loaded source document."""
        self._logger.debug("Document loaded", kind=kind, path=path)

    def log_glyph_dropped(self, glyph_name: str, reason: str, **details: object) -> None:
        """Log a glyph removed from the output."""
        self._logger.warning("Glyph dropped", glyph=glyph_name, reason=reason, **details)
        self._stats.dropped.append((glyph_name, reason))

    def log_alternate_skipped(self, glyph_name: str) -> None:
        """Log a white-listed alternate glyph missing from the font metadata."""
        self._logger.warning(
            "Alternate glyph from the white list is not inside the font metadata",
            glyph=glyph_name,
        )
        self._stats.skipped_alternates.append(glyph_name)

    def log_name_collision(self, glyph_name: str) -> None:
        """Log an alternate glyph replacing a main glyph of the same name."""
        self._logger.warning(
            "Alternate glyph overrides main glyph",
            glyph=glyph_name,
        )
        self._stats.collisions.append(glyph_name)

    def log_glyph_measured(self, glyph_name: str, height: int, width: int) -> None:
        """Log measured glyph dimensions."""
        self._logger.debug("Glyph measured", glyph=glyph_name, h=height, w=width)
        self._stats.measured_count += 1

    @property
    def stats(self) -> AssemblyStats:
        """Get current run statistics."""
        return self._stats
