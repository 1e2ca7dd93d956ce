"""Logging setup for the CLI and the API server."""

import logging
import sys
from typing import Optional

LOGGER_NAMES = ("perf_scanner", "perf_scanner_app")


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level prefix for terminal output."""

    COLORS = {
        logging.DEBUG: "\033[36m",    # Cyan
        logging.INFO: "\033[0m",      # Reset
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",    # Red
        logging.CRITICAL: "\033[35m", # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno, self.RESET)
        return f"{color}[{record.levelname}] {record.getMessage()}{self.RESET}"


class PlainFormatter(logging.Formatter):
    """Plain formatter without colors (for non-terminal output)."""

    def format(self, record: logging.LogRecord) -> str:
        return f"[{record.levelname}] {record.getMessage()}"


def setup_logging(
    verbose: bool = False,
    level: Optional[str] = None,
    use_colors: Optional[bool] = None,
) -> None:
    """
    Set up logging on the package loggers.

    Args:
        verbose: Log at DEBUG (skipped files, per-scanner counts)
        level: Explicit level name; ignored when verbose is set
        use_colors: Whether to use colored output (auto-detect if None)
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName(level or "WARNING")
        if not isinstance(log_level, int):
            log_level = logging.WARNING

    if use_colors is None:
        use_colors = sys.stderr.isatty()

    # stderr only, so --json output on stdout stays parseable
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(ColoredFormatter() if use_colors else PlainFormatter())

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(log_level)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.propagate = False
