"""Centralized logging configuration for docstore."""

import logging
import sys
from pathlib import Path


def setup_logging(
    level: int = logging.WARNING,
    log_file: Path | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure logging for docstore.

    Args:
        level: Logging level (default WARNING)
        log_file: Optional path to an additional log file
        format_string: Optional custom format string
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=format_string, handlers=handlers, force=True)

    # Suppress noisy third-party loggers
    logging.getLogger("pymongo").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"docstore.{name}")
