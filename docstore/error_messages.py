"""Helpful error messages for common docstore failure modes."""

import logging
import sys
from typing import NoReturn

logger = logging.getLogger(__name__)


def _emit_error(*lines: str) -> None:
    """Write error message lines to STDERR."""
    for line in lines:
        sys.stderr.write(line + "\n")


def invalid_configuration_error(source: str, original_error: Exception) -> NoReturn:
    """Log and display helpful message for an unusable store configuration and exit.

    Args:
        source: Where the configuration came from (file path or "--uri")
        original_error: The original ValueError
    """
    logger.error(f"Invalid store configuration from {source}: {original_error}")
    _emit_error(
        "",
        "=" * 70,
        "INVALID STORE CONFIGURATION",
        "=" * 70,
        f"\nSource: {source}",
        f"\nOriginal error: {original_error}",
        "\nA config file looks like:",
        '  {"type": "mongo", "liveness_timeout_ms": 1000,',
        '   "data": {"uri": "mongodb://localhost:27017/"}}',
        "=" * 70,
        "",
    )
    sys.exit(2)
