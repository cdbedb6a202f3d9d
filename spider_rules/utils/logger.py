"""Logging utilities."""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging to stdout.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)

    Raises:
        ValueError: If the level name is unknown.
    """
    numeric_level = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown logging level: {level!r}")

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )
