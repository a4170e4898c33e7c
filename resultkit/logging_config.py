"""Logging configuration.

resultkit is a library, so it stays silent unless the application opts in.
``configure_logging`` attaches a stdout handler to the ``resultkit`` logger.
"""

import logging
import sys

from resultkit.config import get_settings, level_number

PACKAGE_LOGGER = "resultkit"


def configure_logging(level: str | None = None) -> None:
    """Configure logging for the resultkit package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to ``Settings.log_level``.

    Raises:
        ValueError: If ``level`` is not a standard logging level
    """
    if level is None:
        level = get_settings().log_level

    numeric_level = level_number(level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    # Add console handler only once
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
