"""Package logger for predsearch.

The search functions report each outcome at DEBUG level: the matched key
and how many elements were visited, an exhausted search, or the first
element that failed ``all_match``. Set ``LOG_LEVEL=DEBUG`` to see them.
"""

import logging
import sys

from predsearch.core.config import Settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "predsearch",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger writing search outcomes to stdout.

    Args:
        name: Logger name, "predsearch" or one of its children
        level: Log level name; falls back to ``Settings.LOG_LEVEL``
        format_string: Record format; falls back to ``Settings.LOG_FORMAT``

    Returns:
        The named logger, configured on first call only

    Raises:
        pydantic.ValidationError: If the level is not a known level name.
    """
    settings = Settings.load()
    if level is not None:
        settings = Settings(LOG_LEVEL=level, LOG_FORMAT=settings.LOG_FORMAT)
    format_string = format_string or settings.LOG_FORMAT

    logger = logging.getLogger(name)

    # Loggers that already have a handler keep their configuration
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(settings.log_level_number)
        logger.propagate = False

    return logger


logger = setup_logger()
