"""Minimal logging utilities for Whisker.

Provides a simple get_logger function that wraps the standard library logging.
Whisker never configures handlers; applications decide where records go.

Example:
    >>> from whisker.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Compiling template")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "whisker." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'whisker.mymodule'
    """
    if not (name == "whisker" or name.startswith("whisker.")):
        name = f"whisker.{name}"
    return logging.getLogger(name)
