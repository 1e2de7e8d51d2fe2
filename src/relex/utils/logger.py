"""Minimal logging utilities for relex.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure output.

Example:
    >>> from relex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Combined %d patterns", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "relex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'relex.mymodule'
    """
    if not (name == "relex" or name.startswith("relex.")):
        name = f"relex.{name}"
    return logging.getLogger(name)
