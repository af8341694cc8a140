"""Minimal logging utilities for Luthor.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from luthor.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning source")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "luthor." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mylexer")
        >>> logger.name
        'luthor.mylexer'
    """
    if not (name == "luthor" or name.startswith("luthor.")):
        name = f"luthor.{name}"
    return logging.getLogger(name)
