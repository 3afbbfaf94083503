"""Minimal logging utilities for markfmt.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from markfmt.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Parsing markup")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "markfmt." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'markfmt.mymodule'
    """
    if not (name == "markfmt" or name.startswith("markfmt.")):
        name = f"markfmt.{name}"
    return logging.getLogger(name)
