"""Minimal logging utilities for strip_json_comments.

Provides a simple get_logger function that wraps the standard library logging.
The package never installs handlers; configure logging in the application.

Example:
    >>> from strip_json_comments.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Input ended inside a block comment (%d chars)", 120)
"""

from __future__ import annotations

import logging

_ROOT = "strip_json_comments"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger under the "strip_json_comments." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("scanner.core")
        >>> logger.name
        'strip_json_comments.scanner.core'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
