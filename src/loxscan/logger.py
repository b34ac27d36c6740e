"""Logging helpers for loxscan.

Example:
    >>> from loxscan.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("scanning")
"""
from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a standard library logger under the "loxscan." namespace.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("driver").name
        'loxscan.driver'
    """
    if not (name == "loxscan" or name.startswith("loxscan.")):
        name = f"loxscan.{name}"
    return logging.getLogger(name)
