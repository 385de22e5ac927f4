"""Logger access for commoncommons modules.

Every module logs through a child of the ``commoncommons`` logger so the whole
library can be tuned from one place.

Example:
    >>> from commoncommons.observability import configure_logging, get_logger
    >>> configure_logging("DEBUG")
    >>> log = get_logger("parsing")
    >>> log.name
    'commoncommons.parsing'
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "commoncommons"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the commoncommons hierarchy."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Apply a level to the commoncommons logger hierarchy.

    Args:
        level: Explicit level; falls back to ``COMMONCOMMONS_LOG_LEVEL``

    Returns:
        The root commoncommons logger
    """
    if level is None:
        from .config import get_settings
        level = get_settings().logging.level
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
