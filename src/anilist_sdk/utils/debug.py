"""Logging helpers for anilist_sdk.

Messages go to the ``anilist_sdk`` logger, which only carries a NullHandler.
Applications decide where (and whether) they are shown, e.g.
``logging.getLogger("anilist_sdk").setLevel(logging.DEBUG)`` plus a handler of
their own.
"""

import logging

logger = logging.getLogger("anilist_sdk")
logger.addHandler(logging.NullHandler())


def debug(msg: str) -> None:
    """Log a debug message on the package logger."""
    logger.debug(msg)
