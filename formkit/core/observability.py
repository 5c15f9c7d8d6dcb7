"""Logging setup shared by applications embedding the form helpers.

The helpers themselves only emit through module loggers
(``logging.getLogger(__name__)``); call :func:`configure_logging` once at
process start to get them on stderr.
"""

from __future__ import annotations

import logging

from formkit.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Configure the root logger.

    ``level`` defaults to ``settings.LOG_LEVEL``. Unknown level names fall
    back to ``WARNING``.
    """
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("formkit").setLevel(level)
