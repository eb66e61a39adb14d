"""Logging setup for command line runs.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
are attached here, by the entry point.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def config_logger(level: str | int = "INFO", path: str | Path | None = None) -> logging.Logger:
    """Configure the ``layernet`` logger to write to stderr and optionally a file.

    Existing handlers are removed first so repeated calls do not duplicate
    output.
    """

    logger = logging.getLogger("layernet")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if path is not None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    return logger


__all__ = ["LOG_FORMAT", "config_logger"]
