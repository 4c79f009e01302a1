"""Default logger backed by the standard library logging module."""

import logging
import os
import sys
from typing import Any, Optional

from gallery.logger.interface import Logger


def format_context(kwargs: dict) -> str:
    """Render keyword context as ``key=value`` pairs."""
    if not kwargs:
        return ""
    return " " + " ".join(f"{key}={value}" for key, value in kwargs.items())


class DefaultLogger(Logger):
    """Logger writing timestamped records through ``logging``."""

    def __init__(
        self,
        name: str = "gallery",
        level: Optional[int] = None,
    ):
        self._logger = logging.getLogger(name)
        if level is None:
            level_name = os.environ.get("GALLERY_LOG_LEVEL", "INFO").upper()
            level = getattr(logging, level_name, logging.INFO)
        self._logger.setLevel(level)

        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            self._logger.addHandler(handler)
            self._logger.propagate = False

    def set_level(self, level: int) -> None:
        self._logger.setLevel(level)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message + format_context(kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message + format_context(kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(message + format_context(kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message + format_context(kwargs))

    def critical(self, message: str, **kwargs: Any) -> None:
        self._logger.critical(message + format_context(kwargs))
