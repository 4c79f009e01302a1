"""Console logger for command-line output."""

import logging
import sys
from typing import Any, Optional, TextIO

from gallery.logger.interface import Logger
from gallery.logger.default_logger import format_context


class ConsoleLogger(Logger):
    """Prints messages without timestamps.

    Info and debug go to stdout so CLI listings can be piped; warnings and
    errors go to stderr with a level prefix.
    """

    def __init__(
        self,
        level: int = logging.INFO,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.level = level
        self._stdout = stdout
        self._stderr = stderr

    def set_level(self, level: int) -> None:
        self.level = level

    def _emit(self, level: int, message: str, kwargs: dict) -> None:
        if level < self.level:
            return
        text = message + format_context(kwargs)
        # Streams resolved per call so redirected sys.stdout/sys.stderr are honoured
        if level >= logging.WARNING:
            print(f"{logging.getLevelName(level)}: {text}", file=self._stderr or sys.stderr)
        else:
            print(text, file=self._stdout or sys.stdout)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._emit(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._emit(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._emit(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._emit(logging.CRITICAL, message, kwargs)
