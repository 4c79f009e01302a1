"""Logger interface shared by every gallery component."""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Minimal structured logger.

    Messages are plain strings; keyword arguments carry structured context
    (theme name, path, counts) and are rendered by the implementation.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass
