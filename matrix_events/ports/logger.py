"""Logger port for listener dispatch logging."""

import logging
from abc import ABC, abstractmethod
from typing import Any


class LoggerPort(ABC):
    """Abstract interface for logging operations.

    Implementations only provide ``log``; the level helpers delegate to it.
    Keyword arguments are structured context (event type, owner, direction)
    to attach to the record rather than format into the message.
    """

    @abstractmethod
    def log(
        self,
        level: int,
        message: str,
        exc_info: BaseException | bool | None = None,
        **context: Any,
    ) -> None:
        """Emit one record at a stdlib logging level."""
        ...

    def debug(self, message: str, **context: Any) -> None:
        self.log(logging.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self.log(logging.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self.log(logging.WARNING, message, **context)

    def error(self, message: str, **context: Any) -> None:
        self.log(logging.ERROR, message, **context)

    def exception(self, message: str, exc_info: BaseException | None = None, **context: Any) -> None:
        """Log at error level with a traceback, the current one if none is given."""
        self.log(logging.ERROR, message, exc_info=exc_info or True, **context)
