"""Simple logger implementation backed by the standard logging module."""

import logging
from typing import Any

from ..ports.logger import LoggerPort


class SimpleLogger(LoggerPort):
    """Logger writing to a console handler through Python's logging.

    Structured keyword context is stored on the record under ``context`` so
    it never collides with the built-in LogRecord attributes, and rendered
    after the message as ``key=value`` pairs.
    """

    FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s%(context_suffix)s"

    def __init__(self, name: str = "matrix_events", level: int = logging.INFO):
        """Initialize the logger.

        Args:
            name: Logger name (default: "matrix_events")
            level: Logging level (default: INFO)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(self.FORMAT, defaults={"context_suffix": ""}))
            self._logger.addHandler(handler)

    def log(
        self,
        level: int,
        message: str,
        exc_info: BaseException | bool | None = None,
        **context: Any,
    ) -> None:
        """Emit a record with the context attached as ``record.context``."""
        suffix = "".join(f" {key}={value}" for key, value in context.items())
        self._logger.log(
            level,
            message,
            exc_info=exc_info,
            extra={"context": context, "context_suffix": suffix},
        )
