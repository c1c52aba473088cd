"""Domain-specific exceptions following DDD principles."""

from typing import Any


class MatrixEventsError(Exception):
    """Base exception for all matrix_events errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(MatrixEventsError):
    """Domain validation errors."""

    pass


class InvalidArgumentError(ValidationError):
    """Raised when a listener is built from unusable input."""

    def __init__(self, message: str, argument: str | None = None, value: Any = None):
        super().__init__(message)
        self.argument = argument
        if argument:
            self.details["argument"] = argument
            self.details["value_type"] = type(value).__name__
