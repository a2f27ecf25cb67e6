"""Custom exceptions for the screenplay formatter."""

from typing import Any


class ScreenplayException(Exception):
    """Base exception for the screenplay formatter."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(ScreenplayException):
    """Raised when caller input is invalid."""

    pass


class MeasurementUnavailableError(ScreenplayException):
    """Raised when an element has no usable rendered height."""

    pass


class LLMException(ScreenplayException):
    """Raised when the AI hint provider interaction fails."""

    pass


class ElementInvariantError(RuntimeError):
    """Raised when something other than a classified element reaches layout.

    Signals a programmer error; not a ``ScreenplayException``.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        self.index = index
        super().__init__(message)
