"""Exceptions raised by the aesthetic engine."""

from __future__ import annotations

from typing import Any


class AestheticEngineError(Exception):
    """Base class for all engine errors."""


class InvalidThemePropertiesError(AestheticEngineError, ValueError):
    """Raised when theme properties fail validation at construction time."""

    def __init__(self, message: str, *, field: str, value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidAestheticError(AestheticEngineError, ValueError):
    """Raised when an aesthetic attribute violates its constraints."""

    def __init__(self, message: str, *, field: str, value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidScoreError(AestheticEngineError, ValueError):
    """Raised when a match score falls outside the 0-100 range."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Aesthetic score must be an integer between 0 and 100, got {value!r}")
        self.value = value


class InvalidAnswersError(AestheticEngineError, ValueError):
    """Raised when a quiz answer set fails structural validation."""

    def __init__(self, message: str = "Invalid quiz answers provided") -> None:
        super().__init__(message)


class EmptyResultSetError(AestheticEngineError, RuntimeError):
    """Raised when no quiz-ranked aesthetic could be resolved in the catalog."""

    def __init__(self, message: str = "Unable to calculate quiz results") -> None:
        super().__init__(message)


class AestheticNotFoundError(AestheticEngineError, LookupError):
    """Raised when the catalog holds no aesthetic for the identifier."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Aesthetic not found: {identifier}")
        self.identifier = identifier
