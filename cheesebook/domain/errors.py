"""Domain-level error types raised by the in-memory model.

These errors are raised synchronously to the immediate caller (usually a
command) and never leave the store partially mutated. The command layer maps
them to ``UseCaseError`` codes via ``cheesebook.usecases.error_mapping``.
"""

from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base class for model failures that carry a user-facing message."""


class DuplicateEntityError(DomainError):
    """An add or replace would give two entities of one kind the same identity."""

    def __init__(self, kind: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Operation would result in duplicate {kind}s")
        self.kind = kind


class EntityNotFoundError(DomainError):
    """The targeted entity identity does not exist in the collection."""

    def __init__(self, kind: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"The {kind} does not exist")
        self.kind = kind


class InvalidArgumentError(DomainError, ValueError):
    """A required predicate, comparator or snapshot was missing."""


class DataLoadingError(DomainError):
    """A persisted file exists but could not be read into the model."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


def require_not_none(value, name: str):
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value


__all__ = [
    "DataLoadingError",
    "DomainError",
    "DuplicateEntityError",
    "EntityNotFoundError",
    "InvalidArgumentError",
    "require_not_none",
]
