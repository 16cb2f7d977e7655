"""Translate domain errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from ..domain.errors import (
    DataLoadingError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from ..domain.ports import UseCaseError


def map_domain_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map model exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised while a command or storage call ran.
        default_code: Code used when ``exc`` is not a known domain error.
        default_message: Message used for unknown errors without text.

    Returns:
        UseCaseError carrying a stable code and user-facing message.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, DuplicateEntityError):
        return UseCaseError("DUPLICATE_ENTITY", f"This {exc.kind} already exists in the cheese book")
    if isinstance(exc, EntityNotFoundError):
        return UseCaseError("ENTITY_NOT_FOUND", f"This {exc.kind} does not exist in the cheese book")
    if isinstance(exc, InvalidArgumentError):
        return UseCaseError("INVALID_ARGUMENT", str(exc))
    if isinstance(exc, DataLoadingError):
        meta = {"path": exc.path} if exc.path else None
        return UseCaseError("LOAD_FAILED", str(exc), meta=meta)

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


__all__ = ["map_domain_error"]
