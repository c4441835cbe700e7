"""Error Builders

Ergonomic constructors for the errors raised and returned by the library.
"""
from __future__ import annotations

from typing import Any

from .types import AppError, ErrorCode, ErrorContext, Err, InvalidArgument


def invalid_argument(
    message: str,
    *,
    argument: str | None = None,
    code: ErrorCode = ErrorCode.E2005_CONSTRAINT_VIOLATION,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> InvalidArgument:
    """Create (not raise) an InvalidArgument for a violated precondition."""
    meta = {"argument": argument, **metadata}
    return InvalidArgument(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def resource_not_found(resource_id: int, cause: Exception | None = None, origin: str = "") -> InvalidArgument:
    return invalid_argument(
        f"Invalid resource ID {resource_id}",
        argument="resource_id",
        code=ErrorCode.E2030_RESOURCE_NOT_FOUND,
        origin=origin,
        cause=cause,
        resource_id=resource_id,
    )


def validation_failed(
    message: str,
    *,
    validator: Any = None,
    value: Any = None,
    origin: str = "",
) -> Err[AppError]:
    """Create the Err returned when a value does not pass its validators."""
    meta = {
        "validator": type(validator).__name__ if validator is not None else None,
        "value": value,
    }
    return Err(AppError(
        code=ErrorCode.E2000_VALIDATION_GENERIC,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))
