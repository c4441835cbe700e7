"""Precondition guards.

Each guard raises InvalidArgument immediately when its condition does not
hold and returns nothing otherwise.
"""
from __future__ import annotations

from collections.abc import Sized
from typing import Any

from formvalidation.errors import ErrorCode, invalid_argument


def ensure_not_null(obj: Any, message: str, *, argument: str | None = None) -> None:
    """Ensure that an object is not None."""
    if obj is None:
        raise invalid_argument(message, argument=argument, code=ErrorCode.E2001_REQUIRED_FIELD_MISSING)


def ensure_not_empty(obj: Any, message: str, *, argument: str | None = None) -> None:
    """Ensure that a text (or any sized object) is neither None nor empty."""
    if obj is None:
        raise invalid_argument(message, argument=argument, code=ErrorCode.E2001_REQUIRED_FIELD_MISSING)
    if not isinstance(obj, Sized):
        raise invalid_argument(
            message, argument=argument, code=ErrorCode.E2004_INVALID_TYPE, actual=type(obj).__name__,
        )
    if len(obj) == 0:
        raise invalid_argument(message, argument=argument)


def ensure_at_least(value: int | float, minimum: int | float, message: str, *, argument: str | None = None) -> None:
    """Ensure that a number is greater than or equal to a minimum."""
    if value < minimum:
        raise invalid_argument(
            message, argument=argument, code=ErrorCode.E2003_OUT_OF_RANGE, minimum=minimum, actual=value,
        )


def ensure_at_maximum(value: int | float, maximum: int | float, message: str, *, argument: str | None = None) -> None:
    """Ensure that a number is less than or equal to a maximum."""
    if value > maximum:
        raise invalid_argument(
            message, argument=argument, code=ErrorCode.E2003_OUT_OF_RANGE, maximum=maximum, actual=value,
        )


def ensure_true(condition: bool, message: str, *, argument: str | None = None) -> None:
    if not condition:
        raise invalid_argument(message, argument=argument)


def ensure_instance_of(obj: Any, types: type | tuple[type, ...], message: str, *, argument: str | None = None) -> None:
    """Ensure that an object is an instance of the given type(s)."""
    if not isinstance(obj, types):
        raise invalid_argument(
            message, argument=argument, code=ErrorCode.E2004_INVALID_TYPE, actual=type(obj).__name__,
        )
