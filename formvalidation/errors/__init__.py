"""Error Handling

Usage:
    from formvalidation.errors import InvalidArgument, Ok, Err

    try:
        NotEmptyValidator("")
    except InvalidArgument as e:
        print(e.error.code.name, e.error.message)
"""
from .types import (
    AppError,
    AppErrorException,
    Err,
    ErrorCode,
    ErrorContext,
    InvalidArgument,
    Ok,
    Result,
)
from .builders import (
    invalid_argument,
    resource_not_found,
    validation_failed,
)

__all__ = [
    "AppError",
    "AppErrorException",
    "Err",
    "ErrorCode",
    "ErrorContext",
    "InvalidArgument",
    "Ok",
    "Result",
    "invalid_argument",
    "resource_not_found",
    "validation_failed",
]
