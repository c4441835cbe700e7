"""Non-textual validators."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from formvalidation.conditions import ensure_not_null

from .base import AbstractValidator

if TYPE_CHECKING:
    from formvalidation.holder import ValueHolder

T = TypeVar("T")


class NotNullValidator(AbstractValidator[Any]):
    """Fails only for None."""

    def validate(self, value: Any) -> bool:
        return value is not None


class EqualValidator(AbstractValidator[T]):
    """Succeeds if the value equals a reference.

    The reference is either a fixed value or a ValueHolder, whose current
    value is read on every validation (e.g. a "repeat password" field).
    """

    def __init__(self, error_message: str, reference: T | ValueHolder[T]):
        super().__init__(error_message)
        self._reference = reference

    def get_reference_value(self) -> T:
        from formvalidation.holder import ValueHolder

        if isinstance(self._reference, ValueHolder):
            return self._reference.value
        return self._reference

    def validate(self, value: T) -> bool:
        return value == self.get_reference_value()


class TypeAdapterValidator(AbstractValidator[Any]):
    """Succeeds if pydantic accepts the value as an instance of a type.

    Usage:
        TypeAdapterValidator("Enter a whole number", int)
        TypeAdapterValidator("Enter a date", datetime.date, strict=True)
    """

    def __init__(self, error_message: str, type_: Any, *, strict: bool | None = None):
        super().__init__(error_message)
        ensure_not_null(type_, "The type may not be null", argument="type_")
        self._adapter = TypeAdapter(type_)
        self._strict = strict

    def validate(self, value: Any) -> bool:
        try:
            self._adapter.validate_python(value, strict=self._strict)
        except ValidationError:
            return False
        return True
