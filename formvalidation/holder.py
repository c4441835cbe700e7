"""Headless host component.

ValueHolder owns a single value and implements Validateable by forwarding
to a ValidationSupport. It can back a form field in any UI toolkit or be
used on its own, e.g. for validating settings entered on the command line.
"""
from __future__ import annotations

from typing import TypeVar

from formvalidation.errors import AppError, Result
from formvalidation.listeners import ValidationListener
from formvalidation.validateable import Validateable, ValidationState, ValidationSupport
from formvalidation.validators import Validator

T = TypeVar("T")


class ValueHolder(Validateable[T]):
    """Holds a value and validates it on demand or whenever it changes.

    Usage:
        age = ValueHolder("", name="age", validate_on_value_change=True)
        age.add_validator(Validators.not_empty("Required"))
        age.add_validator(Validators.number("Digits only"))
        age.value = "4x"
        age.error  # "Digits only"
    """

    def __init__(
        self,
        value: T | None = None,
        *,
        name: str | None = None,
        validate_on_value_change: bool | None = None,
    ):
        self.name = name
        self._value = value
        self._validation: ValidationSupport[T] = ValidationSupport(
            self, lambda: self._value, validate_on_value_change=validate_on_value_change
        )

    @property
    def value(self) -> T | None:
        return self._value

    @value.setter
    def value(self, value: T | None) -> None:
        self.set_value(value)

    def set_value(self, value: T | None) -> None:
        """Set the value, validating it if it changed and validation on value change is enabled."""
        changed = value != self._value
        self._value = value
        if changed:
            self._validation.notify_value_changed()

    @property
    def error(self) -> str | None:
        """Error message of the last validation, None if it succeeded or did not run yet."""
        return self._validation.error_message

    @property
    def state(self) -> ValidationState:
        return self._validation.state

    @property
    def validation(self) -> ValidationSupport[T]:
        return self._validation

    def is_valid(self) -> bool:
        return self._validation.is_valid()

    def add_validator(self, validator: Validator[T]) -> None:
        self._validation.add_validator(validator)

    def remove_validator(self, validator: Validator[T]) -> None:
        self._validation.remove_validator(validator)

    def remove_all_validators(self) -> None:
        self._validation.remove_all_validators()

    def get_validators(self) -> tuple[Validator[T], ...]:
        return self._validation.get_validators()

    def validate(self) -> bool:
        return self._validation.validate()

    def validate_result(self) -> Result[T, AppError]:
        return self._validation.validate_result()

    def validate_on_value_change(self, validate_on_value_change: bool) -> None:
        self._validation.validate_on_value_change(validate_on_value_change)

    def is_validated_on_value_change(self) -> bool:
        return self._validation.is_validated_on_value_change()

    def add_validation_listener(self, listener: ValidationListener[T]) -> None:
        self._validation.add_validation_listener(listener)

    def remove_validation_listener(self, listener: ValidationListener[T]) -> None:
        self._validation.remove_validation_listener(listener)

    def __repr__(self) -> str:
        return f"ValueHolder(name={self.name!r}, value={self._value!r}, state={self.state.value})"
