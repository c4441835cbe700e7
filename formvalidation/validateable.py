"""Validateable Contract

A component holding a value of type T supports pluggable validation by
implementing Validateable. Rather than implementing the bookkeeping itself,
the component embeds a ValidationSupport and forwards to it:

    class EmailField(Validateable[str]):
        def __init__(self):
            self.text = ""
            self._validation = ValidationSupport(self, lambda: self.text)

        def add_validator(self, validator):
            self._validation.add_validator(validator)
        ...

Validators are evaluated in insertion order. Evaluation stops at the first
failing validator, whose error message becomes the component's current
error. Listeners are notified once per validate() call, after the outcome
is known. No internal locking: callers serialize access to one instance.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Generic, Iterable, TypeVar

from formvalidation.conditions import ensure_instance_of, ensure_not_null
from formvalidation.config import get_settings
from formvalidation.errors import AppError, Ok, Result, validation_failed
from formvalidation.listeners import ValidationListener
from formvalidation.logging import get_logger
from formvalidation.validators import Validator

T = TypeVar("T")

log = get_logger("formvalidation.validateable")


class ValidationState(Enum):
    UNVALIDATED = "unvalidated"
    VALID = "valid"
    INVALID = "invalid"


class Validateable(ABC, Generic[T]):
    """Interface a component, whose value should be able to be validated, implements."""

    @abstractmethod
    def add_validator(self, validator: Validator[T]) -> None:
        """Append a validator. Validators are applied in the order they have been added."""

    def add_all_validators(self, validators: Iterable[Validator[T]]) -> None:
        ensure_not_null(validators, "The validators may not be null", argument="validators")
        for validator in validators:
            self.add_validator(validator)

    @abstractmethod
    def remove_validator(self, validator: Validator[T]) -> None:
        """Remove the first occurrence of a validator. No-op if it is not present."""

    @abstractmethod
    def remove_all_validators(self) -> None: ...

    @abstractmethod
    def validate(self) -> bool:
        """Validate the current value. Returns True if it is valid."""

    @abstractmethod
    def validate_on_value_change(self, validate_on_value_change: bool) -> None:
        """Set whether the value is validated automatically whenever it changes."""

    @abstractmethod
    def is_validated_on_value_change(self) -> bool: ...

    @abstractmethod
    def add_validation_listener(self, listener: ValidationListener[T]) -> None: ...

    @abstractmethod
    def remove_validation_listener(self, listener: ValidationListener[T]) -> None: ...


class ValidationSupport(Validateable[T]):
    """Validator and listener bookkeeping for a host component.

    Args:
        view: The host component, passed to listeners
        value_getter: Returns the host's current value
        validate_on_value_change: Initial flag, defaults to settings.VALIDATE_ON_VALUE_CHANGE
    """

    def __init__(
        self,
        view: Any,
        value_getter: Callable[[], T],
        *,
        validate_on_value_change: bool | None = None,
    ):
        ensure_not_null(view, "The view may not be null", argument="view")
        ensure_not_null(value_getter, "The value getter may not be null", argument="value_getter")
        self._view = view
        self._value_getter = value_getter
        self._validators: list[Validator[T]] = []
        self._listeners: dict[ValidationListener[T], None] = {}
        if validate_on_value_change is None:
            validate_on_value_change = get_settings().VALIDATE_ON_VALUE_CHANGE
        self._validate_on_value_change = validate_on_value_change
        self._state = ValidationState.UNVALIDATED
        self._failed_validator: Validator[T] | None = None

    # -- validators --------------------------------------------------------

    def add_validator(self, validator: Validator[T]) -> None:
        ensure_not_null(validator, "The validator may not be null", argument="validator")
        ensure_instance_of(validator, Validator, "Only validators may be added", argument="validator")
        self._validators.append(validator)
        log.debug("validator_added", validator=type(validator).__name__, count=len(self._validators))

    def remove_validator(self, validator: Validator[T]) -> None:
        ensure_not_null(validator, "The validator may not be null", argument="validator")
        try:
            self._validators.remove(validator)
        except ValueError:
            return
        log.debug("validator_removed", validator=type(validator).__name__, count=len(self._validators))

    def remove_all_validators(self) -> None:
        self._validators.clear()

    def get_validators(self) -> tuple[Validator[T], ...]:
        return tuple(self._validators)

    # -- listeners ---------------------------------------------------------

    def add_validation_listener(self, listener: ValidationListener[T]) -> None:
        ensure_not_null(listener, "The listener may not be null", argument="listener")
        self._listeners[listener] = None
        log.debug("listener_added", listener=type(listener).__name__, count=len(self._listeners))

    def remove_validation_listener(self, listener: ValidationListener[T]) -> None:
        ensure_not_null(listener, "The listener may not be null", argument="listener")
        if listener not in self._listeners:
            return
        del self._listeners[listener]
        log.debug("listener_removed", listener=type(listener).__name__, count=len(self._listeners))

    def get_validation_listeners(self) -> tuple[ValidationListener[T], ...]:
        return tuple(self._listeners)

    # -- value change flag -------------------------------------------------

    def validate_on_value_change(self, validate_on_value_change: bool) -> None:
        self._validate_on_value_change = validate_on_value_change

    def is_validated_on_value_change(self) -> bool:
        return self._validate_on_value_change

    def notify_value_changed(self) -> bool | None:
        """To be called by the host whenever its value changed.

        Validates if validation on value change is enabled and returns the
        outcome, otherwise returns None.
        """
        if not self._validate_on_value_change:
            return None
        return self.validate()

    # -- validation --------------------------------------------------------

    @property
    def state(self) -> ValidationState:
        return self._state

    @property
    def failed_validator(self) -> Validator[T] | None:
        return self._failed_validator

    @property
    def error_message(self) -> str | None:
        """Message of the first validator that failed during the last validation."""
        return self._failed_validator.error_message if self._failed_validator is not None else None

    def is_valid(self) -> bool:
        return self._state is ValidationState.VALID

    def reset(self) -> None:
        """Forget the outcome of the last validation."""
        self._state = ValidationState.UNVALIDATED
        self._failed_validator = None

    def validate(self) -> bool:
        return self._run(self._value_getter())

    def validate_result(self) -> Result[T, AppError]:
        """Validate and return Ok(value) or Err with the failed validator's message."""
        value = self._value_getter()
        if self._run(value):
            return Ok(value)
        failed = self._failed_validator
        return validation_failed(failed.error_message, validator=failed, value=value, origin=type(self._view).__name__)

    def _run(self, value: T) -> bool:
        failed: Validator[T] | None = None
        for validator in self._validators:
            if not validator.validate(value):
                failed = validator
                break

        self._failed_validator = failed
        self._state = ValidationState.VALID if failed is None else ValidationState.INVALID
        log.debug(
            "validated",
            view=type(self._view).__name__,
            state=self._state.value,
            validators=len(self._validators),
            failed=type(failed).__name__ if failed is not None else None,
        )

        for listener in list(self._listeners):
            if failed is None:
                listener.on_validation_success(self._view)
            else:
                listener.on_validation_failure(self._view, failed)

        return failed is None
