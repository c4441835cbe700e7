"""Validation listeners.

Listeners are notified synchronously, once per validate() call, in the order
they have been registered.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from formvalidation.validators import Validator

T = TypeVar("T")


class ValidationListener(ABC, Generic[T]):
    """Observer of a Validateable's validation outcome."""

    @abstractmethod
    def on_validation_success(self, view: Any) -> None:
        """Called when all validators of the view succeeded."""

    @abstractmethod
    def on_validation_failure(self, view: Any, validator: Validator[T]) -> None:
        """Called with the first validator, in insertion order, that failed."""


class CallbackValidationListener(ValidationListener[T]):
    """Adapts plain callables to the ValidationListener interface.

    Usage:
        holder.add_validation_listener(CallbackValidationListener(
            on_failure=lambda view, validator: show_error(validator.error_message),
        ))
    """

    def __init__(
        self,
        on_success: Callable[[Any], None] | None = None,
        on_failure: Callable[[Any, Validator[T]], None] | None = None,
    ):
        self._on_success = on_success
        self._on_failure = on_failure

    def on_validation_success(self, view: Any) -> None:
        if self._on_success is not None:
            self._on_success(view)

    def on_validation_failure(self, view: Any, validator: Validator[T]) -> None:
        if self._on_failure is not None:
            self._on_failure(view, validator)
