"""Validator base classes.

A validator is a predicate over a value plus the error message that is shown
when the predicate does not hold. Validators keep no per-call state, so one
instance may be shared between several views and composites.

Validators compose via operators:
- & (AND): all must pass, see ConjunctiveValidator
- | (OR): at least one must pass, see DisjunctiveValidator
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from formvalidation.conditions import ensure_not_empty
from formvalidation.resources import StringProvider, resolve_string

if TYPE_CHECKING:
    from .composite import ConjunctiveValidator, DisjunctiveValidator

T = TypeVar("T")
V = TypeVar("V", bound="AbstractValidator")


class Validator(ABC, Generic[T]):
    """Interface of all validators."""

    @abstractmethod
    def validate(self, value: T) -> bool:
        """Return True if the value is valid. Must not modify the value."""

    @property
    @abstractmethod
    def error_message(self) -> str:
        """Message to show when validation fails."""

    def __call__(self, value: T) -> bool:
        return self.validate(value)

    def __and__(self, other: Validator[T]) -> ConjunctiveValidator[T]:
        from .composite import ConjunctiveValidator
        return ConjunctiveValidator(self.error_message, self, other)

    def __or__(self, other: Validator[T]) -> DisjunctiveValidator[T]:
        from .composite import DisjunctiveValidator
        return DisjunctiveValidator(self.error_message, self, other)


class AbstractValidator(Validator[T]):
    """Validator holding a non-empty error message.

    Subclasses implement validate(). The message is given either directly or
    via from_resource(), which looks it up through a string provider.
    """

    def __init__(self, error_message: str):
        self._error_message: str = ""
        self.set_error_message(error_message)

    @classmethod
    def from_resource(cls: type[V], provider: StringProvider, resource_id: int, *args: Any, **kwargs: Any) -> V:
        """Create a validator whose error message is a string resource.

        Remaining arguments are passed to the constructor after the message.
        """
        return cls(resolve_string(provider, resource_id), *args, **kwargs)

    def get_error_message(self) -> str:
        return self._error_message

    def set_error_message(self, error_message: str) -> None:
        ensure_not_empty(error_message, "The error message may not be null or empty", argument="error_message")
        self._error_message = str(error_message)

    def set_error_message_from_resource(self, provider: StringProvider, resource_id: int) -> None:
        self.set_error_message(resolve_string(provider, resource_id))

    @property
    def error_message(self) -> str:
        return self._error_message

    @error_message.setter
    def error_message(self, error_message: str) -> None:
        self.set_error_message(error_message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(error_message={self._error_message!r})"
