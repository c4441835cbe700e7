"""Composite validators.

Combine an ordered, non-empty sequence of validators into one validator.
The composite reports its own error message on failure, never the message
of the child that failed.

- ConjunctiveValidator: all children must pass (short-circuit on first failure)
- DisjunctiveValidator: at least one child must pass (short-circuit on first success)
"""
from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable
from typing import Any, TypeVar

from formvalidation.conditions import ensure_at_least, ensure_instance_of, ensure_not_null
from formvalidation.resources import StringProvider, resolve_string

from .base import AbstractValidator, Validator

T = TypeVar("T")
C = TypeVar("C", bound="CompositeValidator")


def _flatten(validators: tuple[Any, ...]) -> tuple[Any, ...]:
    """Accept either varargs or a single iterable (list, tuple, generator, ...) of validators."""
    if len(validators) == 1 and not isinstance(validators[0], (Validator, str)) and isinstance(validators[0], Iterable):
        return tuple(validators[0])
    return validators


class CompositeValidator(AbstractValidator[T]):
    """Base class of validators consisting of other validators."""

    def __init__(self, error_message: str, *validators: Validator[T]):
        super().__init__(error_message)
        self._validators: tuple[Validator[T], ...] = ()
        self.set_validators(*validators)

    @classmethod
    def create(cls: type[C], error_message: str, *validators: Validator[T]) -> C:
        return cls(error_message, *validators)

    @classmethod
    def create_from_resource(cls: type[C], provider: StringProvider, resource_id: int, *validators: Validator[T]) -> C:
        return cls(resolve_string(provider, resource_id), *validators)

    def get_validators(self) -> tuple[Validator[T], ...]:
        return self._validators

    def set_validators(self, *validators: Validator[T] | Iterable[Validator[T]] | None) -> None:
        """Replace all child validators. The sequence may neither be None nor empty."""
        if len(validators) == 1 and validators[0] is None:
            ensure_not_null(None, "The validators may not be null", argument="validators")
        children = _flatten(validators)
        ensure_at_least(len(children), 1, "The validators may not be empty", argument="validators")
        for child in children:
            ensure_not_null(child, "The validators may not contain null", argument="validators")
            ensure_instance_of(child, Validator, "The validators may only contain validators", argument="validators")
        self._validators = tuple(children)

    @property
    def validators(self) -> tuple[Validator[T], ...]:
        return self._validators

    @abstractmethod
    def validate(self, value: T) -> bool: ...

    def __len__(self) -> int:
        return len(self._validators)

    def __iter__(self):
        return iter(self._validators)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(error_message={self.error_message!r}, validators={list(self._validators)!r})"


class ConjunctiveValidator(CompositeValidator[T]):
    """AND combinator: succeeds only if every child succeeds."""

    def validate(self, value: T) -> bool:
        for validator in self._validators:
            if not validator.validate(value):
                return False
        return True

    def __and__(self, other: Validator[T]) -> ConjunctiveValidator[T]:
        return ConjunctiveValidator(self.error_message, *self._validators, other)


class DisjunctiveValidator(CompositeValidator[T]):
    """OR combinator: succeeds if at least one child succeeds."""

    def validate(self, value: T) -> bool:
        for validator in self._validators:
            if validator.validate(value):
                return True
        return False

    def __or__(self, other: Validator[T]) -> DisjunctiveValidator[T]:
        return DisjunctiveValidator(self.error_message, *self._validators, other)
