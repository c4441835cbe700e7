"""Static factory for the built-in validators.

Usage:
    from formvalidation import Validators

    holder.add_validator(Validators.not_empty("Required"))
    holder.add_validator(Validators.number("Digits only"))
"""
from __future__ import annotations

import re
from typing import Any, TypeVar

from .base import Validator
from .composite import ConjunctiveValidator, DisjunctiveValidator
from .misc import EqualValidator, NotNullValidator, TypeAdapterValidator
from .text import (
    BeginsWithUppercaseLetterValidator,
    Case,
    EmailAddressValidator,
    LetterOrNumberValidator,
    LetterValidator,
    MaxLengthValidator,
    MinLengthValidator,
    NoWhitespaceValidator,
    NotEmptyValidator,
    NumberValidator,
    PhoneNumberValidator,
    RegexValidator,
)

T = TypeVar("T")


class Validators:
    """Creates validators. Every method takes the error message first."""

    @staticmethod
    def not_null(error_message: str) -> NotNullValidator:
        return NotNullValidator(error_message)

    @staticmethod
    def not_empty(error_message: str) -> NotEmptyValidator:
        return NotEmptyValidator(error_message)

    @staticmethod
    def min_length(error_message: str, min_length: int) -> MinLengthValidator:
        return MinLengthValidator(error_message, min_length)

    @staticmethod
    def max_length(error_message: str, max_length: int) -> MaxLengthValidator:
        return MaxLengthValidator(error_message, max_length)

    @staticmethod
    def regex(error_message: str, pattern: str | re.Pattern[str], flags: int = 0) -> RegexValidator:
        return RegexValidator(error_message, pattern, flags)

    @staticmethod
    def number(error_message: str) -> NumberValidator:
        return NumberValidator(error_message)

    @staticmethod
    def letters(
        error_message: str, case: Case = Case.CASE_INSENSITIVE, allow_spaces: bool = False
    ) -> LetterValidator:
        return LetterValidator(error_message, case, allow_spaces)

    @staticmethod
    def letter_or_number(
        error_message: str, case: Case = Case.CASE_INSENSITIVE, allow_spaces: bool = False
    ) -> LetterOrNumberValidator:
        return LetterOrNumberValidator(error_message, case, allow_spaces)

    @staticmethod
    def no_whitespace(error_message: str) -> NoWhitespaceValidator:
        return NoWhitespaceValidator(error_message)

    @staticmethod
    def begins_with_uppercase_letter(error_message: str) -> BeginsWithUppercaseLetterValidator:
        return BeginsWithUppercaseLetterValidator(error_message)

    @staticmethod
    def email(error_message: str) -> EmailAddressValidator:
        return EmailAddressValidator(error_message)

    @staticmethod
    def phone_number(error_message: str) -> PhoneNumberValidator:
        return PhoneNumberValidator(error_message)

    @staticmethod
    def equal(error_message: str, reference: Any) -> EqualValidator:
        return EqualValidator(error_message, reference)

    @staticmethod
    def type_adapter(error_message: str, type_: Any, *, strict: bool | None = None) -> TypeAdapterValidator:
        return TypeAdapterValidator(error_message, type_, strict=strict)

    @staticmethod
    def conjunctive(error_message: str, *validators: Validator[T]) -> ConjunctiveValidator[T]:
        return ConjunctiveValidator.create(error_message, *validators)

    @staticmethod
    def disjunctive(error_message: str, *validators: Validator[T]) -> DisjunctiveValidator[T]:
        return DisjunctiveValidator.create(error_message, *validators)
