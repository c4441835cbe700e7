"""Text Validators

Validators for textual values. Apart from NotEmptyValidator and
MinLengthValidator, they accept None and the empty string: whether a field
is required is expressed by adding a NotEmptyValidator in front.
"""
from __future__ import annotations

import re
from collections.abc import Sized
from enum import Enum
from typing import Any

from formvalidation.conditions import ensure_at_least, ensure_not_null

from .base import AbstractValidator


class Case(Enum):
    """Letter case accepted by LetterValidator and LetterOrNumberValidator."""
    CASE_INSENSITIVE = "case_insensitive"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"


class NotEmptyValidator(AbstractValidator[Any]):
    """Fails for None, the empty string and empty collections."""

    def validate(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, Sized):
            return len(value) > 0
        return bool(str(value))


class MinLengthValidator(AbstractValidator[Any]):
    """Fails if the text is shorter than a minimum length."""

    def __init__(self, error_message: str, min_length: int):
        super().__init__(error_message)
        self.set_min_length(min_length)

    def get_min_length(self) -> int:
        return self._min_length

    def set_min_length(self, min_length: int) -> None:
        ensure_at_least(min_length, 1, "The minimum length must be at least 1", argument="min_length")
        self._min_length = min_length

    def validate(self, value: Any) -> bool:
        return len("" if value is None else str(value)) >= self._min_length


class MaxLengthValidator(AbstractValidator[Any]):
    """Fails if the text is longer than a maximum length."""

    def __init__(self, error_message: str, max_length: int):
        super().__init__(error_message)
        self.set_max_length(max_length)

    def get_max_length(self) -> int:
        return self._max_length

    def set_max_length(self, max_length: int) -> None:
        ensure_at_least(max_length, 1, "The maximum length must be at least 1", argument="max_length")
        self._max_length = max_length

    def validate(self, value: Any) -> bool:
        return value is None or len(str(value)) <= self._max_length


class RegexValidator(AbstractValidator[Any]):
    """Succeeds if the whole text matches a regular expression."""

    def __init__(self, error_message: str, pattern: str | re.Pattern[str], flags: int = 0):
        super().__init__(error_message)
        self.set_pattern(pattern, flags)

    def get_pattern(self) -> re.Pattern[str]:
        return self._pattern

    def set_pattern(self, pattern: str | re.Pattern[str], flags: int = 0) -> None:
        ensure_not_null(pattern, "The regular expression may not be null", argument="pattern")
        self._pattern = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern, flags)

    def validate(self, value: Any) -> bool:
        if value is None or value == "":
            return True
        return self._pattern.fullmatch(str(value)) is not None


class NumberValidator(RegexValidator):
    """Succeeds if the text consists of digits only."""

    def __init__(self, error_message: str):
        super().__init__(error_message, r"\d+")


def _is_letter(char: str, case: Case) -> bool:
    if not char.isalpha():
        return False
    match case:
        case Case.UPPERCASE:
            return char.isupper()
        case Case.LOWERCASE:
            return char.islower()
        case _:
            return True


class LetterValidator(AbstractValidator[Any]):
    """Succeeds if the text consists of letters of the given case only."""

    def __init__(self, error_message: str, case: Case = Case.CASE_INSENSITIVE, allow_spaces: bool = False):
        super().__init__(error_message)
        ensure_not_null(case, "The case may not be null", argument="case")
        self.case = case
        self.allow_spaces = allow_spaces

    def _accepts(self, char: str) -> bool:
        return _is_letter(char, self.case) or (self.allow_spaces and char == " ")

    def validate(self, value: Any) -> bool:
        return value is None or all(self._accepts(c) for c in str(value))


class LetterOrNumberValidator(LetterValidator):
    """Succeeds if the text consists of letters and digits only."""

    def _accepts(self, char: str) -> bool:
        return char.isdigit() or super()._accepts(char)


class NoWhitespaceValidator(AbstractValidator[Any]):
    """Fails if the text contains any whitespace character."""

    def validate(self, value: Any) -> bool:
        return value is None or not any(c.isspace() for c in str(value))


class BeginsWithUppercaseLetterValidator(AbstractValidator[Any]):
    def validate(self, value: Any) -> bool:
        if value is None or value == "":
            return True
        return str(value)[0].isupper()


EMAIL_ADDRESS_PATTERN = r"[A-Za-z0-9._%+\-]+@[A-Za-z0-9\-]+(?:\.[A-Za-z0-9\-]+)*\.[A-Za-z]{2,}"
PHONE_NUMBER_PATTERN = r"\+?(?:\(\d+\)|\d)(?:[\d\s\-/]|\(\d+\))*\d"


class EmailAddressValidator(RegexValidator):
    """Succeeds if the text is a syntactically valid email address."""

    def __init__(self, error_message: str):
        super().__init__(error_message, EMAIL_ADDRESS_PATTERN)


class PhoneNumberValidator(RegexValidator):
    """Succeeds for phone numbers made of digits, spaces, dashes, slashes and an optional leading +."""

    def __init__(self, error_message: str):
        super().__init__(error_message, PHONE_NUMBER_PATTERN)
