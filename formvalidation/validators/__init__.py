"""Validators

Base classes, AND/OR combinators and the built-in validators.
"""
from .base import AbstractValidator, Validator
from .composite import CompositeValidator, ConjunctiveValidator, DisjunctiveValidator
from .factory import Validators
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

__all__ = [
    "Validator",
    "AbstractValidator",
    # Combinators
    "CompositeValidator",
    "ConjunctiveValidator",
    "DisjunctiveValidator",
    # Text validators
    "Case",
    "NotEmptyValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "RegexValidator",
    "NumberValidator",
    "LetterValidator",
    "LetterOrNumberValidator",
    "NoWhitespaceValidator",
    "BeginsWithUppercaseLetterValidator",
    "EmailAddressValidator",
    "PhoneNumberValidator",
    # Other validators
    "NotNullValidator",
    "EqualValidator",
    "TypeAdapterValidator",
    # Factory
    "Validators",
]
