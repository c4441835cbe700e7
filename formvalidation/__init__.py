"""Composable validation for UI-bound values.

Key Features:
- Validators pairing a predicate with an error message
- Conjunctive (AND) and disjunctive (OR) composition
- Validateable contract with ordered validators and listeners
- Validation on explicit request or whenever the value changes

Usage:
    from formvalidation import ValueHolder, Validators, CallbackValidationListener

    field = ValueHolder("")
    field.add_validator(Validators.not_empty("Required"))
    field.add_validator(Validators.number("Digits only"))
    field.add_validation_listener(CallbackValidationListener(
        on_failure=lambda view, validator: print(validator.error_message),
    ))
    field.validate()
"""
from formvalidation.config import Settings, get_settings, settings
from formvalidation.logging import configure_logging, get_logger
from formvalidation.errors import AppError, ErrorCode, Err, InvalidArgument, Ok, Result
from formvalidation.conditions import (
    ensure_at_least,
    ensure_at_maximum,
    ensure_instance_of,
    ensure_not_empty,
    ensure_not_null,
    ensure_true,
)
from formvalidation.resources import ResourceBundle, ResourceProvider, resolve_string
from formvalidation.validators import (
    AbstractValidator,
    BeginsWithUppercaseLetterValidator,
    Case,
    CompositeValidator,
    ConjunctiveValidator,
    DisjunctiveValidator,
    EmailAddressValidator,
    EqualValidator,
    LetterOrNumberValidator,
    LetterValidator,
    MaxLengthValidator,
    MinLengthValidator,
    NoWhitespaceValidator,
    NotEmptyValidator,
    NotNullValidator,
    NumberValidator,
    PhoneNumberValidator,
    RegexValidator,
    TypeAdapterValidator,
    Validator,
    Validators,
)
from formvalidation.listeners import CallbackValidationListener, ValidationListener
from formvalidation.validateable import Validateable, ValidationState, ValidationSupport
from formvalidation.holder import ValueHolder

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    "settings",
    "configure_logging",
    "get_logger",
    # Errors
    "AppError",
    "ErrorCode",
    "InvalidArgument",
    "Ok",
    "Err",
    "Result",
    # Preconditions
    "ensure_not_null",
    "ensure_not_empty",
    "ensure_at_least",
    "ensure_at_maximum",
    "ensure_instance_of",
    "ensure_true",
    # Resources
    "ResourceBundle",
    "ResourceProvider",
    "resolve_string",
    # Validators
    "Validator",
    "AbstractValidator",
    "CompositeValidator",
    "ConjunctiveValidator",
    "DisjunctiveValidator",
    "Case",
    "NotNullValidator",
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
    "EqualValidator",
    "TypeAdapterValidator",
    "Validators",
    # Listeners and Validateable
    "ValidationListener",
    "CallbackValidationListener",
    "Validateable",
    "ValidationState",
    "ValidationSupport",
    "ValueHolder",
]
