"""Shared fixtures for the formvalidation test suite."""

import pytest

from formvalidation.config import get_settings
from formvalidation.validators import AbstractValidator, NotEmptyValidator, NumberValidator


class RecordingValidator(AbstractValidator):
    """Validator returning a fixed result and recording every value it was called with."""

    def __init__(self, error_message, result=True):
        super().__init__(error_message)
        self.result = result
        self.calls = []

    def validate(self, value):
        self.calls.append(value)
        return self.result


@pytest.fixture
def recording_validator():
    """Factory for RecordingValidator instances."""
    return RecordingValidator


@pytest.fixture
def not_empty():
    return NotEmptyValidator("err1")


@pytest.fixture
def numeric():
    return NumberValidator("err2")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from the current environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
