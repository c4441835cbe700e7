"""Tests for precondition guards and the error types they raise."""

import pytest

from formvalidation.conditions import (
    ensure_at_least,
    ensure_at_maximum,
    ensure_instance_of,
    ensure_not_empty,
    ensure_not_null,
    ensure_true,
)
from formvalidation.errors import AppErrorException, ErrorCode, InvalidArgument


class TestEnsureNotNull:
    def test_passes_for_object(self):
        ensure_not_null(0, "may not be null")
        ensure_not_null("", "may not be null")

    def test_fails_for_none(self):
        with pytest.raises(InvalidArgument, match="may not be null") as exc_info:
            ensure_not_null(None, "may not be null", argument="thing")

        assert exc_info.value.code == ErrorCode.E2001_REQUIRED_FIELD_MISSING
        assert exc_info.value.error.metadata == {"argument": "thing"}


class TestEnsureNotEmpty:
    def test_passes_for_text(self):
        ensure_not_empty("a", "may not be empty")

    @pytest.mark.parametrize("value", [None, "", [], ()])
    def test_fails_for_missing_or_empty(self, value):
        with pytest.raises(InvalidArgument):
            ensure_not_empty(value, "may not be empty")

    @pytest.mark.parametrize("value", [5, 1.5, object()])
    def test_fails_for_unsized_value(self, value):
        with pytest.raises(InvalidArgument, match="may not be empty") as exc_info:
            ensure_not_empty(value, "may not be empty", argument="thing")

        error = exc_info.value.error
        assert error.code == ErrorCode.E2004_INVALID_TYPE
        assert error.metadata == {"argument": "thing", "actual": type(value).__name__}


class TestEnsureInstanceOf:
    def test_passes_for_instance(self):
        ensure_instance_of("a", str, "must be text")
        ensure_instance_of(1, (str, int), "must be text or number")

    def test_fails_for_other_type(self):
        with pytest.raises(InvalidArgument, match="must be text") as exc_info:
            ensure_instance_of(1, str, "must be text")

        assert exc_info.value.code == ErrorCode.E2004_INVALID_TYPE
        assert exc_info.value.error.metadata["actual"] == "int"


class TestEnsureRange:
    def test_at_least(self):
        ensure_at_least(1, 1, "too small")
        with pytest.raises(InvalidArgument) as exc_info:
            ensure_at_least(0, 1, "too small")

        error = exc_info.value.error
        assert error.code == ErrorCode.E2003_OUT_OF_RANGE
        assert error.metadata["minimum"] == 1
        assert error.metadata["actual"] == 0

    def test_at_maximum(self):
        ensure_at_maximum(5, 5, "too large")
        with pytest.raises(InvalidArgument):
            ensure_at_maximum(6, 5, "too large")

    def test_ensure_true(self):
        ensure_true(True, "must hold")
        with pytest.raises(InvalidArgument, match="must hold"):
            ensure_true(False, "must hold")


class TestInvalidArgument:
    def test_is_a_value_error(self):
        """InvalidArgument can be caught with plain Python idioms."""
        with pytest.raises(ValueError):
            ensure_not_null(None, "may not be null")

    def test_wraps_app_error(self):
        with pytest.raises(AppErrorException) as exc_info:
            ensure_true(False, "broken")

        error = exc_info.value.error
        assert error.message == "broken"
        assert error.code.category == "validation"
        assert error.to_dict()["error"]["code"] == "E2005_CONSTRAINT_VIOLATION"
        assert str(error) == "[E2005_CONSTRAINT_VIOLATION] broken"
