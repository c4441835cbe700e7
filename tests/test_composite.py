"""Tests for conjunctive and disjunctive validator composition."""

import itertools

import pytest

from formvalidation.errors import ErrorCode, InvalidArgument
from formvalidation.validators import ConjunctiveValidator, DisjunctiveValidator


@pytest.fixture
def constant(recording_validator):
    """Factory for validators that always return the given result."""
    return lambda result: recording_validator("child failed", result=result)


class TestConstruction:
    @pytest.mark.parametrize("cls", [ConjunctiveValidator, DisjunctiveValidator])
    def test_without_validators(self, cls):
        with pytest.raises(InvalidArgument):
            cls("message")

    @pytest.mark.parametrize("cls", [ConjunctiveValidator, DisjunctiveValidator])
    def test_with_null(self, cls):
        with pytest.raises(InvalidArgument):
            cls("message", None)

    @pytest.mark.parametrize("cls", [ConjunctiveValidator, DisjunctiveValidator])
    def test_with_empty_list(self, cls):
        with pytest.raises(InvalidArgument):
            cls("message", [])

    def test_with_null_child(self, not_empty):
        with pytest.raises(InvalidArgument):
            ConjunctiveValidator("message", not_empty, None)

    def test_with_empty_message(self, not_empty):
        with pytest.raises(InvalidArgument):
            ConjunctiveValidator("", not_empty)

    def test_accepts_varargs_and_sequence(self, not_empty, numeric):
        assert ConjunctiveValidator("m", not_empty, numeric).get_validators() == (not_empty, numeric)
        assert ConjunctiveValidator("m", [not_empty, numeric]).get_validators() == (not_empty, numeric)

    @pytest.mark.parametrize("cls", [ConjunctiveValidator, DisjunctiveValidator])
    def test_generator_is_unpacked(self, cls, not_empty):
        validator = cls("m", (child for child in [not_empty]))

        assert validator.get_validators() == (not_empty,)
        assert validator.validate("x")
        assert not validator.validate("")

    @pytest.mark.parametrize("child", ["abc", 42, object()])
    def test_with_non_validator_child(self, not_empty, child):
        with pytest.raises(InvalidArgument) as exc_info:
            ConjunctiveValidator("message", not_empty, child)

        assert exc_info.value.code == ErrorCode.E2004_INVALID_TYPE

    def test_single_non_validator_child(self):
        with pytest.raises(InvalidArgument):
            DisjunctiveValidator("message", "abc")

    def test_composite_child_is_not_unpacked(self, not_empty, numeric):
        inner = ConjunctiveValidator("inner", not_empty, numeric)
        assert DisjunctiveValidator("outer", inner).get_validators() == (inner,)

    def test_create_mirrors_constructor(self, not_empty, numeric):
        validator = ConjunctiveValidator.create("m", not_empty, numeric)

        assert isinstance(validator, ConjunctiveValidator)
        assert validator.error_message == "m"
        assert validator.get_validators() == (not_empty, numeric)
        assert isinstance(DisjunctiveValidator.create("m", not_empty), DisjunctiveValidator)


class TestSetValidators:
    def test_round_trip_preserves_order(self, not_empty, numeric, constant):
        validator = ConjunctiveValidator("m", not_empty)
        children = [numeric, constant(True), not_empty]

        validator.set_validators(*children)

        assert validator.get_validators() == tuple(children)
        assert list(validator) == children
        assert len(validator) == 3

    @pytest.mark.parametrize("invalid", [(), (None,), ([],)])
    def test_invalid_replacement_keeps_children(self, not_empty, invalid):
        validator = DisjunctiveValidator("m", not_empty)

        with pytest.raises(InvalidArgument):
            validator.set_validators(*invalid)

        assert validator.get_validators() == (not_empty,)

    def test_replacement_from_generator(self, not_empty, numeric):
        validator = ConjunctiveValidator("m", not_empty)

        validator.set_validators(child for child in (numeric, not_empty))

        assert validator.get_validators() == (numeric, not_empty)

    def test_non_validator_replacement_keeps_children(self, not_empty):
        validator = ConjunctiveValidator("m", not_empty)

        with pytest.raises(InvalidArgument):
            validator.set_validators(not_empty, object())

        assert validator.get_validators() == (not_empty,)

    def test_children_may_be_shared(self, not_empty, numeric):
        first = ConjunctiveValidator("first", not_empty, numeric)
        second = DisjunctiveValidator("second", numeric, not_empty)

        assert first.validate("42")
        assert second.validate("")
        assert not first.validate("")


class TestConjunctiveValidator:
    @pytest.mark.parametrize("results", list(itertools.product([True, False], repeat=3)))
    def test_succeeds_iff_all_children_succeed(self, constant, results):
        validator = ConjunctiveValidator("m", *[constant(r) for r in results])
        assert validator.validate("value") is all(results)

    def test_short_circuits_on_first_failure(self, constant, recording_validator):
        recorder = recording_validator("recorder")
        validator = ConjunctiveValidator("m", constant(False), recorder)

        assert validator.validate("value") is False
        assert recorder.calls == []

    def test_children_evaluated_in_order(self, recording_validator):
        calls = []

        class Ordered(recording_validator):
            def validate(self, value):
                calls.append(self.error_message)
                return True

        ConjunctiveValidator("m", Ordered("a"), Ordered("b"), Ordered("c")).validate("x")
        assert calls == ["a", "b", "c"]

    def test_reports_own_message(self, not_empty, numeric):
        validator = ConjunctiveValidator("Enter a number", not_empty, numeric)
        assert not validator.validate("abc")
        assert validator.error_message == "Enter a number"

    def test_and_operator_flattens(self, not_empty, numeric, constant):
        third = constant(True)
        validator = ConjunctiveValidator("m", not_empty, numeric) & third
        assert validator.get_validators() == (not_empty, numeric, third)
        assert validator.error_message == "m"


class TestDisjunctiveValidator:
    @pytest.mark.parametrize("results", list(itertools.product([True, False], repeat=3)))
    def test_succeeds_iff_any_child_succeeds(self, constant, results):
        validator = DisjunctiveValidator("m", *[constant(r) for r in results])
        assert validator.validate("value") is any(results)

    def test_short_circuits_on_first_success(self, constant, recording_validator):
        recorder = recording_validator("recorder", result=False)
        validator = DisjunctiveValidator("m", constant(True), recorder)

        assert validator.validate("value") is True
        assert recorder.calls == []

    def test_empty_or_number(self, numeric):
        from formvalidation.validators import MaxLengthValidator

        validator = DisjunctiveValidator("m", MaxLengthValidator("short", 2), numeric)
        assert validator.validate("ab")
        assert validator.validate("12345")
        assert not validator.validate("abcde")

    def test_or_operator_flattens(self, not_empty, numeric, constant):
        third = constant(False)
        validator = DisjunctiveValidator("m", not_empty, numeric) | third
        assert validator.get_validators() == (not_empty, numeric, third)
