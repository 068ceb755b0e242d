"""Tests for function (callable) validators."""

from __future__ import annotations

import functools

import pytest

from shapeguard.validation import (
    ValidationError,
    a_function,
    a_number,
    a_string,
    an_object,
    arity_of,
)


def _two(a, b):
    return a + b


def _one_with_default(a, b=1):
    return a + b


def _variadic(*args):
    return args


def _keyword_required(a, *, key):
    return a, key


class _Greeter:
    def greet(self, name):
        return f"hi {name}"


class _Opaque:
    __signature__ = "not a signature"

    def __call__(self, *args):
        return args


def test_accepts_any_callable():
    assert a_function.validate(len) is len
    assert a_function.validate(_two) is _two
    assert a_function.is_valid(_Greeter)


def test_rejects_non_callables_and_validators():
    with pytest.raises(ValidationError, match="expected a function, not a string"):
        a_function.validate("len")
    assert not a_function.is_valid(None)
    assert not a_function.is_valid(a_string)


def test_that_accepts_checks_declared_arity():
    takes_one = a_function.that_accepts(a_string)

    assert takes_one.validate(len) is len
    assert takes_one.is_valid(lambda x: x)
    assert takes_one.is_valid(_one_with_default)
    assert takes_one.is_valid(_variadic)
    assert takes_one.is_valid(_Greeter().greet)
    assert takes_one.is_valid(functools.partial(_two, 1))

    with pytest.raises(ValidationError, match="expected a function accepting 1 parameter, not one accepting 2$"):
        takes_one.validate(_two)


def test_that_accepts_with_no_parameters():
    takes_none = a_function.that_accepts()

    assert takes_none.is_valid(lambda: None)
    assert takes_none.is_valid(_variadic)
    with pytest.raises(ValidationError, match="accepting 0 parameters, not one accepting 1$"):
        takes_none.validate(lambda x: x)


def test_required_keyword_arguments_do_not_match():
    with pytest.raises(ValidationError, match=r"not one accepting 1 \(plus required keyword arguments\)$"):
        a_function.that_accepts(a_string).validate(_keyword_required)


def test_unknown_signature_fails():
    with pytest.raises(ValidationError, match="not one with an unknown signature$"):
        a_function.that_accepts(a_string).validate(_Opaque())


def test_and_returns_records_contract_without_calling():
    calls = []

    def parse_int(text):
        calls.append(text)
        return "not a number"

    a_parser = a_function.that_accepts(a_string).and_returns(a_number)

    assert a_parser.validate(parse_int) is parse_int
    assert calls == []
    assert a_parser.return_validator is a_number
    assert a_parser.parameters == (a_string,)
    assert a_parser.description == "(string) -> number"


def test_builders_leave_base_untouched():
    a_function.that_accepts(a_string, a_number).and_returns(a_string)

    assert a_function.parameters is None
    assert a_function.return_validator is None


def test_function_property_in_object():
    a_handler = an_object({"name": a_string, "handle": a_function.that_accepts(a_string, a_string)})

    with pytest.raises(ValidationError, match="key 'handle': expected a function accepting 2 parameters, not one accepting 1$"):
        a_handler.validate({"name": "x", "handle": len})


def test_arity_of():
    assert arity_of(_one_with_default) == (1, 2, False, False)
    assert str(arity_of(_variadic)) == "0+"
    assert arity_of(_Opaque()) is None
