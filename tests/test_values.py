import math

import pytest

from megaladon.values import (
    INVALID,
    Callable,
    ValueType,
    is_truthy,
    stringify,
    type_of,
    values_equal,
)


class _Fn(Callable):
    def arity(self):
        return 0

    def call(self, interpreter, arguments):
        return None

    def __str__(self):
        return "<fn sample>"


def test_callable_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Callable()


@pytest.mark.parametrize(
    "value, kind",
    [
        (None, ValueType.VOID),
        (1.5, ValueType.NUMBER),
        (True, ValueType.BOOLEAN),
        ("s", ValueType.STRING),
        ([], ValueType.LIST),
        (INVALID, ValueType.INVALID),
    ],
)
def test_type_of(value, kind):
    assert type_of(value) is kind


def test_type_of_function():
    assert type_of(_Fn()) is ValueType.FUNCTION


def test_type_of_rejects_foreign_objects():
    with pytest.raises(TypeError):
        type_of({})


def test_stringify_void_booleans_invalid():
    assert stringify(None) == "void"
    assert stringify(True) == "true"
    assert stringify(False) == "false"
    assert stringify(INVALID) == "invalid"


def test_stringify_whole_numbers_have_no_fraction():
    assert stringify(3.0) == "3"
    assert stringify(-12.0) == "-12"


def test_stringify_fraction_round_trips_to_six_places():
    text = stringify(1 / 3)
    assert not text.endswith("0")
    assert abs(float(text) - 1 / 3) < 1e-6


def test_stringify_trims_trailing_zeros():
    assert stringify(2.5) == "2.5"


def test_stringify_string_and_function():
    assert stringify("hello") == "hello"
    assert stringify(_Fn()) == "<fn sample>"


def test_stringify_list_joins_elements():
    value = [1.0, "a", True, [2.0]]
    expected = "[" + ", ".join(["1", "a", "true", "[2]"]) + "]"
    assert stringify(value) == expected


def test_values_of_different_kinds_are_unequal():
    assert not values_equal(True, 1.0)
    assert not values_equal(None, False)
    assert not values_equal("1", 1.0)


def test_values_equal_same_kind():
    assert values_equal(None, None)
    assert values_equal(INVALID, INVALID)
    assert values_equal(2.0, 2.0)
    assert values_equal("x", "x")
    assert not values_equal("x", "y")


def test_values_equal_lists_compare_elementwise():
    assert values_equal([1.0, ["a"]], [1.0, ["a"]])
    assert not values_equal([1.0, True], [1.0, 1.0])
    assert not values_equal([1.0], [1.0, 2.0])


def test_values_equal_functions_by_identity():
    fn = _Fn()
    assert values_equal(fn, fn)
    assert not values_equal(fn, _Fn())


def test_nan_is_not_equal_to_itself():
    assert not values_equal(math.nan, math.nan)


@pytest.mark.parametrize(
    "value, truth",
    [(None, False), (False, False), (True, True), (0.0, True), ("", True), ([], True)],
)
def test_is_truthy(value, truth):
    assert is_truthy(value) is truth