import pytest

from fieldmatch import ArgumentParseError, FieldNotFoundError, GenericError, MatchError, PredicateKind, TypeMismatchError
from fieldmatch.numeric import numeric, parse_float_arg

SAMPLE = b'{"number_int": 100, "number_float": 100.1, "text": "100"}'


@pytest.mark.parametrize(
    "kind, path, arg, expected",
    [
        (PredicateKind.NUMERIC_EQUAL_TO, "number_int", "100", True),
        (PredicateKind.NUMERIC_EQUAL_TO, "number_float", "100.1", True),
        (PredicateKind.NUMERIC_EQUAL_TO, "number_float", "100.10000001", False),
        (PredicateKind.NUMERIC_GREATER_THAN, "number_int", "1", True),
        (PredicateKind.NUMERIC_GREATER_THAN, "number_float", "2", True),
        (PredicateKind.NUMERIC_GREATER_THAN, "number_float", "1000", False),
        (PredicateKind.NUMERIC_GREATER_EQUAL, "number_float", "100.1", True),
        (PredicateKind.NUMERIC_LESS_THAN, "number_int", "1000", True),
        (PredicateKind.NUMERIC_LESS_THAN, "number_int", "100", False),
        (PredicateKind.NUMERIC_LESS_EQUAL, "number_int", "100", True),
        (PredicateKind.NUMERIC_LESS_EQUAL, "number_int", "2000", True),
        (PredicateKind.NUMERIC_LESS_EQUAL, "number_float", "100", False),
        (PredicateKind.NUMERIC_GREATER_THAN, "number_int", "1e1", True),
    ],
)
def test_numeric_comparisons(kind, path, arg, expected):
    assert numeric(kind, SAMPLE, path, [arg], False) is expected


@pytest.mark.parametrize("arg", ["not a number", "", " 1", "1_000", "0x10"])
def test_bad_argument_is_an_error_not_false(arg):
    with pytest.raises(ArgumentParseError):
        numeric(PredicateKind.NUMERIC_GREATER_THAN, SAMPLE, "number_int", [arg], False)


def test_argument_is_parsed_before_lookup():
    with pytest.raises(ArgumentParseError):
        numeric(PredicateKind.NUMERIC_EQUAL_TO, SAMPLE, "does_not_exist", ["x"], False)


def test_missing_path():
    with pytest.raises(FieldNotFoundError):
        numeric(PredicateKind.NUMERIC_EQUAL_TO, SAMPLE, "does_not_exist", ["1000"], False)


def test_string_field_is_not_coerced_to_number():
    with pytest.raises(TypeMismatchError):
        numeric(PredicateKind.NUMERIC_EQUAL_TO, SAMPLE, "text", ["100"], False)


@pytest.mark.parametrize("args", [[], ["1", "2"]])
def test_numeric_requires_exactly_one_argument(args):
    with pytest.raises(GenericError, match="requires exactly 1 argument"):
        numeric(PredicateKind.NUMERIC_LESS_THAN, SAMPLE, "number_int", args, False)


def test_numeric_rejects_other_kinds():
    with pytest.raises(MatchError):
        numeric(PredicateKind.STRING_EQUAL, SAMPLE, "number_int", ["100"], False)


def test_parse_float_arg_accepts_float_literals():
    assert parse_float_arg("-2.5") == -2.5
    assert parse_float_arg(".5") == 0.5
    assert parse_float_arg("5.") == 5.0
    assert parse_float_arg("inf") == float("inf")
