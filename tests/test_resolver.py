import math

import pytest

from fieldmatch import FieldNotFoundError, GenericError, JsonKind, JsonValue, TypeMismatchError, resolve_and_coerce
from fieldmatch.resolver import field_exists, lookup, resolve
from fieldmatch.utils import split_path

DOC = b"""{
    "number_int": 100,
    "number_float": 100.1,
    "flag": true,
    "nothing": null,
    "name": "alice",
    "tags": ["a", "b"],
    "obj": {"k": "v", "n": [1, 2]},
    "dotted.key": "yes",
    "big": 1e400
}"""


def test_split_path_handles_escaped_dots():
    assert split_path("a.b.0") == ["a", "b", "0"]
    assert split_path("dotted\\.key") == ["dotted.key"]
    assert split_path("a..b") == ["a", "b"]


def test_lookup_walks_objects_and_arrays():
    data = {"items": [{"id": 1}, {"id": 2}]}
    assert lookup(data, "items.1.id") == (True, 2)
    assert lookup(data, "items.#") == (True, 2)
    assert lookup(data, "items.2.id") == (False, None)
    assert lookup(data, "items.-1") == (False, None)
    assert lookup(data, "") == (False, None)


def test_resolve_reports_kind():
    assert resolve(DOC, "nothing") == JsonValue(JsonKind.NULL, None)
    assert resolve(DOC, "flag").kind is JsonKind.BOOLEAN
    assert resolve(DOC, "number_int").kind is JsonKind.NUMBER
    assert resolve(DOC, "tags").kind is JsonKind.ARRAY
    assert resolve(DOC, "obj").kind is JsonKind.OBJECT
    assert resolve(DOC, "dotted\\.key").value == "yes"


def test_resolve_missing_path_raises_not_found():
    with pytest.raises(FieldNotFoundError) as exc_info:
        resolve(DOC, "does_not_exist")
    assert exc_info.value.path == "does_not_exist"


def test_text_coercion_renders_literals():
    assert resolve_and_coerce(DOC, "name", str) == "alice"
    assert resolve_and_coerce(DOC, "number_int", str) == "100"
    assert resolve_and_coerce(DOC, "number_float", str) == "100.1"
    assert resolve_and_coerce(DOC, "flag", str) == "true"
    assert resolve_and_coerce(DOC, "nothing", str) == "null"
    assert resolve_and_coerce(DOC, "tags", str) == '["a","b"]'
    assert resolve_and_coerce(DOC, "obj", str) == '{"k":"v","n":[1,2]}'


def test_float_coercion_requires_number():
    assert resolve_and_coerce(DOC, "number_int", float) == 100.0
    assert math.isinf(resolve_and_coerce(DOC, "big", float))
    with pytest.raises(TypeMismatchError) as exc_info:
        resolve_and_coerce(DOC, "name", float)
    assert exc_info.value.expected == "number"
    assert exc_info.value.actual == "string"


def test_bool_coercion_is_strict():
    assert resolve_and_coerce(b'{"a": false}', "a", bool) is False
    with pytest.raises(TypeMismatchError):
        resolve_and_coerce(b'{"a": 1}', "a", bool)
    with pytest.raises(TypeMismatchError):
        resolve_and_coerce(b'{"a": "true"}', "a", bool)


def test_raw_coercion_passes_value_through():
    field = resolve_and_coerce(DOC, "tags", JsonValue)
    assert field == JsonValue(JsonKind.ARRAY, ["a", "b"])


def test_type_mismatch_is_a_generic_error():
    with pytest.raises(GenericError):
        resolve_and_coerce(DOC, "tags", float)


@pytest.mark.parametrize("document", [b"\xff\xfe{", b"{not json", b'{"a": NaN}'])
def test_undecodable_document_raises_generic_error(document):
    with pytest.raises(GenericError):
        resolve(document, "a")


def test_field_exists():
    assert field_exists(DOC, "obj.n.1") is True
    assert field_exists(DOC, "nothing") is True
    assert field_exists(DOC, "obj.missing") is False


def test_str_document_is_accepted():
    assert resolve_and_coerce('{"a": "b"}', "a", str) == "b"


@pytest.mark.parametrize(
    "document, expected",
    [
        (b'{"n": 1e3}', "1e3"),
        (b'{"n": 100.10}', "100.10"),
        (b'{"n": -0}', "-0"),
        (b'{"n": 1E-2}', "1E-2"),
    ],
)
def test_text_coercion_keeps_number_literal(document, expected):
    assert resolve_and_coerce(document, "n", str) == expected


def test_float_coercion_reads_number_literal():
    assert resolve_and_coerce(b'{"n": 1e3}', "n", float) == 1000.0
    assert resolve_and_coerce(b'{"n": -0}', "n", float) == 0.0


def test_nested_numbers_render_as_written():
    assert resolve_and_coerce(b'{"a": [1.50, {"x": 2e0}]}', "a", str) == '[1.50,{"x":2e0}]'


def test_huge_integer_elsewhere_does_not_break_lookup():
    document = ('{"huge": ' + "7" * 5000 + ', "a": 1}').encode()
    assert field_exists(document, "a") is True
    assert resolve_and_coerce(document, "huge", str) == "7" * 5000


def test_deeply_nested_document_raises_generic_error():
    document = b"[" * 100000 + b"]" * 100000
    with pytest.raises(GenericError):
        resolve(document, "0")
    with pytest.raises(GenericError):
        field_exists(document, "0")
