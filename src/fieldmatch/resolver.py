"""Field extraction and coercion.

Every predicate reads its field through this module: the document is decoded,
the path is walked, and the value found is converted to the type the
predicate needs.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar, cast

from .errors import FieldNotFoundError, GenericError, TypeMismatchError
from .utils import split_path

T = TypeVar("T")

Document = bytes | str


@dataclass(frozen=True)
class JsonNumber:
    """A JSON number kept as the literal text it was written with.

    ``1e3`` and ``100.10`` render back exactly as written; ``float()`` gives
    the numeric value.
    """

    literal: str

    def __float__(self) -> float:
        return float(self.literal)


class JsonKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class JsonValue:
    """A value found in a document, tagged with its JSON kind.

    Attributes:
        kind: The JSON kind of ``value``.
        value: The decoded value (``None``, ``bool``, ``JsonNumber``,
            ``int`` for an array length, ``str``, ``list`` or ``dict``).
    """

    kind: JsonKind
    value: Any

    @classmethod
    def of(cls, value: Any) -> JsonValue:
        return cls(kind=kind_of(value), value=value)


def kind_of(value: Any) -> JsonKind:
    """Return the JSON kind of a decoded value.

    ``bool`` is checked before ``int`` since it is a subclass of it.
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (JsonNumber, int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, Mapping):
        return JsonKind.OBJECT
    raise TypeError(f"not a JSON value: {type(value).__name__}")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant '{name}'")


def decode_document(document: Document) -> Any:
    """Decode a UTF-8 JSON document.

    Numbers are decoded as ``JsonNumber`` so their literal text survives.

    Args:
        document: The raw document. ``str`` input is accepted as-is.

    Returns:
        The decoded Python value.

    Raises:
        GenericError: If the bytes are not UTF-8, not strict JSON
            (``NaN`` and ``Infinity`` are rejected), or nested too deeply
            to decode.
    """
    if isinstance(document, (bytes, bytearray, memoryview)):
        try:
            text = bytes(document).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise GenericError(f"unable to convert bytes to string: {exc}") from exc
    else:
        text = document
    try:
        return json.loads(
            text,
            parse_int=JsonNumber,
            parse_float=JsonNumber,
            parse_constant=_reject_constant,
        )
    except (ValueError, RecursionError) as exc:
        raise GenericError(f"unable to decode document: {exc}") from exc


def lookup(obj: Any, path: str) -> tuple[bool, Any]:
    """Walk ``path`` through a decoded document.

    Path resolution rules:
        - Objects: segments are matched as keys
        - Arrays: segments are non-negative integer indices; ``#`` yields
          the array length
        - A path with no segments does not resolve

    Returns:
        ``(found, value)``; ``value`` is ``None`` when not found.

    Examples:
        >>> lookup({"a": {"b": 1}}, "a.b")
        (True, 1)
        >>> lookup({"items": [10, 20]}, "items.#")
        (True, 2)
        >>> lookup({"a": None}, "a.b")
        (False, None)
    """
    parts = split_path(path)
    if not parts:
        return False, None
    cur = obj
    for part in parts:
        if isinstance(cur, Mapping):
            if part in cur:
                cur = cur[part]
                continue
            return False, None
        if isinstance(cur, list):
            if part == "#":
                cur = len(cur)
                continue
            if not (part.isascii() and part.isdigit()):
                return False, None
            index = int(part)
            if index < len(cur):
                cur = cur[index]
                continue
            return False, None
        return False, None
    return True, cur


def resolve(document: Document, path: str) -> JsonValue:
    """Decode ``document`` and return the value at ``path``.

    Raises:
        GenericError: If the document cannot be decoded.
        FieldNotFoundError: If the path does not resolve.
    """
    found, value = lookup(decode_document(document), path)
    if not found:
        raise FieldNotFoundError(path)
    return JsonValue.of(value)


def field_exists(document: Document, path: str) -> bool:
    """Return whether ``path`` resolves, without coercing the value."""
    found, _ = lookup(decode_document(document), path)
    return found


def _render(value: Any) -> str:
    """Render a decoded value as compact JSON, keeping number literals."""
    if isinstance(value, JsonNumber):
        return value.literal
    if isinstance(value, list):
        return "[" + ",".join(_render(v) for v in value) + "]"
    if isinstance(value, Mapping):
        items = (json.dumps(k, ensure_ascii=False) + ":" + _render(v) for k, v in value.items())
        return "{" + ",".join(items) + "}"
    return json.dumps(value, ensure_ascii=False)


def _as_float(field: JsonValue, path: str) -> float:
    if field.kind is not JsonKind.NUMBER:
        raise TypeMismatchError(path, "number", field.kind.value)
    return float(field.value)


def _as_text(field: JsonValue, path: str) -> str:
    if field.kind is JsonKind.STRING:
        return field.value
    if field.kind is JsonKind.BOOLEAN:
        return "true" if field.value else "false"
    if field.kind is JsonKind.NULL:
        return "null"
    try:
        return _render(field.value)
    except RecursionError as exc:
        raise GenericError(f"value at path '{path}' is nested too deeply") from exc


def _as_bool(field: JsonValue, path: str) -> bool:
    if field.kind is not JsonKind.BOOLEAN:
        raise TypeMismatchError(path, "boolean", field.kind.value)
    return field.value


def _as_raw(field: JsonValue, path: str) -> JsonValue:
    return field


_COERCERS: dict[type, Callable[[JsonValue, str], Any]] = {
    float: _as_float,
    str: _as_text,
    bool: _as_bool,
    JsonValue: _as_raw,
}


def coerce(field: JsonValue, target: type[T], path: str = "") -> T:
    """Convert a resolved value to ``target``.

    Coercion rules:
        - ``float``: the value must be a JSON number
        - ``str``: any kind; strings unquoted, numbers exactly as written
          in the document, booleans as ``true``/``false``, ``null`` as
          ``"null"``, arrays and objects as compact JSON
        - ``bool``: the value must be JSON ``true`` or ``false``
        - ``JsonValue``: returned unchanged

    Raises:
        TypeMismatchError: If the value's kind cannot become ``target``.
    """
    try:
        coercer = _COERCERS[target]
    except KeyError:
        raise TypeError(f"no coercion to {target.__name__}") from None
    return cast(T, coercer(field, path))


def resolve_and_coerce(document: Document, path: str, target: type[T]) -> T:
    """Resolve ``path`` in ``document`` and coerce the value to ``target``.

    Raises:
        GenericError: If the document cannot be decoded.
        FieldNotFoundError: If the path does not resolve.
        TypeMismatchError: If the value cannot be coerced.
    """
    return coerce(resolve(document, path), target, path)
