from __future__ import annotations

import operator
import re
from collections.abc import Callable, Sequence

from .errors import ArgumentParseError, MatchError
from .kinds import PredicateKind
from .resolver import Document, resolve_and_coerce
from .utils import require_exactly_one

_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)\Z",
    re.IGNORECASE,
)

_COMPARATORS: dict[PredicateKind, Callable[[float, float], bool]] = {
    PredicateKind.NUMERIC_EQUAL_TO: operator.eq,
    PredicateKind.NUMERIC_GREATER_THAN: operator.gt,
    PredicateKind.NUMERIC_GREATER_EQUAL: operator.ge,
    PredicateKind.NUMERIC_LESS_THAN: operator.lt,
    PredicateKind.NUMERIC_LESS_EQUAL: operator.le,
}


def parse_float_arg(arg: str) -> float:
    """Parse a predicate argument as a 64-bit float.

    Unlike ``float()``, surrounding whitespace and ``_`` digit separators are
    rejected.

    Raises:
        ArgumentParseError: If ``arg`` is not a float literal.

    Examples:
        >>> parse_float_arg("100.1")
        100.1
        >>> parse_float_arg("1e3")
        1000.0
    """
    if _FLOAT_LITERAL.match(arg) is None:
        raise ArgumentParseError(f"unable to parse argument '{arg}' as a number")
    return float(arg)


def numeric(
    kind: PredicateKind, document: Document, path: str, args: Sequence[str], negate: bool
) -> bool:
    """Compare a numeric field against the single argument.

    The field must be a JSON number; equality is exact, with no tolerance.

    Raises:
        GenericError: If there is not exactly one argument.
        ArgumentParseError: If the argument is not numeric.
        MatchError: If ``kind`` is not a numeric kind.
        FieldNotFoundError: If the path does not resolve.
        TypeMismatchError: If the field is not a number.
    """
    compare = _COMPARATORS.get(kind)
    if compare is None:
        raise MatchError(f"unknown numeric match type: {kind!r}")
    arg = require_exactly_one(kind.name.lower(), args)
    expected = parse_float_arg(arg)
    field = resolve_and_coerce(document, path, float)
    return compare(field, expected)
