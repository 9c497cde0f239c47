"""Built-in predicate evaluators.

Every evaluator has the signature ``(document, path, args, negate) -> bool``
and returns the un-negated result. ``negate`` is part of the signature so that
all evaluators are interchangeable in the registry; it is applied by
``PredicateEngine`` and never read here.

Argument counts are checked before the document is touched.
"""

from __future__ import annotations

import calendar
import logging
import re
from collections.abc import Sequence

from .errors import MatchError, PatternCompileError
from .kinds import PredicateKind
from .resolver import Document, JsonKind, JsonValue, field_exists, resolve_and_coerce
from .utils import require_at_least_one, require_exactly_one

logger = logging.getLogger(__name__)

IPV4_PATTERN = (
    r"(?:\b25[0-5]|\b2[0-4][0-9]|\b[01]?[0-9][0-9]?)"
    r"(?:\.(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)){3}"
)

_IPV4_TAIL = r"((25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])\.){3,3}(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])"

IPV6_PATTERN = "(" + "|".join(
    [
        r"([0-9a-fA-F]{1,4}:){7,7}[0-9a-fA-F]{1,4}",
        r"([0-9a-fA-F]{1,4}:){1,7}:",
        r"([0-9a-fA-F]{1,4}:){1,6}:[0-9a-fA-F]{1,4}",
        r"([0-9a-fA-F]{1,4}:){1,5}(:[0-9a-fA-F]{1,4}){1,2}",
        r"([0-9a-fA-F]{1,4}:){1,4}(:[0-9a-fA-F]{1,4}){1,3}",
        r"([0-9a-fA-F]{1,4}:){1,3}(:[0-9a-fA-F]{1,4}){1,4}",
        r"([0-9a-fA-F]{1,4}:){1,2}(:[0-9a-fA-F]{1,4}){1,5}",
        r"[0-9a-fA-F]{1,4}:((:[0-9a-fA-F]{1,4}){1,6})",
        r":((:[0-9a-fA-F]{1,4}){1,7}|:)",
        r"fe80:(:[0-9a-fA-F]{0,4}){0,4}%[0-9a-zA-Z]{1,}",
        r"::(ffff(:0{1,4}){0,1}:){0,1}" + _IPV4_TAIL,
        r"([0-9a-fA-F]{1,4}:){1,4}:" + _IPV4_TAIL,
    ]
) + ")"

MAC_PATTERN = r"^(?:[0-9A-Fa-f]{2}[:-]){5}(?:[0-9A-Fa-f]{2})\Z"

UUID_PATTERN = (
    r"^[a-fA-F0-9]{8}[:\-]?[a-fA-F0-9]{4}[:\-]?[a-fA-F0-9]{4}"
    r"[:\-]?[a-fA-F0-9]{4}[:\-]?[a-fA-F0-9]{12}\Z"
)

RFC3339_PATTERN = (
    r"^([0-9]{4})-([0-9]{2})-([0-9]{2})[Tt ]([0-9]{2}):([0-9]{2}):([0-9]{2})(\.[0-9]+)?"
    r"(?:[Zz]|([+-])([0-9]{2}):([0-9]{2}))\Z"
)

_INT64_PATTERN = r"^[+-]?[0-9]+\Z"
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_NANOS_PER_SECOND = 1_000_000_000
_SECONDS_PER_DAY = 86_400

_TYPE_NAMES: dict[str, frozenset[JsonKind]] = {
    "string": frozenset({JsonKind.STRING}),
    "number": frozenset({JsonKind.NUMBER}),
    "boolean": frozenset({JsonKind.BOOLEAN}),
    "bool": frozenset({JsonKind.BOOLEAN}),
    "array": frozenset({JsonKind.ARRAY}),
    "object": frozenset({JsonKind.OBJECT}),
    "null": frozenset({JsonKind.NULL}),
}


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a regular expression.

    Raises:
        PatternCompileError: If ``pattern`` is not a valid expression.
    """
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternCompileError(pattern, str(exc)) from exc


def string_equal(document: Document, path: str, args: Sequence[str], negate: bool) -> bool:
    expected = require_exactly_one("string_equal", args)
    field = resolve_and_coerce(document, path, str)
    return field == expected


def string_contains_any(document: Document, path: str, args: Sequence[str], negate: bool) -> bool:
    require_at_least_one("string_contains_any", args)
    field = resolve_and_coerce(document, path, str)
    return any(arg in field for arg in args)


def string_contains_all(document: Document, path: str, args: Sequence[str], negate: bool) -> bool:
    require_at_least_one("string_contains_all", args)
    field = resolve_and_coerce(document, path, str)
    return all(arg in field for arg in args)


def ip_address(
    kind: PredicateKind, document: Document, path: str, args: Sequence[str], negate: bool
) -> bool:
    """Search the field for an IPv4 or IPv6 address.

    The search is unanchored: ``"prefix 10.0.0.1 suffix"`` matches IPv4.

    Raises:
        MatchError: If ``kind`` is not an IP address kind.
    """
    if kind == PredicateKind.IPV4_ADDRESS:
        pattern = IPV4_PATTERN
    elif kind == PredicateKind.IPV6_ADDRESS:
        pattern = IPV6_PATTERN
    else:
        raise MatchError("unknown ip address match type")
    field = resolve_and_coerce(document, path, str)
    return compile_pattern(pattern).search(field) is not None


def mac_address(document: Document, path: str, args: Sequence[str], negate: bool) -> bool:
    field = resolve_and_coerce(document, path, str)
    return compile_pattern(MAC_PATTERN).search(field) is not None


def uuid(document: Document, path: str, args: Sequence[str], negate: bool) -> bool:
    """Match a UUID spanning the whole field.

    Each of the four group separators may independently be ``-``, ``:`` or
    absent, so ``"550e8400:e29b-41d4a716-446655440000"`` is accepted.
    """
    field = resolve_and_coerce(document, path, str)
    return compile_pattern(UUID_PATTERN).search(field) is not None


def _days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date."""
    year -= month <= 2
    era = year // 400
    yoe = year - era * 400
    doy = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


_MIN_DAY = _days_from_civil(-262144, 1, 1)
_MAX_DAY = _days_from_civil(262143, 12, 31)


def _days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if calendar.isleap(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def _is_rfc3339(text: str) -> bool:
    m = compile_pattern(RFC3339_PATTERN).match(text)
    if m is None:
        return False
    year, month, day, hour, minute, second = (int(g) for g in m.group(1, 2, 3, 4, 5, 6))
    if hour > 23 or minute > 59 or second > 60:
        return False
    if m.group(8) is not None and (int(m.group(9)) > 23 or int(m.group(10)) > 59):
        return False
    return 1 <= month <= 12 and 1 <= day <= _days_in_month(year, month)


def _parse_int64(text: str) -> int | None:
    if compile_pattern(_INT64_PATTERN).match(text) is None:
        return None
    digits = text.lstrip("+-").lstrip("0") or "0"
    # Longer than any int64; also keeps int() clear of its digit limit.
    if len(digits) > 19:
        return None
    value = -int(digits) if text.startswith("-") else int(digits)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def _is_valid_unix_seconds(seconds: int) -> bool:
    return _MIN_DAY <= seconds // _SECONDS_PER_DAY <= _MAX_DAY


def timestamp_rfc3339(document: Document, path: str, args: Sequence[str], negate: bool) -> bool:
    field = resolve_and_coerce(document, path, str)
    if not _is_rfc3339(field):
        logger.debug("value at %r is not an RFC 3339 timestamp: %r", path, field)
        return False
    return True


def timestamp_unix(document: Document, path: str, args: Sequence[str], negate: bool) -> bool:
    """Check that the field holds a Unix timestamp in seconds.

    A field that does not parse as a signed 64-bit integer yields ``False``
    rather than an error.
    """
    field = resolve_and_coerce(document, path, str)
    seconds = _parse_int64(field)
    if seconds is None:
        logger.debug("failed to parse timestamp at %r: %r", path, field)
        return False
    return _is_valid_unix_seconds(seconds)


def timestamp_unix_nano(document: Document, path: str, args: Sequence[str], negate: bool) -> bool:
    """Check that the field holds a Unix timestamp in nanoseconds.

    The value is truncated toward zero to whole seconds before the range
    check, so ``-1`` nanosecond is second ``0``.
    """
    field = resolve_and_coerce(document, path, str)
    nanos = _parse_int64(field)
    if nanos is None:
        logger.debug("failed to parse timestamp at %r: %r", path, field)
        return False
    seconds = abs(nanos) // _NANOS_PER_SECOND
    return _is_valid_unix_seconds(seconds if nanos >= 0 else -seconds)


def boolean(
    document: Document, path: str, args: Sequence[str], negate: bool, *, expected: bool
) -> bool:
    field = resolve_and_coerce(document, path, bool)
    return field == expected


def is_empty(document: Document, path: str, args: Sequence[str], negate: bool) -> bool:
    """Return whether the field is null, an empty array or an empty string.

    Objects, numbers and booleans are never empty, even ``{}``.
    """
    field = resolve_and_coerce(document, path, JsonValue)
    if field.kind is JsonKind.NULL:
        return True
    if field.kind in (JsonKind.ARRAY, JsonKind.STRING):
        return len(field.value) == 0
    return False


def has_field(document: Document, path: str, args: Sequence[str], negate: bool) -> bool:
    return field_exists(document, path)


def is_type(document: Document, path: str, args: Sequence[str], negate: bool) -> bool:
    """Compare the field's JSON kind with a type name.

    Accepted names: ``string``, ``number``, ``boolean`` (or ``bool``),
    ``array``, ``object``, ``null``.

    Raises:
        MatchError: If the type name is not one of the above.
    """
    type_name = require_exactly_one("is_type", args)
    field = resolve_and_coerce(document, path, JsonValue)
    kinds = _TYPE_NAMES.get(type_name)
    if kinds is None:
        raise MatchError(f"unknown type: {type_name}")
    return field.kind in kinds


def regex(document: Document, path: str, args: Sequence[str], negate: bool) -> bool:
    """Search the field with a caller-supplied pattern.

    The pattern is compiled on every call and may match anywhere in the
    field; use ``^``/``$`` to anchor it.

    Raises:
        PatternCompileError: If the pattern does not compile.
    """
    pattern = require_exactly_one("regex", args)
    field = resolve_and_coerce(document, path, str)
    return compile_pattern(pattern).search(field) is not None
