from __future__ import annotations

from enum import IntEnum

from .utils import normalize_key


class PredicateKind(IntEnum):
    """Closed set of predicate kinds understood by the engine.

    Integer values are stable wire codes; callers that receive kinds from an
    external rule definition may pass the raw integer to
    ``PredicateEngine.evaluate()``.
    """

    IS_EMPTY = 1000
    HAS_FIELD = 1001
    IS_TYPE = 1002
    STRING_CONTAINS_ANY = 1003
    STRING_CONTAINS_ALL = 1004
    STRING_EQUAL = 1005
    IPV4_ADDRESS = 1006
    IPV6_ADDRESS = 1007
    MAC_ADDRESS = 1008
    REGEX = 1009
    TIMESTAMP_RFC3339 = 1010
    TIMESTAMP_UNIX_NANO = 1011
    TIMESTAMP_UNIX = 1012
    BOOLEAN_TRUE = 1013
    BOOLEAN_FALSE = 1014
    UUID = 1015

    PII_ANY = 2000
    PII_CREDIT_CARD = 2001
    PII_SSN = 2002
    PII_EMAIL = 2003
    PII_PHONE = 2004

    NUMERIC_EQUAL_TO = 3000
    NUMERIC_GREATER_THAN = 3001
    NUMERIC_GREATER_EQUAL = 3002
    NUMERIC_LESS_THAN = 3003
    NUMERIC_LESS_EQUAL = 3004

    @classmethod
    def from_name(cls, name: str) -> PredicateKind | None:
        """Look up a kind by name, ignoring case and hyphen/underscore style.

        Examples:
            >>> PredicateKind.from_name("string-equal")
            <PredicateKind.STRING_EQUAL: 1005>
            >>> PredicateKind.from_name("nope") is None
            True
        """
        return cls.__members__.get(normalize_key(name).upper())

    @classmethod
    def from_code(cls, code: int) -> PredicateKind | None:
        """Return the kind for an integer code, or ``None`` if unknown."""
        try:
            return cls(code)
        except ValueError:
            return None


IP_KINDS = frozenset({PredicateKind.IPV4_ADDRESS, PredicateKind.IPV6_ADDRESS})

NUMERIC_KINDS = frozenset(
    {
        PredicateKind.NUMERIC_EQUAL_TO,
        PredicateKind.NUMERIC_GREATER_THAN,
        PredicateKind.NUMERIC_GREATER_EQUAL,
        PredicateKind.NUMERIC_LESS_THAN,
        PredicateKind.NUMERIC_LESS_EQUAL,
    }
)

PII_KINDS = frozenset(
    {
        PredicateKind.PII_ANY,
        PredicateKind.PII_CREDIT_CARD,
        PredicateKind.PII_SSN,
        PredicateKind.PII_EMAIL,
        PredicateKind.PII_PHONE,
    }
)
