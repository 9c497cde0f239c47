"""fieldmatch - Typed predicate evaluation over JSON documents.

fieldmatch evaluates a single named predicate against one field of a JSON
document and returns a boolean. It is the matching primitive behind rule-based
data inspection: format checks, numeric and string conditions, and PII
detection on streaming records.

Quick Start:
    >>> from fieldmatch import PredicateKind, evaluate
    >>> evaluate(b'{"client": {"ip": "10.0.0.1"}}', "client.ip", PredicateKind.IPV4_ADDRESS)
    True
    >>> evaluate(b'{"age": 30}', "age", PredicateKind.NUMERIC_LESS_THAN, ["18"], negate=True)
    True

Main Components:
    - PredicateEngine: Dispatches a predicate kind and applies negation
    - evaluate(): Evaluate with the default engine
    - PredicateKind: Closed set of predicate kinds with integer codes
    - PredicateRegistry: Kind to evaluator table; get_default_registry()
      returns the built-in one
    - load_request(): Load a MatchRequest from dict, JSON string, or file

Predicate Categories:
    - String: string_equal, string_contains_any, string_contains_all
    - Numeric: numeric_equal_to, numeric_greater_than, numeric_greater_equal,
      numeric_less_than, numeric_less_equal
    - Format: ipv4_address, ipv6_address, mac_address, uuid
    - Timestamp: timestamp_rfc3339, timestamp_unix, timestamp_unix_nano
    - Field: boolean_true, boolean_false, is_empty, has_field, is_type
    - Regex: regex
    - PII: pii_any, pii_credit_card, pii_ssn, pii_email, pii_phone

Exceptions:
    - GenericError: Bad argument count, unparsable argument, undecodable
      document; FieldNotFoundError and TypeMismatchError are subclasses
    - MatchError: Kind routed to the wrong evaluator, unknown type name
    - PatternCompileError: A regular expression failed to compile
    - UnsupportedPredicateError: Kind code with no evaluator
    - RequestLoadError: Match request could not be loaded
"""

from .engine import PredicateEngine, evaluate
from .errors import (
    ArgumentParseError,
    FieldMatchError,
    FieldNotFoundError,
    GenericError,
    MatchError,
    PatternCompileError,
    RequestLoadError,
    TypeMismatchError,
    UnsupportedPredicateError,
)
from .kinds import PredicateKind
from .loader import MatchRequest, load_request
from .registry import Evaluator, PredicateRegistry, get_default_registry
from .resolver import JsonKind, JsonNumber, JsonValue, resolve_and_coerce

__all__ = [
    "ArgumentParseError",
    "Evaluator",
    "FieldMatchError",
    "FieldNotFoundError",
    "GenericError",
    "JsonKind",
    "JsonNumber",
    "JsonValue",
    "MatchError",
    "MatchRequest",
    "PatternCompileError",
    "PredicateEngine",
    "PredicateKind",
    "PredicateRegistry",
    "RequestLoadError",
    "TypeMismatchError",
    "UnsupportedPredicateError",
    "evaluate",
    "get_default_registry",
    "load_request",
    "resolve_and_coerce",
]
