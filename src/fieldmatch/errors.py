class FieldMatchError(Exception):
    """Base exception for all fieldmatch errors.

    All other exceptions in this package inherit from this class,
    allowing callers to catch every evaluation failure with a single
    except clause.
    """


class GenericError(FieldMatchError):
    """Raised for malformed calls and undecodable documents.

    Common causes:
        - Wrong number of arguments for a predicate
        - Document bytes that are not UTF-8 encoded JSON
    """


class ArgumentParseError(GenericError):
    """Raised when a numeric predicate argument is not a number."""


class FieldNotFoundError(GenericError):
    """Raised when a path does not resolve inside the document."""

    def __init__(self, path: str) -> None:
        super().__init__(f"path '{path}' not found")
        self.path = path


class TypeMismatchError(GenericError):
    """Raised when a resolved value cannot be coerced to the required type.

    Attributes:
        path: The path that was resolved.
        expected: Name of the semantic type the predicate required.
        actual: Name of the JSON kind that was found.
    """

    def __init__(self, path: str, expected: str, actual: str) -> None:
        super().__init__(f"value at path '{path}' is {actual}, expected {expected}")
        self.path = path
        self.expected = expected
        self.actual = actual


class MatchError(FieldMatchError):
    """Raised when a predicate cannot interpret what it was given.

    Common causes:
        - A predicate kind routed to an evaluator of another category
        - An unknown type name passed to ``is_type``
    """


class PatternCompileError(FieldMatchError):
    """Raised when a regular expression fails to compile.

    Covers both user-supplied ``regex`` patterns and the built-in format
    patterns. The underlying ``re.error`` is chained as ``__cause__``.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"unable to compile pattern: {reason}")
        self.pattern = pattern


class UnsupportedPredicateError(FieldMatchError):
    """Raised when a predicate kind code has no evaluator."""

    def __init__(self, code: object) -> None:
        super().__init__(f"unsupported predicate kind: {code!r}")
        self.code = code


class RequestLoadError(FieldMatchError):
    """Raised when a match request cannot be loaded or parsed.

    Common causes:
        - Invalid JSON syntax in the request source
        - File not found or unreadable
        - Missing or empty ``path``
        - Unknown ``kind`` name or code
        - ``args`` that is not a list of strings
    """
