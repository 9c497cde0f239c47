from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import partial

from . import numeric, pii, predicates
from .errors import UnsupportedPredicateError
from .kinds import IP_KINDS, NUMERIC_KINDS, PII_KINDS, PredicateKind
from .resolver import Document

Evaluator = Callable[[Document, str, Sequence[str], bool], bool]
"""Type alias for predicate evaluator functions.

An evaluator takes ``(document, path, args, negate)`` and returns the
un-negated match result, raising a ``FieldMatchError`` on failure.
"""


class PredicateRegistry:
    """Registry mapping predicate kinds to evaluator functions.

    The registry is used by ``PredicateEngine`` to dispatch a predicate kind
    to its evaluator. The set of kinds is closed (``PredicateKind``), but the
    evaluator bound to a kind can be replaced via ``register()``, e.g. to plug
    in a different PII implementation.

    Example:
        >>> registry = PredicateRegistry()
        >>> registry.register(PredicateKind.HAS_FIELD, my_has_field)
        >>> registry.get(PredicateKind.HAS_FIELD) is my_has_field
        True
    """

    def __init__(self) -> None:
        """Create an empty predicate registry."""
        self._evaluators: dict[PredicateKind, Evaluator] = {}

    def register(self, kind: PredicateKind, evaluator: Evaluator) -> None:
        """Register an evaluator for a predicate kind.

        If an evaluator is already registered for the kind, it will be
        replaced.

        Args:
            kind: The predicate kind the evaluator serves.
            evaluator: A callable with the ``Evaluator`` signature.
        """
        self._evaluators[PredicateKind(kind)] = evaluator

    def unregister(self, kind: PredicateKind) -> None:
        """Remove the evaluator for a kind.

        Notes:
            Does nothing if the kind is not registered.
        """
        self._evaluators.pop(kind, None)

    def get(self, kind: PredicateKind | int) -> Evaluator:
        """Return the evaluator for a kind or integer kind code.

        Raises:
            UnsupportedPredicateError: If the code names no known kind, or
                the kind has no registered evaluator.
        """
        known = PredicateKind.from_code(kind) if isinstance(kind, int) else None
        if known is None or known not in self._evaluators:
            raise UnsupportedPredicateError(int(kind) if isinstance(kind, int) else kind)
        return self._evaluators[known]

    def kinds(self) -> list[PredicateKind]:
        """Return the registered kinds in code order."""
        return sorted(self._evaluators)

    def __contains__(self, kind: object) -> bool:
        return kind in self._evaluators


_default_registry: PredicateRegistry | None = None


def get_default_registry() -> PredicateRegistry:
    """Return the default registry with all built-in predicates pre-registered.

    The default registry is lazily initialized on first access and cached
    for subsequent calls. It covers every ``PredicateKind``.

    Returns:
        The shared default ``PredicateRegistry`` instance.
    """
    global _default_registry
    if _default_registry is None:
        registry = PredicateRegistry()
        register_builtin_predicates(registry)
        _default_registry = registry
    return _default_registry


def register_builtin_predicates(registry: PredicateRegistry) -> None:
    """Register every built-in evaluator with a registry.

    Kinds that share a category evaluator (IP addresses, numeric
    comparisons, PII) are bound to it with their kind, so the evaluator can
    tell them apart.

    Args:
        registry: The ``PredicateRegistry`` to register predicates with.
    """
    registry.register(PredicateKind.IS_EMPTY, predicates.is_empty)
    registry.register(PredicateKind.HAS_FIELD, predicates.has_field)
    registry.register(PredicateKind.IS_TYPE, predicates.is_type)
    registry.register(PredicateKind.STRING_CONTAINS_ANY, predicates.string_contains_any)
    registry.register(PredicateKind.STRING_CONTAINS_ALL, predicates.string_contains_all)
    registry.register(PredicateKind.STRING_EQUAL, predicates.string_equal)
    registry.register(PredicateKind.MAC_ADDRESS, predicates.mac_address)
    registry.register(PredicateKind.UUID, predicates.uuid)
    registry.register(PredicateKind.REGEX, predicates.regex)
    registry.register(PredicateKind.TIMESTAMP_RFC3339, predicates.timestamp_rfc3339)
    registry.register(PredicateKind.TIMESTAMP_UNIX_NANO, predicates.timestamp_unix_nano)
    registry.register(PredicateKind.TIMESTAMP_UNIX, predicates.timestamp_unix)
    registry.register(PredicateKind.BOOLEAN_TRUE, partial(predicates.boolean, expected=True))
    registry.register(PredicateKind.BOOLEAN_FALSE, partial(predicates.boolean, expected=False))

    for kind in IP_KINDS:
        registry.register(kind, partial(predicates.ip_address, kind))
    for kind in NUMERIC_KINDS:
        registry.register(kind, partial(numeric.numeric, kind))
    for kind in PII_KINDS:
        registry.register(kind, partial(pii.pii, kind))
