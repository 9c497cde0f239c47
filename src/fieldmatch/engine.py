from __future__ import annotations

import logging
from collections.abc import Sequence

from .kinds import PredicateKind
from .loader import MatchRequest
from .registry import PredicateRegistry, get_default_registry
from .resolver import Document

logger = logging.getLogger(__name__)


class PredicateEngine:
    """Evaluates one predicate against one field of a JSON document.

    The engine is the main entry point for evaluation. It dispatches the
    predicate kind to its evaluator through a ``PredicateRegistry`` and
    applies negation to the evaluator's result. It holds no per-call state,
    so one instance can be shared across threads.

    Attributes:
        registry: The ``PredicateRegistry`` used for dispatch.

    Example:
        >>> from fieldmatch import PredicateEngine, PredicateKind
        >>> engine = PredicateEngine()
        >>> engine.evaluate(b'{"n": 100}', "n", PredicateKind.STRING_EQUAL, ["100"])
        True
    """

    def __init__(self, registry: PredicateRegistry | None = None) -> None:
        """Initialize a predicate engine.

        Args:
            registry: Registry used for dispatch. If ``None``, uses the
                default registry from ``get_default_registry()``.
        """
        self.registry = registry or get_default_registry()

    def evaluate(
        self,
        document: Document,
        path: str,
        kind: PredicateKind | int,
        args: Sequence[str] = (),
        negate: bool = False,
    ) -> bool:
        """Evaluate a predicate against the field at ``path``.

        Args:
            document: UTF-8 encoded JSON document.
            path: Dot-separated path to the field.
            kind: Predicate kind, or its integer code.
            args: Predicate arguments. How many are required depends on
                the kind.
            negate: If ``True``, the predicate's result is inverted.

        Returns:
            The match result after negation.

        Raises:
            UnsupportedPredicateError: If ``kind`` has no evaluator.
            FieldMatchError: Any error raised by the evaluator, unchanged.
        """
        evaluator = self.registry.get(kind)
        raw = evaluator(document, path, args, negate)
        result = bool(raw) ^ bool(negate)
        logger.debug(
            "evaluated %s at %r (negate=%s): %s",
            PredicateKind(kind).name,
            path,
            negate,
            result,
        )
        return result

    def run(self, request: MatchRequest, document: Document) -> bool:
        """Evaluate a loaded ``MatchRequest`` against a document."""
        return self.evaluate(document, request.path, request.kind, request.args, request.negate)


_default_engine: PredicateEngine | None = None


def evaluate(
    document: Document,
    path: str,
    kind: PredicateKind | int,
    args: Sequence[str] = (),
    negate: bool = False,
) -> bool:
    """Evaluate a predicate with an engine bound to the default registry.

    See ``PredicateEngine.evaluate()`` for arguments and errors.
    """
    global _default_engine
    if _default_engine is None:
        _default_engine = PredicateEngine()
    return _default_engine.evaluate(document, path, kind, args, negate)
