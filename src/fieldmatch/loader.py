from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import RequestLoadError
from .kinds import PredicateKind


@dataclass(frozen=True)
class MatchRequest:
    """A validated predicate invocation, minus the document.

    This is a frozen (immutable) dataclass describing which predicate to run
    where. The document is supplied separately at evaluation time.

    Attributes:
        kind: The predicate kind to evaluate.
        path: Dot-separated path to the field. Non-empty.
        args: Predicate arguments, in order.
        negate: Whether to invert the result.
    """

    kind: PredicateKind
    path: str
    args: tuple[str, ...] = ()
    negate: bool = False


def parse_kind(value: Any) -> PredicateKind:
    """Interpret a kind given as an integer code or a name.

    Raises:
        RequestLoadError: If the value names no known kind.
    """
    if isinstance(value, bool):
        raise RequestLoadError("request 'kind' must be a name or integer code")
    if isinstance(value, int):
        kind = PredicateKind.from_code(value)
    elif isinstance(value, str) and value.strip():
        kind = PredicateKind.from_name(value)
    else:
        raise RequestLoadError("request 'kind' must be a name or integer code")
    if kind is None:
        raise RequestLoadError(f"unknown predicate kind: {value!r}")
    return kind


def load_request(source: Any, *, base_dir: str | None = None) -> MatchRequest:
    """Load and validate a match request from a dict, JSON string, or file path.

    Args:
        source: Request source. Can be:
            - A ``dict`` with keys ``kind``, ``path``, ``args`` (optional)
              and ``negate`` (optional)
            - A JSON string (detected by leading ``{`` after stripping whitespace)
            - A file path (``str`` or ``Path``) to a JSON file
        base_dir: Base directory for resolving relative file paths. Only
            used when ``source`` is a relative path string.

    Returns:
        A validated ``MatchRequest``.

    Raises:
        RequestLoadError: If the source cannot be loaded, parsed, or fails
            validation. Wraps underlying ``json.JSONDecodeError`` and
            ``OSError`` exceptions.

    Examples:
        >>> load_request({"kind": "string_equal", "path": "user.role", "args": ["admin"]})
        MatchRequest(kind=<PredicateKind.STRING_EQUAL: 1005>, path='user.role', args=('admin',), negate=False)

        >>> load_request('{"kind": 1001, "path": "user", "negate": true}')
        MatchRequest(kind=<PredicateKind.HAS_FIELD: 1001>, path='user', args=(), negate=True)
    """
    try:
        if isinstance(source, (str, Path)):
            text = str(source)
            if text.strip().startswith("{"):
                data = json.loads(text)
            else:
                path = Path(text)
                if not path.is_absolute() and base_dir:
                    path = Path(base_dir) / path
                data = json.loads(path.read_text(encoding="utf-8"))
        elif isinstance(source, dict):
            data = source
        else:
            raise RequestLoadError(f"Unsupported request source type: {type(source).__name__}")
    except (json.JSONDecodeError, OSError) as exc:
        raise RequestLoadError(str(exc)) from exc

    if not isinstance(data, dict):
        raise RequestLoadError("request must be a JSON object")

    kind = parse_kind(data.get("kind"))
    field_path = data.get("path")
    args = data.get("args") or []
    negate = data.get("negate", False)

    if not isinstance(field_path, str) or not field_path:
        raise RequestLoadError("request requires non-empty 'path'")
    if not isinstance(args, list) or not all(isinstance(a, str) for a in args):
        raise RequestLoadError("request 'args' must be a list of strings")
    if not isinstance(negate, bool):
        raise RequestLoadError("request 'negate' must be a boolean")

    return MatchRequest(kind=kind, path=field_path, args=tuple(args), negate=negate)
