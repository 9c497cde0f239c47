from __future__ import annotations

from collections.abc import Sequence

from .errors import GenericError


def split_path(path: str) -> list[str]:
    """Split a dot-separated path into segments.

    A backslash escapes the next character, so ``\\.`` puts a literal dot
    inside a key. Empty segments (consecutive dots) are ignored.

    Args:
        path: The path string, e.g. ``"user.emails.0"``.

    Returns:
        The list of non-empty segments.

    Examples:
        >>> split_path("a.b.0")
        ['a', 'b', '0']
        >>> split_path("headers.content\\\\.type")
        ['headers', 'content.type']
    """
    parts: list[str] = []
    buf: list[str] = []
    escaped = False
    for ch in path:
        if escaped:
            buf.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == ".":
            parts.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
    if escaped:
        buf.append("\\")
    parts.append("".join(buf))
    return [p for p in parts if p]


def normalize_key(key: str) -> str:
    """Normalize a key string for consistent lookups.

    Applies the following transformations:
        - Strips leading and trailing whitespace
        - Converts to lowercase
        - Replaces hyphens with underscores

    Examples:
        >>> normalize_key("  String-Equal  ")
        'string_equal'
    """
    return key.strip().lower().replace("-", "_")


def require_exactly_one(name: str, args: Sequence[str]) -> str:
    """Return the single argument or raise ``GenericError``."""
    if len(args) != 1:
        raise GenericError(f"{name} requires exactly 1 argument")
    return args[0]


def require_at_least_one(name: str, args: Sequence[str]) -> None:
    if not args:
        raise GenericError(f"{name} requires at least 1 argument")
