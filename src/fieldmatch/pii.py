"""PII detection predicates.

Each detector searches the field's text form for one kind of personal data.
Detectors are heuristics: a pattern narrows candidates and, where the data
carries one, a checksum or range rule rejects look-alikes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .errors import MatchError
from .kinds import PredicateKind
from .predicates import compile_pattern
from .resolver import Document, resolve_and_coerce

logger = logging.getLogger(__name__)

EMAIL_PATTERN = (
    r"[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+@"
    r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*\.[A-Za-z]{2,}"
)

# 13-19 digits, optionally grouped by single spaces or hyphens.
CREDIT_CARD_PATTERN = r"(?<![0-9])[0-9](?:[ -]?[0-9]){12,18}(?![0-9])"

SSN_PATTERN = r"(?<![0-9])([0-9]{3})-([0-9]{2})-([0-9]{4})(?![0-9])"

PHONE_PATTERN = (
    r"(?<![0-9+])(?:"
    r"\+[1-9][0-9]{7,14}"
    r"|(?:\+?1[ .-]?)?(?:\([2-9][0-9]{2}\)|[2-9][0-9]{2})[ .-]?[2-9][0-9]{2}[ .-]?[0-9]{4}"
    r")(?![0-9])"
)


def luhn_valid(digits: str) -> bool:
    """Return whether a digit string passes the Luhn checksum.

    Examples:
        >>> luhn_valid("4111111111111111")
        True
        >>> luhn_valid("4111111111111112")
        False
    """
    total = 0
    for i, ch in enumerate(reversed(digits)):
        d = int(ch)
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total % 10 == 0


def has_email(text: str) -> bool:
    return compile_pattern(EMAIL_PATTERN).search(text) is not None


def has_credit_card(text: str) -> bool:
    for m in compile_pattern(CREDIT_CARD_PATTERN).finditer(text):
        digits = "".join(ch for ch in m.group(0) if ch.isdigit())
        if luhn_valid(digits):
            return True
    return False


def has_ssn(text: str) -> bool:
    """Search for a US social security number in ``AAA-GG-SSSS`` form.

    Area numbers 000, 666 and 900-999, group 00 and serial 0000 are never
    issued and are rejected.
    """
    for m in compile_pattern(SSN_PATTERN).finditer(text):
        area, group, serial = m.groups()
        if area == "000" or area == "666" or area.startswith("9"):
            continue
        if group == "00" or serial == "0000":
            continue
        return True
    return False


def has_phone(text: str) -> bool:
    return compile_pattern(PHONE_PATTERN).search(text) is not None


DETECTORS: dict[PredicateKind, Callable[[str], bool]] = {
    PredicateKind.PII_CREDIT_CARD: has_credit_card,
    PredicateKind.PII_SSN: has_ssn,
    PredicateKind.PII_EMAIL: has_email,
    PredicateKind.PII_PHONE: has_phone,
}


def pii(
    kind: PredicateKind, document: Document, path: str, args: Sequence[str], negate: bool
) -> bool:
    """Search the field for personal data of the given kind.

    ``PII_ANY`` runs every detector and matches if any of them does.

    Raises:
        MatchError: If ``kind`` is not a PII kind.
    """
    if kind == PredicateKind.PII_ANY:
        detectors = list(DETECTORS.items())
    elif kind in DETECTORS:
        detectors = [(kind, DETECTORS[kind])]
    else:
        raise MatchError(f"unknown pii match type: {kind!r}")

    field = resolve_and_coerce(document, path, str)
    for detector_kind, detect in detectors:
        if detect(field):
            logger.debug("%s detected at %r", detector_kind.name, path)
            return True
    return False
