import json

import pytest

from fieldmatch import MatchError, PredicateKind
from fieldmatch.pii import has_credit_card, has_email, has_phone, has_ssn, luhn_valid, pii


def run(kind, value):
    return pii(kind, json.dumps({"field": value}).encode(), "field", [], False)


def test_luhn():
    assert luhn_valid("4111111111111111")
    assert luhn_valid("378282246310005")
    assert not luhn_valid("4111111111111112")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("card 4111 1111 1111 1111 on file", True),
        ("4111-1111-1111-1111", True),
        ("4111111111111112", False),
        ("order 12345", False),
    ],
)
def test_credit_card(text, expected):
    assert has_credit_card(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("ssn: 123-45-6789", True),
        ("000-12-3456", False),
        ("666-12-3456", False),
        ("923-12-3456", False),
        ("123-00-4567", False),
        ("123-45-0000", False),
        ("1123-45-6789", False),
    ],
)
def test_ssn(text, expected):
    assert has_ssn(text) is expected


def test_email_and_phone():
    assert has_email("contact: jane.doe+tag@example.co.uk")
    assert not has_email("jane at example dot com")
    assert has_phone("call (415) 555-2671 now")
    assert has_phone("+14155552671")
    assert not has_phone("version 1.2.3")


def test_pii_any_runs_every_detector():
    assert run(PredicateKind.PII_ANY, "reach me at bob@example.com") is True
    assert run(PredicateKind.PII_ANY, "nothing to see") is False


def test_pii_kind_selects_detector():
    assert run(PredicateKind.PII_EMAIL, "bob@example.com") is True
    assert run(PredicateKind.PII_SSN, "bob@example.com") is False


def test_pii_rejects_other_kinds():
    with pytest.raises(MatchError):
        run(PredicateKind.UUID, "bob@example.com")
