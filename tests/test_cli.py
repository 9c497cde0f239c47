import pytest

from fieldmatch.cli import main

DOCUMENT = '{"user": {"role": "admin", "age": 30}}'


def test_evaluate_match(capsys):
    code = main(["evaluate", "--document", DOCUMENT, "--kind", "string_equal", "--path", "user.role", "--arg", "admin"])
    assert code == 0
    assert capsys.readouterr().out.strip() == "match"


def test_evaluate_no_match_with_code_and_negate(capsys):
    code = main(["evaluate", "--document", DOCUMENT, "--kind", "3003", "--path", "user.age", "--arg", "18", "--negate"])
    assert code == 0
    code = main(["evaluate", "--document", DOCUMENT, "--kind", "3003", "--path", "user.age", "--arg", "18"])
    assert code == 3
    assert capsys.readouterr().out.splitlines() == ["match", "no match"]


def test_evaluate_request_and_document_file(tmp_path, capsys):
    doc_path = tmp_path / "doc.json"
    doc_path.write_text(DOCUMENT, encoding="utf-8")
    request = '{"kind": "has_field", "path": "user.email"}'
    code = main(["evaluate", "--document", f"@{doc_path}", "--request", request])
    assert code == 3


def test_evaluate_error_exit_code(capsys):
    code = main(["evaluate", "--document", DOCUMENT, "--kind", "is_empty", "--path", "user.missing"])
    assert code == 1
    assert "not found" in capsys.readouterr().err


def test_kinds_and_unknown_command(capsys):
    assert main(["kinds"]) == 0
    assert "1005\tstring_equal" in capsys.readouterr().out
    assert main(["bogus"]) == 2


def test_invalid_log_level_is_a_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        main(["evaluate", "--document", DOCUMENT, "--kind", "has_field", "--path", "user", "--log-level", "LOUD"])
    assert exc_info.value.code == 2


def test_log_level_is_case_insensitive(capsys):
    code = main(["evaluate", "--document", DOCUMENT, "--kind", "has_field", "--path", "user", "--log-level", "debug"])
    assert code == 0


def test_non_ascii_digit_kind_is_rejected(capsys):
    code = main(["evaluate", "--document", DOCUMENT, "--kind", "١٠٠٥", "--path", "user.role", "--arg", "admin"])
    assert code == 1
    assert "unknown predicate kind" in capsys.readouterr().err
