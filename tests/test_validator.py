"""Tests for the commit message validator."""
import pytest

from gitcommitcheck.commit_message import (
    CommitMessageValidator,
    extract_subject,
    validate_subject,
)

INVALID_FORMAT = "Subject must match <type>(<optional-scope>): <description> with a valid type"


def test_valid_subject():
    assert validate_subject("feat: add login page") == []


def test_period_and_case_violations():
    assert validate_subject("feat: Add login page.") == [
        "Description must not end with a period",
        "Description must be lowercase",
    ]


def test_empty_subject():
    assert validate_subject("") == ["Subject line is empty"]


def test_scoped_subject():
    assert validate_subject("fix(parser): handle empty input") == []


def test_length_violation_only():
    subject = "chore: " + "a" * 66
    assert len(subject) == 73
    assert validate_subject(subject) == [
        "Subject line is 73 characters; must be 72 or fewer"
    ]


def test_72_characters_is_allowed():
    assert validate_subject("chore: " + "a" * 65) == []


def test_missing_type():
    assert validate_subject("update readme") == [INVALID_FORMAT]


def test_unknown_type_skips_description_checks():
    assert validate_subject("feature: Add X.") == [INVALID_FORMAT]


def test_length_and_structure_are_independent():
    subject = "x" * 80
    assert validate_subject(subject) == [
        "Subject line is 80 characters; must be 72 or fewer",
        INVALID_FORMAT,
    ]


def test_length_counts_characters():
    # 73 characters but well over 73 bytes
    subject = "docs: " + "é" * 67
    assert validate_subject(subject) == [
        "Subject line is 73 characters; must be 72 or fewer"
    ]


def test_validate_is_repeatable():
    subject = "feat: Add login page."
    assert validate_subject(subject) == validate_subject(subject)


@pytest.mark.parametrize("message, subject", [
    ("feat: add x\n\nbody\n", "feat: add x"),
    ("feat: add x   \t\n", "feat: add x"),
    ("feat: add x\r\nbody", "feat: add x"),
    ("  feat: add x\n", "  feat: add x"),
    ("", ""),
    ("\nfeat: add x", ""),
])
def test_extract_subject(message, subject):
    assert extract_subject(message) == subject


def test_validator_uses_first_line_only():
    validator = CommitMessageValidator()
    assert validator.validate("fix: handle it\n\nBody With Capitals.\n") == []
    assert validator.validate("\nfix: handle it") == ["Subject line is empty"]


def test_leading_whitespace_is_not_stripped():
    assert CommitMessageValidator().validate("  feat: add x") == [INVALID_FORMAT]


def test_custom_max_subject_length():
    validator = CommitMessageValidator(max_subject_length=20)
    assert validator.validate_subject("feat: a long enough subject") == [
        "Subject line is 27 characters; must be 20 or fewer"
    ]


def test_check_returns_result():
    result = CommitMessageValidator().check("feat: Add login page.\n")
    assert result.subject == "feat: Add login page."
    assert not result.is_valid
    assert result.violations == [
        "Description must not end with a period",
        "Description must be lowercase",
    ]

    result = CommitMessageValidator().check("feat: add login page\n")
    assert result.is_valid
    assert result.violations == []


def test_extract_subject_keeps_information_separators():
    assert extract_subject("feat: add x\x1f\n") == "feat: add x\x1f"


def test_extract_subject_strips_unicode_whitespace():
    assert extract_subject("feat: add x" + chr(0x3000) + chr(0xA0) + "\n") == "feat: add x"
