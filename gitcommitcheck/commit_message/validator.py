"""Commit message validation."""
from typing import List
from ..models import ValidationResult
from .validation import DEFAULT_MAX_SUBJECT_LENGTH, create_validation_chain

# Unicode White_Space; str.isspace() would also match the separators \x1c-\x1f
WHITESPACE = "\t\n\x0b\x0c\r \x85\xa0" + "".join(
    chr(c) for c in [0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000]
)

def extract_subject(message: str) -> str:
    """Return the first line of a commit message without trailing whitespace."""
    return message.split('\n', 1)[0].rstrip(WHITESPACE)

class CommitMessageValidator:
    """Validates commit subjects against conventional commit standards."""

    def __init__(self, max_subject_length: int = DEFAULT_MAX_SUBJECT_LENGTH):
        self.max_subject_length = max_subject_length
        self.validation_chain = create_validation_chain(max_subject_length)

    def validate_subject(self, subject: str) -> List[str]:
        """Validate an already extracted subject line."""
        return self.validation_chain.handle(subject)

    def validate(self, message: str) -> List[str]:
        """Validate the subject line of a full commit message."""
        return self.validate_subject(extract_subject(message))

    def check(self, message: str) -> ValidationResult:
        subject = extract_subject(message)
        return ValidationResult(subject=subject, violations=self.validate_subject(subject))

def validate_subject(subject: str) -> List[str]:
    """Validate a subject line with the default rules."""
    return CommitMessageValidator().validate_subject(subject)
