"""Subject line validation using Chain of Responsibility pattern.

Every handler reports its own violations and decides whether the rest of
the chain still runs, so a single pass collects all applicable violations.
"""
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..models import CommitType, ParsedSubject

DEFAULT_MAX_SUBJECT_LENGTH = 72

SUBJECT_PATTERN = re.compile(
    r"(?P<type>" + "|".join(t.value for t in CommitType) + r")"
    r"(?:\((?P<scope>[^)]+)\))?"
    r": (?P<description>.+)"
)

EMPTY_SUBJECT = "Subject line is empty"
INVALID_FORMAT = "Subject must match <type>(<optional-scope>): <description> with a valid type"
DESCRIPTION_PERIOD = "Description must not end with a period"
DESCRIPTION_CASE = "Description must be lowercase"


def parse_subject(subject: str) -> Optional[ParsedSubject]:
    """Split a conventional subject into type, scope and description.

    Returns None when the whole subject does not match.
    """
    match = SUBJECT_PATTERN.fullmatch(subject)
    if not match:
        return None
    return ParsedSubject(
        type=CommitType(match.group("type")),
        scope=match.group("scope"),
        description=match.group("description"),
    )


class ValidationHandler(ABC):
    """Abstract base class for validation handlers."""

    def __init__(self, next_handler: Optional['ValidationHandler'] = None):
        self.next_handler = next_handler

    def handle(self, subject: str) -> List[str]:
        """Validate and pass to the next handler unless this one stops the chain."""
        violations, proceed = self.validate(subject)
        if not proceed or not self.next_handler:
            return violations
        return violations + self.next_handler.handle(subject)

    @abstractmethod
    def validate(self, subject: str) -> Tuple[List[str], bool]:
        """Return the violations found and whether the chain should continue."""
        pass

class EmptySubjectHandler(ValidationHandler):
    """Rejects an empty subject; nothing else is checked after that."""

    def validate(self, subject: str) -> Tuple[List[str], bool]:
        if not subject:
            return [EMPTY_SUBJECT], False
        return [], True

class SubjectLengthHandler(ValidationHandler):
    """Validates the subject line length in characters."""

    def __init__(self, max_length: int = DEFAULT_MAX_SUBJECT_LENGTH,
                 next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.max_length = max_length

    def validate(self, subject: str) -> Tuple[List[str], bool]:
        length = len(subject)
        if length > self.max_length:
            return [f"Subject line is {length} characters; must be {self.max_length} or fewer"], True
        return [], True

class ConventionalFormatHandler(ValidationHandler):
    """Validates the <type>(<scope>): <description> structure."""

    def validate(self, subject: str) -> Tuple[List[str], bool]:
        if parse_subject(subject) is None:
            return [INVALID_FORMAT], False
        return [], True

class DescriptionHandler(ValidationHandler):
    """Base for handlers that only look at the description part."""

    def validate(self, subject: str) -> Tuple[List[str], bool]:
        parsed = parse_subject(subject)
        if parsed is None:
            return [], True
        return self.validate_description(parsed.description), True

    @abstractmethod
    def validate_description(self, description: str) -> List[str]:
        pass

class DescriptionPeriodHandler(DescriptionHandler):
    """Validates that the description doesn't end with a period."""

    def validate_description(self, description: str) -> List[str]:
        if description.endswith('.'):
            return [DESCRIPTION_PERIOD]
        return []

class DescriptionCaseHandler(DescriptionHandler):
    """Validates that the description has no uppercase characters."""

    def validate_description(self, description: str) -> List[str]:
        if description != description.lower():
            return [DESCRIPTION_CASE]
        return []

def create_validation_chain(max_subject_length: int = DEFAULT_MAX_SUBJECT_LENGTH) -> ValidationHandler:
    """Create the default validation chain."""
    description_case = DescriptionCaseHandler()
    description_period = DescriptionPeriodHandler(description_case)
    conventional = ConventionalFormatHandler(description_period)
    subject_length = SubjectLengthHandler(max_subject_length, conventional)
    empty_subject = EmptySubjectHandler(subject_length)

    return empty_subject
