"""Commit subject validation package."""

from .validation import (
    ValidationHandler,
    create_validation_chain,
    parse_subject,
)
from .validator import CommitMessageValidator, extract_subject, validate_subject

__all__ = [
    'ValidationHandler',
    'create_validation_chain',
    'parse_subject',
    'CommitMessageValidator',
    'extract_subject',
    'validate_subject',
]
