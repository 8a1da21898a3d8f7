"""Shared models for git-commit-check."""
from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, Field

class CommitType(str, Enum):
    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    TEST = "test"
    CHORE = "chore"

class ParsedSubject(BaseModel):
    type: CommitType
    scope: Optional[str]
    description: str

class ValidationResult(BaseModel):
    subject: str = Field(description="Subject line that was checked")
    violations: List[str] = Field(default_factory=list, description="Violations in check order")

    @property
    def is_valid(self) -> bool:
        return not self.violations
