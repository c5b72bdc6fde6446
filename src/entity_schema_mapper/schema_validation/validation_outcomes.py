"""Validation outcome entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValidationErrorKind(str, Enum):
    """Kind of invariant violated by a logical schema."""

    MISSING_KEY = "MissingKeyError"
    DUPLICATE_TABLE_NAME = "DuplicateTableNameError"
    DUPLICATE_COLUMN_NAME = "DuplicateColumnNameError"
    DANGLING_INDEX_REFERENCE = "DanglingIndexReferenceError"


@dataclass(frozen=True)
class ValidationIssue:
    """One invariant violation found in a logical schema."""

    kind: ValidationErrorKind
    schema: str | None
    table: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Every violation found in one validation pass, in check order."""

    issues: tuple[ValidationIssue, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Return True when no issues are present."""
        return not self.issues

    def issues_of(self, kind: ValidationErrorKind) -> tuple[ValidationIssue, ...]:
        return tuple(issue for issue in self.issues if issue.kind == kind)
