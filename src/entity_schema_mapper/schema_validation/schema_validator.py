"""Logical schema validation service."""

from __future__ import annotations

import logging
from collections import Counter

from entity_schema_mapper.schema_building.logical_schema import LogicalSchema, LogicalTable

from .validation_outcomes import ValidationErrorKind, ValidationIssue, ValidationResult

_LOGGER = logging.getLogger(__name__)


class SchemaValidationError(Exception):
    """Raised when a logical schema violates one or more invariants."""

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        details = "; ".join(f"{issue.kind.value}: {issue.message}" for issue in result.issues)
        super().__init__(f"Logical schema is invalid ({len(result.issues)} issue(s)): {details}")


def validate_schema(schema: LogicalSchema) -> ValidationResult:
    """Run every check over the schema and collect all violations."""
    issues: list[ValidationIssue] = []
    issues.extend(_duplicate_table_issues(schema))
    for table in schema.tables:
        issues.extend(_missing_key_issues(table))
        issues.extend(_duplicate_column_issues(table))
        issues.extend(_dangling_index_issues(table))
    if issues:
        _LOGGER.debug("Validation found %d issue(s).", len(issues))
    return ValidationResult(issues=tuple(issues))


def ensure_valid(result: ValidationResult) -> None:
    """Raise `SchemaValidationError` unless the result carries no issues."""
    if not result.is_valid:
        raise SchemaValidationError(result)


def _duplicate_table_issues(schema: LogicalSchema) -> list[ValidationIssue]:
    counts = Counter((table.schema, table.name) for table in schema.tables)
    issues: list[ValidationIssue] = []
    reported: set[tuple[str | None, str]] = set()
    for table in schema.tables:
        identity = (table.schema, table.name)
        if counts[identity] < 2 or identity in reported:
            continue
        reported.add(identity)
        issues.append(
            ValidationIssue(
                kind=ValidationErrorKind.DUPLICATE_TABLE_NAME,
                schema=table.schema,
                table=table.name,
                message=f"{counts[identity]} tables are named '{table.qualified_name}'.",
            )
        )
    return issues


def _missing_key_issues(table: LogicalTable) -> list[ValidationIssue]:
    if table.key is not None and table.key.columns:
        return []
    return [
        ValidationIssue(
            kind=ValidationErrorKind.MISSING_KEY,
            schema=table.schema,
            table=table.name,
            message=f"Table '{table.qualified_name}' has no key.",
        )
    ]


def _duplicate_column_issues(table: LogicalTable) -> list[ValidationIssue]:
    counts = Counter(table.column_names)
    return [
        ValidationIssue(
            kind=ValidationErrorKind.DUPLICATE_COLUMN_NAME,
            schema=table.schema,
            table=table.name,
            message=f"Table '{table.qualified_name}' has {count} columns named '{name}'.",
        )
        for name, count in counts.items()
        if count > 1
    ]


def _dangling_index_issues(table: LogicalTable) -> list[ValidationIssue]:
    column_names = set(table.column_names)
    return [
        ValidationIssue(
            kind=ValidationErrorKind.DANGLING_INDEX_REFERENCE,
            schema=table.schema,
            table=table.name,
            message=(
                f"Index '{index.name}' on table '{table.qualified_name}' references "
                f"missing column '{column_name}'."
            ),
        )
        for index in table.indexes
        for column_name in index.column_names
        if column_name not in column_names
    ]
