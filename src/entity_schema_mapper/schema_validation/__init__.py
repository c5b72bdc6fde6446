"""Schema validation exports."""

from .schema_validator import SchemaValidationError, ensure_valid, validate_schema
from .validation_outcomes import ValidationErrorKind, ValidationIssue, ValidationResult

__all__ = [
    "SchemaValidationError",
    "ensure_valid",
    "validate_schema",
    "ValidationErrorKind",
    "ValidationIssue",
    "ValidationResult",
]
