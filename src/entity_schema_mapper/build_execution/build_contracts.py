"""Build execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from entity_schema_mapper.schema_building.logical_schema import LogicalSchema
from entity_schema_mapper.schema_validation.validation_outcomes import ValidationResult


@dataclass(frozen=True)
class BuildRequest:
    """Input contract for one schema build."""

    config_path: str
    output_path: str | None = None
    require_valid: bool = True


@dataclass(frozen=True)
class BuildOutcome:
    """Output contract for one completed schema build."""

    schema: LogicalSchema
    validation: ValidationResult
    output_path: Path | None
