"""Facade bundling a type registry and a directive set for one build pipeline."""

from __future__ import annotations

from entity_schema_mapper.mapping_directives.directive_models import MappingDirective
from entity_schema_mapper.mapping_directives.directive_set import MappingDirectiveSet
from entity_schema_mapper.schema_building.logical_schema import LogicalSchema
from entity_schema_mapper.schema_building.schema_builder import (
    DEFAULT_BUILD_SETTINGS,
    BuildSettings,
    build_logical_schema,
)
from entity_schema_mapper.schema_validation.schema_validator import ensure_valid, validate_schema
from entity_schema_mapper.schema_validation.validation_outcomes import ValidationResult
from entity_schema_mapper.type_registry.descriptor_models import TypeDescriptor
from entity_schema_mapper.type_registry.type_catalog import TypeRegistry


class SchemaMappingSession:
    """One independent build pipeline.

    Sessions share nothing, so separate sessions may build concurrently.
    """

    def __init__(self, settings: BuildSettings = DEFAULT_BUILD_SETTINGS) -> None:
        self.settings = settings
        self.registry = TypeRegistry()
        self.directives = MappingDirectiveSet()

    def register_type(self, descriptor: TypeDescriptor) -> None:
        self.registry.register(descriptor)

    def append_directive(self, directive: MappingDirective) -> None:
        self.directives.append(directive)

    def build(self) -> LogicalSchema:
        """Build the logical schema without validating it."""
        return build_logical_schema(self.registry, self.directives, self.settings)

    def validate(self, schema: LogicalSchema) -> ValidationResult:
        return validate_schema(schema)

    def build_validated(self) -> LogicalSchema:
        """Build and validate, returning the schema only when it has no issues.

        Raises:
          SchemaValidationError: If validation reports any issue.
        """
        schema = self.build()
        ensure_valid(self.validate(schema))
        return schema
