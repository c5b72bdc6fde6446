"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from entity_schema_mapper.mapping_directives.directive_models import MappingDirective
from entity_schema_mapper.schema_building.schema_builder import BuildSettings
from entity_schema_mapper.type_registry.descriptor_models import TypeDescriptor


@dataclass(frozen=True)
class MappingDocument:
    """Normalized mapping document: settings, entity types and directives."""

    path: Path
    settings: BuildSettings
    table_naming: str
    types: tuple[TypeDescriptor, ...]
    directives: tuple[MappingDirective, ...]
