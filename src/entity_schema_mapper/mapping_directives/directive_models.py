"""Mapping directive entities.

Each directive is an immutable record naming its target by type (and member)
name. Targets are resolved by the schema builder, not here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PropertyAccessMode(str, Enum):
    """How reads and writes of a member reach its value."""

    FIELD = "field"
    FIELD_DURING_CONSTRUCTION = "field_during_construction"
    PROPERTY = "property"
    PREFER_FIELD = "prefer_field"
    PREFER_FIELD_DURING_CONSTRUCTION = "prefer_field_during_construction"
    PREFER_PROPERTY = "prefer_property"


@dataclass(frozen=True)
class RenameTable:
    """Map a type onto a table with an explicit name."""

    type_name: str
    table_name: str


@dataclass(frozen=True)
class SetSchema:
    """Set a table schema, or the build default schema when no type is given."""

    schema: str
    type_name: str | None = None


@dataclass(frozen=True)
class RenameColumn:
    """Map a member onto a column with an explicit name."""

    type_name: str
    member_name: str
    column_name: str


@dataclass(frozen=True)
class SetKeyName:
    """Give the implicit key of a type an explicit constraint name."""

    type_name: str
    key_name: str


@dataclass(frozen=True)
class DefineCompositeIndex:
    """Define an index over an ordered list of members."""

    type_name: str
    member_names: tuple[str, ...]
    index_name: str | None = None
    unique: bool = False


@dataclass(frozen=True)
class ExcludeType:
    """Remove a type from the mapped model."""

    type_name: str


@dataclass(frozen=True)
class SetBackingStorage:
    """Route reads and writes of a member through a named storage slot."""

    type_name: str
    member_name: str
    storage_name: str
    access_mode: PropertyAccessMode = PropertyAccessMode.PREFER_FIELD


MappingDirective = (
    RenameTable
    | SetSchema
    | RenameColumn
    | SetKeyName
    | DefineCompositeIndex
    | ExcludeType
    | SetBackingStorage
)
