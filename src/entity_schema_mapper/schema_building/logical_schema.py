"""Logical schema entities produced by the schema builder."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from entity_schema_mapper.mapping_directives.directive_models import PropertyAccessMode
from entity_schema_mapper.type_registry.descriptor_models import MemberDescriptor


@dataclass(frozen=True)
class LogicalColumn:
    """Column mapped from one entity member."""

    name: str
    source: MemberDescriptor
    nullable: bool
    access_mode: PropertyAccessMode | None = None

    @property
    def backing_storage(self) -> str | None:
        """Return the storage slot reads and writes are routed through."""
        return self.source.backing_storage


@dataclass(frozen=True)
class LogicalKey:
    """Primary key over one or more columns."""

    columns: tuple[LogicalColumn, ...]
    name: str
    is_name_explicit: bool = False

    @property
    def column_names(self) -> tuple[str, ...]:
        return tuple(column.name for column in self.columns)


@dataclass(frozen=True)
class LogicalIndex:
    """Index over an ordered list of columns."""

    columns: tuple[LogicalColumn, ...]
    name: str
    is_unique: bool = False
    is_name_explicit: bool = False

    @property
    def column_names(self) -> tuple[str, ...]:
        return tuple(column.name for column in self.columns)


@dataclass(frozen=True)
class LogicalTable:
    """Table mapped from one entity type."""

    schema: str | None
    name: str
    columns: tuple[LogicalColumn, ...]
    key: LogicalKey | None = None
    indexes: tuple[LogicalIndex, ...] = ()
    source_type: str | None = None

    @property
    def qualified_name(self) -> str:
        return self.name if self.schema is None else f"{self.schema}.{self.name}"

    @property
    def column_names(self) -> tuple[str, ...]:
        return tuple(column.name for column in self.columns)

    def column(self, name: str) -> LogicalColumn | None:
        """Return the column with the given name, if present."""
        for column in self.columns:
            if column.name == name:
                return column
        return None


@dataclass(frozen=True)
class LogicalSchema:
    """Finished set of tables, independent of any storage engine syntax."""

    tables: tuple[LogicalTable, ...] = ()

    @property
    def schemas(self) -> Mapping[str | None, tuple[LogicalTable, ...]]:
        """Group tables by schema name, keeping table order within each group."""
        grouped: dict[str | None, list[LogicalTable]] = {}
        for table in self.tables:
            grouped.setdefault(table.schema, []).append(table)
        return {schema: tuple(tables) for schema, tables in grouped.items()}

    def find_table(self, name: str, schema: str | None = None) -> LogicalTable | None:
        """Return the first table with the given name in the given schema."""
        for table in self.tables:
            if table.name == name and table.schema == schema:
                return table
        return None

    def table_for_type(self, type_name: str) -> LogicalTable | None:
        """Return the table mapped from the given entity type."""
        for table in self.tables:
            if table.source_type == type_name:
                return table
        return None
