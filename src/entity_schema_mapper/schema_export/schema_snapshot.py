"""Plain-data snapshot of a logical schema."""

from __future__ import annotations

from typing import Any

from entity_schema_mapper.schema_building.logical_schema import (
    LogicalColumn,
    LogicalSchema,
    LogicalTable,
)


def logical_schema_to_dict(schema: LogicalSchema) -> dict[str, Any]:
    """Return a JSON-serializable view of the schema, tables in build order."""
    return {"tables": [_table_to_dict(table) for table in schema.tables]}


def _table_to_dict(table: LogicalTable) -> dict[str, Any]:
    return {
        "schema": table.schema,
        "name": table.name,
        "source_type": table.source_type,
        "columns": [_column_to_dict(column) for column in table.columns],
        "key": (
            None
            if table.key is None
            else {"name": table.key.name, "columns": list(table.key.column_names)}
        ),
        "indexes": [
            {"name": index.name, "columns": list(index.column_names), "unique": index.is_unique}
            for index in table.indexes
        ],
    }


def _column_to_dict(column: LogicalColumn) -> dict[str, Any]:
    return {
        "name": column.name,
        "member": column.source.name,
        "kind": column.source.value_kind.value,
        "nullable": column.nullable,
        "backing_storage": column.backing_storage,
        "access_mode": None if column.access_mode is None else column.access_mode.value,
    }
