"""Shared schema export constants."""

from __future__ import annotations

TABLES_SHEET_NAME = "Tables"
COLUMNS_SHEET_NAME = "Columns"
INDEXES_SHEET_NAME = "Indexes"
VALIDATION_SHEET_NAME = "Validation"

TABLE_COLUMNS: tuple[str, ...] = ("Schema", "Table", "Source Type", "Key", "Key Columns")
COLUMN_COLUMNS: tuple[str, ...] = (
    "Schema",
    "Table",
    "Column",
    "Member",
    "Kind",
    "Nullable",
    "Backing Storage",
    "Access Mode",
)
INDEX_COLUMNS: tuple[str, ...] = ("Schema", "Table", "Index", "Columns", "Unique")
VALIDATION_COLUMNS: tuple[str, ...] = ("Kind", "Schema", "Table", "Message")
