"""Schema building exports."""

from .logical_schema import LogicalColumn, LogicalIndex, LogicalKey, LogicalSchema, LogicalTable
from .naming_conventions import (
    TABLE_NAMING_CONVENTIONS,
    TableNamingConvention,
    identity_table_name,
    pluralized_table_name,
)
from .schema_builder import (
    DEFAULT_BUILD_SETTINGS,
    BuildSettings,
    ConflictError,
    InvalidMemberError,
    build_logical_schema,
)

__all__ = [
    "LogicalColumn",
    "LogicalIndex",
    "LogicalKey",
    "LogicalSchema",
    "LogicalTable",
    "TABLE_NAMING_CONVENTIONS",
    "TableNamingConvention",
    "identity_table_name",
    "pluralized_table_name",
    "DEFAULT_BUILD_SETTINGS",
    "BuildSettings",
    "ConflictError",
    "InvalidMemberError",
    "build_logical_schema",
]
