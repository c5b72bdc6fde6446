"""Schema export exports."""

from .constants import (
    COLUMNS_SHEET_NAME,
    INDEXES_SHEET_NAME,
    TABLES_SHEET_NAME,
    VALIDATION_SHEET_NAME,
)
from .schema_snapshot import logical_schema_to_dict
from .schema_workbook_writer import write_schema_workbook

__all__ = [
    "COLUMNS_SHEET_NAME",
    "INDEXES_SHEET_NAME",
    "TABLES_SHEET_NAME",
    "VALIDATION_SHEET_NAME",
    "logical_schema_to_dict",
    "write_schema_workbook",
]
