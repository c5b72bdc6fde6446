"""Excel report of a logical schema."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from entity_schema_mapper.schema_building.logical_schema import LogicalSchema
from entity_schema_mapper.schema_validation.validation_outcomes import ValidationResult

from .constants import (
    COLUMN_COLUMNS,
    COLUMNS_SHEET_NAME,
    INDEX_COLUMNS,
    INDEXES_SHEET_NAME,
    TABLE_COLUMNS,
    TABLES_SHEET_NAME,
    VALIDATION_COLUMNS,
    VALIDATION_SHEET_NAME,
)


def write_schema_workbook(
    schema: LogicalSchema,
    validation: ValidationResult,
    output_path: Path | str,
) -> Path:
    """Write tables, columns, indexes and validation issues to one workbook."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = TABLES_SHEET_NAME

    _write_rows(
        sheet,
        TABLE_COLUMNS,
        (
            (
                table.schema,
                table.name,
                table.source_type,
                table.key.name if table.key else None,
                ", ".join(table.key.column_names) if table.key else None,
            )
            for table in schema.tables
        ),
    )
    _write_rows(
        workbook.create_sheet(COLUMNS_SHEET_NAME),
        COLUMN_COLUMNS,
        (
            (
                table.schema,
                table.name,
                column.name,
                column.source.name,
                column.source.value_kind.value,
                "yes" if column.nullable else "no",
                column.backing_storage,
                column.access_mode.value if column.access_mode else None,
            )
            for table in schema.tables
            for column in table.columns
        ),
    )
    _write_rows(
        workbook.create_sheet(INDEXES_SHEET_NAME),
        INDEX_COLUMNS,
        (
            (
                table.schema,
                table.name,
                index.name,
                ", ".join(index.column_names),
                "yes" if index.is_unique else "no",
            )
            for table in schema.tables
            for index in table.indexes
        ),
    )
    _write_rows(
        workbook.create_sheet(VALIDATION_SHEET_NAME),
        VALIDATION_COLUMNS,
        (
            (issue.kind.value, issue.schema, issue.table, issue.message)
            for issue in validation.issues
        ),
    )

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_rows(
    sheet: Worksheet, headers: Sequence[str], rows: Iterable[Sequence[object]]
) -> None:
    widths = [len(header) for header in headers]
    for column_index, header in enumerate(headers, start=1):
        cell = sheet.cell(row=1, column=column_index, value=header)
        cell.style = "Headline 3"
    for row_index, row in enumerate(rows, start=2):
        for column_index, value in enumerate(row, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)
            if value is not None:
                widths[column_index - 1] = max(widths[column_index - 1], len(str(value)))
    for column_index, width in enumerate(widths, start=1):
        sheet.column_dimensions[get_column_letter(column_index)].width = max(12, min(width + 4, 60))
    sheet.freeze_panes = "A2"
