from __future__ import annotations

from typing import Any, Optional, Sequence

from openpyxl.worksheet.worksheet import Worksheet

from xlexport.config.model import Settings
from xlexport.schema.api import ColumnSchema, DataKind
from .model import ProjectionFormats
from .projector import ProjectionError, RowProjector, autofit_columns, cell_value


def formats_from_settings(settings: Settings) -> ProjectionFormats:
    return ProjectionFormats(
        number_formats={
            DataKind.DATE: settings.date_format,
            DataKind.DATETIME: settings.datetime_format,
            DataKind.TIME: settings.time_format,
        },
        max_column_width=settings.max_column_width,
    )


def project_rows(
    ws: Worksheet,
    schema: ColumnSchema,
    items: Sequence[Any],
    start_row: int,
    formats: Optional[ProjectionFormats] = None,
) -> int:
    """Public API (RowProjector)

    Contract:
    - items[i] -> row start_row+i, schema column c -> sheet column c+1.
    - DATE/DATETIME/TIME columns: number format on rows start_row..end_row only.
    - Columns autofit once after all rows.
    - Returns the last written row (start_row-1 when items is empty).
    - Item of another type than the schema's -> ProjectionError.
    """
    return RowProjector(formats).project(ws, schema, items, start_row)
