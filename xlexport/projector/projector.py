from __future__ import annotations

import datetime
import decimal
import logging
from enum import Enum
from typing import Any, Dict, Sequence

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE, Cell
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from xlexport.schema.api import ColumnSchema
from xlexport.schema.model import TEMPORAL_KINDS
from .model import ProjectionFormats

logger = logging.getLogger(__name__)

EMPTY_COLUMN_WIDTH = 15
WIDTH_PADDING = 2

_NATIVE_TYPES = (
    str, int, float, bool, decimal.Decimal,
    datetime.date, datetime.datetime, datetime.time, datetime.timedelta,
)


class ProjectionError(RuntimeError):
    pass


class RowProjector:
    def __init__(self, formats: ProjectionFormats | None = None) -> None:
        self.formats = formats or ProjectionFormats.default()

    def project(self, ws: Worksheet, schema: ColumnSchema, items: Sequence[Any], start_row: int) -> int:
        if start_row < 1:
            raise ProjectionError(f"start_row must be >= 1, got {start_row}")
        if not items:
            return start_row - 1

        row = start_row
        for item in items:
            if type(item) is not schema.record_type:
                raise ProjectionError(
                    f"row {row}: {type(item).__name__} does not match schema of {schema.record_type.__name__}"
                )
            for col, column in enumerate(schema.columns, start=1):
                write_cell(ws, row, col, cell_value(getattr(item, column.source_field)))
            row += 1
        end_row = row - 1

        self._apply_number_formats(ws, schema, start_row, end_row)
        autofit_columns(ws, self.formats.max_column_width)

        logger.debug("projected %d rows into '%s' (%d..%d)", len(items), ws.title, start_row, end_row)
        return end_row

    def _apply_number_formats(self, ws: Worksheet, schema: ColumnSchema, start_row: int, end_row: int) -> None:
        for col, column in enumerate(schema.columns, start=1):
            if column.kind not in TEMPORAL_KINDS:
                continue
            fmt = self.formats.number_formats.get(column.kind)
            if not fmt:
                continue
            for (cell,) in ws.iter_rows(min_row=start_row, max_row=end_row, min_col=col, max_col=col):
                cell.number_format = fmt


def cell_value(value: Any) -> Any:
    if isinstance(value, (datetime.datetime, datetime.time)) and value.tzinfo is not None:
        # xlsx has no timezone support; keep the wall-clock value
        return value.replace(tzinfo=None)
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    if value is None or isinstance(value, _NATIVE_TYPES):
        return value
    return ILLEGAL_CHARACTERS_RE.sub("", str(value))


def write_cell(ws: Worksheet, row: int, column: int, value: Any) -> Cell:
    """Store value as typed data; text starting with "=" stays text, never a formula."""
    cell = ws.cell(row=row, column=column, value=value)
    if isinstance(value, str) and cell.data_type == "f":
        cell.data_type = "s"
    return cell


def autofit_columns(ws: Worksheet, max_width: int) -> None:
    """Width of each column = longest rendered value + padding, capped at max_width."""
    longest: Dict[int, int] = {}
    # existing cells only; iter_cols would materialize the whole used range
    for (_, col), cell in ws._cells.items():
        if cell.value is None:
            continue
        longest[col] = max(longest.get(col, 0), len(str(cell.value)))

    for col in range(1, ws.max_column + 1):
        length = longest.get(col, 0)
        width = length + WIDTH_PADDING if length > 0 else EMPTY_COLUMN_WIDTH
        ws.column_dimensions[get_column_letter(col)].width = min(width, max_width)
