from __future__ import annotations

import logging
from typing import Any, List, Tuple

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font
from openpyxl.worksheet.worksheet import Worksheet

from xlexport.projector.projector import cell_value, write_cell
from xlexport.schema.api import ColumnSchema
from .model import LocatedSheet

logger = logging.getLogger(__name__)

HEADER_ROW = 1
HEADER_FONT = Font(bold=True)
HEADER_ALIGNMENT = Alignment(horizontal="center")


class SheetLocatorError(RuntimeError):
    pass


class SheetLocator:
    def locate(self, workbook: Workbook, sheet_name: str, schema: ColumnSchema) -> LocatedSheet:
        # exact, case-sensitive lookup
        if sheet_name not in workbook.sheetnames:
            clash = [n for n in workbook.sheetnames if n.lower() == sheet_name.lower()]
            if clash:
                # xlsx forbids names that differ only by case
                raise SheetLocatorError(f"sheet name '{sheet_name}' clashes with existing '{clash[0]}'")
            ws = workbook.create_sheet(sheet_name)
            self._write_header(ws, schema)
            logger.info("created sheet '%s' with %d columns", sheet_name, len(schema))
            return LocatedSheet(sheet=ws, first_writable_row=HEADER_ROW + 1, is_new_sheet=True, header_written=True)

        ws = workbook[sheet_name]
        last = last_populated_row(ws)
        if last == 0:
            # sheet exists (e.g. from a template) but holds nothing yet
            self._write_header(ws, schema)
            return LocatedSheet(sheet=ws, first_writable_row=HEADER_ROW + 1, is_new_sheet=False, header_written=True)

        logger.debug("sheet '%s' exists, frontier row %d", sheet_name, last + 1)
        return LocatedSheet(sheet=ws, first_writable_row=last + 1, is_new_sheet=False)

    def _write_header(self, ws: Worksheet, schema: ColumnSchema) -> None:
        for col, label in enumerate(schema.labels, start=1):
            cell = write_cell(ws, HEADER_ROW, col, cell_value(label))
            cell.font = HEADER_FONT
            cell.alignment = HEADER_ALIGNMENT


def last_populated_row(ws: Worksheet) -> int:
    """Highest row holding at least one non-empty value, 0 for an empty sheet.

    Rows that only carry formatting do not count. Only existing cells are read.
    """
    last = 0
    for (row, _), cell in ws._cells.items():
        if row > last and cell.value is not None and cell.value != "":
            last = row
    return last


def header_labels(ws: Worksheet) -> Tuple[Any, ...]:
    """Values of the header row, trailing blanks dropped."""
    cells = sorted((col, cell.value) for (row, col), cell in ws._cells.items() if row == HEADER_ROW)
    values: List[Any] = [None] * (cells[-1][0] if cells else 0)
    for col, value in cells:
        values[col - 1] = value
    while values and values[-1] is None:
        values.pop()
    return tuple(values)
