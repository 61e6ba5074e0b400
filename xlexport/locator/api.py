from __future__ import annotations

from openpyxl import Workbook

from xlexport.schema.api import ColumnSchema
from .locator import SheetLocator, SheetLocatorError, header_labels, last_populated_row
from .model import LocatedSheet


def locate_sheet(workbook: Workbook, sheet_name: str, schema: ColumnSchema) -> LocatedSheet:
    """Public API (SheetLocator)

    Contract:
    - Missing sheet: create it, bold+centered header from schema labels at row 1,
      first_writable_row=2, is_new_sheet=True.
    - Existing sheet: header untouched, first_writable_row = last populated row + 1.
    - Existing but fully empty sheet: header written, first_writable_row=2.
    - Sheet names match exactly (case-sensitive); a name equal to an existing
      one except for case -> SheetLocatorError.
    """
    return SheetLocator().locate(workbook, sheet_name, schema)
