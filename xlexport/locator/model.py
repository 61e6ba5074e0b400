from dataclasses import dataclass

from openpyxl.worksheet.worksheet import Worksheet


@dataclass(frozen=True)
class LocatedSheet:
    sheet: Worksheet
    first_writable_row: int
    is_new_sheet: bool
    header_written: bool = False
