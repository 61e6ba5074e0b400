from dataclasses import dataclass

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

STATUS_CREATED = "created"
STATUS_APPENDED = "appended"


@dataclass(frozen=True)
class SheetWrite:
    sheet_name: str
    status: str  # created|appended
    first_row: int
    last_row: int

    @property
    def row_count(self) -> int:
        return self.last_row - self.first_row + 1


@dataclass(frozen=True)
class OpenSelection:
    sheet: str
    cell: str
