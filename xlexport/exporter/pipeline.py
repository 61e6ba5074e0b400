from __future__ import annotations

import logging
from io import BytesIO
from typing import List, Sequence, Tuple

from openpyxl import Workbook, load_workbook

from xlexport.config.model import Settings
from xlexport.locator.api import header_labels, locate_sheet
from xlexport.projector.api import cell_value, formats_from_settings, project_rows
from xlexport.projector.model import ProjectionFormats
from xlexport.schema.api import resolve_schema
from xlexport.sheetspec.api import effective_name
from xlexport.sheetspec.model import HeterogeneousCollectionError, RecordCollection
from .model import STATUS_APPENDED, STATUS_CREATED, SheetWrite

logger = logging.getLogger(__name__)


def write_collection(workbook: Workbook, collection: RecordCollection, formats: ProjectionFormats) -> SheetWrite:
    """Resolve schema -> locate sheet -> project rows, for one collection."""
    name = effective_name(collection)
    schema = resolve_schema(collection.record_type)
    located = locate_sheet(workbook, name, schema)
    if not located.header_written:
        expected = tuple(cell_value(label) for label in schema.labels)
        found = header_labels(located.sheet)
        if found != expected:
            raise HeterogeneousCollectionError(
                f"sheet '{name}' has header {list(found)}, "
                f"{collection.record_type.__name__} needs {list(expected)}"
            )
    last_row = project_rows(located.sheet, schema, collection.items, located.first_writable_row, formats)

    status = STATUS_CREATED if located.header_written else STATUS_APPENDED
    logger.info("%s %d rows in sheet '%s'", status, len(collection), name)
    return SheetWrite(sheet_name=name, status=status, first_row=located.first_writable_row, last_row=last_row)


def new_workbook(drop_default: bool = True) -> Workbook:
    wb = Workbook()
    # drop the default sheet; a workbook with nothing to write keeps it
    if drop_default and "Sheet" in wb.sheetnames and len(wb.sheetnames) == 1:
        wb.remove(wb["Sheet"])
    return wb


def synthesize_blank(sheets: Sequence[RecordCollection], settings: Settings) -> Tuple[bytes, Tuple[SheetWrite, ...]]:
    formats = formats_from_settings(settings)
    wb = new_workbook(drop_default=bool(sheets))
    writes: List[SheetWrite] = [write_collection(wb, c, formats) for c in sheets]
    if writes:
        wb.active = wb[writes[0].sheet_name]
    logger.info("synthesized blank workbook with %d sheets", len(wb.sheetnames))
    return serialize(wb), tuple(writes)


def serialize(workbook: Workbook) -> bytes:
    buf = BytesIO()
    workbook.save(buf)
    return buf.getvalue()


def open_workbook(data: bytes) -> Workbook:
    with BytesIO(data) as buf:
        return load_workbook(buf)
