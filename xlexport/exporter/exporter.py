from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple
from zipfile import BadZipFile

from openpyxl import Workbook
from openpyxl.utils.cell import coordinate_from_string
from openpyxl.utils.exceptions import CellCoordinatesException, InvalidFileException
from openpyxl.worksheet.views import Selection

from xlexport.config.model import Settings
from xlexport.fileroute.model import FileRoute
from xlexport.output.api import save_output
from xlexport.projector.api import formats_from_settings
from xlexport.sheetspec.api import sanitize_sheet_name
from xlexport.sheetspec.model import RecordCollection
from xlexport.source.model import SourceKind
from xlexport.source.source import BlankSource
from .model import OpenSelection, SheetWrite
from .pipeline import open_workbook, serialize, write_collection

logger = logging.getLogger(__name__)


class ExportError(RuntimeError):
    pass


class XlExporter:
    """Owns one workbook for its whole lifetime; not safe to share between threads.

    The first ``run()`` loads the template (or synthesizes a blank workbook from the
    pending sheets), later runs append whatever was queued with ``add_sheets``.
    """

    def __init__(
        self,
        sheets: Iterable[RecordCollection],
        file_route: FileRoute,
        selected: Optional[Tuple[str, str]] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.file_route = file_route
        self.settings = settings or Settings()
        self.open_selection = _parse_selection(selected)
        self.source_kind: Optional[SourceKind] = None
        self.last_writes: Tuple[SheetWrite, ...] = ()

        self._formats = formats_from_settings(self.settings)
        self._pending: List[RecordCollection] = list(sheets)
        self._workbook: Optional[Workbook] = None

    @property
    def workbook(self) -> Optional[Workbook]:
        return self._workbook

    def add_sheets(self, sheets: Iterable[RecordCollection]) -> None:
        self._pending.extend(sheets)

    def run(self) -> bytes:
        writes: List[SheetWrite] = []
        if self._workbook is None:
            writes.extend(self._load_or_create())

        pending, self._pending = self._pending, []
        for collection in pending:
            writes.append(write_collection(self._workbook, collection, self._formats))

        if self.open_selection is not None:
            self._apply_selection(self.open_selection)

        data = serialize(self._workbook)
        self.last_writes = tuple(writes)
        logger.info("serialized '%s' (%d bytes, %d sheets written)", self.file_route.file_name, len(data), len(writes))

        route = self.file_route
        return save_output(data, route.output, route.file_name, route.backup_path, route.stream)

    def _load_or_create(self) -> Sequence[SheetWrite]:
        source = self.file_route.source
        if source is not None and source.kind is SourceKind.TEMPLATE and source.is_valid():
            wb = self._open_template(source.load(), source.location)
            if wb is not None:
                self._workbook = wb
                self.source_kind = SourceKind.TEMPLATE
                return ()

        # blank synthesis consumes every sheet queued so far
        blank = BlankSource(self._pending, self.settings)
        self._pending = []
        self._workbook = open_workbook(blank.load())
        self.source_kind = SourceKind.BLANK
        return blank.writes

    def _open_template(self, data: bytes, location: str) -> Optional[Workbook]:
        try:
            wb = open_workbook(data)
        except (InvalidFileException, BadZipFile, KeyError, ValueError) as e:
            logger.warning("template '%s' is not a readable workbook, using blank workbook: %s", location, e)
            return None
        logger.info("loaded template '%s' (%d sheets)", location, len(wb.sheetnames))
        return wb

    def _apply_selection(self, selection: OpenSelection) -> None:
        wb = self._workbook
        if selection.sheet not in wb.sheetnames:
            logger.warning("open selection sheet '%s' not found, ignored", selection.sheet)
            return

        ws = wb[selection.sheet]
        view = ws.sheet_view
        if view.selection:
            view.selection[0].activeCell = selection.cell
            view.selection[0].sqref = selection.cell
        else:
            view.selection = [Selection(activeCell=selection.cell, sqref=selection.cell)]
        for other in wb.worksheets:
            other.sheet_view.tabSelected = other is ws
        wb.active = ws


def _parse_selection(selected: Optional[Tuple[str, str]]) -> Optional[OpenSelection]:
    if selected is None:
        return None
    try:
        sheet, cell = selected
    except (TypeError, ValueError) as e:
        raise ExportError(f"selection must be (sheet, cell), got {selected!r}") from e
    cell = str(cell).strip().upper()
    try:
        coordinate_from_string(cell)
    except CellCoordinatesException as e:
        raise ExportError(f"invalid cell address for selection: {selected[1]!r}") from e
    return OpenSelection(sheet=sanitize_sheet_name(str(sheet)), cell=cell)
