from __future__ import annotations

from typing import Iterable, Optional, Tuple

from xlexport.config.model import Settings
from xlexport.fileroute.model import FileRoute
from xlexport.sheetspec.model import RecordCollection
from .exporter import ExportError, XlExporter
from .model import XLSX_CONTENT_TYPE, SheetWrite


def export(
    sheets: Iterable[RecordCollection],
    file_route: FileRoute,
    selected: Optional[Tuple[str, str]] = None,
    settings: Optional[Settings] = None,
) -> bytes:
    """Public API (Exporter)

    Contract:
    - Valid template -> loaded and appended to; otherwise a blank workbook is
      synthesized from the sheets (header + rows each) and nothing is written twice.
    - Sheets processed in order; existing sheets are appended below their last row.
    - selected=(sheet, "B2") marks the initially selected cell; unknown sheet ignored.
    - Serialized once, routed through file_route.output, bytes always returned.
    """
    return XlExporter(sheets, file_route, selected, settings).run()
