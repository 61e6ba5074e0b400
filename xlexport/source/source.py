from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from xlexport.config.api import resolve_file
from xlexport.config.model import Settings
from xlexport.exporter.pipeline import synthesize_blank
from xlexport.sheetspec.model import RecordCollection
from .model import SourceKind

logger = logging.getLogger(__name__)


class SourceError(RuntimeError):
    pass


class TemplateSource:
    """Workbook template on disk. Located once, at construction."""

    kind = SourceKind.TEMPLATE

    def __init__(self, location: str, settings: Optional[Settings] = None) -> None:
        self.location = location
        self.path: Optional[Path] = resolve_file(location, settings or Settings())
        if self.path is None:
            logger.warning("template '%s' not found", location)

    def is_valid(self) -> bool:
        return self.path is not None

    def load(self) -> bytes:
        if self.path is None:
            raise SourceError(f"template not found: {self.location}")
        with open(self.path, "rb") as fh:
            return fh.read()


class BlankSource:
    """Workbook synthesized from the collections themselves (header + rows per sheet)."""

    kind = SourceKind.BLANK

    def __init__(self, sheets: Sequence[RecordCollection], settings: Optional[Settings] = None) -> None:
        self.sheets = tuple(sheets)
        self._data, self.writes = synthesize_blank(self.sheets, settings or Settings())

    def is_valid(self) -> bool:
        return True

    def load(self) -> bytes:
        return self._data
