from __future__ import annotations

from typing import Optional, Sequence, Union

from xlexport.config.model import Settings
from xlexport.sheetspec.model import RecordCollection
from .model import SourceKind
from .source import BlankSource, SourceError, TemplateSource

Source = Union[BlankSource, TemplateSource]


def template_source(location: str, settings: Optional[Settings] = None) -> TemplateSource:
    """Public API (Source)

    Contract:
    - location: settings path key, base_dir relative path or plain path.
    - Not found -> is_valid() False (never raises here).
    - load() reads the whole file and closes it.
    """
    return TemplateSource(location, settings)


def blank_source(sheets: Sequence[RecordCollection], settings: Optional[Settings] = None) -> BlankSource:
    """Public API (Source): synthesize a workbook from sheets; always valid."""
    return BlankSource(sheets, settings)
