from __future__ import annotations

from typing import Any, Iterable, Optional

from .model import (
    CollectionError,
    EmptyCollectionError,
    HeterogeneousCollectionError,
    RecordCollection,
)

MAX_SHEET_NAME = 31
DEFAULT_SHEET_NAME = "Data"
_INVALID_SHEET_CHARS = set(':\\/?*[]')


def sheet(items: Iterable[Any], name: Optional[str] = None) -> RecordCollection:
    """Public API (SheetSpec)

    Contract:
    - Empty items -> EmptyCollectionError.
    - Mixed record types -> HeterogeneousCollectionError.
    """
    return RecordCollection(items=tuple(items), name=name)


def effective_name(collection: RecordCollection) -> str:
    """Sheet name to use: the explicit name, else the record type's class name, sanitized."""
    return sanitize_sheet_name(collection.name or collection.record_type.__name__)


def sanitize_sheet_name(name: str) -> str:
    """Drop characters xlsx forbids in sheet names, cut to 31 chars, fall back to "Data"."""
    cleaned = "".join(ch for ch in str(name) if ch not in _INVALID_SHEET_CHARS).strip()
    # a leading or trailing apostrophe is reserved too
    cleaned = cleaned.strip("'")[:MAX_SHEET_NAME].rstrip().rstrip("'")
    return cleaned or DEFAULT_SHEET_NAME
