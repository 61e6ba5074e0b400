from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, Dict, Optional

from .model import Column, ColumnSchema, DataKind, XlMeta

logger = logging.getLogger(__name__)

META_KEY = "xlexport"
COMPANION_ATTR = "__xl_companion__"


class SchemaError(RuntimeError):
    pass


def xl_field(
    default: Any = dataclasses.MISSING,
    *,
    default_factory: Any = dataclasses.MISSING,
    ignore: Optional[bool] = None,
    friendly_name: Optional[str] = None,
    display: Optional[str] = None,
    kind: Optional[DataKind] = None,
) -> Any:
    """dataclasses.field() carrying export metadata."""
    meta = XlMeta(ignore=ignore, friendly_name=friendly_name, display=display, kind=kind)
    if default_factory is not dataclasses.MISSING:
        return dataclasses.field(default_factory=default_factory, metadata={META_KEY: meta})
    return dataclasses.field(default=default, metadata={META_KEY: meta})


def metadata_companion(companion: type) -> Callable[[type], type]:
    """Class decorator: use ``companion``'s same-named members as fallback metadata."""
    def wrap(cls: type) -> type:
        setattr(cls, COMPANION_ATTR, companion)
        return cls
    return wrap


class SchemaResolver:
    def __init__(self) -> None:
        self._cache: Dict[type, ColumnSchema] = {}

    def resolve(self, record_type: type) -> ColumnSchema:
        cached = self._cache.get(record_type)
        if cached is not None:
            return cached

        if not isinstance(record_type, type) or not dataclasses.is_dataclass(record_type):
            raise SchemaError(f"record type must be a dataclass: {record_type!r}")

        companion = self._companion_members(record_type)
        columns = []
        for f in dataclasses.fields(record_type):
            direct = f.metadata.get(META_KEY) or XlMeta()
            fallback = companion.get(f.name) or XlMeta()

            if _first(direct.ignore, fallback.ignore, False):
                continue

            label = _first(
                direct.friendly_name, direct.display,
                fallback.friendly_name, fallback.display,
                f.name,
            )
            kind = _first(direct.kind, fallback.kind, DataKind.TEXT)
            columns.append(Column(source_field=f.name, label=label, kind=kind))

        schema = ColumnSchema(record_type=record_type, columns=tuple(columns))
        logger.debug("resolved schema for %s: %s", record_type.__name__, list(schema.labels))
        self._cache[record_type] = schema
        return schema

    def _companion_members(self, record_type: type) -> Dict[str, XlMeta]:
        companion = getattr(record_type, COMPANION_ATTR, None)
        if companion is None:
            return {}

        members: Dict[str, XlMeta] = {}
        if dataclasses.is_dataclass(companion):
            for f in dataclasses.fields(companion):
                meta = f.metadata.get(META_KEY)
                if meta is not None:
                    members[f.name] = meta
        for name, value in vars(companion).items():
            if isinstance(value, XlMeta):
                members.setdefault(name, value)
        return members


def _first(*values: Any) -> Any:
    for v in values:
        if v is not None:
            return v
    return None


_default_resolver = SchemaResolver()


def default_resolver() -> SchemaResolver:
    return _default_resolver
