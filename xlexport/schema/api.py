from __future__ import annotations

from .model import Column, ColumnSchema, DataKind, XlMeta
from .schema import SchemaError, metadata_companion, xl_field, default_resolver


def resolve_schema(record_type: type) -> ColumnSchema:
    """Public API (SchemaResolver)

    Contract:
    - record_type must be a dataclass; column order = declared field order.
    - ignore / label / kind each resolve: direct xl_field metadata -> companion
      member of the same name -> default (kept / field name / TEXT).
    - label precedence: friendly_name, display, companion friendly_name,
      companion display, field name.
    - Memoized per record type; zero exported fields -> empty schema.
    """
    return default_resolver().resolve(record_type)
