from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class DataKind(Enum):
    TEXT = "text"
    NUMBER = "number"
    CURRENCY = "currency"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"


# kinds that get a number format on their data range
TEMPORAL_KINDS = frozenset({DataKind.DATE, DataKind.DATETIME, DataKind.TIME})


@dataclass(frozen=True)
class XlMeta:
    """Display metadata for one record field. None means "not annotated"."""
    ignore: Optional[bool] = None
    friendly_name: Optional[str] = None
    display: Optional[str] = None
    kind: Optional[DataKind] = None


@dataclass(frozen=True)
class Column:
    source_field: str
    label: str
    kind: DataKind = DataKind.TEXT


@dataclass(frozen=True)
class ColumnSchema:
    record_type: type
    columns: Tuple[Column, ...]

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(c.label for c in self.columns)

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self):
        return iter(self.columns)
