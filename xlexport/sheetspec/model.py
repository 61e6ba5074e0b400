from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple


class CollectionError(RuntimeError):
    pass


class EmptyCollectionError(CollectionError):
    pass


class HeterogeneousCollectionError(CollectionError):
    pass


@dataclass(frozen=True)
class RecordCollection:
    """A named, homogeneous group of records destined for one worksheet.

    The first item defines the record type; every other item must be of exactly
    that type. ``name`` may be None, see ``effective_name``.
    """
    items: Tuple[Any, ...]
    name: Optional[str] = None

    def __post_init__(self) -> None:
        items = tuple(self.items)
        object.__setattr__(self, "items", items)

        if not items:
            label = f"'{self.name}'" if self.name else "<unnamed>"
            raise EmptyCollectionError(f"record collection {label} has no items")

        record_type = type(items[0])
        for idx, item in enumerate(items):
            if type(item) is not record_type:
                raise HeterogeneousCollectionError(
                    f"item {idx} is {type(item).__name__}, expected {record_type.__name__}"
                )

    @property
    def record_type(self) -> type:
        return type(self.items[0])

    def extend(self, more: Iterable[Any]) -> "RecordCollection":
        return RecordCollection(items=self.items + tuple(more), name=self.name)

    def __len__(self) -> int:
        return len(self.items)
