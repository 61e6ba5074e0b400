from dataclasses import dataclass
from typing import Dict

from xlexport.config.model import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_DATETIME_FORMAT,
    DEFAULT_MAX_COLUMN_WIDTH,
    DEFAULT_TIME_FORMAT,
)
from xlexport.schema.model import DataKind


@dataclass(frozen=True)
class ProjectionFormats:
    number_formats: Dict[DataKind, str]
    max_column_width: int = DEFAULT_MAX_COLUMN_WIDTH

    @classmethod
    def default(cls) -> "ProjectionFormats":
        return cls(number_formats={
            DataKind.DATE: DEFAULT_DATE_FORMAT,
            DataKind.DATETIME: DEFAULT_DATETIME_FORMAT,
            DataKind.TIME: DEFAULT_TIME_FORMAT,
        })
